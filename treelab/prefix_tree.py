"""Expression trees built from prefix expressions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

OPERATORS = frozenset("+-*/")


@dataclass
class ExprNode:
    """A single operator or operand of an expression tree."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def build_from_prefix(prefix: str) -> ExprNode:
    """Build a tree from a prefix expression of letters and + - * /.

    Characters that are neither letters nor operators are ignored.
    """
    stack: list[ExprNode] = []
    for ch in reversed(prefix):
        if ch.isalpha():
            stack.append(ExprNode(ch))
        elif ch in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} is missing an operand")
            left = stack.pop()
            right = stack.pop()
            stack.append(ExprNode(ch, left, right))
    if not stack:
        raise ValueError("expression is empty")
    if len(stack) > 1:
        raise ValueError("expression has operands without an operator")
    return stack[0]


def iter_postorder(node: ExprNode | None) -> Iterator[ExprNode]:
    """Yield nodes in postorder without recursion."""
    if node is None:
        return
    pending = [node]
    visited: list[ExprNode] = []
    while pending:
        current = pending.pop()
        visited.append(current)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    yield from reversed(visited)


class ExpressionTree:
    """Holds one expression tree built from a prefix expression."""

    def __init__(self):
        self.root: ExprNode | None = None

    def build(self, prefix: str) -> ExprNode:
        self.root = build_from_prefix(prefix)
        return self.root

    def postorder(self) -> Iterator[ExprNode]:
        return iter_postorder(self.root)

    def postfix(self) -> str:
        return "".join(node.data for node in self.postorder())

    def delete(self) -> list[str]:
        """Drop the tree, returning node values in the order they were freed."""
        removed = []
        for node in list(self.postorder()):
            removed.append(node.data)
            node.left = node.right = None
        self.root = None
        return removed


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="")
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def main(argv=None) -> int:
    """Run the interactive expression-tree menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="prefix-tree", description="Build and traverse prefix expression trees."
    )
    parser.parse_args(argv)
    tree = ExpressionTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("1 -> Enter prefix expression")
            print("2 -> Display postfix Expression")
            print("3 -> Deletion")
            print("4 -> Exit")
            raw = _ask(tokens, "Choose an option (1-4):\t")
            try:
                choice = int(raw)
            except ValueError:
                choice = -1
            if choice == 4:
                break
            if choice == 1:
                expression = _ask(tokens, "Enter the expression (eg.: +--a*bc/def):\t")
                try:
                    tree.build(expression)
                except ValueError as exc:
                    print(f"Invalid expression: {exc}")
            elif choice == 2:
                if tree.root is None:
                    print("No expression entered.")
                else:
                    print(tree.postfix())
            elif choice == 3:
                for value in tree.delete():
                    print(f"Deleting node: {value}")
            else:
                print("Choose a valid option (1-4).")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())