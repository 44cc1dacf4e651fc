"""Keyword dictionary stored in an unbalanced binary search tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    key: str
    value: str
    left: _Node | None = None
    right: _Node | None = None


class BSTDictionary:
    """Maps keywords to meanings, kept ordered by keyword."""

    def __init__(self):
        self._root: _Node | None = None
        self._size = 0

    def _find(self, key: str) -> _Node | None:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.right if node.key < key else node.left
        return None

    def insert(self, key: str, value: str) -> bool:
        """Add a keyword; return False if it is already present."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if node.key == key:
                return False
            parent = node
            node = node.right if node.key < key else node.left
        new = _Node(key, value)
        if parent is None:
            self._root = new
        elif parent.key < key:
            parent.right = new
        else:
            parent.left = new
        self._size += 1
        return True

    def search(self, key: str) -> str:
        """Return the meaning of a keyword, raising KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def update(self, key: str, value: str) -> None:
        """Replace the meaning of an existing keyword."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        node.value = value

    def delete(self, key: str) -> None:
        """Remove a keyword, raising KeyError if absent."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.right if node.key < key else node.left
        if node is None:
            raise KeyError(key)
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key, node.value = succ.key, succ.value
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (keyword, meaning) pairs in ascending keyword order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key


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
    """Run the interactive dictionary menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="bst-dict", description="Keyword dictionary on a binary search tree."
    )
    parser.parse_args(argv)
    tree = BSTDictionary()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("--- MAIN MENU ---")
            print("1 -> Insert")
            print("2 -> Search")
            print("3 -> Update")
            print("4 -> Delete")
            print("5 -> Display Ascending")
            print("0 -> Exit")
            raw = _ask(tokens, "Choose an option (0-5):\t")
            try:
                choice = int(raw)
            except ValueError:
                choice = -1
            if choice == 0:
                break
            if choice == 1:
                key = _ask(tokens, "Key (word) to insert:\t")
                value = _ask(tokens, "Value (meaning):\t")
                if tree.insert(key, value):
                    print("Element insertion successful.")
                else:
                    print("Element already exists.")
            elif choice == 2:
                key = _ask(tokens, "Key (word) to search:\t")
                try:
                    print(f"Value (meaning) is:\t{tree.search(key)}")
                except KeyError:
                    print("Element does not exist.")
            elif choice == 3:
                key = _ask(tokens, "Key (word) to update:\t")
                value = _ask(tokens, "New value (meaning):\t")
                try:
                    tree.update(key, value)
                    print("Element updated.")
                except KeyError:
                    print("Element does not exist.")
            elif choice == 4:
                key = _ask(tokens, "Key (word) to delete:\t")
                try:
                    tree.delete(key)
                    print("Element deletion successful.")
                except KeyError:
                    print("Element does not exist.")
            elif choice == 5:
                print("Data in ascending order:\t")
                for key, value in tree.items():
                    print(f"{key} : {value}")
            else:
                print("Please choose a valid option (0-5).")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())