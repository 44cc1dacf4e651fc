"""Keyword dictionary stored in a height-balanced (AVL) tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    key: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _h(node: _Node | None) -> int:
    return node.height if node is not None else -1


def _fix(node: _Node) -> None:
    node.height = 1 + max(_h(node.left), _h(node.right))


def _dif(node: _Node) -> int:
    return _h(node.left) - _h(node.right)


def _rotate_right(par: _Node) -> _Node:
    pivot = par.left
    assert pivot is not None
    par.left = pivot.right
    pivot.right = par
    _fix(par)
    _fix(pivot)
    return pivot


def _rotate_left(par: _Node) -> _Node:
    pivot = par.right
    assert pivot is not None
    par.right = pivot.left
    pivot.left = par
    _fix(par)
    _fix(pivot)
    return pivot


def _balance(node: _Node) -> _Node:
    _fix(node)
    bal = _dif(node)
    if bal >= 2:
        assert node.left is not None
        if _dif(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if bal <= -2:
        assert node.right is not None
        if _dif(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _extract_min(node: _Node) -> _Node | None:
    if node.left is None:
        return node.right
    node.left = _extract_min(node.left)
    return _balance(node)


class AVLDictionary:
    """Maps keywords to meanings in a self-balancing search tree."""

    def __init__(self):
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: str, meaning: str) -> bool:
        """Add a keyword; an existing keyword is left unchanged and False returned."""
        inserted = False

        def put(node: _Node | None) -> _Node:
            nonlocal inserted
            if node is None:
                inserted = True
                return _Node(key, meaning)
            if key < node.key:
                node.left = put(node.left)
            elif key > node.key:
                node.right = put(node.right)
            else:
                return node
            return _balance(node)

        self._root = put(self._root)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, key: str) -> None:
        """Remove a keyword, raising KeyError if absent."""

        def remove(node: _Node | None) -> _Node | None:
            if node is None:
                raise KeyError(key)
            if key < node.key:
                node.left = remove(node.left)
            elif key > node.key:
                node.right = remove(node.right)
            else:
                left, right = node.left, node.right
                if right is None:
                    return left
                successor = right
                while successor.left is not None:
                    successor = successor.left
                successor.right = _extract_min(right)
                successor.left = left
                return _balance(successor)
            return _balance(node)

        self._root = remove(self._root)
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def _walk(self, node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
        if node is None:
            return
        first, last = (node.right, node.left) if reverse else (node.left, node.right)
        yield from self._walk(first, reverse)
        yield node.key, node.meaning
        yield from self._walk(last, reverse)

    def ascending(self) -> Iterator[tuple[str, str]]:
        """Yield (keyword, meaning) pairs in ascending order."""
        return self._walk(self._root, False)

    def descending(self) -> Iterator[tuple[str, str]]:
        """Yield (keyword, meaning) pairs in descending order."""
        return self._walk(self._root, True)

    def height(self) -> int:
        """Height of the tree in edges; -1 when empty.

        A lookup needs at most height() + 1 key comparisons.
        """
        return _h(self._root)

    def is_balanced(self) -> bool:
        """Check every node's balance, recomputing heights from scratch."""

        def check(node: _Node | None) -> int | None:
            if node is None:
                return -1
            left = check(node.left)
            right = check(node.right)
            if left is None or right is None or abs(left - right) > 1:
                return None
            return 1 + max(left, right)

        return check(self._root) is not None


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="")
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _wants_more(answer: str) -> bool:
    return answer[:1] in ("y", "Y")


def main(argv=None) -> int:
    """Run the interactive AVL dictionary menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="avl-dict", description="Keyword dictionary on a height-balanced tree."
    )
    parser.parse_args(argv)
    tree = AVLDictionary()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("\n--- MAIN MENU ---")
            print("1 -> Insert keyword")
            print("2 -> Display AVL tree")
            print("3 -> Search a keyword")
            print("4 -> Delete a keyword")
            raw = _ask(tokens, "Choose an option (1-4):\t")
            try:
                choice = int(raw)
            except ValueError:
                choice = -1
            if choice == 1:
                while True:
                    key = _ask(tokens, "\nEnter keyword:\t")
                    meaning = _ask(tokens, "Enter meaning:\t")
                    tree.insert(key, meaning)
                    if not _wants_more(_ask(tokens, "\nAdd another word? (y/n):\t")):
                        break
            elif choice == 2:
                print("\nKeywords in ascending order:\t")
                for key, meaning in tree.ascending():
                    print(f"\t{key} : {meaning}")
                print("Keywords in descending order:\t")
                for key, meaning in tree.descending():
                    print(f"\t{key} : {meaning}")
            elif choice == 3:
                key = _ask(tokens, "\nKeyword to search:\t")
                if key in tree:
                    print("\nKeyword exists in AVL tree.")
                else:
                    print("\nKeyword does not exist in AVL tree.")
            elif choice == 4:
                key = _ask(tokens, "\nKeyword to delete:\t")
                try:
                    tree.delete(key)
                except KeyError:
                    pass
            else:
                print("\nPlease choose a valid option (1-4).")
            if not _wants_more(_ask(tokens, "\nWould you like to continue? (y/n):\t")):
                break
    except EOFError:
        print()
    print("\n\n// thank you :) \n")
    return 0


if __name__ == "__main__":
    sys.exit(main())