"""Optimal binary search trees built from key and gap weights."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

Number = int | float


@dataclass(frozen=True)
class OBSTCell:
    """Weight, cost and root index of the optimal subtree over keys i+1..j."""

    weight: Number
    cost: Number
    root: int


@dataclass
class OptimalBST:
    """Result of the optimal-tree computation over identifiers 1..n."""

    identifiers: list[str]
    table: dict[tuple[int, int], OBSTCell] = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.identifiers)

    @property
    def cost(self) -> Number:
        """Total weighted cost of the whole tree."""
        return self.table[(0, self.size)].cost

    @property
    def weight(self) -> Number:
        """Sum of all success and failure weights."""
        return self.table[(0, self.size)].weight

    def root_of(self, i: int, j: int) -> int:
        """One-based index of the root chosen for keys i+1..j, or 0 if empty."""
        if not 0 <= i <= j <= self.size:
            raise IndexError(f"range ({i}, {j}) is outside 0..{self.size}")
        return self.table[(i, j)].root

    def _walk(self, i: int, j: int) -> Iterator[str]:
        if i >= j:
            return
        root = self.table[(i, j)].root
        yield self.identifiers[root - 1]
        yield from self._walk(i, root - 1)
        yield from self._walk(root, j)

    def preorder(self) -> list[str]:
        """Identifiers of the optimal tree, root first, then left and right subtrees."""
        return list(self._walk(0, self.size))

    def cells(self) -> Iterator[tuple[int, int, OBSTCell]]:
        """Yield table cells in the order they are computed."""
        for span in range(self.size + 1):
            for i in range(self.size - span + 1):
                yield i, i + span, self.table[(i, i + span)]


def build_obst(
    identifiers: Sequence[str],
    success: Sequence[Number],
    failure: Sequence[Number],
) -> OptimalBST:
    """Compute the optimal tree.

    ``success[k]`` is the weight of finding ``identifiers[k]``; ``failure[i]``
    is the weight of an unsuccessful search ending in gap ``i`` (n + 1 gaps).
    """
    n = len(identifiers)
    if len(success) != n:
        raise ValueError("need one success weight per identifier")
    if len(failure) != n + 1:
        raise ValueError("need one more failure weight than identifiers")
    p = [0, *success]
    q = list(failure)
    table: dict[tuple[int, int], OBSTCell] = {}
    for i in range(n + 1):
        table[(i, i)] = OBSTCell(q[i], 0, 0)
    for span in range(1, n + 1):
        for i in range(n - span + 1):
            j = i + span
            weight = p[j] + q[j] + table[(i, j - 1)].weight
            best = min(
                range(i + 1, j + 1),
                key=lambda k: table[(i, k - 1)].cost + table[(k, j)].cost,
            )
            cost = table[(i, best - 1)].cost + table[(best, j)].cost + weight
            table[(i, j)] = OBSTCell(weight, cost, best)
    return OptimalBST(list(identifiers), table)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return token


def _number(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        return float(token)


def main(argv=None) -> int:
    """Read identifiers and weights from standard input and print the optimal tree."""
    parser = argparse.ArgumentParser(
        prog="obst", description="Build an optimal binary search tree."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("\nEnter number of identifiers: ", end="")
        n = int(_next(tokens))
        if n < 0:
            raise ValueError("number of identifiers cannot be negative")
        identifiers = []
        for i in range(1, n + 1):
            print(f"Enter Identifier {i}: ", end="")
            identifiers.append(_next(tokens))
        success = []
        for i in range(1, n + 1):
            print(f"Enter successful probability of {i}: ", end="")
            success.append(_number(_next(tokens)))
        failure = []
        for i in range(n + 1):
            print(f"Enter unsuccessful probability of {i}: ", end="")
            failure.append(_number(_next(tokens)))
        tree = build_obst(identifiers, success, failure)
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print()
    for _, _, cell in tree.cells():
        print(f"W: {cell.weight} | c: {cell.cost} | r: {cell.root}")
    print("\nFinal OBST is: ")
    for identifier in tree.preorder():
        print(identifier)
    return 0


if __name__ == "__main__":
    sys.exit(main())