"""Routes between cities that are at most one road longer than the shortest."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator


class RoadMap:
    """Undirected road network between numbered cities."""

    def __init__(self, cities: int):
        if cities < 0:
            raise ValueError("number of cities cannot be negative")
        self.cities = cities
        self._adjacent: list[list[int]] = [[] for _ in range(cities)]

    def _check(self, city: int) -> None:
        if not 0 <= city < self.cities:
            raise ValueError(f"city {city} is out of range 0..{self.cities - 1}")

    def add_road(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacent[u].append(v)
        self._adjacent[v].append(u)

    def min_steps(self, start: int, end: int) -> int | None:
        """Fewest roads from start to end, or None if unreachable."""
        self._check(start)
        self._check(end)
        seen = {start}
        queue = deque([(start, 0)])
        while queue:
            city, depth = queue.popleft()
            if city == end:
                return depth
            for neighbour in self._adjacent[city]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append((neighbour, depth + 1))
        return None

    def routes(self, start: int, end: int) -> list[list[int]]:
        """Simple paths whose length is the shortest or one more, in search order."""
        shortest = self.min_steps(start, end)
        if shortest is None:
            return []
        limit = shortest + 1
        found: list[list[int]] = []
        path = [start]
        on_path = {start}

        def walk(city: int) -> None:
            depth = len(path) - 1
            if city == end:
                if depth >= shortest:
                    found.append(list(path))
                return
            if depth >= limit:
                return
            for neighbour in self._adjacent[city]:
                if neighbour in on_path:
                    continue
                path.append(neighbour)
                on_path.add(neighbour)
                walk(neighbour)
                on_path.discard(neighbour)
                path.pop()

        walk(start)
        return found


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return int(token)


def main(argv=None) -> int:
    """Read a road map and two cities from standard input and list routes."""
    parser = argparse.ArgumentParser(
        prog="routes", description="List near-shortest routes between two cities."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of cities and number of roads: ", end="")
        cities = _read_int(tokens)
        roads = _read_int(tokens)
        road_map = RoadMap(cities)
        print("Enter each road (2 cities connected, e.g. 0 1):")
        for _ in range(roads):
            road_map.add_road(_read_int(tokens), _read_int(tokens))
        print("Enter start city and destination city: ", end="")
        start = _read_int(tokens)
        end = _read_int(tokens)
        found = road_map.routes(start, end)
    except (EOFError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print(f"\nValid routes from {start} to {end}:")
    for route in found:
        print(" ".join(map(str, route)))
    return 0


if __name__ == "__main__":
    sys.exit(main())