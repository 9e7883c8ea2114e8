"""Undirected graph stored as a list of edges, and the helpers shared by the graph tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

DEFAULT_INPUT = "dothi.txt"
MAX_EDGES = 100
SEPARATOR = "-" * 31


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("number of vertices must not be negative")


def _check_range(n: int, *vertices: int, first: int = 1) -> None:
    for v in vertices:
        if not first <= v <= n:
            raise ValueError(f"vertex {v} outside {first}..{n}")


def _parse(text: str) -> tuple[int, list[tuple[int, int]]]:
    """Read 'n m' followed by m pairs of integers."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        raise ValueError("missing vertex and edge counts")
    n, m = numbers[0], numbers[1]
    body = numbers[2 : 2 + 2 * m]
    if m < 0 or len(body) < 2 * m:
        raise ValueError(f"expected {m} edges after the header")
    return n, list(zip(body[0::2], body[1::2]))


def _format_rows(rows: Iterable[Iterable[int]]) -> list[str]:
    return ["".join(f"{value} " for value in row) for row in rows]


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _describe(
    n: int,
    degree: Callable[[int], int],
    adjacent: Callable[[int, int], bool],
    neighbours: Callable[[int], list[int]],
) -> list[str]:
    """Degree lines, pairwise adjacency lines and neighbour lines for vertices 1..n."""
    vertices = range(1, n + 1)
    lines = [f"Bac({v}): {degree(v)}" for v in vertices]
    lines.append(SEPARATOR)
    lines.extend(
        f"{j} {'ke voi' if adjacent(j, k) else 'khong ke voi'} {k}"
        for j in vertices
        for k in vertices
    )
    lines.append(SEPARATOR)
    for v in vertices:
        lines.append(f"Hang xom cua {v} la: " + "".join(map(str, neighbours(v))))
        lines.append("")
    return lines


def _parser(prog: str, description: str, default: str = DEFAULT_INPUT) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("path", nargs="?", default=default)
    return parser


def _read(path: str) -> str:
    return Path(path).read_text()


class EdgeListGraph:
    """Vertices 1..n joined by at most MAX_EDGES edges, duplicates allowed."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.n = n
        self.edges: list[tuple[int, int]] = []

    def add_edge(self, x: int, y: int) -> None:
        _check_range(self.n, x, y)
        if len(self.edges) >= MAX_EDGES:
            raise ValueError(f"graph holds at most {MAX_EDGES} edges")
        self.edges.append((x, y))

    def adjacent(self, x: int, y: int) -> bool:
        return any((a, b) in ((x, y), (y, x)) for a, b in self.edges)

    def degree(self, x: int) -> int:
        """Number of edge ends at x; a loop counts twice."""
        return sum((a == x) + (b == x) for a, b in self.edges)

    def neighbours(self, u: int) -> list[int]:
        return [v for v in range(1, self.n + 1) if self.adjacent(u, v)]


def parse_edge_list(text: str) -> EdgeListGraph:
    """Build a graph from 'n m' followed by m pairs of vertices."""
    n, pairs = _parse(text)
    graph = EdgeListGraph(n)
    for x, y in pairs:
        graph.add_edge(x, y)
    return graph


def report(graph: EdgeListGraph) -> str:
    """Degrees, pairwise adjacency and neighbours of every vertex."""
    return _join(_describe(graph.n, graph.degree, graph.adjacent, graph.neighbours))


def main(argv: list[str] | None = None) -> int:
    parser = _parser("vertexkit-edges", "Describe a graph given as edges.")
    args = parser.parse_args(argv)
    sys.stdout.write(report(parse_edge_list(_read(args.path))))
    return 0


if __name__ == "__main__":
    sys.exit(main())