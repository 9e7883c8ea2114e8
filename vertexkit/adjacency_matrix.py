"""Undirected graph stored as an adjacency matrix."""

from __future__ import annotations

import sys

from vertexkit.edge_list import (
    _check_count,
    _check_range,
    _describe,
    _format_rows,
    _join,
    _parse,
    _parser,
    _read,
)


class MatrixGraph:
    """Vertices 1..n with a 0/1 adjacency matrix; repeated edges collapse."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.n = n
        self.edge_count = 0
        self._adj: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}

    def _check(self, *vertices: int) -> None:
        _check_range(self.n, *vertices)

    def add_edge(self, x: int, y: int) -> None:
        """Mark x and y adjacent; every call counts towards edge_count."""
        self._check(x, y)
        self._adj[x].add(y)
        self._adj[y].add(x)
        self.edge_count += 1

    def adjacent(self, x: int, y: int) -> bool:
        self._check(x, y)
        return y in self._adj[x]

    def degree(self, x: int) -> int:
        """Number of marked matrix cells in row x; a loop counts once."""
        self._check(x)
        return len(self._adj[x])

    def loop_degree(self, x: int) -> int:
        """Degree of x where a loop counts twice."""
        return self.degree(x) + (x in self._adj[x])

    def neighbours(self, u: int) -> list[int]:
        self._check(u)
        return sorted(self._adj[u])

    def matrix_rows(self) -> list[list[int]]:
        vertices = range(1, self.n + 1)
        return [[int(j in self._adj[i]) for j in vertices] for i in vertices]


def parse_matrix_graph(text: str) -> MatrixGraph:
    """Build a graph from 'n m' followed by m pairs of vertices."""
    n, pairs = _parse(text)
    graph = MatrixGraph(n)
    for x, y in pairs:
        graph.add_edge(x, y)
    return graph


def report(graph: MatrixGraph, show_matrix: bool = False) -> str:
    """Describe the graph.

    With show_matrix the matrix is printed first and degrees count a loop
    once; without it, degrees count a loop twice.
    """
    lines = _format_rows(graph.matrix_rows()) if show_matrix else []
    degree = graph.degree if show_matrix else graph.loop_degree
    lines.extend(_describe(graph.n, degree, graph.adjacent, graph.neighbours))
    return _join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = _parser("vertexkit-matrix", "Describe a graph as an adjacency matrix.")
    parser.add_argument(
        "--matrix", action="store_true", help="print the matrix; loops count once"
    )
    args = parser.parse_args(argv)
    sys.stdout.write(report(parse_matrix_graph(_read(args.path)), args.matrix))
    return 0


if __name__ == "__main__":
    sys.exit(main())