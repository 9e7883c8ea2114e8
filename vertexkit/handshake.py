"""Handshake counting on an undirected adjacency-matrix graph."""

from __future__ import annotations

import sys

from vertexkit.edge_list import (
    _check_count,
    _check_range,
    _format_rows,
    _join,
    _parse,
    _parser,
    _read,
)


class HandshakeGraph:
    """People numbered 0..n; an edge records that two of them shook hands."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.n = n
        self._partners: dict[int, set[int]] = {v: set() for v in range(n + 1)}

    def _check(self, *vertices: int) -> None:
        _check_range(self.n, *vertices, first=0)

    def shake(self, x: int, y: int) -> None:
        """Record a handshake between x and y."""
        self._check(x, y)
        self._partners[x].add(y)
        self._partners[y].add(x)

    def adjacent(self, x: int, y: int) -> bool:
        self._check(x, y)
        return y in self._partners[x]

    def count(self, x: int) -> int:
        """Number of handshakes of x with the people numbered 0 to n-1."""
        self._check(x)
        return sum(1 for partner in self._partners[x] if partner < self.n)

    def matrix_rows(self) -> list[list[int]]:
        """Adjacency matrix over vertices 1..n as rows of 0 and 1."""
        vertices = range(1, self.n + 1)
        return [[int(j in self._partners[i]) for j in vertices] for i in vertices]


def parse_handshakes(text: str) -> HandshakeGraph:
    """Build a graph from 'n m' followed by m pairs of people."""
    n, pairs = _parse(text)
    graph = HandshakeGraph(n)
    for x, y in pairs:
        graph.shake(x, y)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = _parser("vertexkit-handshake", "Count handshakes in a graph file.")
    parser.add_argument("--person", type=int, help="person to count handshakes for")
    args = parser.parse_args(argv)

    graph = parse_handshakes(_read(args.path))
    sys.stdout.write(_join(_format_rows(graph.matrix_rows())))
    person = args.person
    if person is None:
        person = int(input("Tim so lan bat tay cua: "))
    print(f"So lan bat tay cua {person} la {graph.count(person)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())