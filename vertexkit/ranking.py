"""Topological ranking of the vertices of a directed graph."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from vertexkit.edge_list import _check_count, _check_range, _parse, _parser, _read

DEFAULT_INPUT = "dothixephang.txt"


class DirectedGraph:
    """Vertices 1..n with a 0/1 adjacency matrix of directed edges."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.n = n
        self._out: dict[int, set[int]] = {v: set() for v in range(1, n + 1)}

    def _check(self, *vertices: int) -> None:
        _check_range(self.n, *vertices)

    def add_edge(self, x: int, y: int) -> None:
        """Add the arc x -> y."""
        self._check(x, y)
        self._out[x].add(y)

    def adjacent(self, x: int, y: int) -> bool:
        self._check(x, y)
        return y in self._out[x]

    def degree(self, x: int) -> int:
        """Out-degree of x."""
        self._check(x)
        return len(self._out[x])

    def neighbors(self, x: int) -> list[int]:
        """Successors of x in ascending order."""
        self._check(x)
        return sorted(self._out[x])


@dataclass(frozen=True)
class Ranking:
    """Vertices removed at each step, and the step number of every ranked vertex.

    Vertices on or behind a cycle never reach in-degree zero and are absent
    from ``ranks``.
    """

    steps: list[list[int]] = field(default_factory=list)
    ranks: dict[int, int] = field(default_factory=dict)


def rank_vertices(graph: DirectedGraph) -> Ranking:
    """Rank vertices by repeatedly removing those of in-degree zero, from rank 0."""
    vertices = range(1, graph.n + 1)
    in_degree = dict.fromkeys(vertices, 0)
    for x in vertices:
        for u in graph.neighbors(x):
            in_degree[u] += 1

    current = [u for u in vertices if in_degree[u] == 0]
    result = Ranking()
    while current:
        rank = len(result.steps)
        result.steps.append(current)
        following: list[int] = []
        for u in current:
            result.ranks[u] = rank
            for v in graph.neighbors(u):
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    following.append(v)
        current = following
    return result


def parse_directed_graph(text: str) -> DirectedGraph:
    """Build a graph from 'n m' followed by m arcs 'x y'."""
    n, pairs = _parse(text)
    graph = DirectedGraph(n)
    for x, y in pairs:
        graph.add_edge(x, y)
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = _parser("vertexkit-rank", "Rank the vertices of a directed graph.", DEFAULT_INPUT)
    args = parser.parse_args(argv)

    graph = parse_directed_graph(_read(args.path))
    result = rank_vertices(graph)
    for k, step in enumerate(result.steps):
        print(f"step {k}: " + "".join(f"{u} " for u in step))
    for u in range(1, graph.n + 1):
        print(f"Dinh {u} co thu hang rank {result.ranks.get(u, 0)} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())