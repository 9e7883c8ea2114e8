"""Depth-first and breadth-first traversal of an undirected edge-list graph."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator

from vertexkit.edge_list import _check_count, _check_range, _parse, _parser, _read

MAX_EDGES = 20


class DuplicateEdgeError(ValueError):
    """Raised when an edge already present in the graph is added again."""


class TraversalGraph:
    """Vertices 1..n joined by at most MAX_EDGES distinct undirected edges."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.n = n
        self.edges: list[tuple[int, int]] = []

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge u-v; raise DuplicateEdgeError if it is already there."""
        _check_range(self.n, u, v)
        if self.adjacent(u, v):
            raise DuplicateEdgeError(f"edge {u} {v} already in the graph")
        if len(self.edges) >= MAX_EDGES:
            raise ValueError(f"graph holds at most {MAX_EDGES} edges")
        self.edges.append((u, v))

    def adjacent(self, u: int, v: int) -> bool:
        return any((a, b) in ((u, v), (v, u)) for a, b in self.edges)

    def degree(self, x: int) -> int:
        """Count the vertices numbered 0..m adjacent to x, m being the edge count."""
        return sum(1 for i in range(len(self.edges) + 1) if self.adjacent(x, i))

    def neighbors(self, x: int) -> list[int]:
        return [v for v in range(1, self.n + 1) if self.adjacent(x, v)]

    def _dfs_components(self) -> Iterator[list[int]]:
        """Yield, for each start vertex, the vertices first reached from it."""
        marked: set[int] = set()
        for start in range(1, self.n + 1):
            visited: list[int] = []
            stack = [] if start in marked else [start]
            while stack:
                x = stack.pop()
                if x in marked:
                    continue
                marked.add(x)
                visited.append(x)
                stack.extend(self.neighbors(x))
            yield visited

    def _bfs_components(self) -> Iterator[list[int]]:
        marked: set[int] = set()
        for start in range(1, self.n + 1):
            if start in marked:
                continue
            marked.add(start)
            visited = [start]
            queue = deque([start])
            while queue:
                for e in self.neighbors(queue.popleft()):
                    if e not in marked:
                        marked.add(e)
                        visited.append(e)
                        queue.append(e)
            yield visited

    def depth_first_search(self) -> list[int]:
        """Vertices in the order a stack-based depth-first search visits them."""
        return [v for visited in self._dfs_components() for v in visited]

    def breadth_first_search(self) -> list[int]:
        """Vertices in the order a breadth-first search visits them."""
        return [v for visited in self._bfs_components() for v in visited]


def parse_traversal_graph(text: str) -> TraversalGraph:
    """Build a graph from 'n m' and m pairs; repeated edges are skipped."""
    n, pairs = _parse(text)
    graph = TraversalGraph(n)
    for u, v in pairs:
        try:
            graph.add_edge(u, v)
        except DuplicateEdgeError:
            continue
    return graph


def _marks_line(n: int, seen: set[int]) -> str:
    return "".join(f"{int(k in seen)} " for k in range(1, n + 1))


def main(argv: list[str] | None = None) -> int:
    parser = _parser("vertexkit-traverse", "Traverse a graph depth- and breadth-first.")
    args = parser.parse_args(argv)

    n, pairs = _parse(_read(args.path))
    graph = TraversalGraph(n)
    print(f"Do thi G duoc khoi tao voi so dinh n = {n} va so canh m = 0")
    for u, v in pairs:
        try:
            graph.add_edge(u, v)
        except DuplicateEdgeError:
            print("Canh da co trong do thi!")
        else:
            print(f"Do thi da them vao canh {u} {v}")

    vertices = range(1, n + 1)
    for i in vertices:
        print(f"Bac cua canh {i} la: {graph.degree(i)}")
    for i in vertices:
        print(f"neighbor({i}): " + "".join(f"{e} " for e in graph.neighbors(i)))

    print("\nDuyet theo chieu sau:")
    seen: set[int] = set()
    for visited in graph._dfs_components():
        print(_marks_line(n, seen))
        if visited:
            for x in visited:
                print(f"Duyet {x}")
            seen.update(visited)
            print(_marks_line(n, seen))

    print("\nDuyet BFS:")
    for visited in graph._bfs_components():
        for x in visited:
            print(f"Duyet {x}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())