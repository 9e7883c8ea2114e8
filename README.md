# vertexkit

A small toolkit for simple graphs held in memory. It offers several graph
representations, each with adjacency tests, degree counts and neighbour
lists, plus depth-first and breadth-first traversal of undirected graphs and
level-by-level ranking of directed graphs. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Graph file format

Every command and every parser reads whitespace-separated integers: the
number of vertices `n` and the number of edges `m`, followed by `m` pairs
`u v`, one edge each. Text after the `m` pairs is ignored; fewer than `m`
pairs, or a missing header, raises `ValueError`.

```
4 3
1 2
2 3
3 4
```

Vertices are numbered `1..n`, except in the handshake graph, whose people are
numbered `0..n`. A vertex outside the allowed range raises `ValueError`.

## Commands

Each command takes the graph file as an optional positional argument. The
default is `dothi.txt` in the current directory, except for `vertexkit-rank`,
whose default is `dothixephang.txt`.

| Command               | What it prints                                                                   |
|-----------------------|----------------------------------------------------------------------------------|
| `vertexkit-handshake` | The handshake matrix over people 1..n, then how many hands one person shook.     |
| `vertexkit-edges`     | For an edge-list graph: every degree, pairwise adjacency, and neighbours.        |
| `vertexkit-matrix`    | The same for an adjacency-matrix graph.                                          |
| `vertexkit-traverse`  | Edges as they are added, degrees, neighbours, then DFS and BFS visiting orders.  |
| `vertexkit-rank`      | The vertices removed at each step, then the rank of every vertex.                |

Options:

- `vertexkit-handshake --person N` names the person to count for; without it
  the command asks for the number on standard input.
- `vertexkit-matrix --matrix` prints the adjacency matrix first and counts a
  loop once in degrees; without it a loop counts twice.

The output text is in Vietnamese (`Bac` for degree, `ke voi` / `khong ke voi`
for adjacent / not adjacent, `Hang xom` for neighbours, `Duyet` for visit).

## Library use

### Edge list and adjacency matrix

```python
from vertexkit.edge_list import EdgeListGraph, parse_edge_list, report
from vertexkit.adjacency_matrix import MatrixGraph, parse_matrix_graph

g = EdgeListGraph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.degree(2)        # 2
g.adjacent(2, 1)   # True
g.neighbours(2)    # [1, 3]
print(report(g))

m = MatrixGraph(3)
m.add_edge(1, 2)
m.add_edge(3, 3)
m.matrix_rows()    # [[0, 1, 0], [1, 0, 0], [0, 0, 1]]
m.degree(3)        # 1: a loop counts once
m.loop_degree(3)   # 2: a loop counts twice
m.edge_count       # 2
```

`EdgeListGraph` keeps repeated edges and holds at most 100 of them; its
`degree` counts edge ends, so a loop counts twice. `MatrixGraph` collapses
repeated edges, though every `add_edge` call raises `edge_count`.
`vertexkit.adjacency_matrix.report(graph, show_matrix)` gives the text of the
`vertexkit-matrix` command.

### Handshakes

```python
from vertexkit.handshake import HandshakeGraph, parse_handshakes

h = HandshakeGraph(3)
h.shake(1, 2)
h.adjacent(2, 1)   # True
h.count(1)         # handshakes with people numbered 0..n-1
h.matrix_rows()    # matrix over people 1..n
```

### Traversal

```python
from vertexkit.traversal import TraversalGraph, DuplicateEdgeError, parse_traversal_graph

t = TraversalGraph(4)
t.add_edge(1, 2)
t.add_edge(2, 3)
t.neighbors(2)              # [1, 3]
t.depth_first_search()      # [1, 3, 2, 4]  (stack-based)
t.breadth_first_search()    # [1, 2, 3, 4]

try:
    t.add_edge(2, 1)
except DuplicateEdgeError:
    pass                    # the edge is already in the graph
```

`TraversalGraph` holds at most 20 distinct edges. Its `degree(x)` counts the
vertices numbered `0..m` adjacent to `x`, where `m` is the current number of
edges. `parse_traversal_graph` skips repeated edges instead of raising.

### Ranking

```python
from vertexkit.ranking import DirectedGraph, rank_vertices, parse_directed_graph

d = DirectedGraph(3)
d.add_edge(1, 2)
d.add_edge(2, 3)
result = rank_vertices(d)
result.steps   # [[1], [2], [3]]
result.ranks   # {1: 0, 2: 1, 3: 2}
```

`rank_vertices` repeatedly removes the vertices of in-degree zero, starting at
rank 0. Vertices on or behind a cycle are never removed and are absent from
`ranks`; the `vertexkit-rank` command prints rank 0 for them.
`DirectedGraph.degree` is the out-degree and `neighbors` lists successors.

## What it does not do

Graphs live only in memory: there is no saving, no drawing, no weighted
edges, no edge removal and no shortest paths. The commands only read the file
format above and print plain text reports.