import pytest

from vertexkit.traversal import (
    MAX_EDGES,
    DuplicateEdgeError,
    TraversalGraph,
    main,
    parse_traversal_graph,
)


def _graph(n, edges):
    graph = TraversalGraph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


TWO_COMPONENTS = (6, [(1, 2), (2, 3), (1, 3), (4, 5)])


def test_adjacent_is_symmetric():
    graph = _graph(3, [(1, 2)])
    assert graph.adjacent(1, 2)
    assert graph.adjacent(2, 1)
    assert not graph.adjacent(1, 3)


def test_duplicate_edge_raises_in_either_orientation():
    graph = _graph(3, [(1, 2)])
    with pytest.raises(DuplicateEdgeError):
        graph.add_edge(2, 1)
    with pytest.raises(DuplicateEdgeError):
        graph.add_edge(1, 2)
    assert graph.edges == [(1, 2)]


def test_vertex_out_of_range_raises():
    graph = TraversalGraph(3)
    with pytest.raises(ValueError):
        graph.add_edge(0, 1)
    with pytest.raises(ValueError):
        graph.add_edge(1, 4)


def test_edge_capacity_is_enforced():
    graph = TraversalGraph(30)
    for v in range(2, MAX_EDGES + 2):
        graph.add_edge(1, v)
    with pytest.raises(ValueError):
        graph.add_edge(2, 3)
    assert len(graph.edges) == MAX_EDGES


def test_neighbors_are_ascending_and_adjacent():
    graph = _graph(*TWO_COMPONENTS)
    for x in range(1, 7):
        nb = graph.neighbors(x)
        assert nb == sorted(nb)
        assert all(graph.adjacent(x, v) for v in nb)
    assert graph.neighbors(6) == []


def test_degree_matches_neighbors_when_edges_cover_vertices():
    graph = _graph(3, [(1, 2), (2, 3), (1, 3)])
    for x in range(1, 4):
        assert graph.degree(x) == len(graph.neighbors(x))


def test_degree_never_exceeds_neighbor_count():
    graph = _graph(*TWO_COMPONENTS)
    for x in range(1, 7):
        assert graph.degree(x) <= len(graph.neighbors(x))


@pytest.mark.parametrize("search", ["depth_first_search", "breadth_first_search"])
def test_search_visits_every_vertex_once(search):
    graph = _graph(*TWO_COMPONENTS)
    order = getattr(graph, search)()
    assert sorted(order) == list(range(1, 7))


def test_dfs_follows_stack_order():
    graph = _graph(3, [(1, 2), (1, 3)])
    assert graph.depth_first_search() == [1, 3, 2]


def test_bfs_on_path_is_in_vertex_order():
    graph = _graph(5, [(1, 2), (2, 3), (3, 4), (4, 5)])
    assert graph.breadth_first_search() == [1, 2, 3, 4, 5]


def test_search_components_are_contiguous():
    graph = _graph(*TWO_COMPONENTS)
    for order in (graph.depth_first_search(), graph.breadth_first_search()):
        assert set(order[:3]) == {1, 2, 3}
        assert set(order[3:5]) == {4, 5}
        assert order[5] == 6


def test_parse_skips_duplicate_edges():
    graph = parse_traversal_graph("3 3\n1 2\n2 1\n2 3\n")
    assert graph.n == 3
    assert graph.edges == [(1, 2), (2, 3)]


def test_parse_rejects_short_input():
    with pytest.raises(ValueError):
        parse_traversal_graph("3 2\n1 2\n")


def test_main_reports_traversals(tmp_path, capsys):
    path = tmp_path / "dothi.txt"
    path.write_text("4 3\n1 2\n2 1\n3 4\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Canh da co trong do thi!" in out
    assert "Do thi da them vao canh 3 4" in out
    assert "Duyet theo chieu sau:" in out
    assert "Duyet BFS:" in out
    dfs_part, bfs_part = out.split("Duyet BFS:")
    assert dfs_part.count("Duyet ") - 1 == 4
    assert bfs_part.count("Duyet ") == 4
    assert "neighbor(1): 2 " in out