import pytest

from vertexkit.handshake import HandshakeGraph, main, parse_handshakes


def test_shake_is_symmetric():
    g = HandshakeGraph(4)
    g.shake(1, 3)
    assert g.adjacent(1, 3)
    assert g.adjacent(3, 1)
    assert not g.adjacent(1, 2)


def test_count_leaves_out_highest_vertex():
    g = HandshakeGraph(3)
    g.shake(1, 2)
    g.shake(1, 3)
    assert g.count(1) == 1


def test_count_includes_vertex_zero():
    g = HandshakeGraph(3)
    g.shake(0, 2)
    assert g.count(2) == 1


def test_matrix_rows_small_example():
    g = HandshakeGraph(2)
    g.shake(1, 2)
    assert g.matrix_rows() == [[0, 1], [1, 0]]


def test_matrix_rows_symmetric_and_square():
    g = parse_handshakes("5 4\n1 2\n2 3\n4 5\n1 5\n")
    rows = g.matrix_rows()
    assert len(rows) == g.n
    assert all(len(row) == g.n for row in rows)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            assert value == rows[j][i]
            assert bool(value) == g.adjacent(i + 1, j + 1)


def test_out_of_range_vertex_rejected():
    g = HandshakeGraph(3)
    with pytest.raises(ValueError):
        g.shake(1, 4)
    with pytest.raises(ValueError):
        g.count(-1)


def test_parse_builds_edges():
    g = parse_handshakes("3 2\n1 2\n2 3\n")
    assert g.n == 3
    assert g.adjacent(1, 2)
    assert g.adjacent(2, 3)
    assert not g.adjacent(1, 3)


def test_parse_truncated_input():
    with pytest.raises(ValueError):
        parse_handshakes("3 2\n1 2\n")


def test_parse_empty_input():
    with pytest.raises(ValueError):
        parse_handshakes("")


def test_main_prints_matrix_and_count(tmp_path, capsys):
    text = "4 3\n1 2\n1 3\n2 4\n"
    path = tmp_path / "dothi.txt"
    path.write_text(text)
    assert main([str(path), "--person", "1"]) == 0
    graph = parse_handshakes(text)
    lines = capsys.readouterr().out.splitlines()
    rows = graph.matrix_rows()
    for line, row in zip(lines, rows):
        assert line.split() == [str(v) for v in row]
    assert lines[-1] == f"So lan bat tay cua 1 la {graph.count(1)}"