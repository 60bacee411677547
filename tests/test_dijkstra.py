import io

import pytest

from bitcraft.dijkstra import Graph, main, parse_graph


def _sample():
    graph = Graph(4)
    graph.add_edge(0, 1, 4)
    graph.add_edge(1, 2, 3)
    graph.add_edge(0, 2, 10)
    return graph


def test_start_is_zero():
    assert _sample().shortest_distances(0)[0] == 0


def test_direct_edge_distance():
    assert _sample().shortest_distances(0)[1] == 4


def test_shorter_path_preferred():
    distances = _sample().shortest_distances(0)
    assert distances[2] == distances[1] + 3
    assert distances[2] < 10


def test_unreachable_is_none():
    assert _sample().shortest_distances(0)[3] is None


def test_undirected_symmetry():
    graph = _sample()
    assert graph.shortest_distances(2)[0] == graph.shortest_distances(0)[2]


def test_directed_edges_one_way():
    graph = Graph(2, directed=True)
    graph.add_edge(0, 1, 5)
    assert graph.shortest_distances(0) == [0, 5]
    assert graph.shortest_distances(1) == [None, 0]


def test_triangle_inequality_holds():
    graph = _sample()
    distances = graph.shortest_distances(0)
    for u, v, w in [(0, 1, 4), (1, 2, 3), (0, 2, 10)]:
        assert distances[v] <= distances[u] + w
        assert distances[u] <= distances[v] + w


def test_bad_vertex_rejected():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        graph.shortest_distances(5)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_parse_graph_converts_to_zero_based():
    graph, start = parse_graph("3 2\n1 2 5\n2 3 7\n2\n")
    assert start == 1
    distances = graph.shortest_distances(start)
    assert distances == [5, 0, 7]


def test_parse_graph_truncated():
    with pytest.raises(ValueError):
        parse_graph("3 2\n1 2 5\n")


def test_parse_graph_vertex_out_of_range():
    with pytest.raises(ValueError):
        parse_graph("2 1\n1 3 5\n1\n")


def test_parse_graph_non_integer():
    with pytest.raises(ValueError):
        parse_graph("2 1\n1 x 5\n1\n")


def test_main_prints_distances(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1\n1 2 5\n1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Distance to 1: 0",
        "Distance to 2: 5",
        "Distance to 3: unreachable",
    ]


def test_main_rejects_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("oops"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2