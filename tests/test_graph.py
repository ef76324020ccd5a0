import pytest

from cpkit.graph import DirectedGraph, Edge, UndirectedGraph


def test_edge_ids_are_sequential():
    g = UndirectedGraph(3)
    ids = [g.add_edge(0, 1), g.add_edge(1, 2), g.add_edge(0, 1)]
    assert ids == list(range(3))
    assert g.edges[2] == Edge(0, 1, 0)


def test_undirected_adjacency_both_ends():
    g = UndirectedGraph(3)
    e = g.add_edge(0, 2, 5)
    assert e in g.adj[0] and e in g.adj[2]
    assert g.adj[1] == []
    assert g.edges[e].cost == 5


def test_directed_adjacency_tail_only():
    g = DirectedGraph(3)
    e = g.add_edge(0, 2)
    assert g.adj[0] == [e]
    assert g.adj[2] == []


def test_other_endpoint():
    g = UndirectedGraph(4)
    e = g.add_edge(1, 3)
    assert g.other(1, e) == 3
    assert g.other(3, e) == 1


def test_ignore_predicate():
    g = UndirectedGraph(2, ignore=lambda eid: eid == 0)
    a = g.add_edge(0, 1)
    b = g.add_edge(0, 1)
    assert g.is_ignore(a) is True
    assert g.is_ignore(b) is False
    g.clear_ignore()
    assert g.is_ignore(a) is False
    g.set_ignore(lambda eid: eid == b)
    assert g.is_ignore(b) is True


def test_vertex_out_of_range():
    g = UndirectedGraph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        UndirectedGraph(-1)