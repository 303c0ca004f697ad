"""Tests for the in-memory graph model."""

import pytest

from dotgraph.core.graph import Edge, Graph


@pytest.fixture
def test_graph():
    """The directed example graph with keyed edges and styled nodes."""
    graph = Graph("Test Graph", directed=True)
    graph.set_graph_attr({"fontsize": "32", "label": "Test Graph"})
    graph.add_edge("a", "b", "a-to-b", [("label", "A to B")])
    graph.add_edge("c", "b", "c-to-b", [("style", "dotted")])
    graph.add_edge("b", "a", "b-to-a")
    graph.add_node("c", [("color", "blue"), ("shape", "box"),
                         ("style", "filled"), ("fontcolor", "white")])
    graph.add_node("d", [("lable", "node")])
    return graph


def test_graph_creation():
    """Test empty graph defaults."""
    graph = Graph()

    assert graph.name is None
    assert graph.directed is False
    assert graph.graph_attr == {}
    assert graph.nodes() == []
    assert graph.edges() == []


def test_directed_flag_is_read_only():
    graph = Graph(directed=True)

    with pytest.raises(AttributeError):
        graph.directed = False


def test_example_graph_queries(test_graph):
    """Test node and edge counts of the example graph."""
    assert len(test_graph.nodes()) == 4
    assert set(test_graph.nodes()) == {"a", "b", "c", "d"}
    assert len(test_graph.edges()) == 3
    assert len(test_graph.edges_at("a")) == 2
    assert test_graph.edges_at("d") == []
    assert Edge("a", "b", "a-to-b") in test_graph.edges_at("a")


def test_nodes_keep_insertion_order(test_graph):
    assert test_graph.nodes() == ["a", "b", "c", "d"]


def test_node_count_matches_distinct_keys():
    graph = Graph()
    graph.add_node("x")
    graph.add_node("x")
    graph.add_edge("x", "y")
    graph.add_edge("y", "z")
    graph.add_edge("z", "x")

    assert graph.number_of_nodes() == 3
    assert "y" in graph
    assert graph.has_node("z")
    assert "w" not in graph


def test_add_edge_creates_endpoints_without_attributes():
    graph = Graph()
    graph.add_edge("a", "b")

    assert graph.node_attrs("a") == {}
    assert graph.node_attrs("b") == {}


def test_same_edge_added_twice_is_one_edge():
    graph = Graph(directed=True)
    graph.add_edge("a", "b", "k", {"color": "blue"})
    graph.add_edge("a", "b", "k", {"style": "dotted"})

    assert graph.edges() == [Edge("a", "b", "k")]
    assert graph.edge_attrs(Edge("a", "b", "k")) == {"color": "blue", "style": "dotted"}


def test_edge_attributes_overwrite():
    graph = Graph(directed=True)
    graph.add_edge("a", "b", "k", {"color": "blue"})
    graph.add_edge("a", "b", "k", {"color": "red"})

    assert graph.edges() == [Edge("a", "b", "k")]
    assert graph.edge_attrs(Edge("a", "b", "k")) == {"color": "red"}


def test_different_keys_are_distinct_edges():
    graph = Graph(directed=True)
    first = graph.add_edge("a", "b", "k1")
    second = graph.add_edge("a", "b", "k2")

    assert first != second
    assert len(graph.edges()) == 2
    for node in ("a", "b"):
        assert first in graph.edges_at(node)
        assert second in graph.edges_at(node)


def test_missing_key_and_empty_key_are_distinct():
    graph = Graph()
    graph.add_edge("a", "b")
    graph.add_edge("a", "b", "")

    assert set(graph.edges()) == {Edge("a", "b", None), Edge("a", "b", "")}


def test_reversed_edge_is_distinct_in_undirected_graph():
    graph = Graph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "a")

    assert graph.edges() == [Edge("a", "b"), Edge("b", "a")]
    assert graph.degree("a") == 2


def test_node_attributes_overwrite():
    """Test that setting an attribute twice keeps only the latest value."""
    graph = Graph()
    graph.add_node("c", {"color": "blue", "shape": "box"})
    graph.add_node("c", {"color": "red"})

    assert graph.node_attrs("c") == {"color": "red", "shape": "box"}


def test_attributes_accept_pairs_and_non_strings():
    graph = Graph()
    graph.add_node("n", [("width", 2), ("fixedsize", True)])

    assert graph.node_attrs("n") == {"width": "2", "fixedsize": "True"}


def test_attribute_accessors_return_copies():
    graph = Graph()
    edge = graph.add_edge("a", "b", attrs={"color": "blue"})

    graph.edge_attrs(edge)["color"] = "red"
    graph.node_attrs("a")["shape"] = "box"

    assert graph.edge_attrs(edge) == {"color": "blue"}
    assert graph.node_attrs("a") == {}


def test_unknown_node_lookups_return_none():
    graph = Graph(directed=True)
    graph.add_edge("a", "b")

    assert graph.edges_at("zzz") is None
    assert graph.degree("zzz") is None
    assert graph.in_degree("zzz") is None
    assert graph.out_degree("zzz") is None
    assert graph.node_attrs("zzz") is None
    assert graph.edge_attrs(Edge("a", "zzz")) is None
    assert list(graph.iter_edges("zzz")) == []


def test_unknown_node_lookups_in_undirected_graph():
    graph = Graph()

    assert graph.in_degree("zzz") is None
    assert graph.out_degree("zzz") is None


def test_isolated_node_has_zero_degree(test_graph):
    assert test_graph.degree("d") == 0
    assert test_graph.in_degree("d") == 0
    assert test_graph.out_degree("d") == 0


def test_undirected_degrees_are_equal():
    graph = Graph()
    graph.add_edge("a", "b")
    graph.add_edge("c", "a", "x")
    graph.add_edge("a", "d")

    assert graph.degree("a") == 3
    assert graph.in_degree("a") == graph.degree("a")
    assert graph.out_degree("a") == graph.degree("a")


def test_directed_degrees(test_graph):
    """Test in/out degree sums without self-loops."""
    assert test_graph.out_degree("b") == 1
    assert test_graph.in_degree("b") == 2
    for node in test_graph.nodes():
        assert test_graph.in_degree(node) + test_graph.out_degree(node) == test_graph.degree(node)


def test_self_loop():
    """Test that a self-loop is reported once and counts as in and out edge."""
    graph = Graph(directed=True)
    loop = graph.add_edge("a", "a", "loop")

    assert graph.edges() == [loop]
    assert graph.edges_at("a") == [loop]
    assert graph.degree("a") == 1
    assert graph.in_degree("a") == 1
    assert graph.out_degree("a") == 1


def test_edges_reported_from_first_endpoint():
    """Test that edges are listed through the adjacency entry of their first endpoint."""
    graph = Graph()
    graph.add_node("z")
    graph.add_edge("a", "z")
    graph.add_edge("z", "a")

    # "z" is walked first, so its own edge comes first
    assert graph.edges() == [Edge("z", "a"), Edge("a", "z")]


def test_iter_edges_for_node(test_graph):
    edges = list(test_graph.iter_edges("b"))

    assert len(edges) == 3
    assert set(edges) == {
        Edge("a", "b", "a-to-b"),
        Edge("c", "b", "c-to-b"),
        Edge("b", "a", "b-to-a"),
    }


def test_graph_repr(test_graph):
    assert repr(test_graph) == "Graph(name='Test Graph', directed=True, nodes=4, edges=3)"
