"""Conversion between dotgraph graphs and NetworkX graphs."""

import logging
from typing import Any, Dict, Union

import networkx as nx

from ..core.graph import Graph

logger = logging.getLogger(__name__)

# Graph-level key holding the graph name when "name" is taken by a graph attribute
NAME_ATTR = "dotgraph_name"
# Edge data key holding (a, b, key) for edges a NetworkX multigraph cannot tell apart
EDGE_ATTR = "dotgraph_edge"


def to_networkx(graph: Graph) -> Union[nx.MultiDiGraph, nx.MultiGraph]:
    """Convert a graph to a NetworkX multigraph.

    Keyed edges use their key as the NetworkX edge key. Edges without a key
    get the integer key NetworkX assigns.

    The graph name is stored as ``graph["name"]``, or under ``NAME_ATTR`` when
    the graph has an attribute called ``name``. In an undirected graph,
    ``a -- b`` and ``b -- a`` are distinct edges but the same pair for
    NetworkX; the second one gets its identity stored under ``EDGE_ATTR``, and
    a NetworkX-assigned key when its own key is already used for the pair.

    Args:
        graph: Graph to convert.

    Returns:
        ``nx.MultiDiGraph`` for directed graphs, ``nx.MultiGraph`` otherwise.
    """
    nx_graph = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    nx_graph.graph.update(graph.graph_attr)
    if graph.name is not None:
        name_attr = NAME_ATTR if "name" in graph.graph_attr else "name"
        nx_graph.graph[name_attr] = graph.name

    # attributes are set after insertion since names like "key" clash with add_edge()
    for node in graph.nodes():
        nx_graph.add_node(node)
        nx_graph.nodes[node].update(graph.node_attrs(node) or {})

    for edge in graph.iter_edges():
        data = graph.edge_attrs(edge) or {}
        key = edge.key
        if not graph.directed and nx_graph.has_edge(edge.a, edge.b):
            data[EDGE_ATTR] = (edge.a, edge.b, edge.key)
            if key is not None and nx_graph.has_edge(edge.a, edge.b, key):
                key = None
        nx_key = nx_graph.add_edge(edge.a, edge.b, key=key)
        nx_graph.edges[edge.a, edge.b, nx_key].update(data)

    logger.debug(
        f"Converted graph to NetworkX with {nx_graph.number_of_nodes()} nodes and {nx_graph.number_of_edges()} edges",
    )
    return nx_graph


def from_networkx(nx_graph: nx.Graph) -> Graph:
    """Build a graph from a NetworkX graph.

    String edge keys of multigraphs are kept; any other key (such as the
    integers NetworkX assigns) becomes ``None``. Edge identities and the graph
    name stored by ``to_networkx`` are read back. Node keys and attribute
    values are converted to strings.
    """
    graph_attr = dict(nx_graph.graph)
    if NAME_ATTR in graph_attr:
        name = graph_attr.pop(NAME_ATTR)
    else:
        name = graph_attr.pop("name", None)
    graph = Graph(str(name) if name is not None else None, directed=nx_graph.is_directed())
    graph.set_graph_attr(graph_attr)

    for node, attrs in nx_graph.nodes(data=True):
        graph.add_node(str(node), attrs)

    if nx_graph.is_multigraph():
        for a, b, key, attrs in nx_graph.edges(keys=True, data=True):
            _add_edge(graph, a, b, key if isinstance(key, str) else None, attrs)
    else:
        for a, b, attrs in nx_graph.edges(data=True):
            _add_edge(graph, a, b, None, attrs)

    return graph


def _add_edge(graph: Graph, a: Any, b: Any, key: Any, attrs: Dict[str, Any]) -> None:
    attrs = dict(attrs)
    identity = attrs.pop(EDGE_ATTR, None)
    if identity is not None:
        a, b, key = identity
    graph.add_edge(str(a), str(b), key, attrs)
