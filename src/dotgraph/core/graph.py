"""In-memory graph model with node, edge and graph attributes."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Attributes = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


@dataclass(frozen=True)
class Edge:
    """Edge identity: two endpoints and an optional key.

    ``key`` tells apart multiple edges between the same ordered pair of
    nodes. ``None`` means the edge has no key; an empty string is a key.
    """

    a: str
    b: str
    key: Optional[str] = None


def _normalize_attrs(attrs: Optional[Attributes]) -> Dict[str, str]:
    if attrs is None:
        return {}
    pairs = attrs.items() if isinstance(attrs, Mapping) else attrs
    return {str(name): str(value) for name, value in pairs}


class Graph:
    """A labeled graph that can be rendered to the DOT language.

    Nodes are identified by string keys and created on first use. Edges are
    identified by ``(a, b, key)`` and stored once; each node keeps an
    adjacency index of the edges it takes part in.

    Example:
        >>> graph = Graph("deps", directed=True)
        >>> graph.add_edge("app", "lib", attrs={"style": "dotted"})
        Edge(a='app', b='lib', key=None)
        >>> graph.degree("lib")
        1
    """

    def __init__(self, name: Optional[str] = None, directed: bool = False):
        """Create an empty graph.

        Args:
            name: Graph name used in the DOT header.
            directed: Whether edges are directed. Fixed for the graph's lifetime.
        """
        self.name = name
        self._directed = directed
        self.graph_attr: Dict[str, str] = {}
        self._node_attrs: Dict[str, Dict[str, str]] = {}
        self._edge_attrs: Dict[Edge, Dict[str, str]] = {}
        # dict values are unused; keys form an insertion-ordered set
        self._adjacency: Dict[str, Dict[Edge, None]] = {}

    @property
    def directed(self) -> bool:
        """Whether the graph is directed."""
        return self._directed

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, directed={self._directed}, "
            f"nodes={self.number_of_nodes()}, edges={self.number_of_edges()})"
        )

    def __contains__(self, node: object) -> bool:
        return node in self._node_attrs

    # -----------------
    # Mutation
    # -----------------

    def set_graph_attr(self, attrs: Attributes) -> None:
        """Merge attributes into the graph-level attribute mapping."""
        self.graph_attr.update(_normalize_attrs(attrs))

    def _ensure_node(self, key: str) -> Dict[str, str]:
        if key not in self._node_attrs:
            logger.debug(f"Creating node {key!r}")
            self._node_attrs[key] = {}
            self._adjacency[key] = {}
        return self._node_attrs[key]

    def add_node(self, key: str, attrs: Optional[Attributes] = None) -> None:
        """Add a node, or update the attributes of an existing one.

        Args:
            key: Node key. Also used as the label unless a ``label`` is given.
            attrs: Attributes as a mapping or ``(name, value)`` pairs. Existing
                attributes with the same name are overwritten.
        """
        self._ensure_node(key).update(_normalize_attrs(attrs))

    def add_edge(
        self,
        a: str,
        b: str,
        key: Optional[str] = None,
        attrs: Optional[Attributes] = None,
    ) -> Edge:
        """Add an edge from ``a`` to ``b``, creating missing nodes.

        Calling this again with the same ``a``, ``b`` and ``key`` merges the
        new attributes into the existing edge.

        Args:
            a: First endpoint (the source in a directed graph).
            b: Second endpoint.
            key: Optional identifier to allow several edges between ``a`` and ``b``.
            attrs: Edge attributes as a mapping or ``(name, value)`` pairs.

        Returns:
            The edge identity.
        """
        edge = Edge(a, b, key)
        self._ensure_node(a)
        self._ensure_node(b)
        self._adjacency[a][edge] = None
        self._adjacency[b][edge] = None
        self._edge_attrs.setdefault(edge, {}).update(_normalize_attrs(attrs))
        return edge

    # -----------------
    # Queries
    # -----------------

    def has_node(self, key: str) -> bool:
        return key in self._node_attrs

    def nodes(self) -> List[str]:
        """Return the node keys in insertion order."""
        return list(self._node_attrs)

    def node_attrs(self, key: str) -> Optional[Dict[str, str]]:
        """Return a copy of a node's attributes, or ``None`` if unknown."""
        attrs = self._node_attrs.get(key)
        return dict(attrs) if attrs is not None else None

    def edge_attrs(self, edge: Edge) -> Optional[Dict[str, str]]:
        """Return a copy of an edge's attributes, or ``None`` if unknown."""
        attrs = self._edge_attrs.get(edge)
        return dict(attrs) if attrs is not None else None

    def iter_edges(self, node: Optional[str] = None) -> Iterator[Edge]:
        """Iterate over edges.

        Without ``node``, yields every edge in the graph once: an edge is
        reported from the adjacency entry of its first endpoint only. With
        ``node``, yields the edges adjacent to it (in or out); nothing if
        the node is unknown.
        """
        if node is not None:
            yield from self._adjacency.get(node, ())
            return

        for owner, adjacent in self._adjacency.items():
            for edge in adjacent:
                if edge.a == owner:
                    yield edge

    def edges(self) -> List[Edge]:
        """Return all the edges in the graph."""
        return list(self.iter_edges())

    def edges_at(self, node: str) -> Optional[List[Edge]]:
        """Return the edges adjacent to ``node``, or ``None`` if it is unknown."""
        if node not in self._adjacency:
            return None
        return list(self._adjacency[node])

    def number_of_nodes(self) -> int:
        return len(self._node_attrs)

    def number_of_edges(self) -> int:
        return len(self._edge_attrs)

    def degree(self, node: str) -> Optional[int]:
        """The number of edges adjacent to ``node`` (in or out).

        Returns:
            The degree, or ``None`` if the node is unknown.
        """
        if node not in self._adjacency:
            return None
        return len(self._adjacency[node])

    def in_degree(self, node: str) -> Optional[int]:
        """The number of edges into ``node``.

        For an undirected graph this is the same as ``degree()``.
        """
        if not self._directed:
            return self.degree(node)
        if node not in self._adjacency:
            return None
        return sum(1 for edge in self._adjacency[node] if edge.b == node)

    def out_degree(self, node: str) -> Optional[int]:
        """The number of edges out of ``node``.

        For an undirected graph this is the same as ``degree()``.
        """
        if not self._directed:
            return self.degree(node)
        if node not in self._adjacency:
            return None
        return sum(1 for edge in self._adjacency[node] if edge.a == node)
