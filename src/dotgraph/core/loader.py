"""Loading graphs from JSON graph descriptions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import GraphLoadError
from .graph import Graph

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> Any:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _stringify_attrs(attrs: Any) -> Any:
    if isinstance(attrs, dict):
        return {name: _stringify(value) for name, value in attrs.items()}
    return attrs


class EdgeDescription(BaseModel):
    """An edge entry in a graph description."""

    a: str
    b: str
    key: str | None = None
    attrs: dict[str, str] = Field(default_factory=dict)

    @field_validator("attrs", mode="before")
    @classmethod
    def _coerce_attrs(cls, value: Any) -> Any:
        return _stringify_attrs(value)


class GraphDescription(BaseModel):
    """A graph described as data.

    Example document::

        {
            "name": "deps",
            "directed": true,
            "graph_attr": {"rankdir": "LR"},
            "nodes": {"app": {"shape": "box"}},
            "edges": [{"a": "app", "b": "lib", "attrs": {"style": "dotted"}}]
        }
    """

    name: str | None = None
    directed: bool = False
    graph_attr: dict[str, str] = Field(default_factory=dict)
    nodes: dict[str, dict[str, str]] = Field(default_factory=dict)
    edges: list[EdgeDescription] = Field(default_factory=list)

    @field_validator("graph_attr", mode="before")
    @classmethod
    def _coerce_graph_attr(cls, value: Any) -> Any:
        return _stringify_attrs(value)

    @field_validator("nodes", mode="before")
    @classmethod
    def _coerce_node_attrs(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                node: _stringify_attrs(attrs if attrs is not None else {})
                for node, attrs in value.items()
            }
        return value

    def to_graph(self) -> Graph:
        """Build a ``Graph`` from this description.

        Nodes are added before edges, so declared nodes keep their order.
        """
        graph = Graph(self.name, directed=self.directed)
        graph.set_graph_attr(self.graph_attr)
        for node, attrs in self.nodes.items():
            graph.add_node(node, attrs)
        for edge in self.edges:
            graph.add_edge(edge.a, edge.b, edge.key, edge.attrs)

        logger.info(
            f"Loaded graph with {graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges",
        )
        return graph


def parse_graph(content: str) -> Graph:
    """Parse a JSON graph description.

    Raises:
        GraphLoadError: If the content is not valid JSON or does not
            describe a graph.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Invalid JSON: {e}") from e

    try:
        description = GraphDescription.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(f"Invalid graph description: {e}") from e

    return description.to_graph()


def load_graph(path: str | Path) -> Graph:
    """Load a graph from a JSON graph description file."""
    file_path = Path(path)
    logger.info(f"Loading graph description from {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(f"Cannot read {file_path}: {e}") from e
    return parse_graph(content)
