"""DOT language generation for Graphviz rendering."""

import logging
from typing import Dict, List

from ..core.graph import Graph

logger = logging.getLogger(__name__)


class DOTGenerator:
    """Generates DOT language text from a ``Graph``.

    Attribute values are wrapped in double quotes as-is. Quotes, backslashes
    and newlines inside values are not escaped unless ``escape`` is set, so
    callers are responsible for passing values that are safe inside quotes.
    """

    INDENT = "    "

    def __init__(self, escape: bool = False):
        """Initialize DOT generator.

        Args:
            escape: Backslash-escape quotes, backslashes and newlines in
                attribute values.
        """
        self.escape = escape

    def generate_dot(self, graph: Graph) -> str:
        """Generate DOT language string from a graph.

        Args:
            graph: Graph to describe. It is only read.

        Returns:
            DOT language string.
        """
        logger.info("Generating DOT language from graph")

        lines = [self._generate_header(graph)]
        lines.extend(self._generate_graph_attributes(graph))
        lines.append("")
        lines.extend(self._generate_nodes(graph))
        lines.append("")
        lines.extend(self._generate_edges(graph))
        lines.append("}")

        logger.info("DOT language generation completed")
        return "\n".join(lines) + "\n"

    def _generate_header(self, graph: Graph) -> str:
        graph_type = "digraph" if graph.directed else "graph"
        name = graph.name if graph.name is not None else ""
        return f"strict {graph_type} {name} {{"

    def _generate_graph_attributes(self, graph: Graph) -> List[str]:
        lines = [f"{self.INDENT}// Graph attributes"]
        for attr in self._attr_list(graph.graph_attr):
            lines.append(f"{self.INDENT}{attr};")
        return lines

    def _generate_nodes(self, graph: Graph) -> List[str]:
        lines = [f"{self.INDENT}// Nodes"]
        for node in graph.nodes():
            attrs = self._inline_attr_list(graph.node_attrs(node) or {})
            lines.append(f"{self.INDENT}{node}{attrs};")
        return lines

    def _generate_edges(self, graph: Graph) -> List[str]:
        edge_symbol = "->" if graph.directed else "--"

        lines = [f"{self.INDENT}// Edges"]
        for edge in graph.iter_edges():
            if edge.key is not None:
                lines.append(f"{self.INDENT}// key={edge.key}")
            attrs = self._inline_attr_list(graph.edge_attrs(edge) or {})
            lines.append(f"{self.INDENT}{edge.a} {edge_symbol} {edge.b}{attrs};")
        return lines

    def _attr_list(self, attrs: Dict[str, str]) -> List[str]:
        return [f'{key}="{self._format_value(value)}"' for key, value in attrs.items()]

    def _inline_attr_list(self, attrs: Dict[str, str]) -> str:
        """Format attributes as `` [k="v", ...]``, or an empty string if there are none."""
        pairs = self._attr_list(attrs)
        if not pairs:
            return ""
        return " [" + ", ".join(pairs) + "]"

    def _format_value(self, value: str) -> str:
        if not self.escape:
            return value
        return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def to_dot(graph: Graph, escape: bool = False) -> str:
    """Return the DOT language description of ``graph``."""
    return DOTGenerator(escape=escape).generate_dot(graph)
