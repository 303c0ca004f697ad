"""Core dotgraph module."""

from .exceptions import DotGraphError, GraphLoadError, GraphvizNotFoundError, RenderError
from .graph import Edge, Graph
from .loader import EdgeDescription, GraphDescription, load_graph, parse_graph
from .models import LayoutEngine, OutputFormat, RenderConfig
from .exporter import GraphExporter

__all__ = [
    "DotGraphError",
    "Edge",
    "EdgeDescription",
    "Graph",
    "GraphDescription",
    "GraphExporter",
    "GraphLoadError",
    "GraphvizNotFoundError",
    "LayoutEngine",
    "OutputFormat",
    "RenderConfig",
    "RenderError",
    "load_graph",
    "parse_graph",
]
