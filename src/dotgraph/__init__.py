"""dotgraph - labeled graphs rendered to the Graphviz DOT language.

Build a graph with node, edge and graph attributes, emit it as DOT, and
export it as an image with Graphviz.
"""

from .core.exceptions import DotGraphError, GraphLoadError, GraphvizNotFoundError, RenderError
from .core.graph import Edge, Graph
from .core.loader import load_graph
from .core.models import LayoutEngine, OutputFormat, RenderConfig
from .visualization import DOTGenerator, GraphRenderer, from_networkx, to_dot, to_networkx

__version__ = "0.3.0"
__all__ = [
    "DOTGenerator",
    "DotGraphError",
    "Edge",
    "Graph",
    "GraphLoadError",
    "GraphRenderer",
    "GraphvizNotFoundError",
    "LayoutEngine",
    "OutputFormat",
    "RenderConfig",
    "RenderError",
    "from_networkx",
    "load_graph",
    "to_dot",
    "to_networkx",
]
