"""Visualization module for DOT generation and rendering."""

from .dot_generator import DOTGenerator, to_dot
from .networkx_adapter import from_networkx, to_networkx
from .renderer import GraphRenderer

__all__ = ["DOTGenerator", "GraphRenderer", "from_networkx", "to_dot", "to_networkx"]
