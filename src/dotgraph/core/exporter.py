"""Main exporter class for turning graphs into DOT sources and images."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..visualization import DOTGenerator, GraphRenderer
from ..visualization.renderer import default_output_file
from .exceptions import GraphvizNotFoundError
from .graph import Graph
from .models import LayoutEngine, OutputFormat, RenderConfig

logger = logging.getLogger(__name__)


def dot_source_file(output_file: str) -> Path:
    """Path for the DOT source saved next to ``output_file``.

    ``graph.png`` saves ``graph.dot``; an output already ending in ``.dot``
    (a ``dot`` format render) saves ``graph.source.dot`` instead.
    """
    output_path = Path(output_file)
    dot_file = output_path.with_suffix(".dot")
    if dot_file == output_path:
        dot_file = output_path.with_name(f"{output_path.stem}.source.dot")
    return dot_file


class GraphExporter:
    """Exports graphs as image files with Graphviz."""

    def __init__(self, config: Optional[RenderConfig] = None, **options: Any):
        """Initialize exporter.

        Args:
            config: Render configuration. If None, one is built from ``options``.
            **options: ``RenderConfig`` fields, used when ``config`` is None.
        """
        self.config = config if config is not None else RenderConfig(**options)

    def export(self, graph: Graph, escape: bool = False) -> Path:
        """Export a graph to an image file.

        Args:
            graph: Graph to export.
            escape: Escape attribute values in the generated DOT.

        Returns:
            Path to the generated file.
        """
        config = self.config
        output_file = config.output_file
        if output_file is None:
            output_file = default_output_file(graph, config.output_format)

        logger.info(f"Starting export of {graph!r} to {output_file}")

        dot_content = DOTGenerator(escape=escape).generate_dot(graph)
        renderer = GraphRenderer.from_config(config)

        if config.save_dot:
            dot_file = renderer.save_dot_file(dot_content, dot_source_file(output_file))
            logger.info(f"DOT file saved: {dot_file}")

        output_path = renderer.render(
            dot_content,
            output_file,
            output_format=config.output_format,
            engine=config.engine,
        )

        logger.info(f"Graph exported successfully: {output_path}")
        return output_path

    def validate_prerequisites(self) -> Dict[str, bool]:
        """Validate all prerequisites for rendering.

        Returns:
            Dictionary with validation results.
        """
        results = {}

        try:
            renderer = GraphRenderer.from_config(self.config)
            results["graphviz"] = True
            results["engine"] = self.config.engine in renderer.get_available_engines()
        except GraphvizNotFoundError:
            results["graphviz"] = False
            results["engine"] = False

        if self.config.graphviz_path is not None:
            results["graphviz_path"] = self.config.graphviz_path.is_dir()

        return results

    def get_supported_engines(self) -> List[str]:
        return [engine.value for engine in LayoutEngine]

    def get_supported_formats(self) -> List[str]:
        return [fmt.value for fmt in OutputFormat]
