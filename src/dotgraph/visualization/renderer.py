"""Graph rendering using Graphviz."""

import logging
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import graphviz

from ..core.exceptions import GraphvizNotFoundError, RenderError
from ..core.graph import Graph
from ..core.models import LayoutEngine, OutputFormat, RenderConfig
from .dot_generator import DOTGenerator

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@contextmanager
def graphviz_search_path(directory: Optional[PathLike]) -> Iterator[None]:
    """Context manager to temporarily put ``directory`` first on ``PATH``."""
    if directory is None:
        yield
        return

    old_path = os.environ.get("PATH")
    os.environ["PATH"] = str(directory) + os.pathsep + (old_path or "")
    try:
        yield
    finally:
        if old_path is None:
            os.environ.pop("PATH", None)
        else:
            os.environ["PATH"] = old_path


def split_format(output_format: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Split ``format[:renderer[:formatter]]`` into its parts."""
    parts = output_format.split(":")
    if len(parts) > 3 or not parts[0]:
        raise RenderError(f"Invalid output format: {output_format!r}")
    parts += [None] * (3 - len(parts))
    fmt, renderer, formatter = parts
    return fmt, renderer or None, formatter or None


def default_output_file(graph: Graph, output_format: str) -> str:
    """File name used when none is given: the graph name and the format."""
    extension = split_format(output_format)[0]
    return f"{graph.name or 'graph'}.{extension}"


def _value(option: Union[str, LayoutEngine, OutputFormat]) -> str:
    return option.value if isinstance(option, (LayoutEngine, OutputFormat)) else option


class GraphRenderer:
    """Renders DOT language to image files using Graphviz."""

    def __init__(self, graphviz_path: Optional[PathLike] = None, verbose: bool = False):
        """Initialize renderer and check Graphviz availability.

        Args:
            graphviz_path: Directory holding the Graphviz executables. If None,
                they are looked up on ``PATH``.
            verbose: Whether to let Graphviz warnings through to stderr.
        """
        self.graphviz_path = Path(graphviz_path) if graphviz_path is not None else None
        self.verbose = verbose
        self.dot_executable = self._check_graphviz_installation()

    @classmethod
    def from_config(cls, config: RenderConfig) -> "GraphRenderer":
        return cls(graphviz_path=config.graphviz_path, verbose=config.verbose)

    @property
    def search_path(self) -> Optional[str]:
        return str(self.graphviz_path) if self.graphviz_path is not None else None

    def _check_graphviz_installation(self) -> str:
        """Check if Graphviz is installed and accessible."""
        executable = shutil.which("dot", path=self.search_path)
        if not executable:
            location = f"in {self.graphviz_path}" if self.graphviz_path else "on PATH"
            raise GraphvizNotFoundError(
                f"Graphviz 'dot' executable not found {location}. Please install Graphviz:\n"
                "  Ubuntu/Debian: sudo apt-get install graphviz\n"
                "  macOS: brew install graphviz\n"
                "  Windows: Download from https://graphviz.org/download/\n"
                "If it is installed outside PATH, pass its directory with --graphviz-path."
            )

        logger.info(f"Graphviz installation verified: {executable}")
        return executable

    def render(
        self,
        dot_content: str,
        output_file: PathLike,
        output_format: Union[str, OutputFormat] = OutputFormat.PNG,
        engine: Union[str, LayoutEngine] = LayoutEngine.DOT,
    ) -> Path:
        """Render DOT content to a file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path, written as given.
            output_format: Graphviz output format, optionally as
                ``format:renderer:formatter``.
            engine: Graphviz layout engine (dot, neato, fdp, sfdp, circo, twopi, ...).

        Returns:
            Path to the generated file.

        Raises:
            GraphvizNotFoundError: If Graphviz cannot be run.
            RenderError: If Graphviz rejects the input or the options.
        """
        output_path = Path(output_file)
        data = self.render_to_bytes(dot_content, output_format, engine)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)

        logger.info(f"Graph rendered successfully to: {output_path}")
        return output_path

    def render_to_bytes(
        self,
        dot_content: str,
        output_format: Union[str, OutputFormat] = OutputFormat.PNG,
        engine: Union[str, LayoutEngine] = LayoutEngine.DOT,
    ) -> bytes:
        """Render DOT content to bytes for in-memory usage."""
        output_format = _value(output_format)
        engine = _value(engine)
        fmt, renderer, formatter = split_format(output_format)

        logger.info(f"Rendering graph to {output_format} format with {engine}")

        try:
            with graphviz_search_path(self.graphviz_path):
                source = graphviz.Source(dot_content, engine=engine)
                return source.pipe(
                    format=fmt,
                    renderer=renderer,
                    formatter=formatter,
                    quiet=not self.verbose,
                )
        except graphviz.ExecutableNotFound as e:
            raise GraphvizNotFoundError(f"Graphviz executable not found: {e}") from e
        except graphviz.CalledProcessError as e:
            diagnostics = self._decode(e.stderr)
            raise RenderError(
                f"Graphviz failed with exit status {e.returncode}: {diagnostics}",
                diagnostics=diagnostics,
            ) from e
        except ValueError as e:
            raise RenderError(f"Failed to render graph: {e}") from e

    def render_graph(
        self,
        graph: Graph,
        output_file: Optional[PathLike] = None,
        output_format: Union[str, OutputFormat] = OutputFormat.PNG,
        engine: Union[str, LayoutEngine] = LayoutEngine.DOT,
        escape: bool = False,
    ) -> Path:
        """Generate DOT for ``graph`` and render it.

        If ``output_file`` is None, the file is named after the graph
        (``graph`` when it has no name) with the format as extension.
        """
        if output_file is None:
            output_file = default_output_file(graph, _value(output_format))

        dot_content = DOTGenerator(escape=escape).generate_dot(graph)
        return self.render(dot_content, output_file, output_format, engine)

    def save_dot_file(self, dot_content: str, output_file: PathLike) -> Path:
        """Save DOT content to a .dot file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.

        Returns:
            Path to the saved DOT file.
        """
        dot_path = Path(output_file)

        # Ensure .dot extension
        if dot_path.suffix.lower() != ".dot":
            dot_path = dot_path.with_suffix(".dot")

        dot_path.write_text(dot_content, encoding="utf-8")
        logger.info(f"DOT file saved to: {dot_path}")

        return dot_path

    def get_available_engines(self) -> List[str]:
        """Get list of available Graphviz layout engines.

        Returns:
            List of engine names found in the search path.
        """
        return [
            engine.value
            for engine in LayoutEngine
            if shutil.which(engine.value, path=self.search_path)
        ]

    def graphviz_version(self) -> Optional[str]:
        """Return the installed Graphviz version, or None if it cannot be determined."""
        try:
            with graphviz_search_path(self.graphviz_path):
                version = graphviz.version()
        except (graphviz.ExecutableNotFound, graphviz.CalledProcessError, RuntimeError) as e:
            logger.warning(f"Could not determine Graphviz version: {e}")
            return None
        return ".".join(str(part) for part in version)

    @staticmethod
    def _decode(stream: Union[bytes, str, None]) -> str:
        if stream is None:
            return ""
        if isinstance(stream, bytes):
            return stream.decode("utf-8", errors="replace").strip()
        return stream.strip()
