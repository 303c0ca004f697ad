"""Exception types raised by dotgraph."""


class DotGraphError(Exception):
    """Base class for dotgraph errors."""


class GraphvizNotFoundError(DotGraphError, RuntimeError):
    """The Graphviz executable could not be located."""


class RenderError(DotGraphError, RuntimeError):
    """Graphviz ran but failed to produce the requested output."""

    def __init__(self, message: str, diagnostics: str = ""):
        super().__init__(message)
        self.diagnostics = diagnostics


class GraphLoadError(DotGraphError, ValueError):
    """A graph description could not be read or validated."""
