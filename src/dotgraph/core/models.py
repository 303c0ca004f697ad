"""Enums and configuration models for dotgraph."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator


class LayoutEngine(str, Enum):
    """Graphviz layout engines."""

    DOT = "dot"
    NEATO = "neato"
    FDP = "fdp"
    SFDP = "sfdp"
    TWOPI = "twopi"
    CIRCO = "circo"
    OSAGE = "osage"
    PATCHWORK = "patchwork"


class OutputFormat(str, Enum):
    """Commonly used Graphviz output formats.

    Any other format understood by Graphviz, including the
    ``format:renderer:formatter`` form, is passed through unchanged.
    """

    PNG = "png"
    SVG = "svg"
    PDF = "pdf"
    JPG = "jpg"
    GIF = "gif"
    PS = "ps"
    DOT = "dot"
    JSON = "json"
    PLAIN = "plain"


class RenderConfig(BaseModel):
    """Configuration for rendering a graph with Graphviz."""

    output_file: str | None = None
    output_format: str = OutputFormat.PNG.value
    engine: str = LayoutEngine.DOT.value
    graphviz_path: Path | None = None
    save_dot: bool = False
    verbose: bool = False

    @field_validator("output_format", "engine", mode="before")
    @classmethod
    def _enum_to_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value
