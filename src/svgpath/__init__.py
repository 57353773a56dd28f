"""svgpath – typed builder for SVG path data."""

from __future__ import annotations

from .arcs import ArcSegment, decompose_arc, full_circle, partial_circle
from .commands import Command, format_number, render_command
from .path import Path

__all__ = [
    "ArcSegment",
    "Command",
    "Path",
    "__version__",
    "decompose_arc",
    "format_number",
    "full_circle",
    "partial_circle",
    "render_command",
]

__version__ = "0.1.0"
