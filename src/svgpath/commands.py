from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Tuple, Type

import numpy as np


def format_number(value: float, precision: int | None = None) -> str:
    """Format a number as a plain SVG decimal.

    With ``precision=None`` the shortest string that round-trips to the same
    float is produced. Scientific notation is never used, integral values drop
    their fraction and negative zero prints as ``0``.
    """

    value = float(value)
    if not np.isfinite(value):
        return str(value)
    if precision is None:
        text = np.format_float_positional(value, unique=True, trim="-")
    else:
        text = np.format_float_positional(value, precision=max(int(precision), 0), unique=True, trim="-")
    if text == "-0":
        return "0"
    return text


def format_flag(value: bool) -> str:
    return "1" if value else "0"


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class HorizontalLineTo:
    x: float
    relative: bool = False


@dataclass(frozen=True)
class VerticalLineTo:
    y: float
    relative: bool = False


@dataclass(frozen=True)
class CubicBezierTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class SmoothCubicBezierTo:
    """Cubic curve whose first control point reflects the previous curve's second one."""

    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class QuadraticBezierTo:
    x1: float
    y1: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class SmoothQuadraticBezierTo:
    """Quadratic curve whose control point reflects the previous curve's one."""

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class EllipticalArcTo:
    """Arc of an ellipse with radii ``rx``/``ry`` rotated by ``x_axis_rotation`` degrees.

    ``large_arc`` and ``sweep`` pick one of the four candidate arcs joining
    the current point and ``(x, y)``.
    """

    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class ClosePath:
    relative: bool = False


Command = (
    MoveTo
    | LineTo
    | HorizontalLineTo
    | VerticalLineTo
    | CubicBezierTo
    | SmoothCubicBezierTo
    | QuadraticBezierTo
    | SmoothQuadraticBezierTo
    | EllipticalArcTo
    | ClosePath
)

COMMAND_LETTERS: Dict[Type, str] = {
    MoveTo: "M",
    LineTo: "L",
    HorizontalLineTo: "H",
    VerticalLineTo: "V",
    CubicBezierTo: "C",
    SmoothCubicBezierTo: "S",
    QuadraticBezierTo: "Q",
    SmoothQuadraticBezierTo: "T",
    EllipticalArcTo: "A",
    ClosePath: "Z",
}


def command_letter(command: Command) -> str:
    """Return the path letter for ``command``, lowercase when relative."""

    try:
        letter = COMMAND_LETTERS[type(command)]
    except KeyError as exc:
        raise TypeError(f"{command!r} is not a path command.") from exc
    return letter.lower() if command.relative else letter


def command_arguments(command: Command) -> Tuple[float | bool, ...]:
    return tuple(getattr(command, f.name) for f in fields(command) if f.name != "relative")


def render_command(command: Command, precision: int | None = None) -> str:
    """Render one command as its path data fragment, e.g. ``"L 10 0"``."""

    tokens = [command_letter(command)]
    for value in command_arguments(command):
        if isinstance(value, bool):
            tokens.append(format_flag(value))
        else:
            tokens.append(format_number(value, precision))
    return " ".join(tokens)


__all__ = [
    "ClosePath",
    "Command",
    "CubicBezierTo",
    "EllipticalArcTo",
    "HorizontalLineTo",
    "LineTo",
    "MoveTo",
    "QuadraticBezierTo",
    "SmoothCubicBezierTo",
    "SmoothQuadraticBezierTo",
    "VerticalLineTo",
    "command_arguments",
    "command_letter",
    "format_flag",
    "format_number",
    "render_command",
]
