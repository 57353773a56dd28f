from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from . import arcs
from .commands import (
    ClosePath,
    Command,
    CubicBezierTo,
    EllipticalArcTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticBezierTo,
    SmoothCubicBezierTo,
    SmoothQuadraticBezierTo,
    VerticalLineTo,
    render_command,
)


@dataclass
class Path:
    """Builder for SVG path data, the value of a ``<path d="...">`` attribute.

    Every append method pushes one command and returns the same instance, so
    calls chain::

        Path().move_to(0, 0).line_to(10, 0).close_path()  # "M 0 0 L 10 0 Z"

    No current point is tracked; coordinates are written exactly as given.
    ``str(path)`` renders the data, so a path drops straight into markup such
    as ``f'<path d="{path}"/>'``.
    """

    commands: List[Command] = field(default_factory=list)
    precision: int | None = None

    def __post_init__(self) -> None:
        self.commands = list(self.commands)

    def append(self, command: Command) -> "Path":
        self.commands.append(command)
        return self

    def move_to(self, x: float, y: float, *, relative: bool = False) -> "Path":
        """Start a new subpath at ``(x, y)``."""
        return self.append(MoveTo(x, y, relative=relative))

    def move_by(self, dx: float, dy: float) -> "Path":
        return self.move_to(dx, dy, relative=True)

    def line_to(self, x: float, y: float, *, relative: bool = False) -> "Path":
        return self.append(LineTo(x, y, relative=relative))

    def line_by(self, dx: float, dy: float) -> "Path":
        return self.line_to(dx, dy, relative=True)

    def horizontal_line_to(self, x: float, *, relative: bool = False) -> "Path":
        return self.append(HorizontalLineTo(x, relative=relative))

    def horizontal_line_by(self, dx: float) -> "Path":
        return self.horizontal_line_to(dx, relative=True)

    def vertical_line_to(self, y: float, *, relative: bool = False) -> "Path":
        return self.append(VerticalLineTo(y, relative=relative))

    def vertical_line_by(self, dy: float) -> "Path":
        return self.vertical_line_to(dy, relative=True)

    def cubic_bezier_to(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x: float,
        y: float,
        *,
        relative: bool = False,
    ) -> "Path":
        """Cubic curve to ``(x, y)`` with control points ``(x1, y1)`` and ``(x2, y2)``."""
        return self.append(CubicBezierTo(x1, y1, x2, y2, x, y, relative=relative))

    def cubic_bezier_by(self, dx1: float, dy1: float, dx2: float, dy2: float, dx: float, dy: float) -> "Path":
        return self.cubic_bezier_to(dx1, dy1, dx2, dy2, dx, dy, relative=True)

    def smooth_cubic_bezier_to(self, x2: float, y2: float, x: float, y: float, *, relative: bool = False) -> "Path":
        return self.append(SmoothCubicBezierTo(x2, y2, x, y, relative=relative))

    def smooth_cubic_bezier_by(self, dx2: float, dy2: float, dx: float, dy: float) -> "Path":
        return self.smooth_cubic_bezier_to(dx2, dy2, dx, dy, relative=True)

    def quadratic_bezier_to(self, x1: float, y1: float, x: float, y: float, *, relative: bool = False) -> "Path":
        return self.append(QuadraticBezierTo(x1, y1, x, y, relative=relative))

    def quadratic_bezier_by(self, dx1: float, dy1: float, dx: float, dy: float) -> "Path":
        return self.quadratic_bezier_to(dx1, dy1, dx, dy, relative=True)

    def smooth_quadratic_bezier_to(self, x: float, y: float, *, relative: bool = False) -> "Path":
        return self.append(SmoothQuadraticBezierTo(x, y, relative=relative))

    def smooth_quadratic_bezier_by(self, dx: float, dy: float) -> "Path":
        return self.smooth_quadratic_bezier_to(dx, dy, relative=True)

    def elliptical_arc_to(
        self,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
        x: float,
        y: float,
        *,
        relative: bool = False,
    ) -> "Path":
        """Elliptical arc to ``(x, y)``; the flags choose which of the candidate arcs is drawn."""
        return self.append(
            EllipticalArcTo(rx, ry, x_axis_rotation, bool(large_arc), bool(sweep), x, y, relative=relative)
        )

    def elliptical_arc_by(
        self,
        rx: float,
        ry: float,
        x_axis_rotation: float,
        large_arc: bool,
        sweep: bool,
        dx: float,
        dy: float,
    ) -> "Path":
        return self.elliptical_arc_to(rx, ry, x_axis_rotation, large_arc, sweep, dx, dy, relative=True)

    def close_path(self, *, relative: bool = False) -> "Path":
        return self.append(ClosePath(relative=relative))

    close = close_path

    def partial_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        *,
        move: bool = True,
    ) -> "Path":
        """Append a circular arc; see :func:`svgpath.arcs.partial_circle`."""
        return arcs.partial_circle(self, cx, cy, radius, start_angle, end_angle, move=move)

    def circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float = 0.0,
        clockwise: bool = True,
        *,
        move: bool = True,
    ) -> "Path":
        """Append a full circle; see :func:`svgpath.arcs.full_circle`."""
        return arcs.full_circle(self, cx, cy, radius, start_angle, clockwise, move=move)

    @property
    def fragments(self) -> List[str]:
        return [render_command(command, self.precision) for command in self.commands]

    def render(self, precision: int | None = None) -> str:
        """Join the rendered commands with single spaces.

        ``precision`` overrides the path's own precision for this call only.
        """
        digits = self.precision if precision is None else precision
        return " ".join(render_command(command, digits) for command in self.commands)

    def copy(self) -> "Path":
        return Path(commands=self.commands, precision=self.precision)

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        return format(self.render(), format_spec)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)


__all__ = ["Path"]
