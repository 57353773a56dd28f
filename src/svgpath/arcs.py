"""Circular arcs expressed as SVG elliptical-arc commands.

Angles are in radians and the point at angle ``theta`` is
``(cx + r * cos(theta), cy + r * sin(theta))``. SVG user space is y-down, so
increasing angles run clockwise on screen, which is the direction SVG calls
positive: a positive span gets ``sweep=1`` and a negative one ``sweep=0``.

A single ``A`` command cannot describe a full turn (its endpoint would equal
its start point) and its large-arc flag is ambiguous at exactly half a turn.
Spans are therefore split so every emitted segment covers strictly less than
``pi``, and the large-arc flag is always ``0``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from .path import Path

FULL_TURN = 2.0 * math.pi


@dataclass(frozen=True)
class ArcSegment:
    """One piece of a decomposed circular arc."""

    center: Tuple[float, float]
    radius: float
    start_angle: float
    end_angle: float
    start: Tuple[float, float]
    end: Tuple[float, float]

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def sweep(self) -> bool:
        return self.span > 0


def circle_point(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    return (float(cx + radius * math.cos(angle)), float(cy + radius * math.sin(angle)))


def normalize_span(span: float) -> float:
    """Fold spans larger than a full turn back into ``[-2pi, 2pi]``.

    Exact multiples of a full turn stay a full turn instead of collapsing to
    zero. Non-finite spans are returned unchanged.
    """

    span = float(span)
    magnitude = abs(span)
    if not np.isfinite(magnitude) or magnitude <= FULL_TURN:
        return span
    reduced = math.fmod(magnitude, FULL_TURN)
    if np.isclose(reduced, 0.0, rtol=0.0, atol=1e-12) or np.isclose(reduced, FULL_TURN, rtol=0.0, atol=1e-12):
        reduced = FULL_TURN
    return math.copysign(reduced, span)


def segment_count(span: float) -> int:
    """Number of ``A`` commands needed so that none covers half a turn or more."""

    magnitude = abs(float(span))
    if not np.isfinite(magnitude):
        return 1
    return int(magnitude // math.pi) + 1


def decompose_arc(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
) -> List[ArcSegment]:
    """Split the arc from ``start_angle`` to ``end_angle`` into segments.

    Returns an empty list when both angles are equal. Nothing is validated:
    a zero radius yields zero-length segments and non-finite input yields
    non-finite coordinates.
    """

    return decompose_span(cx, cy, radius, start_angle, float(end_angle) - float(start_angle))


def decompose_span(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    span: float,
) -> List[ArcSegment]:
    """Like :func:`decompose_arc` but with a signed angular span instead of an end angle."""

    start = float(start_angle)
    span = normalize_span(span)
    if span == 0.0:
        return []

    count = segment_count(span)
    angles = start + np.linspace(0.0, span, count + 1, endpoint=True)
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    points = [(float(x), float(y)) for x, y in zip(xs, ys)]
    if np.isclose(abs(span), FULL_TURN, rtol=0.0, atol=1e-12):
        # Close the circle exactly instead of landing a rounding error away.
        points[-1] = points[0]

    center = (float(cx), float(cy))
    return [
        ArcSegment(
            center=center,
            radius=float(radius),
            start_angle=float(angles[i]),
            end_angle=float(angles[i + 1]),
            start=points[i],
            end=points[i + 1],
        )
        for i in range(count)
    ]


def partial_circle(
    path: "Path",
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    *,
    move: bool = True,
) -> "Path":
    """Append the circular arc from ``start_angle`` to ``end_angle`` to ``path``.

    With ``move=True`` a move-to the start point comes first; otherwise the
    arc continues from whatever current point the path already has.
    """

    return _append_span(path, cx, cy, radius, start_angle, float(end_angle) - float(start_angle), move)


def full_circle(
    path: "Path",
    cx: float,
    cy: float,
    radius: float,
    start_angle: float = 0.0,
    clockwise: bool = True,
    *,
    move: bool = True,
) -> "Path":
    """Append a whole circle starting and ending at ``start_angle``.

    ``clockwise`` refers to the on-screen direction in SVG's y-down space.
    """

    span = FULL_TURN if clockwise else -FULL_TURN
    return _append_span(path, cx, cy, radius, start_angle, span, move)


def _append_span(
    path: "Path",
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    span: float,
    move: bool,
) -> "Path":
    segments = decompose_span(cx, cy, radius, start_angle, span)
    if move:
        start = segments[0].start if segments else circle_point(cx, cy, radius, float(start_angle))
        path.move_to(*start)
    for segment in segments:
        path.elliptical_arc_to(radius, radius, 0.0, False, segment.sweep, *segment.end)
    return path


__all__ = [
    "ArcSegment",
    "FULL_TURN",
    "circle_point",
    "decompose_arc",
    "decompose_span",
    "full_circle",
    "normalize_span",
    "partial_circle",
    "segment_count",
]
