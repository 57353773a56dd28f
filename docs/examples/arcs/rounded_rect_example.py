"""Rectangle with rounded corners built from quarter arcs."""

from __future__ import annotations

import math

from svgpath import Path


def build(x0: float = 10, y0: float = 10, x1: float = 90, y1: float = 60, r: float = 8):
    half = math.pi / 2
    path = Path(precision=3).move_to(x0 + r, y0)
    path.horizontal_line_to(x1 - r).partial_circle(x1 - r, y0 + r, r, -half, 0.0, move=False)
    path.vertical_line_to(y1 - r).partial_circle(x1 - r, y1 - r, r, 0.0, half, move=False)
    path.horizontal_line_to(x0 + r).partial_circle(x0 + r, y1 - r, r, half, math.pi, move=False)
    path.vertical_line_to(y0 + r).partial_circle(x0 + r, y0 + r, r, math.pi, 1.5 * math.pi, move=False)
    return path.close_path()


if __name__ == "__main__":
    print(build())
