"""Bezier curves, absolute and relative."""

from __future__ import annotations

from svgpath import Path


def build():
    path = Path().move_to(10, 50)
    path.cubic_bezier_to(20, 10, 40, 10, 50, 50)
    path.smooth_cubic_bezier_to(80, 90, 90, 50)
    path.move_to(10, 90).quadratic_bezier_by(20, -20, 40, 0).smooth_quadratic_bezier_by(40, 0)
    return path


if __name__ == "__main__":
    print(build())
