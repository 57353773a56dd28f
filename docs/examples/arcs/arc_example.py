"""Three quarters of a circle, counterclockwise on screen."""

from __future__ import annotations

import math

from svgpath import Path


def build():
    return Path(precision=3).partial_circle(50, 50, 30, 0.0, -1.5 * math.pi)


if __name__ == "__main__":
    print(build())
