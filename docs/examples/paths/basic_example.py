"""Straight lines and a closed subpath."""

from __future__ import annotations

from svgpath import Path


def build():
    return Path().move_to(10, 10).line_to(90, 10).line_to(50, 80).close_path()


if __name__ == "__main__":
    print(build())
