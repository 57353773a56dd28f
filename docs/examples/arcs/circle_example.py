"""Full circle traced as arc segments."""

from __future__ import annotations

from svgpath import Path


def build():
    return Path(precision=3).circle(50, 50, 40)


if __name__ == "__main__":
    print(build())
