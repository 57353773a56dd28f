from __future__ import annotations

import numpy as np

LETTERS = set("MmLlHhVvCcSsQqTtAaZz")


def split_commands(data: str) -> list[tuple[str, list[float]]]:
    """Group rendered path data into (letter, numbers) pairs."""
    commands: list[tuple[str, list[float]]] = []
    for token in data.split(" "):
        if token in LETTERS:
            commands.append((token, []))
        else:
            commands[-1][1].append(float(token))
    return commands


def arc_endpoints(data: str) -> np.ndarray:
    return np.array([args[5:7] for letter, args in split_commands(data) if letter == "A"], dtype=float)
