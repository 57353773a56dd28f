from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".svgpath"
CONFIG_FILE = CONFIG_DIR / "svgpath.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": (
        "precision: null prints the shortest decimals that round-trip, "
        "or an integer caps the digits after the decimal point."
    ),
    "precision": None,
}


@dataclass(frozen=True)
class FormatSettings:
    """Resolved number formatting from svgpath.cfg."""

    precision: int | None


def ensure_user_config() -> None:
    """Ensure ~/.svgpath/svgpath.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        data = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _normalize_precision(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value


def get_format_settings() -> FormatSettings:
    """Return the configured number formatting policy."""

    raw_config = _load_user_config()
    return FormatSettings(precision=_normalize_precision(raw_config.get("precision")))
