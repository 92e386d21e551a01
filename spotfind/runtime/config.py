"""Persistent JSON config helpers.

Stores result caps, viewport height, interaction mode, theme, and log level.
Malformed or missing config values fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..render import VIEWPORT_HEIGHT
from ..terminal import INTERACTION_MODES

APP_NAME = "spotfind"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MAX_VIEWPORT_HEIGHT = 100
DEFAULT_LOG_LEVEL = "WARNING"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bounded_int(key: str, low: int, high: int | None = None) -> int | None:
    """Read an int in ``[low, high]``; booleans and other types are rejected."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < low or (high is not None and value > high):
        return None
    return value


def load_viewport_height() -> int:
    value = _load_bounded_int("viewport_height", 1, MAX_VIEWPORT_HEIGHT)
    return VIEWPORT_HEIGHT if value is None else value


def load_max_results() -> int:
    """Load the per-search match cap; defaults to the viewport height."""
    value = _load_bounded_int("max_results", 1)
    return load_viewport_height() if value is None else value


def load_interaction_mode() -> str:
    value = load_config().get("interaction_mode")
    if not isinstance(value, str):
        return "auto"
    normalized = value.strip().lower()
    return normalized if normalized in INTERACTION_MODES else "auto"


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_log_level() -> int:
    """Return the configured logging level as an int, ``WARNING`` by default."""
    value = load_config().get("log_level")
    if isinstance(value, str):
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)
