"""Display-width helpers for fitting names and paths into result columns.

Widths are measured in terminal cells: combining marks take none and East
Asian wide/fullwidth characters take two.
"""

from __future__ import annotations

import unicodedata

ELLIPSIS = "..."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def pad_to_width(text: str, width: int) -> str:
    """Left-align ``text`` in ``width`` columns (like ``%-Ns``)."""
    return text + " " * max(0, width - display_width(text))


def tail_within(text: str, max_cols: int) -> str:
    """Return the longest suffix of ``text`` that fits ``max_cols`` columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if used + w > max_cols:
            break
        out.append(ch)
        used += w
    return "".join(reversed(out))


def shorten_path(path: str, max_cols: int) -> str:
    """Keep ``path`` when shorter than ``max_cols``, else ``...`` plus its tail.

    The shortened form is one column narrower than ``max_cols``.
    """
    if display_width(path) < max_cols:
        return path
    return ELLIPSIS + tail_within(path, max_cols - len(ELLIPSIS) - 1)


def fit_name(name: str, max_cols: int) -> str:
    """Return ``name`` when it fits ``max_cols`` columns, otherwise ``...``."""
    if display_width(name) > max_cols:
        return ELLIPSIS
    return name
