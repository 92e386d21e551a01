"""ASCII case-insensitive substring matching for filenames.

Only ``A-Z`` are folded; every other character compares as-is, so non-ASCII
names only match where their characters are identical.
"""

from __future__ import annotations

_ASCII_LOWER_TABLE = {code: code + 32 for code in range(ord("A"), ord("Z") + 1)}


def fold(text: str) -> str:
    """Return ``text`` with ASCII uppercase letters lowered."""
    return text.translate(_ASCII_LOWER_TABLE)


def matches_folded(folded_name: str, folded_query: str) -> bool:
    """Substring test on already-folded operands."""
    return folded_query in folded_name


def matches(filename: str, query: str) -> bool:
    """Return whether ``query`` occurs in ``filename`` ignoring ASCII case.

    An empty query is contained in every filename and therefore matches.
    """
    if not query:
        return True
    return matches_folded(fold(filename), fold(query))
