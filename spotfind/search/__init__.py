"""Search package exports.

Combines the filename index, the substring matcher, the bounded scan, and the
directory walk that fills the index in one import surface.
"""

from __future__ import annotations

from .engine import MAX_RESULTS, SearchEngine, SearchResult, search
from .matcher import fold, matches, matches_folded
from .name_index import TABLE_SIZE, FileEntry, NameIndex, name_hash
from .traversal import build_index, walk_files

__all__ = [
    "FileEntry",
    "MAX_RESULTS",
    "NameIndex",
    "SearchEngine",
    "SearchResult",
    "TABLE_SIZE",
    "build_index",
    "fold",
    "matches",
    "matches_folded",
    "name_hash",
    "search",
    "walk_files",
]
