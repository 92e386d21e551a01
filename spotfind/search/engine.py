"""Bounded linear scan of a ``NameIndex``.

The scan stops as soon as ``max_results`` matches are collected, so entries in
later buckets can be left out whenever a query matches more files than the
cap. That truncation is part of the observable behavior.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from .matcher import fold, matches_folded
from .name_index import FileEntry, NameIndex

MAX_RESULTS = 50


@dataclass(frozen=True)
class SearchResult:
    """Matches in enumeration order plus the seconds spent scanning."""

    matches: list[FileEntry]
    elapsed: float

    def __len__(self) -> int:
        return len(self.matches)


def search(index: NameIndex, query: str, max_results: int = MAX_RESULTS) -> SearchResult:
    """Collect up to ``max_results`` entries whose name contains ``query``.

    An empty query returns no matches without touching the index.
    """
    if max_results < 1:
        raise ValueError("max_results must be >= 1")
    if not query:
        return SearchResult(matches=[], elapsed=0.0)

    started = time.perf_counter()
    folded_query = fold(query)
    found: list[FileEntry] = []
    for entry in index.iter_entries():
        if not matches_folded(entry.folded_name, folded_query):
            continue
        found.append(entry)
        if len(found) >= max_results:
            break
    return SearchResult(matches=found, elapsed=time.perf_counter() - started)


class SearchEngine:
    """Search bound to one index and one result cap."""

    def __init__(self, index: NameIndex, max_results: int = MAX_RESULTS) -> None:
        if max_results < 1:
            raise ValueError("max_results must be >= 1")
        self.index = index
        self.max_results = max_results

    @property
    def total_files(self) -> int:
        return self.index.total_files

    def search(self, query: str) -> SearchResult:
        return search(self.index, query, self.max_results)
