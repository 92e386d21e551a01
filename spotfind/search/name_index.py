"""In-memory filename index bucketed by a case-folded DJB2 hash.

Each bucket holds the entries whose lowercased name hashes to it. Scans walk
buckets in ascending order and, inside a bucket, newest entry first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .matcher import fold

TABLE_SIZE = 16384
_DJB2_SEED = 5381
_HASH_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class FileEntry:
    """One indexed file: its bare name and the full path it was found at."""

    name: str
    full_path: str
    folded_name: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "folded_name", fold(self.name))


def name_hash(name: str, table_size: int = TABLE_SIZE) -> int:
    """Return the bucket for ``name``.

    DJB2 (``h * 33 + c``) over the ASCII-lowercased UTF-8 bytes, wrapped to 64
    bits. ``surrogateescape`` keeps undecodable OS filenames hashable.
    """
    value = _DJB2_SEED
    for byte in fold(name).encode("utf-8", errors="surrogateescape"):
        value = (value * 33 + byte) & _HASH_MASK
    return value % table_size


class NameIndex:
    """Hash table of ``FileEntry`` records keyed by folded filename."""

    def __init__(self, table_size: int = TABLE_SIZE) -> None:
        if table_size < 1:
            raise ValueError("table_size must be >= 1")
        self.table_size = table_size
        # Buckets append at the tail; readers walk them in reverse so the
        # newest entry comes first.
        self._buckets: list[list[FileEntry] | None] = [None] * table_size
        self._total_files = 0

    @property
    def total_files(self) -> int:
        return self._total_files

    def __len__(self) -> int:
        return self._total_files

    def bucket_of(self, name: str) -> int:
        return name_hash(name, self.table_size)

    def insert(self, name: str, full_path: str) -> FileEntry:
        """Add a file to the index and return its new entry.

        Duplicate names are kept as separate entries in the same bucket.
        """
        if name is None or full_path is None:
            raise TypeError("name and full_path must not be None")
        entry = FileEntry(name=name, full_path=full_path)
        bucket_idx = self.bucket_of(name)
        bucket = self._buckets[bucket_idx]
        if bucket is None:
            bucket = []
            self._buckets[bucket_idx] = bucket
        bucket.append(entry)
        self._total_files += 1
        return entry

    def clear(self) -> None:
        self._buckets = [None] * self.table_size
        self._total_files = 0

    def iter_entries(self) -> Iterator[FileEntry]:
        """Yield every entry in bucket order, newest first within a bucket."""
        for bucket in self._buckets:
            if bucket:
                yield from reversed(bucket)

    def for_each_entry(self, visit: Callable[[FileEntry], object]) -> None:
        for entry in self.iter_entries():
            visit(entry)

    def bucket_entries(self, bucket: int) -> list[FileEntry]:
        """Return a copy of one bucket, newest entry first."""
        entries = self._buckets[bucket]
        return list(reversed(entries)) if entries else []

    def bucket_lengths(self) -> dict[int, int]:
        """Return lengths of all non-empty buckets keyed by bucket number."""
        return {idx: len(bucket) for idx, bucket in enumerate(self._buckets) if bucket}

    def lookup(self, name: str) -> list[FileEntry]:
        """Return entries whose name equals ``name`` ignoring ASCII case."""
        folded = fold(name)
        return [entry for entry in self.bucket_entries(self.bucket_of(name)) if entry.folded_name == folded]
