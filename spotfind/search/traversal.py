"""Recursive directory walk that feeds the name index.

Directories are followed through symlinks, like a plain ``stat`` walk. Anything
that cannot be read or stat'ed is skipped without surfacing an error.
"""

from __future__ import annotations

import logging
import os
import stat
import time
from collections.abc import Iterator
from pathlib import Path

from .name_index import NameIndex

logger = logging.getLogger(__name__)


def _directory_key(path: str, info: os.stat_result) -> tuple[int, int]:
    # ``DirEntry.stat`` reports zero inode numbers on Windows.
    if info.st_ino == 0:
        info = os.stat(path)
    return (info.st_dev, info.st_ino)


def walk_files(root: str | os.PathLike[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(name, full_path)`` for every regular file below ``root``.

    A directory reached twice (symlink loops, or two links to one directory)
    is only descended into the first time.
    """
    root_path = os.fspath(root)
    visited: set[tuple[int, int]] = set()
    try:
        visited.add(_directory_key(root_path, os.stat(root_path)))
    except OSError as exc:
        logger.debug("cannot stat root %s: %s", root_path, exc)
        return

    pending = [root_path]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as entries:
                children = list(entries)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            continue

        subdirectories: list[str] = []
        for child in children:
            try:
                info = child.stat()
                if stat.S_ISDIR(info.st_mode):
                    key = _directory_key(child.path, info)
                    if key in visited:
                        logger.debug("skipping already visited directory %s", child.path)
                        continue
                    visited.add(key)
                    subdirectories.append(child.path)
                elif stat.S_ISREG(info.st_mode):
                    yield child.name, child.path
            except OSError as exc:
                logger.debug("skipping %s: %s", child.path, exc)

        # Depth-first, in directory listing order.
        pending.extend(reversed(subdirectories))


def build_index(root: str | os.PathLike[str], index: NameIndex | None = None) -> NameIndex:
    """Populate ``index`` (or a fresh one) with every file under ``root``."""
    if index is None:
        index = NameIndex()
    root_path = Path(root)
    started = time.perf_counter()
    logger.info("indexing %s", root_path)
    for name, full_path in walk_files(root_path):
        try:
            index.insert(name, full_path)
        except MemoryError:
            logger.warning("out of memory while indexing %s; entry skipped", full_path)
    logger.info(
        "indexed %d files under %s in %.3fs",
        index.total_files,
        root_path,
        time.perf_counter() - started,
    )
    return index
