"""Open a file with the host's default application.

Launches are fire-and-forget: the opener runs detached with its output
discarded, and a failure to start it is logged rather than reported.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileLauncher(Protocol):
    def open(self, path: str | Path) -> None:
        ...


def opener_command(platform: str = sys.platform) -> list[str] | None:
    """Return the argv prefix that opens a file, or ``None`` on Windows."""
    if platform == "win32":
        return None
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class SystemLauncher:
    """``FileLauncher`` using ``os.startfile``, ``open`` or ``xdg-open``."""

    def __init__(self, platform: str = sys.platform) -> None:
        self.platform = platform
        self.command = opener_command(platform)
        self._children: list[subprocess.Popen] = []

    def reap(self) -> None:
        """Collect openers that have exited so they do not linger as zombies."""
        self._children = [child for child in self._children if child.poll() is None]

    def open(self, path: str | Path) -> None:
        target = os.fspath(path)
        logger.info("opening %s", target)
        self.reap()
        try:
            if self.command is None:
                os.startfile(target)  # type: ignore[attr-defined]
                return
            child = subprocess.Popen(
                [*self.command, target],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.warning("failed to open %s: %s", target, exc)
            return
        self._children.append(child)
