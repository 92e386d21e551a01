"""Terminal capability interface and per-host implementations.

The interaction loop only talks to ``TerminalIO``. ``open_terminal`` is the one
place that looks at the host platform and at whether stdin is a TTY.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import Protocol

logger = logging.getLogger(__name__)

INTERACTION_MODES = ("auto", "keys", "lines")


class TerminalIO(Protocol):
    """Input/output surface used by the interaction loop.

    ``reads_keys`` selects keystroke mode (``read_key``) over line mode
    (``read_line``). ``session`` acquires the terminal input mode and must
    release it on every exit path.
    """

    reads_keys: bool

    def session(self) -> AbstractContextManager[None]:
        ...

    def write(self, text: str) -> None:
        ...

    def read_key(self) -> str:
        """Return one key token, or ``""`` at end of input."""
        ...

    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return one line without its newline, ``None`` at EOF."""
        ...


def _stdio_is_tty() -> bool:
    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def open_terminal(mode: str = "auto") -> TerminalIO:
    """Build the terminal for ``mode`` (``auto``, ``keys`` or ``lines``)."""
    if mode not in INTERACTION_MODES:
        raise ValueError(f"unknown interaction mode: {mode!r}")
    interactive = _stdio_is_tty()
    if mode == "auto":
        mode = "keys" if interactive else "lines"
    elif mode == "keys" and not interactive:
        logger.warning("keystroke mode needs a terminal; reading lines instead")
        mode = "lines"

    if mode == "lines":
        from .lines import LineTerminal

        return LineTerminal(sys.stdin, sys.stdout)
    if sys.platform == "win32":
        from .windows import WindowsTerminal

        return WindowsTerminal()

    from .posix import PosixTerminal

    return PosixTerminal(sys.stdin.fileno(), sys.stdout.fileno())


__all__ = ["INTERACTION_MODES", "TerminalIO", "open_terminal"]
