"""Terminal control for Windows consoles.

``msvcrt`` already delivers unbuffered keystrokes, so the session only has to
turn on ANSI escape processing for stdout and put the old mode back.
"""

from __future__ import annotations

import contextlib
import ctypes
import msvcrt
import sys

_STD_OUTPUT_HANDLE = -11
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004

# Second byte after a 0x00/0xE0 prefix.
_SPECIAL_KEYS = {"H": "UP", "P": "DOWN", "M": "RIGHT", "K": "LEFT"}


class WindowsTerminal:
    """Keystroke terminal backed by ``msvcrt``."""

    reads_keys = True

    def __init__(self) -> None:
        self._kernel32 = ctypes.windll.kernel32
        self._handle = self._kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
        self._saved_mode: int | None = None

    def _enable_ansi(self) -> None:
        mode = ctypes.c_uint32()
        if not self._kernel32.GetConsoleMode(self._handle, ctypes.byref(mode)):
            return
        self._saved_mode = mode.value
        self._kernel32.SetConsoleMode(self._handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING)

    def _restore_mode(self) -> None:
        if self._saved_mode is None:
            return
        self._kernel32.SetConsoleMode(self._handle, self._saved_mode)
        self._saved_mode = None

    @contextlib.contextmanager
    def session(self):
        try:
            self._enable_ansi()
            yield
        finally:
            self._restore_mode()

    def write(self, text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    def read_key(self) -> str:
        ch = msvcrt.getwch()
        if ch in {"\x00", "\xe0"}:
            return _SPECIAL_KEYS.get(msvcrt.getwch(), "UNKNOWN")
        if ch == "\x03":
            raise KeyboardInterrupt
        if ch == "\x1a":
            return ""
        if ch == "\x1b":
            return "ESC"
        if ch in {"\r", "\n"}:
            return "ENTER"
        if ch == "\x08":
            return "BACKSPACE"
        if ch == "\x15":
            return "CTRL_U"
        if ord(ch) < 0x20:
            return "UNKNOWN"
        return ch

    def read_line(self, prompt: str) -> str | None:
        self.write(prompt)
        line = sys.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")
