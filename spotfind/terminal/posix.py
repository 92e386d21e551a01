"""Terminal control for POSIX hosts.

Owns the cbreak-mode lifecycle: echo and line buffering are switched off for
the session and briefly restored while a whole line is being typed.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .keys import KeyReader


class PosixTerminal:
    """Keystroke terminal backed by ``termios``."""

    reads_keys = True

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._keys = KeyReader(stdin_fd)

    def enable_input_mode(self) -> None:
        tty.setcbreak(self.stdin_fd, termios.TCSAFLUSH)

    def disable_input_mode(self) -> None:
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def session(self):
        """Bracket the interactive session with cbreak enter/exit."""
        try:
            self.enable_input_mode()
            yield
        finally:
            self.disable_input_mode()

    @contextlib.contextmanager
    def canonical_input(self):
        """Temporarily restore echoing, line-buffered input."""
        termios.tcsetattr(self.stdin_fd, termios.TCSANOW, self._saved_tty_state)
        try:
            yield
        finally:
            tty.setcbreak(self.stdin_fd, termios.TCSANOW)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="surrogateescape"))

    def read_key(self) -> str:
        return self._keys.read_key()

    def read_line(self, prompt: str) -> str | None:
        self.write(prompt)
        chunks: list[bytes] = []
        with self.canonical_input():
            while True:
                chunk = os.read(self.stdin_fd, 1024)
                if not chunk:
                    break
                chunks.append(chunk)
                if chunk.endswith(b"\n"):
                    break
        if not chunks:
            return None
        return b"".join(chunks).decode("utf-8", errors="replace").rstrip("\r\n")
