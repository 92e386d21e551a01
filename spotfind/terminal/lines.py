"""Line-oriented terminal for pipes, scripts, and dumb consoles."""

from __future__ import annotations

import contextlib
from typing import TextIO


class LineTerminal:
    """Read whole lines from a text stream and write plain text back."""

    reads_keys = False

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    @contextlib.contextmanager
    def session(self):
        try:
            yield
        finally:
            self.stdout.flush()

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_key(self) -> str:
        raise NotImplementedError("LineTerminal reads whole lines; use read_line()")

    def read_line(self, prompt: str) -> str | None:
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")
