"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
A lone ESC is told apart from arrow-key sequences by a short read timeout.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25

_ARROW_FINALS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


class KeyReader:
    """Decode one key token per call from a raw-mode file descriptor.

    Tokens are single printable characters or one of ``ESC``, ``ENTER``,
    ``BACKSPACE``, ``CTRL_U``, ``UP``/``DOWN``/``LEFT``/``RIGHT`` and
    ``UNKNOWN``. End of input yields ``""``.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: list[bytes] = []

    def _read_ready_byte(self, timeout_ms: int) -> bytes | None:
        ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
        ch = os.read(self.fd, 1)
        if not ch:
            return None
        return ch

    def _read_byte(self) -> bytes:
        if self._pending:
            return self._pending.pop(0)
        return os.read(self.fd, 1)

    def read_key(self) -> str:
        ch = self._read_byte()
        if not ch:
            return ""

        if ch in {b"\x08", b"\x7f"}:
            return "BACKSPACE"
        if ch in {b"\r", b"\n"}:
            return "ENTER"
        if ch == b"\x15":
            return "CTRL_U"
        if ch == b"\x1b":
            return self._read_escape()
        if ch[0] < 0x20:
            return "UNKNOWN"

        raw = ch
        for _ in range(_utf8_sequence_length(ch[0]) - 1):
            more = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            raw += more
        return raw.decode("utf-8", errors="replace")

    def _read_escape(self) -> str:
        seq = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return "ESC"
        if seq not in {b"[", b"O"}:
            self._pending.append(seq)
            return "ESC"

        # CSI/SS3: parameters then one final byte in 0x40..0x7e.
        for _ in range(16):
            part = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return "UNKNOWN"
            if 0x40 <= part[0] <= 0x7E:
                return _ARROW_FINALS.get(part, "UNKNOWN")
        return "UNKNOWN"
