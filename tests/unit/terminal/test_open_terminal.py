"""Tests for terminal selection and the line-mode terminal."""

from __future__ import annotations

import io
import sys
import unittest
from unittest import mock

from spotfind.terminal import open_terminal
from spotfind.terminal.lines import LineTerminal


class OpenTerminalTests(unittest.TestCase):
    def test_auto_without_tty_reads_lines(self) -> None:
        with mock.patch("spotfind.terminal._stdio_is_tty", return_value=False):
            terminal = open_terminal("auto")

        self.assertIsInstance(terminal, LineTerminal)
        self.assertFalse(terminal.reads_keys)

    def test_forced_keys_without_tty_falls_back_with_warning(self) -> None:
        with mock.patch("spotfind.terminal._stdio_is_tty", return_value=False):
            with self.assertLogs("spotfind.terminal", level="WARNING") as logs:
                terminal = open_terminal("keys")

        self.assertIsInstance(terminal, LineTerminal)
        self.assertIn("keystroke mode needs a terminal", logs.output[0])

    def test_lines_mode_ignores_tty(self) -> None:
        with mock.patch("spotfind.terminal._stdio_is_tty", return_value=True):
            self.assertIsInstance(open_terminal("lines"), LineTerminal)

    @unittest.skipIf(sys.platform == "win32", "termios is POSIX-only")
    def test_auto_with_tty_on_posix_opens_keystroke_terminal(self) -> None:
        fake_sys = mock.Mock(platform="linux")
        fake_sys.stdin.fileno.return_value = 0
        fake_sys.stdout.fileno.return_value = 1

        with mock.patch("spotfind.terminal._stdio_is_tty", return_value=True), mock.patch(
            "spotfind.terminal.sys", fake_sys
        ), mock.patch("spotfind.terminal.posix.PosixTerminal") as posix_cls:
            terminal = open_terminal("auto")

        posix_cls.assert_called_once_with(0, 1)
        self.assertIs(terminal, posix_cls.return_value)

    def test_unknown_mode_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            open_terminal("mouse")


class LineTerminalTests(unittest.TestCase):
    def test_read_line_writes_prompt_and_strips_newline(self) -> None:
        stdout = io.StringIO()
        terminal = LineTerminal(io.StringIO("report\r\nexit\n"), stdout)

        self.assertEqual(terminal.read_line("> "), "report")
        self.assertEqual(terminal.read_line("> "), "exit")
        self.assertIsNone(terminal.read_line("> "))
        self.assertEqual(stdout.getvalue(), "> > > ")

    def test_read_key_is_not_supported(self) -> None:
        terminal = LineTerminal(io.StringIO(""), io.StringIO())

        with self.assertRaises(NotImplementedError):
            terminal.read_key()

    def test_session_flushes_output(self) -> None:
        stdout = mock.Mock()
        terminal = LineTerminal(io.StringIO(""), stdout)

        with terminal.session():
            pass

        stdout.flush.assert_called_once()


if __name__ == "__main__":
    unittest.main()
