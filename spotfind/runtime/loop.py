"""Incremental-search interaction loop.

A synchronous state machine: every edit to the query runs one bounded search
and one redraw. Enter on a non-empty result list asks for a result number and
hands the chosen path to the launcher.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Protocol

from ..launcher import FileLauncher
from ..render import RenderFrame
from ..search import FileEntry, SearchEngine, SearchResult
from ..terminal import TerminalIO

logger = logging.getLogger(__name__)

QUERY_MAX_LENGTH = 255
EXIT_COMMAND = "exit"


class LoopMode(enum.Enum):
    TYPING = "typing"
    CONFIRMING = "confirming"
    TERMINATED = "terminated"


class Renderer(Protocol):
    query_prompt: str
    viewport_height: int

    def start(self, total_files: int) -> None:
        ...

    def draw(self, frame: RenderFrame) -> None:
        ...

    def selection_prompt(self, count: int) -> str:
        ...

    def after_selection(self) -> None:
        ...

    def finish(self) -> None:
        ...


@dataclass
class SessionState:
    """Query buffer, current mode, and the latest search result."""

    query: str = ""
    mode: LoopMode = LoopMode.TYPING
    result: SearchResult = field(default_factory=lambda: SearchResult(matches=[], elapsed=0.0))

    @property
    def matches(self) -> list[FileEntry]:
        return self.result.matches


def parse_selection(text: str, count: int) -> int | None:
    """Return the 1-based choice in ``text`` when it is within ``[1, count]``."""
    try:
        choice = int(text.strip())
    except ValueError:
        return None
    if 1 <= choice <= count:
        return choice
    return None


def is_query_character(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class InteractionLoop:
    """Drive one search session over an already-built index."""

    def __init__(
        self,
        engine: SearchEngine,
        terminal: TerminalIO,
        renderer: Renderer,
        launcher: FileLauncher,
        query_max_length: int = QUERY_MAX_LENGTH,
    ) -> None:
        self.engine = engine
        self.terminal = terminal
        self.renderer = renderer
        self.launcher = launcher
        self.query_max_length = query_max_length
        self.state = SessionState()

    @property
    def mode(self) -> LoopMode:
        return self.state.mode

    @property
    def query(self) -> str:
        return self.state.query

    def terminate(self, reason: str) -> None:
        logger.info("session ended: %s", reason)
        self.state.mode = LoopMode.TERMINATED

    def refresh(self) -> None:
        """Re-run the search for the current query and redraw."""
        self.state.result = self.engine.search(self.state.query)
        self.renderer.draw(
            RenderFrame(
                query=self.state.query,
                matches=self.state.matches,
                total_files=self.engine.total_files,
                elapsed=self.state.result.elapsed,
            )
        )

    def set_query(self, query: str) -> None:
        query = query[: self.query_max_length]
        if query == self.state.query:
            return
        self.state.query = query
        self.refresh()

    def handle_key(self, key: str) -> None:
        """Apply one key token while typing."""
        if self.state.mode is not LoopMode.TYPING:
            return
        if key == "":
            self.terminate("end of input")
        elif key == "ESC":
            self.terminate("escape")
        elif key == "ENTER":
            self.confirm()
        elif key == "BACKSPACE":
            self.set_query(self.state.query[:-1])
        elif key == "CTRL_U":
            self.set_query("")
        elif is_query_character(key):
            self.set_query(self.state.query + key)

    def handle_line(self, line: str | None) -> None:
        """Apply one input line: a whole new query followed by Enter."""
        if self.state.mode is not LoopMode.TYPING:
            return
        if line is None:
            self.terminate("end of input")
            return
        if line.strip() == EXIT_COMMAND:
            self.terminate("exit command")
            return
        self.state.query = line[: self.query_max_length]
        self.refresh()
        self.confirm()

    @property
    def visible_matches(self) -> list[FileEntry]:
        """Matches the renderer actually drew; only these can be chosen."""
        return self.state.matches[: self.renderer.viewport_height]

    def confirm(self) -> None:
        """Ask which result to open; does nothing while there are no matches."""
        if not self.state.matches:
            return
        self.state.mode = LoopMode.CONFIRMING
        answer = self.terminal.read_line(self.renderer.selection_prompt(len(self.visible_matches)))
        self.handle_selection(answer)

    def handle_selection(self, answer: str | None) -> None:
        """Open the chosen result (if any) and go back to an empty query."""
        if self.state.mode is not LoopMode.CONFIRMING:
            return
        if answer is None:
            self.terminate("end of input")
            return
        matches = self.visible_matches
        choice = parse_selection(answer, len(matches))
        self.renderer.after_selection()
        if choice is not None:
            self.launcher.open(matches[choice - 1].full_path)
        else:
            logger.debug("selection %r cancelled", answer)
        self.state.mode = LoopMode.TYPING
        self.state.query = ""
        self.refresh()

    def step(self) -> None:
        """Read and apply one unit of input."""
        if self.terminal.reads_keys:
            self.handle_key(self.terminal.read_key())
        else:
            self.handle_line(self.terminal.read_line(self.renderer.query_prompt))

    def run(self) -> None:
        with self.terminal.session():
            self.renderer.start(self.engine.total_files)
            try:
                self.refresh()
                while self.state.mode is not LoopMode.TERMINATED:
                    self.step()
            finally:
                self.renderer.finish()
