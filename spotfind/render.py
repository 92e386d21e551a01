"""Screen rendering for the search session.

``InlineRenderer`` redraws a fixed viewport under the prompt with cursor
save/restore, for keystroke mode. ``ListRenderer`` prints each refresh as plain
lines, for line mode. Both share the row and status formatting.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .ansi import fit_name, pad_to_width, shorten_path
from .search import FileEntry
from .ui_theme import DEFAULT_THEME, UITheme

VIEWPORT_HEIGHT = 12
NAME_COLUMNS = 35
PATH_COLUMNS = 55
DIVIDER = "_" * 54
TITLE = "SPOTLIGHT SEARCH"

# Cursor control.
SAVE_CURSOR = "\0337"
RESTORE_CURSOR = "\0338"
CLEAR_LINE = "\033[2K"
CLEAR_SCREEN = "\033[H\033[2J"


@dataclass(frozen=True)
class RenderFrame:
    """Everything one refresh needs."""

    query: str
    matches: Sequence[FileEntry]
    total_files: int
    elapsed: float


def format_match_row(number: int, entry: FileEntry, theme: UITheme = DEFAULT_THEME) -> str:
    """Return ``[ n]  name  path`` for one result row."""
    t = theme
    name = pad_to_width(fit_name(entry.name, NAME_COLUMNS), NAME_COLUMNS)
    path = shorten_path(entry.full_path, PATH_COLUMNS)
    return (
        f"  {t.row_number}[{number:2d}]{t.reset}"
        f"  {t.row_name}{name}{t.reset}"
        f"  {t.row_path}{path}{t.reset}"
    )


def format_viewport_rows(frame: RenderFrame, height: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Return exactly ``height`` rows; unused rows are empty strings."""
    rows: list[str] = []
    for idx in range(height):
        if idx < len(frame.matches):
            rows.append(format_match_row(idx + 1, frame.matches[idx], theme))
        elif idx == 0 and frame.query:
            rows.append(f"{theme.no_matches}       No matches found.{theme.reset}")
        else:
            rows.append("")
    return rows


def format_status_line(frame: RenderFrame, theme: UITheme = DEFAULT_THEME) -> str:
    if frame.query:
        text = f"  Found {len(frame.matches)} matches in {frame.elapsed:.4f}s"
    else:
        text = f"  {frame.total_files} files indexed. Ready."
    return f"{theme.status}{text}{theme.reset}"


def format_selection_prompt(count: int, theme: UITheme = DEFAULT_THEME) -> str:
    return f"  {theme.selection_prompt}Open file ID (1-{count}): {theme.reset}"


class InlineRenderer:
    """Fixed-position viewport drawn below a one-line search bar.

    The cursor rests at the end of the query text between refreshes; rows are
    drawn relative to it and the cursor is restored afterwards.
    """

    query_prompt = ""

    def __init__(
        self,
        write: Callable[[str], None],
        theme: UITheme = DEFAULT_THEME,
        viewport_height: int = VIEWPORT_HEIGHT,
    ) -> None:
        self.write = write
        self.theme = theme
        self.viewport_height = viewport_height

    @property
    def _rows_below_prompt(self) -> int:
        # Viewport, divider, and status line.
        return self.viewport_height + 2

    def start(self, total_files: int) -> None:
        t = self.theme
        reserved = self._rows_below_prompt + 2
        self.write(
            CLEAR_SCREEN
            + f"\n  {t.title}{TITLE}{t.reset}\n"
            + f"  {t.hint}Type to search. Enter to open. ESC to quit.{t.reset}\n\n"
            + "\n" * reserved
            + f"\033[{reserved}A"
        )

    def draw(self, frame: RenderFrame) -> None:
        t = self.theme
        out = [f"\r{CLEAR_LINE}  {t.prompt}> {t.reset}{t.query}{frame.query}{t.reset}", SAVE_CURSOR]
        for row in format_viewport_rows(frame, self.viewport_height, t):
            out.append(f"\033[B{CLEAR_LINE}\r{row}")
        out.append(f"\033[B{CLEAR_LINE}\r{t.status}  {DIVIDER}{t.reset}")
        out.append(f"\033[B{CLEAR_LINE}\r{format_status_line(frame, t)}")
        out.append(RESTORE_CURSOR)
        self.write("".join(out))

    def selection_prompt(self, count: int) -> str:
        """Move to the row under the status line and return the prompt text."""
        return f"\033[{self._rows_below_prompt + 1}B\r{CLEAR_LINE}{format_selection_prompt(count, self.theme)}"

    def after_selection(self) -> None:
        # The echoed newline left the cursor one row below the prompt.
        self.write(f"\033[A\r{CLEAR_LINE}\033[{self._rows_below_prompt + 1}A")

    def finish(self) -> None:
        self.write(CLEAR_SCREEN)


class ListRenderer:
    """Print each refresh as plain lines, for line-at-a-time sessions."""

    def __init__(
        self,
        write: Callable[[str], None],
        theme: UITheme = DEFAULT_THEME,
        viewport_height: int = VIEWPORT_HEIGHT,
    ) -> None:
        self.write = write
        self.theme = theme
        self.viewport_height = viewport_height

    @property
    def query_prompt(self) -> str:
        return f"  {self.theme.prompt}> {self.theme.reset}"

    def start(self, total_files: int) -> None:
        t = self.theme
        self.write(
            f"\n  {t.title}{TITLE}{t.reset}\n"
            f"  {t.hint}Type a query and press Enter. Type exit to quit.{t.reset}\n\n"
        )

    def draw(self, frame: RenderFrame) -> None:
        rows = format_viewport_rows(frame, self.viewport_height, self.theme)
        lines = [row for row in rows if row]
        lines.append(format_status_line(frame, self.theme))
        self.write("\n".join(lines) + "\n")

    def selection_prompt(self, count: int) -> str:
        return format_selection_prompt(count, self.theme)

    def after_selection(self) -> None:
        self.write("\n")

    def finish(self) -> None:
        pass
