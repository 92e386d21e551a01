"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the search prompt, result rows, and status bar.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    hint: str
    prompt: str
    query: str
    row_number: str
    row_name: str
    row_path: str
    no_matches: str
    status: str
    selection_prompt: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1m\033[37m",
    hint="\033[2m",
    prompt="\033[36m",
    query="\033[1m",
    row_number="\033[36m",
    row_name="\033[1m",
    row_path="\033[2m",
    no_matches="\033[33m",
    status="\033[2m",
    selection_prompt="\033[36m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    hint="",
    prompt="",
    query="",
    row_number="",
    row_name="",
    row_path="",
    no_matches="",
    status="",
    selection_prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "resolve_theme",
]
