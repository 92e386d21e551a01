"""Runtime composition layer for spotfind.

Builds the index, picks the terminal and renderer, wires the loop, and makes
sure the terminal is handed back on every way out.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from pathlib import Path

from ..launcher import FileLauncher, SystemLauncher
from ..render import InlineRenderer, ListRenderer
from ..search import SearchEngine, build_index
from ..terminal import TerminalIO, open_terminal
from ..ui_theme import UITheme, resolve_theme
from .config import (
    load_interaction_mode,
    load_max_results,
    load_theme_name,
    load_viewport_height,
)
from .loop import InteractionLoop

logger = logging.getLogger(__name__)


def _color_disabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return True
    try:
        return not sys.stdout.isatty()
    except (AttributeError, ValueError):
        return True


def _raise_interrupt(signum, _frame) -> None:
    raise KeyboardInterrupt(f"signal {signum}")


def _print_scan_banner(root: Path, theme: UITheme) -> None:
    sys.stdout.write(f"  {theme.prompt}Index > {theme.reset}Scanning {root} ...\n")
    sys.stdout.flush()


def run_finder(
    root: Path,
    *,
    terminal: TerminalIO | None = None,
    launcher: FileLauncher | None = None,
) -> None:
    """Index ``root`` and run one interactive search session over it."""
    theme = resolve_theme(load_theme_name(), no_color=_color_disabled())
    viewport_height = load_viewport_height()
    max_results = load_max_results()

    _print_scan_banner(root, theme)
    index = build_index(root)

    if terminal is None:
        terminal = open_terminal(load_interaction_mode())
    if launcher is None:
        launcher = SystemLauncher()
    renderer_cls = InlineRenderer if terminal.reads_keys else ListRenderer
    renderer = renderer_cls(terminal.write, theme=theme, viewport_height=viewport_height)
    loop = InteractionLoop(SearchEngine(index, max_results), terminal, renderer, launcher)

    previous_sigterm = signal.signal(signal.SIGTERM, _raise_interrupt)
    try:
        loop.run()
    except KeyboardInterrupt:
        logger.info("session interrupted")
    finally:
        signal.signal(signal.SIGTERM, previous_sigterm)
        index.clear()
