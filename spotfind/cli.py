"""Command-line front door for spotfind.

Parses the optional root directory, resolves it, and starts a session.
A root that cannot be determined ends the process with status 1.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .runtime import run_finder
from .runtime.config import load_log_level
from .runtime.logs import configure_logging


def resolve_root(path_arg: str | None, default_path: Path | None = None) -> Path:
    """Return the absolute directory to index or raise ``SystemExit``."""
    if path_arg is not None:
        candidate = Path(path_arg)
    elif default_path is not None:
        candidate = default_path
    else:
        try:
            candidate = Path.cwd()
        except OSError as exc:
            raise SystemExit(f"Cannot determine current directory: {exc}") from exc

    try:
        root = candidate.resolve()
    except OSError as exc:
        raise SystemExit(f"Cannot resolve path {candidate}: {exc}") from exc
    if not root.exists():
        raise SystemExit(f"Path not found: {candidate}")
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {candidate}")
    return root


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the finder over a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Index every file under a directory and search filenames as you type."
    )
    parser.add_argument("root", nargs="?", default=None, help="Directory to index. Defaults to current directory.")
    args = parser.parse_args()

    root = resolve_root(args.root, default_path)
    configure_logging(load_log_level())
    run_finder(root)


if __name__ == "__main__":
    main()
