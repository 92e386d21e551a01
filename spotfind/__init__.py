"""Public package surface for spotfind.

Exports ``main`` for programmatic CLI invocation.
The index, matcher, and search engine live under ``spotfind.search``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
