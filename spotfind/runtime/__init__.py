"""Public runtime orchestration entry points.

This package groups the session bootstrap (`run_finder`), the interaction
loop, config loading, and log setup.
"""

from __future__ import annotations


def run_finder(*args, **kwargs):
    """Lazily import the session entrypoint to keep package imports light."""
    from .app import run_finder as _run_finder

    return _run_finder(*args, **kwargs)


__all__ = ["run_finder"]
