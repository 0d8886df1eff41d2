"""Public runtime entry points.

This package groups the viewer bootstrap (`run_viewer`), the event loop, and
the session, navigation, and mark-ring model it drives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopOptions


def run_viewer(*args, **kwargs):
    """Lazily import viewer entrypoint to keep package imports lightweight."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopOptions":
        from .loop import RuntimeLoopOptions

        return RuntimeLoopOptions
    raise AttributeError(name)


__all__ = ["RuntimeLoopOptions", "run_main_loop", "run_viewer"]
