"""Terminal event classification.

Turns raw key tokens and terminal size changes into discrete events for the
event loop: a key press, a resize, or nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .reader import read_key

RESIZE_POLL_MS = 120


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    lines: int


Event = KeyEvent | ResizeEvent


def poll_event(
    fd: int,
    previous_size: tuple[int, int],
    get_size: Callable[[], tuple[int, int]],
    *,
    timeout_ms: int = RESIZE_POLL_MS,
) -> Event | None:
    """Wait up to ``timeout_ms`` for input and classify what happened.

    A size different from ``previous_size`` wins over pending input so the
    next frame is drawn at the new geometry. ``UNKNOWN`` escape sequences are
    dropped.
    """
    size = get_size()
    if size != previous_size:
        return ResizeEvent(columns=size[0], lines=size[1])
    key = read_key(fd, timeout_ms=timeout_ms)
    if key in {"", "UNKNOWN"}:
        size = get_size()
        if size != previous_size:
            return ResizeEvent(columns=size[0], lines=size[1])
        return None
    return KeyEvent(key)
