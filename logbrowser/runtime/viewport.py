"""Viewport offsets and the clamped navigation arithmetic.

Every function here is pure: it takes the current offset, the viewport size
for this frame, and the content line count, and returns a new ``Coords``.
Vertical moves clamp after the move in the direction travelled only; a
downward move checks the bottom bound, an upward move checks the top bound.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from .commands import Command


@dataclass(frozen=True)
class Coords:
    """Viewport anchor: ``x`` is the horizontal pan, ``y`` the first visible line.

    ``x`` stays at or below zero when reached by panning right; panning left
    drives it negative, which shifts line text leftward on screen.
    """

    x: int = 0
    y: int = 0


def _bottom_start(height: int, line_count: int) -> int:
    return max(0, line_count - height)


def _clamp_down(y: int, height: int, line_count: int) -> int:
    if y + height > line_count:
        return _bottom_start(height, line_count)
    return y


def _clamp_up(y: int) -> int:
    return max(0, y)


def line_down(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_down(offset.y + 1, height, line_count))


def line_up(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_up(offset.y - 1))


def _page_step(height: int) -> int:
    # One line of overlap with the previous page.
    return max(0, height - 1)


def page_down(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_down(offset.y + _page_step(height), height, line_count))


def page_up(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_up(offset.y - _page_step(height)))


def half_page_down(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_down(offset.y + height // 2, height, line_count))


def half_page_up(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_clamp_up(offset.y - height // 2))


def go_to_top(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=0)


def go_to_bottom(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, y=_bottom_start(height, line_count))


def pan_right(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, x=min(0, offset.x + 1))


def pan_left(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, x=offset.x - 1)


def half_pan_right(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, x=min(0, offset.x + width // 2))


def half_pan_left(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, x=offset.x - width // 2)


def reset_column(offset: Coords, width: int, height: int, line_count: int) -> Coords:
    return replace(offset, x=0)


NavigationFn = Callable[[Coords, int, int, int], Coords]

NAVIGATION_TABLE: dict[Command, NavigationFn] = {
    Command.LINE_DOWN: line_down,
    Command.LINE_UP: line_up,
    Command.PAGE_DOWN: page_down,
    Command.PAGE_UP: page_up,
    Command.HALF_PAGE_DOWN: half_page_down,
    Command.HALF_PAGE_UP: half_page_up,
    Command.GO_TO_TOP: go_to_top,
    Command.GO_TO_BOTTOM: go_to_bottom,
    Command.PAN_RIGHT: pan_right,
    Command.PAN_LEFT: pan_left,
    Command.HALF_PAN_RIGHT: half_pan_right,
    Command.HALF_PAN_LEFT: half_pan_left,
    Command.RESET_COLUMN: reset_column,
}


def navigate(command: Command, offset: Coords, width: int, height: int, line_count: int) -> Coords:
    """Apply one navigation ``command`` and return the resulting offset.

    Sizes below zero are treated as zero. Raises ``ValueError`` for commands
    that are not navigation commands.
    """
    handler = NAVIGATION_TABLE.get(command)
    if handler is None:
        raise ValueError(f"not a navigation command: {command!r}")
    return handler(offset, max(0, width), max(0, height), max(0, line_count))
