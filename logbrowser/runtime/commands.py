"""Closed set of semantic viewer commands.

Key bindings resolve raw key tokens into these members before anything
touches viewport or mark state.
"""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    LINE_DOWN = "line-down"
    LINE_UP = "line-up"
    PAGE_DOWN = "page-down"
    PAGE_UP = "page-up"
    HALF_PAGE_DOWN = "half-page-down"
    HALF_PAGE_UP = "half-page-up"
    GO_TO_TOP = "go-to-top"
    GO_TO_BOTTOM = "go-to-bottom"
    PAN_RIGHT = "pan-right"
    PAN_LEFT = "pan-left"
    HALF_PAN_RIGHT = "half-pan-right"
    HALF_PAN_LEFT = "half-pan-left"
    RESET_COLUMN = "reset-column"
    SET_MARK = "set-mark"
    NEXT_MARK = "next-mark"
    PREVIOUS_MARK = "previous-mark"
    REDRAW = "redraw"
    QUIT = "quit"

    @property
    def is_navigation(self) -> bool:
        return self in NAVIGATION_COMMANDS


NAVIGATION_COMMANDS = frozenset(
    {
        Command.LINE_DOWN,
        Command.LINE_UP,
        Command.PAGE_DOWN,
        Command.PAGE_UP,
        Command.HALF_PAGE_DOWN,
        Command.HALF_PAGE_UP,
        Command.GO_TO_TOP,
        Command.GO_TO_BOTTOM,
        Command.PAN_RIGHT,
        Command.PAN_LEFT,
        Command.HALF_PAN_RIGHT,
        Command.HALF_PAN_LEFT,
        Command.RESET_COLUMN,
    }
)
