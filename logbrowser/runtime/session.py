"""Viewer session state and single-command dispatch.

The session is the only mutable state of a running viewer. ``dispatch``
applies one ``Command`` to it and reports what the event loop should do next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..content import ContentStore
from .commands import Command
from .marks import MarkRing
from .viewport import Coords, navigate

logger = logging.getLogger(__name__)


@dataclass
class ViewerSession:
    content: ContentStore
    offset: Coords = field(default_factory=Coords)
    marks: MarkRing = field(default_factory=MarkRing)

    @property
    def lines(self) -> tuple[str, ...]:
        return self.content.lines


@dataclass(frozen=True)
class Outcome:
    """Loop directives produced by one dispatched command."""

    quit: bool = False
    redraw: bool = False


CONTINUE = Outcome()


def _jump_to_current_mark(session: ViewerSession) -> None:
    mark = session.marks.recall()
    if mark is None:
        return
    session.offset = mark.coords


def dispatch(session: ViewerSession, command: Command, width: int, height: int) -> Outcome:
    """Apply ``command`` to ``session`` for a ``width`` x ``height`` viewport."""
    if command is Command.QUIT:
        return Outcome(quit=True)
    if command is Command.REDRAW:
        return Outcome(redraw=True)
    if command.is_navigation:
        session.offset = navigate(command, session.offset, width, height, session.content.line_count)
        return CONTINUE
    if command is Command.SET_MARK:
        session.marks.set_mark(session.offset)
        return CONTINUE
    if command is Command.NEXT_MARK:
        session.marks.next()
        _jump_to_current_mark(session)
        return CONTINUE
    if command is Command.PREVIOUS_MARK:
        session.marks.previous()
        _jump_to_current_mark(session)
        return CONTINUE
    logger.debug("ignoring unhandled command %s", command)
    return CONTINUE
