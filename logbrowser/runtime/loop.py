"""Main interactive event loop for the terminal viewer.

Renders when state changed, waits for the next event, and hands key presses to
session dispatch. Feature logic lives in ``session`` and ``viewport``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..input import RESIZE_POLL_MS, KeyComboRegistry, ResizeEvent, default_key_registry, poll_event
from ..render import RenderContext, render_viewport
from ..ui_theme import DEFAULT_THEME, UITheme
from .session import ViewerSession, dispatch

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    def raw_mode(self): ...

    def size(self) -> tuple[int, int]: ...


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Tunables for ``run_main_loop``."""

    theme: UITheme = DEFAULT_THEME
    poll_timeout_ms: int = RESIZE_POLL_MS


def run_main_loop(
    session: ViewerSession,
    terminal: Terminal,
    stdin_fd: int,
    stdout_fd: int,
    options: RuntimeLoopOptions | None = None,
    registry: KeyComboRegistry | None = None,
) -> None:
    """Run the viewer loop until a quit command or an interrupt.

    Resizes only force a full redraw; the offset is left as-is and clamping
    happens on the next navigation command.
    """
    options = options if options is not None else RuntimeLoopOptions()
    registry = registry if registry is not None else default_key_registry()

    with terminal.raw_mode():
        size = terminal.size()
        dirty = True
        full_redraw = True
        while True:
            if dirty:
                columns, rows = size
                render_viewport(
                    stdout_fd,
                    RenderContext(
                        lines=session.lines,
                        offset=session.offset,
                        width=columns,
                        height=rows,
                        theme=options.theme,
                    ),
                    full_redraw=full_redraw,
                )
                dirty = False
                full_redraw = False

            try:
                event = poll_event(stdin_fd, size, terminal.size, timeout_ms=options.poll_timeout_ms)
            except KeyboardInterrupt:
                logger.debug("interrupted; leaving viewer")
                break
            if event is None:
                continue

            if isinstance(event, ResizeEvent):
                size = (event.columns, event.lines)
                logger.debug("resized to %dx%d", event.columns, event.lines)
                dirty = True
                full_redraw = True
                continue

            command = registry.resolve(event.key)
            if command is None:
                continue
            outcome = dispatch(session, command, size[0], size[1])
            if outcome.quit:
                break
            dirty = True
            if outcome.redraw:
                logger.debug("full redraw requested")
                full_redraw = True
