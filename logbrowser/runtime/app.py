"""Viewer bootstrap: builds the session and terminal, then runs the loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..content import ContentStore
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .loop import RuntimeLoopOptions, run_main_loop
from .session import ViewerSession

logger = logging.getLogger(__name__)


def run_viewer(content: ContentStore, path: Path, theme: UITheme) -> None:
    """Show ``content`` interactively until the user quits.

    Raises ``TerminalInitError`` when stdin is not a usable terminal; nothing
    is drawn in that case.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    session = ViewerSession(content=content)
    logger.debug("viewing %s (%d lines, theme=%s)", path, content.line_count, theme.name)
    run_main_loop(session, terminal, stdin_fd, stdout_fd, RuntimeLoopOptions(theme=theme))
