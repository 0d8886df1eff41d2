"""Terminal control helpers for the viewer session.

Owns raw-mode lifecycle, alternate-screen switching, and size queries.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import termios
import tty

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (80, 24)


class TerminalInitError(RuntimeError):
    """Raised when the controlling terminal cannot be put into viewer mode."""


class TerminalController:
    """Manage terminal mode transitions for the duration of a session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except (termios.error, OSError) as exc:
            raise TerminalInitError(f"unable to initialize terminal: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise TerminalInitError(f"unable to enter raw mode: {exc}") from exc
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and the main screen buffer."""
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> tuple[int, int]:
        """Return current ``(columns, lines)``."""
        term = shutil.get_terminal_size(DEFAULT_SIZE)
        return max(0, term.columns), max(0, term.lines)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
            logger.debug("terminal restored")
