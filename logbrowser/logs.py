"""Process-wide logging setup.

While the viewer owns the screen nothing below WARNING may reach the terminal,
so debug records only go to a file. Warnings and fatal startup errors always
go to stderr as bare messages.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
STDERR_FORMAT = "%(message)s"


def configure_logging(log_file: Path | None = None) -> None:
    """Install root handlers; ``log_file`` enables debug logging to that file."""
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter(STDERR_FORMAT))
    handlers: list[logging.Handler] = [stderr_handler]
    level = logging.WARNING
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
        level = logging.DEBUG
    logging.basicConfig(level=level, handlers=handlers, force=True)
