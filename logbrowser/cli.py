"""Command-line front door for logbrowser.

Parses CLI options, loads the file into a content store, and dispatches into
the interactive viewer runtime. Every startup failure ends the process with a
non-zero status before the terminal is touched.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import load_log_file, load_theme_name
from .content import load
from .logs import configure_logging
from .runtime import run_viewer
from .terminal import TerminalInitError
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

USAGE_EXIT_STATUS = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports usage errors on stdout with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stdout)
        sys.stdout.write(f"{self.prog}: error: {message}\n")
        raise SystemExit(USAGE_EXIT_STATUS)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="logbrowser",
        description="Browse a large text file in a scrollable terminal viewport.",
    )
    parser.add_argument("path", metavar="FILE", help="Path to the file to view.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Draw without colors.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, load the file, and run the viewer until the user quits."""
    args = build_parser().parse_args(argv)

    log_file = args.log_file if args.log_file is not None else load_log_file()
    try:
        configure_logging(log_file)
    except OSError as exc:
        raise SystemExit(f"Couldn't open log file: {exc}") from exc

    path = Path(args.path)
    try:
        content = load(path)
    except OSError as exc:
        logger.critical("Couldn't read file: %s", exc)
        raise SystemExit(1) from exc

    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    theme_name = args.theme if args.theme is not None else load_theme_name()
    theme = resolve_theme(theme_name, no_color=no_color)

    try:
        run_viewer(content, path, theme)
    except TerminalInitError as exc:
        logger.critical("%s", exc)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        logger.debug("interrupted outside the event loop")


if __name__ == "__main__":
    main()
