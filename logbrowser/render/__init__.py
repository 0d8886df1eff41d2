"""Rendering for the single-pane file viewport.

``build_frame`` projects content lines through the viewport offset into one
styled string per terminal row without side effects. ``paint_frame`` writes a
composed frame to the terminal.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from ..runtime.viewport import Coords
from ..ui_theme import DEFAULT_THEME, UITheme
from .cells import shape_row

CLEAR_SCREEN = "\033[2J"


@dataclass(frozen=True)
class RenderContext:
    lines: Sequence[str]
    offset: Coords
    width: int
    height: int
    theme: UITheme = DEFAULT_THEME


def build_frame(
    lines: Sequence[str],
    offset: Coords,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> tuple[str, ...]:
    """Return ``height`` styled rows, each ``width`` columns wide.

    Row ``r`` shows line ``offset.y + r``. Rows that fall outside the content,
    before the first line or past the last, are drawn blank.
    """
    rows: list[str] = []
    line_count = len(lines)
    for row in range(max(0, height)):
        line_index = offset.y + row
        text = lines[line_index] if 0 <= line_index < line_count else ""
        rows.append(f"{theme.text}{shape_row(text, offset.x, width)}{theme.reset}")
    return tuple(rows)


def build_frame_context(context: RenderContext) -> tuple[str, ...]:
    return build_frame(context.lines, context.offset, context.width, context.height, context.theme)


def compose_frame(rows: Sequence[str], *, full_redraw: bool = False) -> str:
    """Join rows into one terminal write, positioning the cursor per row."""
    out: list[str] = []
    if full_redraw:
        out.append(CLEAR_SCREEN)
    for idx, row in enumerate(rows):
        out.append(f"\033[{idx + 1};1H")
        out.append(row)
    out.append("\033[H")
    return "".join(out)


def paint_frame(fd: int, rows: Sequence[str], *, full_redraw: bool = False) -> None:
    """Write one composed frame to ``fd``."""
    os.write(fd, compose_frame(rows, full_redraw=full_redraw).encode("utf-8", errors="replace"))


def render_viewport(fd: int, context: RenderContext, *, full_redraw: bool = False) -> tuple[str, ...]:
    """Build and paint the frame for ``context``; returns the painted rows."""
    rows = build_frame_context(context)
    paint_frame(fd, rows, full_redraw=full_redraw)
    return rows


__all__ = [
    "RenderContext",
    "build_frame",
    "build_frame_context",
    "compose_frame",
    "paint_frame",
    "render_viewport",
]
