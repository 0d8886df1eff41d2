"""Tests for projecting content through the viewport onto terminal rows."""

from __future__ import annotations

import os
import unittest

from logbrowser.render import RenderContext, build_frame, build_frame_context, compose_frame, paint_frame
from logbrowser.render.cells import cell_glyph, shape_row
from logbrowser.runtime.viewport import Coords
from logbrowser.ui_theme import DEFAULT_THEME, PLAIN_THEME


class ShapeRowTests(unittest.TestCase):
    def test_short_line_is_padded_to_width(self) -> None:
        self.assertEqual(shape_row("abc", 0, 6), "abc   ")

    def test_long_line_is_truncated(self) -> None:
        self.assertEqual(shape_row("abcdefghij", 0, 4), "abcd")

    def test_negative_offset_clips_leading_runes(self) -> None:
        self.assertEqual(shape_row("hello", -2, 5), "llo  ")
        self.assertEqual(shape_row("hello", -9, 3), "   ")

    def test_positive_offset_leaves_leading_blanks(self) -> None:
        self.assertEqual(shape_row("ab", 2, 5), "  ab ")

    def test_control_characters_and_tabs_occupy_one_cell(self) -> None:
        self.assertEqual(shape_row("a\tb\x07\x1b[31m", 0, 10), "a b??[31m ")
        self.assertEqual(cell_glyph("\x9b"), "?")

    def test_wide_rune_crossing_right_edge_becomes_blank(self) -> None:
        self.assertEqual(shape_row("日本", 0, 3), "日 ")
        self.assertEqual(shape_row("日本", 0, 4), "日本")

    def test_zero_width_returns_empty(self) -> None:
        self.assertEqual(shape_row("abc", 0, 0), "")


class BuildFrameTests(unittest.TestCase):
    def test_rows_show_lines_from_vertical_offset(self) -> None:
        lines = ("zero", "one", "two", "three")
        rows = build_frame(lines, Coords(0, 1), 5, 2, PLAIN_THEME)
        self.assertEqual(rows, ("one  ", "two  "))

    def test_rows_past_content_are_blank(self) -> None:
        rows = build_frame(("only",), Coords(0, 0), 4, 3, PLAIN_THEME)
        self.assertEqual(rows, ("only", "    ", "    "))

    def test_negative_vertical_offset_draws_blank_rows_first(self) -> None:
        rows = build_frame(("a", "b"), Coords(0, -1), 2, 3, PLAIN_THEME)
        self.assertEqual(rows, ("  ", "a ", "b "))

    def test_empty_content_renders_only_blank_rows(self) -> None:
        rows = build_frame((), Coords(0, 0), 3, 2, PLAIN_THEME)
        self.assertEqual(rows, ("   ", "   "))

    def test_theme_style_wraps_every_row(self) -> None:
        rows = build_frame(("hi",), Coords(0, 0), 4, 2, DEFAULT_THEME)
        for row in rows:
            self.assertTrue(row.startswith(DEFAULT_THEME.text))
            self.assertTrue(row.endswith(DEFAULT_THEME.reset))
        self.assertIn("hi  ", rows[0])

    def test_rendering_twice_yields_identical_frames(self) -> None:
        context = RenderContext(
            lines=("alpha", "beta", "gamma"),
            offset=Coords(-1, 1),
            width=4,
            height=3,
            theme=DEFAULT_THEME,
        )
        self.assertEqual(build_frame_context(context), build_frame_context(context))


class PaintFrameTests(unittest.TestCase):
    def test_compose_frame_positions_each_row(self) -> None:
        out = compose_frame(("ab", "cd"))
        self.assertEqual(out, "\033[1;1Hab\033[2;1Hcd\033[H")

    def test_full_redraw_clears_screen_first(self) -> None:
        out = compose_frame(("ab",), full_redraw=True)
        self.assertTrue(out.startswith("\033[2J"))

    def test_paint_frame_writes_utf8_frame(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            paint_frame(write_fd, ("é ",))
            data = os.read(read_fd, 1024)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual(data, "\033[1;1Hé \033[H".encode("utf-8"))


if __name__ == "__main__":
    unittest.main()
