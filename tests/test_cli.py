"""CLI argument, startup-error, and theme-selection tests.

Verifies how ``logbrowser.cli.main`` reports usage errors and unreadable files
and what it hands to the viewer runtime.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import ExitStack, redirect_stdout
from pathlib import Path
from unittest import mock

from logbrowser import cli
from logbrowser.terminal import TerminalInitError
from logbrowser.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        stack = ExitStack()
        self.addCleanup(stack.close)
        stack.enter_context(mock.patch("logbrowser.cli.configure_logging"))
        stack.enter_context(mock.patch("logbrowser.cli.load_theme_name", return_value=None))
        stack.enter_context(mock.patch("logbrowser.cli.load_log_file", return_value=None))
        stack.enter_context(mock.patch.dict("logbrowser.cli.os.environ", {}, clear=True))
        self.run_viewer = stack.enter_context(mock.patch("logbrowser.cli.run_viewer"))

    def _main_expecting_exit(self, argv: list[str]) -> tuple[int | str | None, str]:
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as raised:
            cli.main(argv)
        return raised.exception.code, out.getvalue()

    def test_missing_path_is_usage_error_on_stdout(self) -> None:
        code, out = self._main_expecting_exit([])
        self.assertEqual(code, 1)
        self.assertIn("usage: logbrowser", out)
        self.run_viewer.assert_not_called()

    def test_extra_positional_argument_is_usage_error(self) -> None:
        code, out = self._main_expecting_exit(["a.log", "b.log"])
        self.assertEqual(code, 1)
        self.assertIn("usage: logbrowser", out)
        self.run_viewer.assert_not_called()

    def test_unreadable_file_is_fatal_before_terminal_setup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.log"
            with self.assertLogs("logbrowser.cli", level="CRITICAL") as logs:
                code, _out = self._main_expecting_exit([str(missing)])

        self.assertEqual(code, 1)
        self.assertIn("Couldn't read file:", logs.output[0])
        self.run_viewer.assert_not_called()

    def test_loads_file_and_runs_viewer_with_default_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "app.log"
            target.write_text("first\nsecond\n", encoding="utf-8")
            cli.main([str(target)])

        self.run_viewer.assert_called_once()
        content, path, theme = self.run_viewer.call_args.args
        self.assertEqual(content.lines, ("first", "second"))
        self.assertEqual(path, target)
        self.assertIs(theme, DEFAULT_THEME)

    def test_theme_flag_and_no_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "app.log"
            target.write_text("x\n", encoding="utf-8")
            cli.main(["--theme", "ocean", str(target)])
            cli.main(["--theme", "ocean", "--no-color", str(target)])

        themes = [call.args[2] for call in self.run_viewer.call_args_list]
        self.assertEqual(themes, [OCEAN_THEME, PLAIN_THEME])

    def test_configured_theme_is_used_without_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "app.log"
            target.write_text("x\n", encoding="utf-8")
            with mock.patch("logbrowser.cli.load_theme_name", return_value="ocean"):
                cli.main([str(target)])

        self.assertIs(self.run_viewer.call_args.args[2], OCEAN_THEME)

    def test_terminal_init_failure_exits_non_zero(self) -> None:
        self.run_viewer.side_effect = TerminalInitError("unable to initialize terminal: not a tty")
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "app.log"
            target.write_text("x\n", encoding="utf-8")
            with self.assertLogs("logbrowser.cli", level="CRITICAL") as logs:
                code, _out = self._main_expecting_exit([str(target)])

        self.assertEqual(code, 1)
        self.assertIn("not a tty", logs.output[0])


if __name__ == "__main__":
    unittest.main()
