# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import io
import unittest
from unittest import mock

from rich.console import Console

from toolbelt.cli.ui import THEME, UIContext, configure_ui, isatty
from toolbelt.cli.ui.prompts import prompt_yes_no


def _context() -> tuple[UIContext, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, theme=THEME, force_terminal=False, width=80)
    return UIContext(theme=THEME, console=console, console_err=console), buffer


class TestPrompts(unittest.TestCase):
    @mock.patch("toolbelt.cli.ui.prompts.questionary.confirm")
    def test_prompt_yes_no_returns_answer(self, confirm: mock.MagicMock) -> None:
        confirm.return_value.ask.return_value = False
        context, buffer = _context()
        answer = prompt_yes_no("Send 'a'?", default=True, help_text="n stops", context=context)
        self.assertFalse(answer)
        self.assertEqual(confirm.call_args.kwargs["default"], True)
        self.assertIn("Hint: n stops", buffer.getvalue())

    @mock.patch("toolbelt.cli.ui.prompts.questionary.confirm")
    def test_prompt_yes_no_cancel_raises(self, confirm: mock.MagicMock) -> None:
        confirm.return_value.ask.return_value = None
        context, _buffer = _context()
        with self.assertRaises(KeyboardInterrupt):
            prompt_yes_no("Send?", default=True, context=context)


class TestUiState(unittest.TestCase):
    def test_configure_ui_no_color(self) -> None:
        context, _buffer = _context()
        configure_ui(no_color=True, context=context)
        self.assertTrue(context.console.no_color)
        configure_ui(no_color=False, context=context)
        self.assertFalse(context.console.no_color)

    def test_isatty_handles_broken_streams(self) -> None:
        broken = mock.Mock()
        broken.isatty.side_effect = ValueError("closed")
        self.assertFalse(isatty(broken, None))
        fallback = mock.Mock()
        fallback.isatty.return_value = True
        self.assertTrue(isatty(None, fallback))


if __name__ == "__main__":
    unittest.main()
