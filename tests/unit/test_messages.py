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

import tempfile
import unittest
from pathlib import Path

from toolbelt.net.messages import (
    Delay,
    Message,
    MessageFileError,
    decode_escapes,
    load_message_file,
    message_count,
    parse_messages,
    select_window,
)


def _texts(entries) -> list[str]:
    return [entry.text for entry in entries if isinstance(entry, Message)]


class TestParseMessages(unittest.TestCase):
    def test_plain_lines_delays_and_comments(self) -> None:
        lines = ["hello\n", "\n", "# comment\n", "2\n", "0.5\n", ".25\n", "world 3\n", "1.\n"]
        entries = parse_messages(lines)
        self.assertEqual(
            entries,
            [
                Message(text="hello", line=1),
                Delay(seconds=2.0, line=4),
                Delay(seconds=0.5, line=5),
                Delay(seconds=0.25, line=6),
                Message(text="world 3", line=7),
                Delay(seconds=1.0, line=8),
            ],
        )

    def test_lines_are_kept_as_is(self) -> None:
        entries = parse_messages(["  indented  \r\n", "1.2.3\n", "-4\n"])
        self.assertEqual(_texts(entries), ["  indented  ", "1.2.3", "-4"])

    def test_block_mode_reassembles_messages(self) -> None:
        lines = ["'msg1", "'", "'msg2", "cont", "'"]
        entries = parse_messages(lines, block="'")
        self.assertEqual(_texts(entries), ["msg1\n", "msg2cont\n"])
        self.assertEqual([entry.line for entry in entries], [1, 3])

    def test_block_mode_allows_delays_and_comments_between_blocks(self) -> None:
        lines = ["# header", "'a", "'", "1.5", "", "'b", "# inside", "c", "'"]
        entries = parse_messages(lines, block="'")
        self.assertEqual(
            entries,
            [
                Message(text="a\n", line=2),
                Delay(seconds=1.5, line=4),
                Message(text="bc\n", line=6),
            ],
        )

    def test_block_mode_errors_carry_line_numbers(self) -> None:
        cases = (
            (["stray text"], 1, "outside a block"),
            (["'a", "'b"], 2, "block start inside"),
            (["'"], 1, "block end without"),
            (["ok", "'"], 1, "outside a block"),
            (["'a", "more"], 1, "never closed"),
        )
        for lines, line, fragment in cases:
            with self.subTest(lines=lines):
                with self.assertRaises(MessageFileError) as exc_info:
                    parse_messages(lines, block="'")
                self.assertEqual(exc_info.exception.line, line)
                self.assertIn(fragment, str(exc_info.exception))
                self.assertTrue(str(exc_info.exception).startswith(f"line {line}:"))

    def test_block_delimiter_must_be_one_character(self) -> None:
        with self.assertRaises(ValueError):
            parse_messages(["x"], block="''")

    def test_load_message_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "messages.txt"
            path.write_text("first\n3\nsecond\n", encoding="utf-8")
            entries = load_message_file(path)
        self.assertEqual(_texts(entries), ["first", "second"])


class TestSelectWindow(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = parse_messages(["m0", "1", "m1", "2", "m2", "m3", "9"])

    def test_no_bounds_keeps_everything(self) -> None:
        self.assertEqual(select_window(self.entries), self.entries)

    def test_offset_skips_messages_and_their_delays(self) -> None:
        window = select_window(self.entries, offset=2)
        self.assertEqual(
            window,
            [
                Delay(seconds=2.0, line=4),
                Message(text="m2", line=5),
                Message(text="m3", line=6),
                Delay(seconds=9.0, line=7),
            ],
        )

    def test_count_limits_messages(self) -> None:
        window = select_window(self.entries, offset=1, count=1)
        self.assertEqual(window, [Delay(seconds=1.0, line=2), Message(text="m1", line=3)])
        self.assertEqual(message_count(window), 1)

    def test_offset_past_end(self) -> None:
        self.assertEqual(select_window(self.entries, offset=10), [])

    def test_negative_bounds_rejected(self) -> None:
        with self.assertRaises(ValueError):
            select_window(self.entries, offset=-1)
        with self.assertRaises(ValueError):
            select_window(self.entries, count=-1)


class TestDecodeEscapes(unittest.TestCase):
    def test_escapes(self) -> None:
        self.assertEqual(decode_escapes("\\r\\n"), "\r\n")
        self.assertEqual(decode_escapes("tab\\there"), "tab\there")
        self.assertEqual(decode_escapes("plain"), "plain")
        self.assertEqual(decode_escapes("café\\n"), "café\n")


if __name__ == "__main__":
    unittest.main()
