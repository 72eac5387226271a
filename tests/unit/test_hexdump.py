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

import unittest

from toolbelt.net.hexdump import NON_PRINTABLE, hexdump, hexdump_lines, printable_map


class TestHexdump(unittest.TestCase):
    def test_seventeen_bytes_make_two_aligned_lines(self) -> None:
        data = bytes(range(0x41, 0x41 + 17))
        lines = hexdump_lines(data)
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0].index("ABCDEFGHIJKLMNOP"), lines[1].index("Q"))
        self.assertEqual(lines[1].split()[1:], ["51", "Q"])
        self.assertTrue(lines[1].startswith("00000010  51 "))

    def test_full_line_layout(self) -> None:
        line = hexdump_lines(b"Hello, world!\x00\x01\x7f")[0]
        self.assertEqual(
            line,
            "00000000  48 65 6c 6c  6f 2c 20 77  6f 72 6c 64  21 00 01 7f  "
            f"Hello, world!{NON_PRINTABLE * 3}",
        )

    def test_uppercase(self) -> None:
        self.assertEqual(
            hexdump(b"\xab\xcd", upper=True),
            "00000000  AB CD" + " " * 45 + f"  {NON_PRINTABLE * 2}",
        )

    def test_offset_is_applied(self) -> None:
        self.assertTrue(hexdump(b"z", offset=0x20).startswith("00000020  7a"))

    def test_empty_input(self) -> None:
        self.assertEqual(hexdump_lines(b""), [])

    def test_printable_map(self) -> None:
        self.assertEqual(printable_map(b"a\tb ~\x80"), f"a{NON_PRINTABLE}b ~{NON_PRINTABLE}")


if __name__ == "__main__":
    unittest.main()
