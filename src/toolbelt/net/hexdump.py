#!/usr/bin/env python3
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


from __future__ import annotations

BYTES_PER_LINE = 16
GROUP_SIZE = 4
NON_PRINTABLE = "·"

_GROUPS = BYTES_PER_LINE // GROUP_SIZE
_HEX_WIDTH = _GROUPS * (GROUP_SIZE * 3 - 1) + (_GROUPS - 1) * 2


def printable_map(chunk: bytes) -> str:
    return "".join(chr(byte) if 0x20 <= byte < 0x7F else NON_PRINTABLE for byte in chunk)


def _hex_column(chunk: bytes, *, upper: bool) -> str:
    byte_format = "{:02X}" if upper else "{:02x}"
    groups = []
    for start in range(0, len(chunk), GROUP_SIZE):
        group = chunk[start : start + GROUP_SIZE]
        groups.append(" ".join(byte_format.format(byte) for byte in group))
    return "  ".join(groups).ljust(_HEX_WIDTH)


def hexdump_lines(data: bytes, *, upper: bool = False, offset: int = 0) -> list[str]:
    """Render ``data`` as 16-byte lines: offset, hex grouped by four, character map.

    The hex column of a short last line is padded so its character map starts
    in the same column as the full lines above it.
    """
    offset_format = "{:08X}" if upper else "{:08x}"
    lines = []
    for start in range(0, len(data), BYTES_PER_LINE):
        chunk = data[start : start + BYTES_PER_LINE]
        lines.append(
            f"{offset_format.format(offset + start)}  "
            f"{_hex_column(chunk, upper=upper)}  {printable_map(chunk)}"
        )
    return lines


def hexdump(data: bytes, *, upper: bool = False, offset: int = 0) -> str:
    return "\n".join(hexdump_lines(data, upper=upper, offset=offset))
