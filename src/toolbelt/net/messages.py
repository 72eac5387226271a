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


"""Message file parsing for the TCP sender.

A message file is read top to bottom. Blank lines and ``#`` comments are
dropped. A line holding only a number (``2``, ``0.5``, ``.25``) is a delay in
seconds; any other line is a message.

In block mode a delimiter character groups several lines into one message::

    'first line
    second line
    '

becomes ``"first linesecond line\\n"``.
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

COMMENT_MARKER = "#"
DELAY_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True)
class Message:
    text: str
    line: int


@dataclass(frozen=True)
class Delay:
    seconds: float
    line: int


Entry = Message | Delay


class MessageFileError(ValueError):
    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"


def _is_skipped(line: str) -> bool:
    return not line.strip() or line.startswith(COMMENT_MARKER)


def _delay(line: str, lineno: int) -> Delay | None:
    candidate = line.strip()
    if DELAY_RE.fullmatch(candidate):
        return Delay(seconds=float(candidate), line=lineno)
    return None


def parse_messages(lines: Iterable[str], *, block: str | None = None) -> list[Entry]:
    if block is not None and len(block) != 1:
        raise ValueError("block delimiter must be a single character")
    entries: list[Entry] = []
    parts: list[str] | None = None
    block_start = 0
    lineno = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if _is_skipped(line):
            continue
        if block is None:
            entries.append(_delay(line, lineno) or Message(text=line, line=lineno))
            continue
        if parts is None:
            if line == block:
                raise MessageFileError(lineno, "block end without a block start")
            if line.startswith(block):
                parts = [line[1:]]
                block_start = lineno
                continue
            delay = _delay(line, lineno)
            if delay is None:
                raise MessageFileError(
                    lineno, f"text outside a block; blocks start with {block!r}"
                )
            entries.append(delay)
            continue
        if line == block:
            entries.append(Message(text="".join(parts) + "\n", line=block_start))
            parts = None
        elif line.startswith(block):
            raise MessageFileError(
                lineno, f"block start inside the block opened on line {block_start}"
            )
        else:
            parts.append(line)
    if parts is not None:
        raise MessageFileError(block_start, "block is never closed")
    return entries


def load_message_file(path: str | Path, *, block: str | None = None) -> list[Entry]:
    with open(path, encoding="utf-8") as handle:
        return parse_messages(handle, block=block)


def select_window(
    entries: Sequence[Entry],
    *,
    offset: int = 0,
    count: int | None = None,
) -> list[Entry]:
    """Keep messages ``offset`` .. ``offset + count`` and the delays leading up to them."""
    if offset < 0:
        raise ValueError("offset must not be negative")
    if count is not None and count < 0:
        raise ValueError("count must not be negative")
    selected: list[Entry] = []
    pending: list[Delay] = []
    index = 0
    taken = 0
    for entry in entries:
        if isinstance(entry, Delay):
            pending.append(entry)
            continue
        if index >= offset and (count is None or taken < count):
            selected.extend(pending)
            selected.append(entry)
            taken += 1
        pending = []
        index += 1
    if index >= offset and (count is None or taken < count):
        selected.extend(pending)
    return selected


def message_count(entries: Iterable[Entry]) -> int:
    return sum(1 for entry in entries if isinstance(entry, Message))


def decode_escapes(value: str) -> str:
    r"""Turn ``\n``, ``\r`` and ``\t`` style escapes into the characters they name."""
    if "\\" not in value:
        return value
    return codecs.decode(value.encode("latin-1", "backslashreplace"), "unicode_escape")
