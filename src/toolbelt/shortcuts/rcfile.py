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

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from ..core.tracing import span

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
_PAIR_SPLIT_RE = re.compile(r"\s*,\s*|\s+")

ShortcutMap = dict[str, Path]


class ShortcutConfigError(ValueError):
    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"


def expand_home(value: str, *, home: Path | None = None) -> Path:
    if value == "~" or value.startswith("~/"):
        base = home if home is not None else Path.home()
        return base / value[2:] if len(value) > 1 else base
    return Path(os.path.expanduser(value))


def parse_shortcuts(lines: Iterable[str], *, home: Path | None = None) -> ShortcutMap:
    shortcuts: ShortcutMap = {}
    seen: dict[str, int] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_MARKER):
            continue
        parts = _PAIR_SPLIT_RE.split(line, maxsplit=1)
        if len(parts) != 2 or not parts[1]:
            raise ShortcutConfigError(lineno, f"expected 'key path', got {line!r}")
        key, path = parts[0], parts[1].strip()
        if key in seen:
            raise ShortcutConfigError(
                lineno, f"duplicate key {key!r} (first defined on line {seen[key]})"
            )
        seen[key] = lineno
        shortcuts[key] = expand_home(path, home=home)
    return shortcuts


def load_shortcuts(path: str | Path) -> ShortcutMap:
    rc_path = Path(path).expanduser()
    with span(logger, "load_shortcuts", path=str(rc_path)):
        if not rc_path.exists():
            logger.info("no shortcut file at %s", rc_path)
            return {}
        with rc_path.open(encoding="utf-8") as handle:
            return parse_shortcuts(handle)
