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


"""Backup file naming.

A source path is split with "last dot wins" into base, dot and extension, and
classified by which of those parts are present. The class decides where the
version token goes:

    name.ext -> name,N.ext
    name.    -> name,N.
    name     -> name,N
    .ext     -> .ext,N
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from pathlib import Path

from .errors import BackupError

DEFAULT_SEPARATOR = ","


class Pattern(enum.Enum):
    EXTENSION_ONLY = "extension-only"
    BARE = "bare"
    TRAILING_DOT = "trailing-dot"
    FULL = "full"


@dataclass(frozen=True)
class BackupName:
    directory: Path
    base: str
    dot: str
    extension: str
    pattern: Pattern

    @property
    def filename(self) -> str:
        return f"{self.base}{self.dot}{self.extension}"


def classify(base: str, dot: str, extension: str) -> Pattern:
    if not base and not extension:
        raise BackupError(BackupError.INVALID_NAME, "cannot back up a nameless path")
    if not base:
        return Pattern.EXTENSION_ONLY
    if extension:
        return Pattern.FULL
    if dot:
        return Pattern.TRAILING_DOT
    return Pattern.BARE


def split_backup_name(path: str | Path) -> BackupName:
    source = Path(path)
    filename = source.name
    if filename in {"", ".", ".."}:
        raise BackupError(BackupError.INVALID_NAME, f"cannot back up {str(path)!r}")
    base, dot, extension = filename.rpartition(".")
    if not dot:
        base, extension = extension, ""
    return BackupName(
        directory=source.parent,
        base=base,
        dot=dot,
        extension=extension,
        pattern=classify(base, dot, extension),
    )


def format_backup_name(name: BackupName, token: str | int, separator: str) -> str:
    token = str(token)
    if name.pattern is Pattern.EXTENSION_ONLY:
        return f"{name.dot}{name.extension}{separator}{token}"
    if name.pattern is Pattern.BARE:
        return f"{name.base}{separator}{token}"
    if name.pattern is Pattern.TRAILING_DOT:
        return f"{name.base}{separator}{token}{name.dot}"
    return f"{name.base}{separator}{token}{name.dot}{name.extension}"


def version_matcher(name: BackupName, separator: str) -> re.Pattern[str]:
    placeholder = "\0"
    template = format_backup_name(name, placeholder, separator)
    head, _, tail = template.partition(placeholder)
    return re.compile(f"{re.escape(head)}(\\d+){re.escape(tail)}")
