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

from dataclasses import dataclass
from typing import Literal

HexCase = Literal["lower", "upper"]


@dataclass
class ListenArgs:
    """Typed container for listen command arguments."""

    config: str | None = None
    host: str = ""
    port: int = 0
    timestamp: bool = False
    hex_case: HexCase | None = None
    output: str | None = None
    debug: bool = False


@dataclass
class SendArgs:
    """Typed container for send command arguments."""

    config: str | None = None
    host: str = ""
    port: int = 0
    message_file: str = ""
    append: str | None = None
    block: str | None = None
    count: int | None = None
    delay: float | None = None
    offset: int = 0
    interactive: bool = False
    show: bool = False
    debug: bool = False


@dataclass
class GotoArgs:
    """Typed container for goto command arguments."""

    config: str | None = None
    key: str = ""
    rc_file: str | None = None
    source_env: str | None = None
    debug: bool = False


@dataclass
class BackupArgs:
    """Typed container for backup command arguments."""

    config: str | None = None
    files: list[str] | None = None
    include_dirs: bool = False
    relative_dir: str | None = None
    backup_dir: str | None = None
    force: bool = False
    dry_run: bool = False
    move: bool = False
    quiet: bool = False
    restore: str | None = None
    separator: str | None = None
    timestamp: bool = False
    verbosity: int = 0
