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

import datetime
import logging
import os
import re
from pathlib import Path

from ..core.tracing import span
from .errors import BackupError
from .naming import BackupName, version_matcher

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
TIMESTAMP_RE = re.compile(r"\d{8}-\d{6}")

logger = logging.getLogger(__name__)


def timestamp_token(now: datetime.datetime | None = None) -> str:
    return (now or datetime.datetime.now()).strftime(TIMESTAMP_FORMAT)


def existing_versions(name: BackupName, backup_dir: Path, separator: str) -> list[int]:
    """Return every integer version of ``name`` present in ``backup_dir``.

    The directory is listed on every call; nothing is cached between files
    because each source file has its own matcher.
    """
    if not backup_dir.is_dir():
        return []
    matcher = version_matcher(name, separator)
    versions: list[int] = []
    with os.scandir(backup_dir) as entries:
        for entry in entries:
            match = matcher.fullmatch(entry.name)
            if match:
                versions.append(int(match.group(1)))
    return versions


def latest_version(name: BackupName, backup_dir: Path, separator: str) -> int | None:
    return max(existing_versions(name, backup_dir, separator), default=None)


def next_version(name: BackupName, backup_dir: Path, separator: str) -> int:
    with span(logger, "next_version", file=name.filename, backup_dir=str(backup_dir)):
        latest = latest_version(name, backup_dir, separator)
        version = (-1 if latest is None else latest) + 1
        logger.debug("next version for %s is %d", name.filename, version)
        return version


def parse_version_token(value: str) -> str:
    token = value.strip()
    if token.isdigit():
        return str(int(token))
    if TIMESTAMP_RE.fullmatch(token):
        return token
    raise BackupError(
        BackupError.BAD_VERSION,
        f"version must be a number or a YYYYMMDD-HHMMSS timestamp, got {value!r}",
    )
