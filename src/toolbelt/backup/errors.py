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


class BackupError(ValueError):
    """A per-item backup failure carrying a numeric code for traceability."""

    INVALID_NAME = 10
    SLOT_TAKEN = 11
    BAD_VERSION = 12
    SOURCE_MISSING = 20
    COPY_FAILED = 30
    MOVE_FAILED = 31
    BACKUP_DIR_INVALID = 32
    RESTORE_MISSING = 40
    RESTORE_UNSUPPORTED = 41
    RESTORE_FAILED = 42

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
