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

"""Versioned file and directory backups."""

from .errors import BackupError
from .naming import (
    DEFAULT_SEPARATOR,
    BackupName,
    Pattern,
    classify,
    format_backup_name,
    split_backup_name,
    version_matcher,
)
from .transfer import (
    BackupOutcome,
    BackupPlan,
    backup_path,
    is_identical,
    plan_backup,
    resolve_backup_dir,
    restore_path,
)
from .versions import (
    existing_versions,
    latest_version,
    next_version,
    parse_version_token,
    timestamp_token,
)

__all__ = [
    "BackupError",
    "BackupName",
    "BackupOutcome",
    "BackupPlan",
    "DEFAULT_SEPARATOR",
    "Pattern",
    "backup_path",
    "classify",
    "existing_versions",
    "format_backup_name",
    "is_identical",
    "latest_version",
    "next_version",
    "parse_version_token",
    "plan_backup",
    "resolve_backup_dir",
    "restore_path",
    "split_backup_name",
    "timestamp_token",
]
