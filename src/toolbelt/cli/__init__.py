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

from .app import app as app, main as main
from .core.types import (
    BackupArgs as BackupArgs,
    GotoArgs as GotoArgs,
    ListenArgs as ListenArgs,
    SendArgs as SendArgs,
)
from .flows.backup import run_backup_command as run_backup_command
from .flows.goto import run_goto_command as run_goto_command
from .flows.listen import run_listen_command as run_listen_command
from .flows.send import run_send_command as run_send_command

__all__ = [
    "BackupArgs",
    "GotoArgs",
    "ListenArgs",
    "SendArgs",
    "app",
    "main",
    "run_backup_command",
    "run_goto_command",
    "run_listen_command",
    "run_send_command",
]
