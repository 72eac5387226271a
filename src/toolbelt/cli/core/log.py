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

from ...core.tracing import configure_logging, verbosity_level
from ..api import console_err


def _setup_logging(*, debug: bool = False, verbosity: int = 0) -> logging.Logger:
    level = logging.DEBUG if debug else verbosity_level(verbosity)
    return configure_logging(level, console=console_err)


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {message}")


def _notice(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[muted]{message}[/muted]", highlight=False)
