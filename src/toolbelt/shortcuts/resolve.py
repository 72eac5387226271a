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
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..core.tracing import span

logger = logging.getLogger(__name__)

MatchKind = Literal["shortcut", "source-dir", "current-dir", "prefix"]


@dataclass(frozen=True)
class Resolution:
    key: str
    path: Path
    kind: MatchKind


class ShortcutNotFound(LookupError):
    pass


def _subdirectories(directory: Path) -> list[str]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries if entry.is_dir())
    except OSError:
        return []


def resolve_shortcut(
    key: str,
    shortcuts: Mapping[str, Path],
    *,
    source_dir: Path | None = None,
    cwd: Path | None = None,
) -> Resolution:
    """Resolve ``key`` to a directory.

    Order: configured shortcut, ``source_dir/<key>``, ``cwd/<key>``, then the
    first subdirectory of ``cwd`` (in name order) that starts with ``key``.
    """
    current = cwd if cwd is not None else Path.cwd()
    with span(logger, "resolve_shortcut", key=key):
        if not key:
            raise ShortcutNotFound("no key given")
        if key in shortcuts:
            return Resolution(key=key, path=shortcuts[key], kind="shortcut")
        if source_dir is not None:
            candidate = source_dir / key
            if candidate.is_dir():
                return Resolution(key=key, path=candidate, kind="source-dir")
        candidate = current / key
        if candidate.is_dir():
            return Resolution(key=key, path=candidate, kind="current-dir")
        for name in _subdirectories(current):
            if name.startswith(key):
                return Resolution(key=key, path=current / name, kind="prefix")
    raise ShortcutNotFound(f"no shortcut or directory matches {key!r}")
