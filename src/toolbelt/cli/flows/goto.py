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
from pathlib import Path

from ...config import load_app_config
from ...shortcuts import ShortcutNotFound, load_shortcuts, resolve_shortcut
from ..api import console
from ..core.log import _setup_logging
from ..core.types import GotoArgs

logger = logging.getLogger(__name__)

SHELL_FUNCTION = """\
goto() {
    local target
    target="$(goto-resolve "$@")" || return
    case "$target" in
        ERROR:*) printf '%s\\n' "$target" >&2; return 1 ;;
    esac
    eval cd "$target"
}
"""


def shell_quote(path: Path) -> str:
    return "'" + str(path).replace("'", "'\"'\"'") + "'"


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def run_goto_command(args: GotoArgs) -> int:
    _setup_logging(debug=args.debug)
    defaults = load_app_config(args.config).goto
    shortcuts = load_shortcuts(args.rc_file or defaults.rc_file)
    source_env = args.source_env or defaults.source_env
    source = os.environ.get(source_env)
    try:
        resolution = resolve_shortcut(
            args.key,
            shortcuts,
            source_dir=Path(source).expanduser() if source else None,
        )
    except ShortcutNotFound as exc:
        _emit(f"ERROR: {exc}")
        return 0
    logger.info("%s matched by %s", args.key, resolution.kind)
    _emit(shell_quote(resolution.path))
    return 0


def print_shell_init() -> int:
    console.print(SHELL_FUNCTION, markup=False, highlight=False, soft_wrap=True, end="")
    return 0
