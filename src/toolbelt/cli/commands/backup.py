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

import functools
import os
import shlex
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import typer

from ..api import console_err
from ..core.common import CONTEXT_SETTINGS, _resolve_config, _run_cli
from ..core.types import BackupArgs
from ..flows.backup import run_backup_command

ENV_ARGS = "BKP_ARGS"
NO_ENV_SHORT = "z"
NO_ENV_LONG = "--no-env"
_SHORT_VALUE_FLAGS = frozenset("bBrsV")
_LONG_VALUE_FLAGS = frozenset(
    {"--subdir", "--backup-dir", "--restore", "--separator", "--verbosity", "--config"}
)

_BACKUP_HELP = (
    "Make a numbered (or timestamped) backup copy of each FILE.\n\n"
    "Backup names: name.ext -> name,N.ext; name. -> name,N.; name -> name,N; "
    ".ext -> .ext,N. Options in $BKP_ARGS are read first unless -z is given.\n\n"
    "Examples:\n"
    "  bkp notes.txt\n"
    "  bkp -b old -t report.pdf\n"
    "  bkp -r 3 notes.txt\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_BACKUP_HELP, context_settings=CONTEXT_SETTINGS)(backup)


def backup(
    ctx: typer.Context,
    files: list[Path] | None = typer.Argument(
        None,
        help="Files or directories to back up.",
        show_default=False,
    ),
    include_dirs: bool = typer.Option(
        False,
        "-a",
        "--all",
        help="Back up directories even when several files are given.",
        rich_help_panel="Selection",
    ),
    relative_dir: str | None = typer.Option(
        None,
        "-b",
        "--subdir",
        help="Backup directory, relative to each file's own directory.",
        rich_help_panel="Location",
    ),
    backup_dir: str | None = typer.Option(
        None,
        "-B",
        "--backup-dir",
        help="Single backup directory for all files.",
        rich_help_panel="Location",
    ),
    force: bool = typer.Option(
        False,
        "-f",
        "--force",
        help="Create a new version even if the latest one is identical.",
        rich_help_panel="Behavior",
    ),
    dry_run: bool = typer.Option(
        False,
        "-g",
        "--dry-run",
        help="Print the backup name that would be used and change nothing.",
        rich_help_panel="Behavior",
    ),
    move: bool = typer.Option(
        False,
        "-m",
        "--move",
        help="Move the file into the backup instead of copying it.",
        rich_help_panel="Behavior",
    ),
    quiet: bool = typer.Option(
        False,
        "-q",
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Behavior",
    ),
    restore: str | None = typer.Option(
        None,
        "-r",
        "--restore",
        metavar="N",
        help="Restore version N (number or YYYYMMDD-HHMMSS) over the live file.",
        rich_help_panel="Behavior",
    ),
    separator: str | None = typer.Option(
        None,
        "-s",
        "--separator",
        help="Text placed between the name and the version (default: ',').",
        rich_help_panel="Naming",
    ),
    timestamp: bool = typer.Option(
        False,
        "-t",
        "--timestamp",
        help="Use a YYYYMMDD-HHMMSS timestamp instead of a version number.",
        rich_help_panel="Naming",
    ),
    verbosity: int = typer.Option(
        0,
        "-V",
        "--verbosity",
        metavar="N",
        help="Diagnostic level: 0 warnings, 1 info, 2 call tracing.",
        rich_help_panel="Debug",
    ),
    no_env: bool = typer.Option(
        False,
        "-z",
        "--no-env",
        help=f"Ignore options from ${ENV_ARGS}.",
        rich_help_panel="Behavior",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
) -> None:
    _ = no_env
    if not files:
        console_err.print("Missing FILE argument. Run with -h for usage.")
        raise typer.Exit(code=-1)
    args = BackupArgs(
        config=_resolve_config(ctx, config),
        files=[str(path) for path in files],
        include_dirs=include_dirs,
        relative_dir=relative_dir,
        backup_dir=backup_dir,
        force=force,
        dry_run=dry_run,
        move=move,
        quiet=quiet,
        restore=restore,
        separator=separator,
        timestamp=timestamp,
        verbosity=verbosity,
    )
    _run_cli(functools.partial(run_backup_command, args), debug=verbosity >= 2)


def _has_no_env_flag(argv: Sequence[str]) -> bool:
    """Find -z in argv, including inside grouped short flags such as -qz."""
    skip_next = False
    for arg in argv:
        if skip_next:
            skip_next = False
            continue
        if arg == "--":
            return False
        if arg.startswith("--"):
            if arg == NO_ENV_LONG:
                return True
            skip_next = arg in _LONG_VALUE_FLAGS
            continue
        if not arg.startswith("-") or arg == "-":
            continue
        flags = arg[1:]
        for index, flag in enumerate(flags):
            if flag == NO_ENV_SHORT:
                return True
            if flag in _SHORT_VALUE_FLAGS:
                # the rest of the group, or the next argument, is the value
                skip_next = index == len(flags) - 1
                break
    return False


def prepend_env_args(
    argv: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    environ = os.environ if environ is None else environ
    if _has_no_env_flag(argv):
        return list(argv)
    extra = shlex.split(environ.get(ENV_ARGS, ""))
    return [*extra, *argv]


def main() -> None:
    app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)
    register(app)
    app(args=prepend_env_args(sys.argv[1:]), prog_name="bkp")
