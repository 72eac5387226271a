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

import typer

from ..api import console_err
from ..core.common import CONTEXT_SETTINGS, _resolve_config, _run_cli
from ..core.types import GotoArgs
from ..flows.goto import print_shell_init, run_goto_command

_GOTO_HELP = (
    "Print the directory a shortcut KEY points to, for a shell function to cd into.\n\n"
    "KEY is looked up in ~/.gotorc, then as a directory under $DEV, then under\n"
    "the current directory, then as the prefix of a current-directory entry.\n\n"
    "Examples:\n"
    "  eval \"$(goto-resolve --shell-init)\"\n"
    "  goto src\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_GOTO_HELP, context_settings=CONTEXT_SETTINGS)(goto)


def goto(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Shortcut or directory name."),
    rc_file: str | None = typer.Option(
        None,
        "--rc-file",
        help="Shortcut file (default: ~/.gotorc).",
        rich_help_panel="Config",
    ),
    shell_init: bool = typer.Option(
        False,
        "--shell-init",
        help="Print a `goto` shell function and exit.",
        rich_help_panel="Setup",
    ),
    source_env: str | None = typer.Option(
        None,
        "--source-env",
        metavar="VAR",
        help="Environment variable naming the source directory (default: DEV).",
        rich_help_panel="Config",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show debug logging.",
        rich_help_panel="Debug",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
) -> None:
    if shell_init:
        _run_cli(print_shell_init, debug=debug)
        return
    if not key:
        console_err.print("Missing KEY argument. Run with -h for usage.")
        raise typer.Exit(code=2)
    args = GotoArgs(
        config=_resolve_config(ctx, config),
        key=key,
        rc_file=rc_file,
        source_env=source_env,
        debug=debug,
    )
    _run_cli(functools.partial(run_goto_command, args), debug=debug)


def main() -> None:
    app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)
    register(app)
    app(prog_name="goto-resolve")
