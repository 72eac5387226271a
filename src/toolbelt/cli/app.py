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

import sys
from collections.abc import Sequence

import typer

from ..config import init_user_config
from . import command_registry
from .api import configure_ui, console, console_err
from .commands.backup import prepend_env_args
from .core.common import CONTEXT_SETTINGS, _get_version

app = typer.Typer(
    add_completion=False,
    help="Small TCP, shortcut and backup tools.",
    context_settings=CONTEXT_SETTINGS,
)

_OPTIONS_WITH_VALUES = frozenset({"--config"})


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"toolbelt {_get_version()}")
        raise typer.Exit()


def _init_config_callback(value: bool) -> None:
    if not value:
        return
    try:
        config_dir = init_user_config()
    except OSError as exc:
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    console.print(f"User config ready at {config_dir}")
    raise typer.Exit()


@app.callback()
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output.",
        rich_help_panel="Accessibility",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy defaults to the user config directory and exit.",
        callback=_init_config_callback,
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version, init_config
    configure_ui(no_color=no_color)
    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "no_color": no_color})


command_registry.register(app)


def _subcommand_index(argv: Sequence[str]) -> int | None:
    skip_next = False
    for index, arg in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if arg in _OPTIONS_WITH_VALUES:
            skip_next = True
            continue
        if arg.startswith("-"):
            continue
        return index
    return None


def expand_backup_env_args(argv: Sequence[str]) -> list[str]:
    index = _subcommand_index(argv)
    if index is None or argv[index] != "backup":
        return list(argv)
    return [*argv[: index + 1], *prepend_env_args(argv[index + 1 :])]


def main() -> None:
    app(args=expand_backup_env_args(sys.argv[1:]), prog_name="toolbelt")
