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

from ..core.common import CONTEXT_SETTINGS, _resolve_config, _run_cli
from ..core.types import HexCase, ListenArgs
from ..flows.listen import run_listen_command

_LISTEN_HELP = (
    "Accept one TCP client on IP-ADDR:PORT and print everything it sends.\n\n"
    "Examples:\n"
    "  tcp-listen 127.0.0.1 9000\n"
    "  tcp-listen 0.0.0.0 9000 -t -X -o capture.bin\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_LISTEN_HELP, context_settings=CONTEXT_SETTINGS)(listen)


def _hex_case(lower: bool, upper: bool) -> HexCase | None:
    if lower and upper:
        raise typer.BadParameter("use either -x or -X, not both")
    if upper:
        return "upper"
    if lower:
        return "lower"
    return None


def listen(
    ctx: typer.Context,
    host: str = typer.Argument(..., metavar="IP-ADDR", help="Address to bind."),
    port: int = typer.Argument(..., min=0, max=65535, help="Port to bind."),
    timestamp: bool = typer.Option(
        False,
        "-t",
        "--timestamp",
        help="Prefix each message with YYYY-MM-DD HH:MM:SS:.",
        rich_help_panel="Output",
    ),
    hex_lower: bool = typer.Option(
        False,
        "-x",
        "--hex",
        help="Show messages as a lowercase hex dump.",
        rich_help_panel="Output",
    ),
    hex_upper: bool = typer.Option(
        False,
        "-X",
        "--hex-upper",
        help="Show messages as an uppercase hex dump.",
        rich_help_panel="Output",
    ),
    output: str | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Append the raw received bytes to this file.",
        rich_help_panel="Output",
    ),
    debug: bool = typer.Option(
        False,
        "-d",
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
    args = ListenArgs(
        config=_resolve_config(ctx, config),
        host=host,
        port=port,
        timestamp=timestamp,
        hex_case=_hex_case(hex_lower, hex_upper),
        output=output,
        debug=debug,
    )
    _run_cli(functools.partial(run_listen_command, args), debug=debug)


def main() -> None:
    app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)
    register(app)
    app(prog_name="tcp-listen")
