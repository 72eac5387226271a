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
from ..core.types import SendArgs
from ..flows.send import run_send_command

_SEND_HELP = (
    "Send the messages in MSG-FILE to a TCP listener, one after another.\n\n"
    "Blank lines and lines starting with # are ignored. A line holding only a\n"
    "number pauses for that many seconds. With -b C, lines between 'Ctext' and\n"
    "a line holding only C are joined into one message.\n\n"
    "Examples:\n"
    "  tcp-send 127.0.0.1 9000 messages.txt\n"
    "  tcp-send 127.0.0.1 9000 messages.txt -a '\\r\\n' -d 0.5 -c 10\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_SEND_HELP, context_settings=CONTEXT_SETTINGS)(send)


def _block_callback(value: str | None) -> str | None:
    if value is None:
        return None
    if len(value) != 1:
        raise typer.BadParameter("block delimiter must be a single character")
    return value


def send(
    ctx: typer.Context,
    host: str = typer.Argument(..., metavar="SERVER-IP", help="Listener address."),
    port: int = typer.Argument(..., min=0, max=65535, metavar="SERVER-PORT", help="Port."),
    message_file: str = typer.Argument(..., metavar="MSG-FILE", help="File of messages."),
    append: str | None = typer.Option(
        None,
        "-a",
        "--append",
        help="Text appended to every message (\\n, \\r, \\t understood).",
        rich_help_panel="Messages",
    ),
    block: str | None = typer.Option(
        None,
        "-b",
        "--block",
        help="Delimiter character for multi-line message blocks.",
        callback=_block_callback,
        rich_help_panel="Messages",
    ),
    count: int | None = typer.Option(
        None,
        "-c",
        "--count",
        min=0,
        help="Send at most this many messages.",
        rich_help_panel="Selection",
    ),
    delay: float | None = typer.Option(
        None,
        "-d",
        "--delay",
        min=0,
        help="Seconds to wait between messages.",
        rich_help_panel="Timing",
    ),
    offset: int = typer.Option(
        0,
        "-f",
        "--from",
        min=0,
        help="Skip this many messages before sending.",
        rich_help_panel="Selection",
    ),
    interactive: bool = typer.Option(
        False,
        "-i",
        "--interactive",
        help="Ask before sending each message.",
        rich_help_panel="Behavior",
    ),
    show: bool = typer.Option(
        False,
        "-s",
        "--show",
        help="Print each message as it is sent.",
        rich_help_panel="Behavior",
    ),
    debug: bool = typer.Option(
        False,
        "-D",
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
    args = SendArgs(
        config=_resolve_config(ctx, config),
        host=host,
        port=port,
        message_file=message_file,
        append=append,
        block=block,
        count=count,
        delay=delay,
        offset=offset,
        interactive=interactive,
        show=show,
        debug=debug,
    )
    _run_cli(functools.partial(run_send_command, args), debug=debug)


def main() -> None:
    app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)
    register(app)
    app(prog_name="tcp-send")
