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
from dataclasses import replace

from ...config import SendDefaults, load_app_config
from ...net.messages import decode_escapes, load_message_file, message_count, select_window
from ...net.sender import open_connection, send_entries
from ..api import console, console_err, prompt_yes_no
from ..core.log import _setup_logging, _warn
from ..core.types import SendArgs

logger = logging.getLogger(__name__)


def _confirm_send(payload: str) -> bool:
    return prompt_yes_no(f"Send {payload!r}?", default=True)


def _show_message(payload: str) -> None:
    console.print(payload, markup=False, highlight=False, soft_wrap=True, end="")
    if not payload.endswith("\n"):
        console.print()


def _apply_defaults(args: SendArgs, defaults: SendDefaults) -> SendArgs:
    return replace(
        args,
        append=defaults.append if args.append is None else args.append,
        block=defaults.block if args.block is None else args.block,
        delay=defaults.delay if args.delay is None else args.delay,
    )


def run_send_command(args: SendArgs) -> int:
    _setup_logging(debug=args.debug)
    args = _apply_defaults(args, load_app_config(args.config).send)
    if args.delay < 0:
        raise ValueError("delay must not be negative")
    entries = load_message_file(args.message_file, block=args.block)
    window = select_window(entries, offset=args.offset, count=args.count)
    if not message_count(window):
        _warn(f"no messages to send from {args.message_file}", quiet=False)
        return 0
    with open_connection(args.host, args.port) as sock:
        sent = send_entries(
            sock,
            window,
            append=decode_escapes(args.append or ""),
            delay=args.delay,
            confirm=_confirm_send if args.interactive else None,
            on_send=_show_message if args.show else None,
        )
    console_err.print(f"[muted]sent {sent} message(s) to {args.host}:{args.port}[/muted]")
    return 0
