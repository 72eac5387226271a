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
from contextlib import ExitStack
from dataclasses import replace

from ...config import load_app_config
from ...net.listener import format_chunk, open_listener, serve_one, text_decoder
from ..api import console, console_err
from ..core.log import _setup_logging
from ..core.types import ListenArgs

logger = logging.getLogger(__name__)


def _write_raw(text: str, *, newline: bool) -> None:
    # Bypass rich rendering so tabs, carriage returns and escapes pass through.
    if not text:
        return
    if newline and not text.endswith("\n"):
        text += "\n"
    stream = console.file
    stream.write(text)
    stream.flush()


def run_listen_command(args: ListenArgs) -> int:
    _setup_logging(debug=args.debug)
    defaults = load_app_config(args.config).listen
    args = replace(
        args,
        timestamp=args.timestamp or defaults.timestamp,
        hex_case=args.hex_case or defaults.hex_case,
    )
    decoder = text_decoder()
    # Hex dumps and timestamped chunks are one record per line.
    per_line = args.timestamp or args.hex_case is not None

    def _on_data(data: bytes) -> None:
        text = format_chunk(
            data,
            timestamp=args.timestamp,
            hex_case=args.hex_case,
            decoder=decoder,
        )
        _write_raw(text, newline=per_line)

    def _on_accept(address: tuple[str, int]) -> None:
        console_err.print(f"[muted]connection from {address[0]}:{address[1]}[/muted]")

    with ExitStack() as stack:
        tee = stack.enter_context(open(args.output, "ab")) if args.output else None
        server = stack.enter_context(open_listener(args.host, args.port))
        console_err.print(f"[muted]listening on {args.host}:{args.port}[/muted]")
        total = serve_one(server, _on_data, on_accept=_on_accept, tee=tee)
    if args.hex_case is None:
        _write_raw(decoder.decode(b"", final=True), newline=per_line)
    console_err.print(f"[muted]connection closed after {total} bytes[/muted]")
    return 0
