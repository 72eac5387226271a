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

import codecs
import datetime
import logging
import socket
from collections.abc import Callable
from typing import BinaryIO, Literal

from ..core.tracing import span
from .hexdump import hexdump

logger = logging.getLogger(__name__)

RECV_SIZE = 4096
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def open_listener(host: str, port: int, *, backlog: int = 1) -> socket.socket:
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(backlog)
    except OSError:
        server.close()
        raise
    logger.info("listening on %s:%d", host, port)
    return server


def text_decoder() -> codecs.IncrementalDecoder:
    """Return a UTF-8 decoder that carries partial characters between chunks."""
    return codecs.getincrementaldecoder("utf-8")(errors="replace")


def format_chunk(
    data: bytes,
    *,
    timestamp: bool = False,
    hex_case: Literal["lower", "upper"] | None = None,
    now: datetime.datetime | None = None,
    decoder: codecs.IncrementalDecoder | None = None,
) -> str:
    if hex_case is not None:
        body = hexdump(data, upper=hex_case == "upper")
    elif decoder is not None:
        body = decoder.decode(data)
    else:
        body = data.decode("utf-8", errors="replace")
    if not body:
        return ""
    if not timestamp:
        return body
    stamp = (now or datetime.datetime.now()).strftime(TIMESTAMP_FORMAT)
    separator = "\n" if hex_case is not None else " "
    return f"{stamp}:{separator}{body}"


def receive_from(
    conn: socket.socket,
    on_data: Callable[[bytes], None],
    *,
    tee: BinaryIO | None = None,
    recv_size: int = RECV_SIZE,
) -> int:
    """Read from ``conn`` until the peer closes, returning the byte total."""
    total = 0
    while True:
        data = conn.recv(recv_size)
        if not data:
            break
        total += len(data)
        logger.debug("received %d bytes", len(data))
        if tee is not None:
            tee.write(data)
            tee.flush()
        on_data(data)
    return total


def serve_one(
    server: socket.socket,
    on_data: Callable[[bytes], None],
    *,
    on_accept: Callable[[tuple[str, int]], None] | None = None,
    tee: BinaryIO | None = None,
) -> int:
    """Accept a single client and echo what it sends; further clients are never accepted."""
    conn, address = server.accept()
    with conn, span(logger, "client", address=address):
        if on_accept is not None:
            on_accept(address)
        return receive_from(conn, on_data, tee=tee)
