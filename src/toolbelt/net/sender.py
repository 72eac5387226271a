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
import socket
import time
from collections.abc import Callable, Sequence

from ..core.tracing import span
from .messages import Delay, Entry

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def open_connection(host: str, port: int, *, timeout: float | None = None) -> socket.socket:
    with span(logger, "connect", host=host, port=port):
        return socket.create_connection((host, port), timeout=timeout)


def send_entries(
    sock: socket.socket,
    entries: Sequence[Entry],
    *,
    append: str = "",
    delay: float = 0.0,
    confirm: Callable[[str], bool] | None = None,
    on_send: Callable[[str], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Send messages in order, honoring delay entries and the fixed delay.

    ``confirm`` is asked before every message; a false answer stops the run.
    Returns the number of messages sent.
    """
    sent = 0
    for entry in entries:
        if isinstance(entry, Delay):
            logger.debug("line %d: sleeping %.3fs", entry.line, entry.seconds)
            sleep(entry.seconds)
            continue
        if sent and delay > 0:
            sleep(delay)
        payload = entry.text + append
        if confirm is not None and not confirm(payload):
            logger.info("stopped before line %d", entry.line)
            break
        with span(logger, "send", line=entry.line, size=len(payload)):
            if on_send is not None:
                on_send(payload)
            sock.sendall(payload.encode(ENCODING))
        sent += 1
    return sent
