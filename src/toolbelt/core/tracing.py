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
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "toolbelt"

_SPAN_DEPTH: ContextVar[int] = ContextVar("toolbelt_span_depth", default=0)


def verbosity_level(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(level: int, *, console: Console | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


@contextmanager
def span(logger: logging.Logger, name: str, /, **fields: object) -> Iterator[None]:
    """Log entry and exit of a unit of work at DEBUG level.

    Nested spans are indented by their depth, so a debug run reads as a call
    tree without callers having to track indentation.
    """
    depth = _SPAN_DEPTH.get()
    indent = "  " * depth
    detail = " ".join(f"{key}={value!r}" for key, value in fields.items())
    logger.debug("%s-> %s %s", indent, name, detail)
    token = _SPAN_DEPTH.set(depth + 1)
    started = time.monotonic()
    try:
        yield
    except BaseException as exc:
        elapsed = time.monotonic() - started
        logger.debug("%s<- %s raised %s (%.3fs)", indent, name, type(exc).__name__, elapsed)
        raise
    finally:
        _SPAN_DEPTH.reset(token)
    logger.debug("%s<- %s (%.3fs)", indent, name, time.monotonic() - started)
