#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    backup as backup_command,
    goto as goto_command,
    listen as listen_command,
    send as send_command,
)


def register(app: typer.Typer) -> None:
    listen_command.register(app)
    send_command.register(app)
    goto_command.register(app)
    backup_command.register(app)
