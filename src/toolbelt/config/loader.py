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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from .installer import resolve_config_path

DEFAULT_SEPARATOR = ","
DEFAULT_RC_FILE = "~/.gotorc"
DEFAULT_SOURCE_ENV = "DEV"


@dataclass(frozen=True)
class BackupDefaults:
    separator: str = DEFAULT_SEPARATOR
    directory: str | None = None
    timestamp: bool = False
    force: bool = False


@dataclass(frozen=True)
class ListenDefaults:
    timestamp: bool = False
    hex_case: Literal["lower", "upper"] | None = None


@dataclass(frozen=True)
class SendDefaults:
    append: str = ""
    block: str | None = None
    delay: float = 0.0


@dataclass(frozen=True)
class GotoDefaults:
    rc_file: str = DEFAULT_RC_FILE
    source_env: str = DEFAULT_SOURCE_ENV


@dataclass(frozen=True)
class AppConfig:
    path: Path | None = None
    backup: BackupDefaults = field(default_factory=BackupDefaults)
    listen: ListenDefaults = field(default_factory=ListenDefaults)
    send: SendDefaults = field(default_factory=SendDefaults)
    goto: GotoDefaults = field(default_factory=GotoDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        backup=_parse_backup_defaults(_get_dict(data, "backup")),
        listen=_parse_listen_defaults(_get_dict(data, "listen")),
        send=_parse_send_defaults(_get_dict(data, "send")),
        goto=_parse_goto_defaults(_get_dict(data, "goto")),
    )


def _parse_backup_defaults(cfg: dict[str, object]) -> BackupDefaults:
    separator = _parse_optional_str(cfg.get("separator"), field="backup.separator")
    if separator is not None and not separator:
        raise ValueError("backup.separator must be a non-empty string")
    return BackupDefaults(
        separator=DEFAULT_SEPARATOR if separator is None else separator,
        directory=_parse_optional_unset_str(cfg.get("directory"), field="backup.directory"),
        timestamp=_parse_bool(cfg.get("timestamp"), field="backup.timestamp", default=False),
        force=_parse_bool(cfg.get("force"), field="backup.force", default=False),
    )


def _parse_listen_defaults(cfg: dict[str, object]) -> ListenDefaults:
    return ListenDefaults(
        timestamp=_parse_bool(cfg.get("timestamp"), field="listen.timestamp", default=False),
        hex_case=_parse_optional_hex_case(cfg.get("hex"), field="listen.hex"),
    )


def _parse_send_defaults(cfg: dict[str, object]) -> SendDefaults:
    block = _parse_optional_unset_str(cfg.get("block"), field="send.block")
    if block is not None and len(block) != 1:
        raise ValueError("send.block must be a single character")
    delay = _parse_float(cfg.get("delay"), field="send.delay", default=0.0)
    if delay < 0:
        raise ValueError("send.delay must not be negative")
    return SendDefaults(
        append=_parse_optional_str(cfg.get("append"), field="send.append") or "",
        block=block,
        delay=delay,
    )


def _parse_goto_defaults(cfg: dict[str, object]) -> GotoDefaults:
    return GotoDefaults(
        rc_file=_parse_optional_unset_str(cfg.get("rc_file"), field="goto.rc_file")
        or DEFAULT_RC_FILE,
        source_env=_parse_optional_unset_str(cfg.get("source_env"), field="goto.source_env")
        or DEFAULT_SOURCE_ENV,
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_optional_unset_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_optional_hex_case(
    value: object,
    *,
    field: str,
) -> Literal["lower", "upper"] | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'lower', 'upper', or empty")
    normalized = value.strip().lower()
    if not normalized:
        return None
    if normalized not in {"lower", "upper"}:
        raise ValueError(f"{field} must be 'lower', 'upper', or empty")
    return cast(Literal["lower", "upper"], normalized)
