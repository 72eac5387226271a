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

import datetime
import filecmp
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..core.tracing import span
from .errors import BackupError
from .naming import BackupName, format_backup_name, split_backup_name
from .versions import next_version, timestamp_token

logger = logging.getLogger(__name__)

OutcomeStatus = Literal["created", "moved", "identical", "planned", "restored"]


@dataclass(frozen=True)
class BackupPlan:
    source: Path
    name: BackupName
    backup_dir: Path
    token: str
    target: Path
    previous: Path | None


@dataclass(frozen=True)
class BackupOutcome:
    status: OutcomeStatus
    source: Path
    target: Path


def resolve_backup_dir(
    source: Path,
    *,
    backup_dir: str | Path | None = None,
    relative_dir: str | Path | None = None,
) -> Path:
    if backup_dir is not None:
        return Path(backup_dir).expanduser()
    if relative_dir is not None:
        return source.parent / Path(relative_dir).expanduser()
    return source.parent


def plan_backup(
    source: Path,
    backup_dir: Path,
    *,
    separator: str,
    timestamp: bool = False,
    now: datetime.datetime | None = None,
) -> BackupPlan:
    name = split_backup_name(source)
    if timestamp:
        token = timestamp_token(now)
        previous = None
    else:
        version = next_version(name, backup_dir, separator)
        token = str(version)
        previous = (
            backup_dir / format_backup_name(name, version - 1, separator) if version else None
        )
    target = backup_dir / format_backup_name(name, token, separator)
    if os.path.lexists(target):
        raise BackupError(BackupError.SLOT_TAKEN, f"backup already exists: {target}")
    return BackupPlan(
        source=source,
        name=name,
        backup_dir=backup_dir,
        token=token,
        target=target,
        previous=previous,
    )


def is_identical(left: Path, right: Path) -> bool:
    """Compare two files byte for byte, or two trees recursively."""
    if left.is_symlink() or right.is_symlink():
        return (
            left.is_symlink()
            and right.is_symlink()
            and os.readlink(left) == os.readlink(right)
        )
    if left.is_file() and right.is_file():
        return filecmp.cmp(left, right, shallow=False)
    if left.is_dir() and right.is_dir():
        left_names = sorted(entry.name for entry in left.iterdir())
        right_names = sorted(entry.name for entry in right.iterdir())
        if left_names != right_names:
            return False
        return all(is_identical(left / name, right / name) for name in left_names)
    return False


def ensure_backup_dir(backup_dir: Path) -> None:
    if backup_dir.exists() and not backup_dir.is_dir():
        raise BackupError(
            BackupError.BACKUP_DIR_INVALID,
            f"backup location is not a directory: {backup_dir}",
        )
    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupError(
            BackupError.BACKUP_DIR_INVALID,
            f"cannot create backup directory {backup_dir}: {exc.strerror or exc}",
        ) from exc


def copy_item(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir():
        shutil.copytree(source, target, symlinks=True)
    else:
        shutil.copy2(source, target)


def remove_item(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def backup_path(
    source: Path,
    backup_dir: Path,
    *,
    separator: str,
    timestamp: bool = False,
    force: bool = False,
    move: bool = False,
    dry_run: bool = False,
    now: datetime.datetime | None = None,
) -> BackupOutcome:
    with span(logger, "backup_path", source=str(source), backup_dir=str(backup_dir)):
        if not os.path.lexists(source):
            raise BackupError(BackupError.SOURCE_MISSING, f"no such file or directory: {source}")
        plan = plan_backup(source, backup_dir, separator=separator, timestamp=timestamp, now=now)
        logger.info("%s -> %s", source, plan.target)
        if source.is_dir() and _is_within(plan.target, source):
            raise BackupError(
                BackupError.COPY_FAILED,
                f"backup directory {backup_dir} is inside {source}",
            )
        if dry_run:
            return BackupOutcome(status="planned", source=source, target=plan.target)
        if not force and plan.previous is not None and is_identical(source, plan.previous):
            logger.info("%s matches %s", source, plan.previous)
            return BackupOutcome(status="identical", source=source, target=plan.previous)
        ensure_backup_dir(backup_dir)
        if move:
            try:
                shutil.move(os.fspath(source), os.fspath(plan.target))
            except OSError as exc:
                raise BackupError(
                    BackupError.MOVE_FAILED,
                    f"cannot move {source} to {plan.target}: {exc.strerror or exc}",
                ) from exc
            return BackupOutcome(status="moved", source=source, target=plan.target)
        try:
            copy_item(source, plan.target)
        except (OSError, shutil.Error) as exc:
            raise BackupError(
                BackupError.COPY_FAILED,
                f"cannot copy {source} to {plan.target}: {exc}",
            ) from exc
        return BackupOutcome(status="created", source=source, target=plan.target)


def restore_path(
    source: Path,
    backup_dir: Path,
    *,
    separator: str,
    token: str,
    dry_run: bool = False,
) -> BackupOutcome:
    with span(logger, "restore_path", source=str(source), token=token):
        name = split_backup_name(source)
        backup = backup_dir / format_backup_name(name, token, separator)
        if not os.path.lexists(backup):
            raise BackupError(
                BackupError.RESTORE_MISSING,
                f"version {token} of {source} not found: {backup}",
            )
        if backup.is_symlink() or not (backup.is_file() or backup.is_dir()):
            raise BackupError(
                BackupError.RESTORE_UNSUPPORTED,
                f"{backup} is neither a regular file nor a directory",
            )
        if dry_run:
            return BackupOutcome(status="planned", source=source, target=backup)
        try:
            if os.path.lexists(source):
                remove_item(source)
            copy_item(backup, source)
        except (OSError, shutil.Error) as exc:
            raise BackupError(
                BackupError.RESTORE_FAILED,
                f"cannot restore {backup} to {source}: {exc}",
            ) from exc
        return BackupOutcome(status="restored", source=source, target=backup)


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
    except ValueError:
        return False
    return True
