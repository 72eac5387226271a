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
from pathlib import Path

from ...backup import (
    BackupError,
    BackupOutcome,
    backup_path,
    parse_version_token,
    resolve_backup_dir,
    restore_path,
)
from ...config import BackupDefaults, load_app_config
from ...core.tracing import span
from ..api import console
from ..core.log import _notice, _setup_logging
from ..core.types import BackupArgs

logger = logging.getLogger(__name__)


def _apply_defaults(args: BackupArgs, defaults: BackupDefaults) -> BackupArgs:
    relative_dir = args.relative_dir
    if relative_dir is None and args.backup_dir is None:
        relative_dir = defaults.directory
    return replace(
        args,
        relative_dir=relative_dir,
        separator=defaults.separator if args.separator is None else args.separator,
        force=args.force or defaults.force,
        timestamp=args.timestamp or (defaults.timestamp and args.restore is None),
    )


def _validate_backup_args(args: BackupArgs) -> None:
    if args.relative_dir and args.backup_dir:
        raise ValueError("use either -b or -B, not both")
    if not args.separator:
        raise ValueError("separator cannot be empty")
    if args.restore is not None and (args.move or args.timestamp):
        raise ValueError("-r cannot be combined with -m or -t")


def _report_outcome(outcome: BackupOutcome, *, quiet: bool) -> None:
    if outcome.status == "planned":
        console.print(str(outcome.target), markup=False, highlight=False, soft_wrap=True)
        return
    if quiet:
        return
    if outcome.status == "identical":
        console.print(
            f"[muted]{outcome.source}: identical backup already exists "
            f"({outcome.target.name})[/muted]",
            highlight=False,
        )
    elif outcome.status == "restored":
        console.print(
            f"[success]restored[/success] {outcome.source} from {outcome.target.name}",
            highlight=False,
        )
    elif outcome.status == "moved":
        console.print(
            f"[success]moved[/success] {outcome.source} -> {outcome.target}",
            highlight=False,
        )
    else:
        console.print(f"{outcome.source} -> {outcome.target}", markup=False, highlight=False)


def _should_skip(source: Path, *, multiple: bool, include_dirs: bool, quiet: bool) -> bool:
    if source.is_symlink():
        _notice(f"{source}: symbolic link, skipped", quiet=quiet)
        return True
    if multiple and source.is_dir() and not include_dirs:
        _notice(f"{source}: directory, skipped (use -a to include directories)", quiet=quiet)
        return True
    return False


def _process_item(source: Path, args: BackupArgs, token: str | None) -> BackupOutcome:
    backup_dir = resolve_backup_dir(
        source,
        backup_dir=args.backup_dir,
        relative_dir=args.relative_dir,
    )
    if token is not None:
        return restore_path(
            source,
            backup_dir,
            separator=args.separator,
            token=token,
            dry_run=args.dry_run,
        )
    return backup_path(
        source,
        backup_dir,
        separator=args.separator,
        timestamp=args.timestamp,
        force=args.force,
        move=args.move,
        dry_run=args.dry_run,
    )


def run_backup_command(args: BackupArgs) -> int:
    _setup_logging(verbosity=args.verbosity)
    args = _apply_defaults(args, load_app_config(args.config).backup)
    _validate_backup_args(args)
    files = args.files or []
    token = parse_version_token(args.restore) if args.restore is not None else None
    failures = 0
    with span(logger, "run_backup_command", files=len(files)):
        for raw in files:
            source = Path(raw)
            if _should_skip(
                source,
                multiple=len(files) > 1,
                include_dirs=args.include_dirs,
                quiet=args.quiet,
            ):
                continue
            try:
                outcome = _process_item(source, args, token)
            except BackupError as exc:
                failures += 1
                console.print(
                    f"[error]Error {exc.code}:[/error] {exc.message}",
                    highlight=False,
                )
                continue
            _report_outcome(outcome, quiet=args.quiet)
    return 1 if failures else 0
