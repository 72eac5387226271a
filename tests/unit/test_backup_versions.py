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

import datetime
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from toolbelt.backup import (
    BackupError,
    existing_versions,
    latest_version,
    next_version,
    parse_version_token,
    split_backup_name,
    timestamp_token,
)


class TestBackupVersions(unittest.TestCase):
    def test_next_version_is_max_plus_one_ignoring_gaps(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            backup_dir = Path(tmpdir)
            for version in (0, 1, 2, 5):
                (backup_dir / f"report,{version}.txt").write_text("x", encoding="utf-8")
            (backup_dir / "report,x.txt").write_text("noise", encoding="utf-8")
            (backup_dir / "other,9.txt").write_text("noise", encoding="utf-8")
            name = split_backup_name("report.txt")
            self.assertEqual(sorted(existing_versions(name, backup_dir, ",")), [0, 1, 2, 5])
            self.assertEqual(latest_version(name, backup_dir, ","), 5)
            self.assertEqual(next_version(name, backup_dir, ","), 6)

    def test_next_version_starts_at_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            name = split_backup_name("report.txt")
            self.assertEqual(next_version(name, Path(tmpdir), ","), 0)
            self.assertEqual(next_version(name, Path(tmpdir) / "missing", ","), 0)
            self.assertIsNone(latest_version(name, Path(tmpdir), ","))

    def test_versions_are_per_pattern(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            backup_dir = Path(tmpdir)
            (backup_dir / "cat,4.").write_text("x", encoding="utf-8")
            (backup_dir / "cat,9").write_text("x", encoding="utf-8")
            self.assertEqual(next_version(split_backup_name("cat."), backup_dir, ","), 5)
            self.assertEqual(next_version(split_backup_name("cat"), backup_dir, ","), 10)
            self.assertEqual(next_version(split_backup_name("cat.txt"), backup_dir, ","), 0)

    def test_next_version_rescans_every_call(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            backup_dir = Path(tmpdir)
            name = split_backup_name("dog")
            self.assertEqual(next_version(name, backup_dir, ","), 0)
            (backup_dir / "dog,0").write_text("x", encoding="utf-8")
            self.assertEqual(next_version(name, backup_dir, ","), 1)

    def test_timestamp_token_format(self) -> None:
        moment = datetime.datetime(2026, 1, 2, 3, 4, 5)
        self.assertEqual(timestamp_token(moment), "20260102-030405")

    @mock.patch("toolbelt.backup.versions.datetime")
    def test_timestamp_token_defaults_to_now(self, datetime_mock: mock.MagicMock) -> None:
        datetime_mock.datetime.now.return_value = datetime.datetime(2030, 12, 31, 23, 59, 58)
        self.assertEqual(timestamp_token(), "20301231-235958")

    def test_parse_version_token(self) -> None:
        self.assertEqual(parse_version_token("3"), "3")
        self.assertEqual(parse_version_token("007"), "7")
        self.assertEqual(parse_version_token("20260102-030405"), "20260102-030405")
        for bad in ("-1", "abc", "2026-01-02", ""):
            with self.subTest(value=bad):
                with self.assertRaises(BackupError) as exc_info:
                    parse_version_token(bad)
                self.assertEqual(exc_info.exception.code, BackupError.BAD_VERSION)


if __name__ == "__main__":
    unittest.main()
