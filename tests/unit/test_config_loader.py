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

import tempfile
import unittest
from pathlib import Path

from tests.test_support import temp_env
from toolbelt.config import (
    CONFIG_ENV,
    DEFAULT_CONFIG_PATH,
    init_user_config,
    load_app_config,
    resolve_config_path,
)


class TestConfig(unittest.TestCase):
    def _write(self, tmpdir: str, toml: str) -> Path:
        path = Path(tmpdir) / "config.toml"
        path.write_text(toml, encoding="utf-8")
        return path

    def test_packaged_defaults(self) -> None:
        config = load_app_config(DEFAULT_CONFIG_PATH)
        self.assertEqual(config.backup.separator, ",")
        self.assertIsNone(config.backup.directory)
        self.assertFalse(config.backup.timestamp)
        self.assertIsNone(config.listen.hex_case)
        self.assertEqual(config.send.append, "")
        self.assertIsNone(config.send.block)
        self.assertEqual(config.send.delay, 0.0)
        self.assertEqual(config.goto.rc_file, "~/.gotorc")
        self.assertEqual(config.goto.source_env, "DEV")

    def test_sections_are_parsed(self) -> None:
        toml = """
[backup]
separator = "_v"
directory = "old"
timestamp = "yes"
force = 1

[listen]
timestamp = true
hex = "UPPER"

[send]
append = "\\\\r\\\\n"
block = "'"
delay = "0.5"

[goto]
rc_file = "/etc/gotorc"
source_env = "SRC"
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_app_config(self._write(tmpdir, toml))
        self.assertEqual(config.backup.separator, "_v")
        self.assertEqual(config.backup.directory, "old")
        self.assertTrue(config.backup.timestamp)
        self.assertTrue(config.backup.force)
        self.assertTrue(config.listen.timestamp)
        self.assertEqual(config.listen.hex_case, "upper")
        self.assertEqual(config.send.append, "\\r\\n")
        self.assertEqual(config.send.block, "'")
        self.assertEqual(config.send.delay, 0.5)
        self.assertEqual(config.goto.rc_file, "/etc/gotorc")
        self.assertEqual(config.goto.source_env, "SRC")

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ('[backup]\nseparator = ""\n', "backup.separator"),
            ("[backup]\nforce = 3\n", "backup.force"),
            ('[listen]\nhex = "octal"\n', "listen.hex"),
            ('[send]\nblock = "ab"\n', "send.block"),
            ("[send]\ndelay = -1\n", "send.delay"),
            ("[send]\ndelay = true\n", "send.delay"),
            ("[goto]\nrc_file = 5\n", "goto.rc_file"),
        )
        for toml, field in cases:
            with self.subTest(field=field):
                with tempfile.TemporaryDirectory() as tmpdir:
                    path = self._write(tmpdir, toml)
                    with self.assertRaisesRegex(ValueError, field):
                        load_app_config(path)

    def test_resolution_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            explicit = self._write(tmpdir, "")
            env_path = Path(tmpdir) / "env.toml"
            env_path.write_text("", encoding="utf-8")
            xdg = Path(tmpdir) / "xdg"
            with temp_env({"XDG_CONFIG_HOME": str(xdg)}):
                with temp_env({CONFIG_ENV: ""}):
                    self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)
                    user_dir = init_user_config()
                    self.assertEqual(user_dir, xdg / "toolbelt")
                    self.assertEqual(resolve_config_path(), xdg / "toolbelt" / "config.toml")
                with temp_env({CONFIG_ENV: str(env_path)}):
                    self.assertEqual(resolve_config_path(), env_path)
                    self.assertEqual(resolve_config_path(explicit), explicit)

    def test_missing_explicit_file(self) -> None:
        with self.assertRaisesRegex(ValueError, "config file not found"):
            resolve_config_path("/no/such/config.toml")


if __name__ == "__main__":
    unittest.main()
