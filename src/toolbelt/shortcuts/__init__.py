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

"""Directory shortcuts read from a ``~/.gotorc`` style file."""

from .rcfile import ShortcutConfigError, ShortcutMap, load_shortcuts, parse_shortcuts
from .resolve import Resolution, ShortcutNotFound, resolve_shortcut

__all__ = [
    "Resolution",
    "ShortcutConfigError",
    "ShortcutMap",
    "ShortcutNotFound",
    "load_shortcuts",
    "parse_shortcuts",
    "resolve_shortcut",
]
