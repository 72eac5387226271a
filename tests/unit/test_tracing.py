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

import logging
import unittest

from toolbelt.core.tracing import LOGGER_NAME, configure_logging, span, verbosity_level


class TestTracing(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger(f"{LOGGER_NAME}.tests")

    def test_verbosity_levels(self) -> None:
        self.assertEqual(verbosity_level(0), logging.WARNING)
        self.assertEqual(verbosity_level(1), logging.INFO)
        self.assertEqual(verbosity_level(2), logging.DEBUG)
        self.assertEqual(verbosity_level(7), logging.DEBUG)

    def test_configure_logging_replaces_handler(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        saved_propagate = logger.propagate
        logger.handlers = []

        def _restore() -> None:
            logger.handlers = saved_handlers
            logger.setLevel(saved_level)
            logger.propagate = saved_propagate

        self.addCleanup(_restore)
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)

    def test_span_logs_enter_and_exit_with_nesting(self) -> None:
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            with span(self.logger, "outer", item="a"):
                with span(self.logger, "inner"):
                    pass
        messages = [record.getMessage() for record in captured.records]
        self.assertEqual(len(messages), 4)
        self.assertTrue(messages[0].startswith("-> outer item='a'"))
        self.assertTrue(messages[1].startswith("  -> inner"))
        self.assertTrue(messages[2].startswith("  <- inner"))
        self.assertTrue(messages[3].startswith("<- outer"))

    def test_span_fields_may_reuse_parameter_names(self) -> None:
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            with span(self.logger, "lookup", name="notes.txt", logger="x"):
                pass
        self.assertIn("name='notes.txt'", captured.records[0].getMessage())
        self.assertIn("logger='x'", captured.records[0].getMessage())

    def test_span_logs_exception_and_reraises(self) -> None:
        with self.assertLogs(self.logger, level="DEBUG") as captured:
            with self.assertRaises(KeyError):
                with span(self.logger, "failing"):
                    raise KeyError("x")
            with span(self.logger, "after"):
                pass
        messages = [record.getMessage() for record in captured.records]
        self.assertIn("raised KeyError", messages[1])
        self.assertTrue(messages[2].startswith("-> after"))


if __name__ == "__main__":
    unittest.main()
