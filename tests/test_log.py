"""Test log."""

import logging
import unittest

from .context import blameparse  # noqa: F401

from blameparse import log  # noqa: I100


class TestLog(unittest.TestCase):
    """Test log."""

    def test_logging_level_to_syslog(self):
        self.assertEqual(7, log.logging_level_to_syslog(logging.DEBUG))
        self.assertEqual(6, log.logging_level_to_syslog(logging.INFO))
        self.assertEqual(4, log.logging_level_to_syslog(logging.WARNING))
        self.assertEqual(3, log.logging_level_to_syslog(logging.ERROR))
        self.assertEqual(2, log.logging_level_to_syslog(logging.CRITICAL))
        self.assertEqual(1, log.logging_level_to_syslog(logging.CRITICAL + 1))

    def test_syslog_formatter(self):
        formatter = log.SyslogFormatter('%(filename)s: %(message)s')
        record = logging.LogRecord('test', logging.WARNING, '/src/blameparser.py', 1,
                                   'bad line %d', (3,), None)
        self.assertEqual('<4>blameparser.py: bad line 3', formatter.format(record))
