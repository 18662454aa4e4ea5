"""Test config."""

import os
import tempfile
import unittest
from unittest import mock

from .context import blameparse  # noqa: F401

from blameparse import config  # noqa: I100


class TestConfig(unittest.TestCase):
    """Test config."""

    def setUp(self):
        super().setUp()
        config.get.cache_clear()
        self.addCleanup(config.get.cache_clear)

    def test_defaults(self):
        with (mock.patch.dict(os.environ, {'XDG_CONFIG_HOME': '/dev/null'}),
              mock.patch.object(config, 'config_module', None)):
            self.assertEqual(40, config.get('commit_hash_length'))
            self.assertEqual('UTF-8', config.get('blame_encoding'))
            with self.assertRaises(KeyError):
                config.get('no_such_variable')

    def test_config_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with open(os.path.join(tmpdir, config.CONFIG_FILE), 'w') as f:
                f.write('commit_hash_length = 64\n')
            with (mock.patch.dict(os.environ, {'XDG_CONFIG_HOME': tmpdir}),
                  mock.patch.object(config, 'config_module', None)):
                self.assertEqual(64, config.get('commit_hash_length'))
                self.assertEqual(8, config.get('summary_short_hash_length'))

    def test_override(self):
        with (mock.patch.dict(os.environ, {'XDG_CONFIG_HOME': '/dev/null'}),
              mock.patch.object(config, 'config_module', None),
              mock.patch.dict(config.overrides)):
            config.add_override('blame_encoding', 'ISO-8859-1')
            self.assertEqual('ISO-8859-1', config.get('blame_encoding'))
            with self.assertLogs(level='WARNING'):
                config.add_override('misspelled', 1)
        config.get.cache_clear()
        self.assertNotIn('blame_encoding', config.overrides)
