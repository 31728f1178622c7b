#!/usr/bin/env python3
"""
Unit tests for client configuration in client/utils/config.py
"""

import tempfile
import unittest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from client.utils.config import ClientConfig, ConfigError
from common.constants import DEFAULT_PAGE_URL, ENV_UPLOAD_URL, ENV_SERVE_PATH


class TestClientConfig(unittest.TestCase):
    """Test cases for ClientConfig."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.tmp_dir.name) / 'metube-upload.toml'

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_defaults(self):
        config = ClientConfig()
        self.assertEqual(config.page_url, DEFAULT_PAGE_URL)
        self.assertIsNone(config.serve_path)
        self.assertEqual(config.timeout_ms, 45000)
        self.assertEqual(config.field_name, 'FileToUpload')

    def test_from_file(self):
        self.config_path.write_text(
            '[upload]\n'
            'page_url = "http://media.lan:8080/metube/upload/"\n'
            'serve_path = "/metube"\n'
            'timeout_ms = 60000\n'
        )
        config = ClientConfig.from_file(str(self.config_path))
        self.assertEqual(config.page_url, 'http://media.lan:8080/metube/upload/')
        self.assertEqual(config.serve_path, '/metube')
        self.assertEqual(config.timeout_ms, 60000)

    def test_from_file_without_upload_table(self):
        self.config_path.write_text('[other]\nkey = 1\n')
        config = ClientConfig.from_file(str(self.config_path))
        self.assertEqual(config.page_url, DEFAULT_PAGE_URL)

    def test_invalid_toml(self):
        self.config_path.write_text('[upload\npage_url = ')
        with self.assertRaises(ConfigError):
            ClientConfig.from_file(str(self.config_path))

    def test_missing_file_falls_back_to_defaults(self):
        missing = str(Path(self.tmp_dir.name) / 'missing.toml')
        with patch('client.utils.config.logger') as mock_logger, \
                patch.dict('os.environ', {}, clear=True):
            config = ClientConfig.load(missing)

        mock_logger.warning.assert_called_once()
        self.assertEqual(config.page_url, DEFAULT_PAGE_URL)

    def test_environment_overrides(self):
        config = ClientConfig()
        config.apply_env({
            ENV_UPLOAD_URL: 'http://tv.lan/upload',
            ENV_SERVE_PATH: 'tv',
        })
        self.assertEqual(config.page_url, 'http://tv.lan/upload')
        self.assertEqual(config.serve_path, 'tv')

    def test_update_ignores_missing_values(self):
        config = ClientConfig(page_url='http://a/upload')
        config.update(page_url=None, serve_path=None, timeout_ms=None)
        self.assertEqual(config.page_url, 'http://a/upload')
        self.assertEqual(config.timeout_ms, 45000)

    def test_non_positive_timeout_rejected(self):
        with self.assertRaises(ConfigError):
            ClientConfig().update(timeout_ms=0)

    def test_non_numeric_timeout_in_file(self):
        """Test that a timeout that is not a number is a config error."""
        self.config_path.write_text('[upload]\ntimeout_ms = "fast"\n')
        with self.assertRaises(ConfigError):
            ClientConfig.from_file(str(self.config_path))

    def test_boolean_timeout_rejected(self):
        with self.assertRaises(ConfigError):
            ClientConfig().update(timeout_ms=True)

    def test_non_string_urls_in_file(self):
        """Test that page_url and serve_path must be strings."""
        for body in ('page_url = 8080\n', 'serve_path = ["metube"]\n'):
            with self.subTest(body=body):
                self.config_path.write_text('[upload]\n' + body)
                with self.assertRaises(ConfigError):
                    ClientConfig.from_file(str(self.config_path))


if __name__ == '__main__':
    unittest.main()
