"""
Client configuration module.

This module handles client-side configuration settings.
"""

import os
import tomllib
from pathlib import Path
from typing import Optional

from client.utils.logger import logger
from common.constants import (
    DEFAULT_PAGE_URL, UPLOAD_TIMEOUT_MS, UPLOAD_FIELD_NAME, CONFIG_SECTION,
    ENV_UPLOAD_URL, ENV_SERVE_PATH
)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


class ClientConfig:
    """Client configuration class."""

    def __init__(self, page_url: str = DEFAULT_PAGE_URL, serve_path: Optional[str] = None,
                 timeout_ms: int = UPLOAD_TIMEOUT_MS):
        # Location of the upload page; the mount prefix is detected from it
        self.page_url = page_url
        # Explicit mount path, overrides detection when set
        self.serve_path = serve_path

        # Transfer settings
        self.timeout_ms = timeout_ms
        self.field_name = UPLOAD_FIELD_NAME

    @classmethod
    def from_file(cls, path: str) -> 'ClientConfig':
        """Load configuration from the ``[upload]`` table of a TOML file."""
        try:
            with open(path, 'rb') as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"Failed to read config file at {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config file {path}: {e}") from e

        section = data.get(CONFIG_SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{CONFIG_SECTION}] in {path} must be a table")

        config = cls()
        config.update(
            page_url=section.get('page_url'),
            serve_path=section.get('serve_path'),
            timeout_ms=section.get('timeout_ms'),
        )
        return config

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'ClientConfig':
        """Load ``path`` if it exists, otherwise fall back to defaults."""
        if path and Path(path).exists():
            config = cls.from_file(path)
        else:
            if path:
                logger.warning(f"Config file {path} not found. Using default config...")
            config = cls()
        config.apply_env()
        return config

    def apply_env(self, environ=None):
        """Apply overrides from the environment."""
        environ = os.environ if environ is None else environ
        self.update(
            page_url=environ.get(ENV_UPLOAD_URL),
            serve_path=environ.get(ENV_SERVE_PATH),
        )

    def update(self, page_url: str = None, serve_path: str = None, timeout_ms: int = None):
        """Update settings, ignoring values that are not given."""
        for name, value in (('page_url', page_url), ('serve_path', serve_path)):
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")

        if page_url is not None:
            self.page_url = page_url
        if serve_path is not None:
            self.serve_path = serve_path
        if timeout_ms is not None:
            try:
                if isinstance(timeout_ms, bool):
                    raise TypeError(timeout_ms)
                timeout = int(timeout_ms)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"timeout_ms must be an integer, got {timeout_ms!r}") from e
            if timeout <= 0:
                raise ConfigError(f"timeout_ms must be positive, got {timeout_ms}")
            self.timeout_ms = timeout

    def get_connection_info(self):
        """Get connection information."""
        return {
            'page_url': self.page_url,
            'serve_path': self.serve_path,
            'timeout_ms': self.timeout_ms
        }
