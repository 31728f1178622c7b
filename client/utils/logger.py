"""
Client logging module.

This module handles client-side logging functionality.
"""

import logging
import sys

from common.constants import LOGGER_NAME


class ClientLogger:
    """Client logging class."""

    def __init__(self, log_level: int = logging.INFO):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level)

        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        # Create console handler
        self.console_handler = logging.StreamHandler(sys.stdout)
        self.console_handler.setLevel(log_level)

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.console_handler.setFormatter(formatter)

        # Add handler to logger
        self.logger.addHandler(self.console_handler)

    def set_level(self, log_level: int):
        """Change the level of the logger and its console handler."""
        self.logger.setLevel(log_level)
        self.console_handler.setLevel(log_level)

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def log_endpoint(self, page_url: str, target_url: str):
        """Log the resolved upload endpoint."""
        self.debug(f"[CONFIG] Page {page_url} resolves to upload target {target_url}")

    def log_upload_start(self, filename: str, size: int, target_url: str):
        """Log file upload attempt."""
        self.info(f"[UPLOAD] Uploading file: {filename} ({size} bytes) to {target_url}")

    def log_upload_progress(self, label: str):
        """Log displayed upload progress."""
        self.info(f"[UPLOAD] Progress: {label}")

    def log_upload_result(self, filename: str, result):
        """Log the outcome of an upload."""
        if result.ok:
            self.info(f"[UPLOAD] Upload complete: {filename} (HTTP {result.status_code})")
        elif result.status_code is not None:
            self.error(f"[UPLOAD] Server rejected {filename}: HTTP {result.status_code}")
        else:
            self.error(f"[UPLOAD] Upload of {filename} failed ({result.status}): {result.error}")

    def log_error(self, operation: str, error: Exception):
        """Log error with operation context."""
        self.error(f"Error in {operation}: {error}")


# Global logger instance
logger = ClientLogger()
