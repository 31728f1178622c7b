#!/usr/bin/env python3
"""
MeTube Upload Client - Command-Line Flow

Uploads one file from the command line, reporting progress through the
client logger.
"""

import asyncio

from client.files.progress import ConsoleProgressDisplay
from client.files.selection import FileSelection
from client.files.upload_client import UploadClient, UploadError
from client.utils.config import ClientConfig
from client.utils.logger import logger
from common.protocol_definitions import UploadResult


class UploadCli:
    """Command-line upload client."""

    def __init__(self, config: ClientConfig = None, upload_client: UploadClient = None):
        self.config = config or ClientConfig()
        self.upload_client = upload_client or UploadClient(self.config)
        self.display = ConsoleProgressDisplay()

    async def upload(self, file_path: str) -> UploadResult:
        """Upload ``file_path`` and return the outcome."""
        selection = FileSelection(file_path)
        return await self.upload_client.post_file(selection, self.display)

    def run(self, file_path: str) -> int:
        """Upload ``file_path``; return a process exit code."""
        try:
            result = asyncio.run(self.upload(file_path))
        except (UploadError, OSError) as e:
            logger.log_error("upload", e)
            return 2

        if result.ok:
            if result.body:
                logger.debug(f"[UPLOAD] Server response: {result.body}")
            return 0
        return 1
