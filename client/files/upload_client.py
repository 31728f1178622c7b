"""
Upload client module.

This module posts one selected file to the MeTube upload endpoint and
reports transmission progress to a progress display.
"""

import asyncio
from typing import AsyncIterator, Optional

import httpx

from client.files.progress import ProgressDisplay, ProgressTracker
from client.files.selection import FileSelection
from client.utils.config import ClientConfig
from client.utils.logger import logger
from common.constants import UPLOAD_CONTENT_TYPE, UploadStatus
from common.protocol_definitions import (
    ProgressEvent, UploadRequest, UploadResult, create_upload_request, resolve_upload_url
)


class UploadError(Exception):
    """Base class for errors raised before an upload starts."""


class NoFileSelectedError(UploadError, ValueError):
    """Raised when a submission is made with an empty file selection."""


class UploadInProgressError(UploadError):
    """Raised when a submission is made while another one is in flight."""


class UploadClient:
    """Client-side file upload functionality."""

    def __init__(self, config: Optional[ClientConfig] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or ClientConfig()
        self.transport = transport
        # Resolved once; the page location does not change for this client
        self.target_url = resolve_upload_url(self.config.page_url, self.config.serve_path)
        self.current_task: Optional[asyncio.Task] = None
        logger.log_endpoint(self.config.page_url, self.target_url)

    def build_request(self, selection: FileSelection) -> UploadRequest:
        """Create the request for the file currently selected."""
        files = selection.files
        if not files:
            raise NoFileSelectedError("No file selected for upload")
        return create_upload_request(files[0], self.target_url, self.config.timeout_ms)

    def submit(self, selection: FileSelection, display: ProgressDisplay) -> asyncio.Task:
        """Start uploading the selected file and return without waiting.

        Must be called from a running event loop. The returned task resolves
        to an :class:`UploadResult`.
        """
        if self.current_task is not None and not self.current_task.done():
            raise UploadInProgressError("An upload is already in progress")

        request = self.build_request(selection)
        self.current_task = asyncio.create_task(self.post(request, display))
        return self.current_task

    async def post_file(self, selection: FileSelection, display: ProgressDisplay) -> UploadResult:
        """Upload the selected file and wait for the outcome."""
        request = self.build_request(selection)
        return await self.post(request, display)

    async def post(self, request: UploadRequest, display: ProgressDisplay) -> UploadResult:
        """Perform the actual upload of ``request``.

        Transport failures become an :class:`UploadResult`. An :class:`OSError`
        from reading the file itself, such as the file being removed after it
        was selected, propagates to the caller.
        """
        tracker = ProgressTracker(display, request.file.size)
        logger.log_upload_start(request.file.name, request.file.size, request.target_path)

        try:
            # The deadline covers the whole transfer, not single reads or writes
            result = await asyncio.wait_for(
                self._send(request, tracker),
                timeout=request.timeout_seconds
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            result = UploadResult(
                status=UploadStatus.TIMEOUT,
                error=f"Upload timed out after {request.timeout_ms} ms"
            )
        except httpx.TransportError as e:
            result = UploadResult(status=UploadStatus.NETWORK_ERROR, error=str(e) or type(e).__name__)

        logger.log_upload_result(request.file.name, result)
        return result

    async def _send(self, request: UploadRequest, tracker: ProgressTracker) -> UploadResult:
        timeout = httpx.Timeout(request.timeout_seconds)
        async with httpx.AsyncClient(transport=self.transport, timeout=timeout) as client:
            with open(request.file.path, 'rb') as f:
                files = {self.config.field_name: (request.file.name, f, UPLOAD_CONTENT_TYPE)}
                multipart = client.build_request('POST', request.target_path, files=files)
                total = int(multipart.headers['Content-Length'])

                http_request = client.build_request(
                    'POST',
                    request.target_path,
                    headers=multipart.headers,
                    content=self._monitor(multipart.stream, total, tracker),
                )
                response = await client.send(http_request)

        if response.is_success:
            return UploadResult(
                status=UploadStatus.SUCCESS,
                status_code=response.status_code,
                body=response.text
            )
        return UploadResult(
            status=UploadStatus.SERVER_REJECTED,
            status_code=response.status_code,
            body=response.text,
            error=f"HTTP {response.status_code} {response.reason_phrase}"
        )

    @staticmethod
    async def _monitor(stream, total: int, tracker: ProgressTracker) -> AsyncIterator[bytes]:
        """Pass the body through, notifying ``tracker`` after each chunk is sent."""
        loaded = 0
        async for chunk in stream:
            yield chunk
            loaded += len(chunk)
            tracker.on_progress(ProgressEvent(loaded=loaded, total=total))
