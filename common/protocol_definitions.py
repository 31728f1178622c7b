"""
Protocol definitions for the MeTube upload client.

This module defines the data structures exchanged with the upload endpoint
and the rules that map a page location onto the endpoint the client posts to.
"""

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from common.constants import (
    UPLOAD_PATH, UPLOAD_PAGE_PATTERN, UPLOAD_TIMEOUT_MS, UploadStatus
)

_UPLOAD_PAGE_RE = re.compile(UPLOAD_PAGE_PATTERN, re.IGNORECASE)


@dataclass
class SelectedFile:
    """A file picked in the file-selection control."""
    path: Path
    name: str
    size: int

    @classmethod
    def from_path(cls, path) -> 'SelectedFile':
        path = Path(path)
        return cls(path=path, name=path.name, size=path.stat().st_size)


@dataclass
class UploadRequest:
    """One submission; lives only for the duration of one transfer."""
    file: SelectedFile
    target_path: str
    timeout_ms: int = UPLOAD_TIMEOUT_MS

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


@dataclass
class ProgressEvent:
    """Transport-level progress notification.

    ``loaded`` is the number of body bytes sent so far, ``total`` the number
    of body bytes expected, multipart framing included.
    """
    loaded: int
    total: int


@dataclass
class UploadResult:
    """Outcome of one submission."""
    status: str
    status_code: Optional[int] = None
    body: str = ''
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == UploadStatus.SUCCESS


def detect_serve_prefix(page_path: str) -> str:
    """Return the path the application is mounted under.

    ``/foo/upload/`` yields ``/foo``; a path that does not end in ``/upload``
    yields an empty prefix.
    """
    match = _UPLOAD_PAGE_RE.match(page_path or '')
    if match is None or match.group(1) is None:
        return ''
    return match.group(1)


def normalize_serve_path(serve_path: Optional[str]) -> str:
    """Turn a configured mount path into a prefix usable for URL building."""
    if not serve_path or serve_path == '/':
        return ''
    if not serve_path.startswith('/'):
        serve_path = '/' + serve_path
    return serve_path.rstrip('/')


def upload_target(prefix: str) -> str:
    """Create the path the file is posted to."""
    return prefix + UPLOAD_PATH


def resolve_upload_url(page_url: str, serve_path: Optional[str] = None) -> str:
    """Resolve the absolute upload URL for a page URL.

    An explicit ``serve_path`` takes precedence over detection from the
    page path.
    """
    url = httpx.URL(page_url)
    if serve_path is not None:
        prefix = normalize_serve_path(serve_path)
    else:
        prefix = detect_serve_prefix(url.path)
    return str(url.join(upload_target(prefix)))


def progress_percent(loaded: int, size: int) -> int:
    """Percentage of ``size`` covered by ``loaded``, halves rounded up."""
    return int(math.floor(loaded / size * 100 + 0.5))


def create_upload_request(file: SelectedFile, target_path: str,
                          timeout_ms: int = UPLOAD_TIMEOUT_MS) -> UploadRequest:
    """Create an upload request."""
    return UploadRequest(file=file, target_path=target_path, timeout_ms=timeout_ms)
