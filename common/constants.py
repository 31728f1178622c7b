"""
Shared constants for the MeTube upload client.

This module contains the fixed values of the upload endpoint contract.
"""

# Network Configuration
DEFAULT_LISTEN_ADDRESS = '127.0.0.1'
DEFAULT_LISTEN_PORT = 8080
DEFAULT_PAGE_URL = f'http://{DEFAULT_LISTEN_ADDRESS}:{DEFAULT_LISTEN_PORT}/upload/'

# Upload Endpoint
UPLOAD_PATH = '/upload/'
UPLOAD_PAGE_PATTERN = r'^(/.*)?/upload/?$'
UPLOAD_FIELD_NAME = 'FileToUpload'
UPLOAD_CONTENT_TYPE = 'application/octet-stream'

# Timeouts
UPLOAD_TIMEOUT_MS = 45000  # whole transfer, independent of file size

# Progress Display
PROGRESS_COMPLETE = 100

# Configuration
DEFAULT_CONFIG_PATH = '/etc/metube-upload.toml'
CONFIG_SECTION = 'upload'
ENV_UPLOAD_URL = 'METUBE_UPLOAD_URL'
ENV_SERVE_PATH = 'METUBE_SERVE_PATH'

# Logging
LOGGER_NAME = 'metube_upload'


# Upload Outcomes
class UploadStatus:
    SUCCESS = 'success'
    NETWORK_ERROR = 'network_error'
    TIMEOUT = 'timeout'
    SERVER_REJECTED = 'server_rejected'
