"""Document download pipeline.

Fetches saved HTML for a user and returns it as .docx or PDF bytes.
"""

from .document_builder import DocumentBuilder
from .download_service import DownloadService, parse_format
from .errors import (
    DownloadError,
    InvalidDownloadRequestError,
    AccessDeniedError,
    DocumentDownloadError,
)
from .models import DocumentFormat, DownloadedDocument

__all__ = [
    'DocumentBuilder',
    'DownloadService',
    'parse_format',
    'DocumentFormat',
    'DownloadedDocument',
    'DownloadError',
    'InvalidDownloadRequestError',
    'AccessDeniedError',
    'DocumentDownloadError',
]
