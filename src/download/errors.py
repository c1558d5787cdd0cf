"""Typed exception hierarchy for document download errors.

Each error carries the HTTP status the download endpoint answers with.
"""

from src.document_converter.errors import ResumeDocsError


class DownloadError(ResumeDocsError):
    """Base exception for all download errors."""

    status_code = 500


class InvalidDownloadRequestError(DownloadError):
    """Raised when the request is missing fields or names an unknown format."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)


class AccessDeniedError(DownloadError):
    """Raised when a key does not belong to the requesting user."""

    status_code = 403

    def __init__(self, user_id: str, key: str):
        super().__init__("Access denied")
        self.user_id = user_id
        self.key = key


class DocumentDownloadError(DownloadError):
    """Raised when fetching, converting or rendering the document fails.

    The message stays generic; the underlying cause is chained.
    """

    status_code = 500

    def __init__(self, key: str):
        super().__init__("Failed to download document")
        self.key = key
