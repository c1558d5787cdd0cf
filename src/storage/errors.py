"""Typed exception hierarchy for object store errors.

All exceptions inherit from StorageError so callers can catch any
storage failure in one place.
"""

from typing import Optional

from src.document_converter.errors import ResumeDocsError


class StorageError(ResumeDocsError):
    """Base exception for all object store errors."""
    pass


class ObjectNotFoundError(StorageError):
    """Raised when the requested object does not exist."""

    def __init__(self, bucket: str, key: str):
        super().__init__(f"Object {key} not found in bucket {bucket}")
        self.bucket = bucket
        self.key = key


class StorageAccessError(StorageError):
    """Raised when reading from the object store fails."""

    def __init__(self, key: str, reason: Optional[str] = None):
        message = f"Failed to read object {key}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.key = key
        self.reason = reason
