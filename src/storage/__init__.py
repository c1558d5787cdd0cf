"""Object store access for saved documents.

This package wraps the S3 client used to read the HTML that the editor
saves for each user, translating boto3 failures into typed errors.
"""

from .errors import StorageError, ObjectNotFoundError, StorageAccessError
from .object_store import ObjectStore

__all__ = [
    "ObjectStore",
    "StorageError",
    "ObjectNotFoundError",
    "StorageAccessError",
]
