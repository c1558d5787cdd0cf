"""Download pipeline for stored resume and cover-letter documents.

Validates a download request, checks that the key belongs to the user,
fetches the saved HTML from the object store and hands it to the
DocumentBuilder for .docx or PDF output.
"""

import logging
from typing import Optional, Union

from src.config.models import DocumentStyleConfig, Settings
from src.document_converter.errors import ConversionError
from src.storage.errors import ObjectNotFoundError, StorageError
from src.storage.object_store import ObjectStore

from .document_builder import DocumentBuilder
from .errors import AccessDeniedError, DocumentDownloadError, InvalidDownloadRequestError
from .models import DocumentFormat, DownloadedDocument

logger = logging.getLogger(__name__)

USER_KEY_PREFIX = "users/{user_id}/"


def parse_format(document_format: Union[str, DocumentFormat, None]) -> DocumentFormat:
    """Parse a requested format name.

    Raises:
        InvalidDownloadRequestError: If the format is not docx or pdf
    """
    if isinstance(document_format, DocumentFormat):
        return document_format
    try:
        return DocumentFormat(str(document_format).strip().lower())
    except ValueError:
        raise InvalidDownloadRequestError("Invalid format")


class DownloadService:
    """Produces downloadable documents from stored HTML.

    Attributes:
        store: Object store holding the saved HTML
        builder: Converts HTML into the requested format

    Example:
        >>> service = DownloadService.from_settings(settings)
        >>> doc = service.download("u1", "users/u1/resume.html", "docx")
        >>> doc.filename
        'document.docx'
    """

    def __init__(self, store: ObjectStore, builder: Optional[DocumentBuilder] = None):
        self.store = store
        self.builder = builder or DocumentBuilder()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        style: Optional[DocumentStyleConfig] = None,
    ) -> "DownloadService":
        """Build a service wired to S3 and configured with the style options."""
        return cls(
            store=ObjectStore(settings.bucket, region=settings.region),
            builder=DocumentBuilder.from_style(style),
        )

    def download(
        self,
        user_id: str,
        key: Optional[str],
        document_format: Union[str, DocumentFormat, None],
    ) -> DownloadedDocument:
        """Fetch a stored document and return it in the requested format.

        Args:
            user_id: Authenticated user requesting the download
            key: Object key of the saved HTML
            document_format: "docx" or "pdf"

        Returns:
            DownloadedDocument with bytes, content type and filename

        Raises:
            InvalidDownloadRequestError: Missing key/format or unknown format
            AccessDeniedError: Key is outside the user's prefix
            ObjectNotFoundError: No object stored under the key
            DocumentDownloadError: Fetching, conversion or rendering failed
        """
        if not key or not document_format:
            raise InvalidDownloadRequestError("Missing key or format")

        fmt = parse_format(document_format)
        html = self.fetch_html(user_id, key)

        try:
            return self.builder.build(html, fmt)
        except ConversionError as e:
            logger.error(f"Error downloading document {key}: {e}")
            raise DocumentDownloadError(key) from e

    def fetch_html(self, user_id: str, key: str) -> str:
        """Fetch the saved HTML for a key owned by the user.

        Raises:
            AccessDeniedError: Key is outside the user's prefix
            ObjectNotFoundError: No object stored under the key
            DocumentDownloadError: The object store request failed
        """
        if not user_id or not key.startswith(USER_KEY_PREFIX.format(user_id=user_id)):
            logger.warning(f"Access denied: key {key} does not belong to user {user_id}")
            raise AccessDeniedError(user_id, key)

        try:
            return self.store.get_text(key)
        except ObjectNotFoundError:
            raise
        except StorageError as e:
            logger.error(f"Error downloading document {key}: {e}")
            raise DocumentDownloadError(key) from e
