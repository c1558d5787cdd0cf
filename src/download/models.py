"""Data models for document downloads."""

from dataclasses import dataclass
from enum import Enum

from src.document_converter.docx_writer import DOCX_CONTENT_TYPE
from src.document_converter.pdf_renderer import PDF_CONTENT_TYPE


class DocumentFormat(Enum):
    """Output formats a stored document can be downloaded as."""

    DOCX = "docx"
    PDF = "pdf"

    @property
    def content_type(self) -> str:
        if self is DocumentFormat.DOCX:
            return DOCX_CONTENT_TYPE
        return PDF_CONTENT_TYPE

    @property
    def extension(self) -> str:
        return self.value


@dataclass
class DownloadedDocument:
    """A generated document ready to be returned to the user.

    Attributes:
        content: File bytes
        content_type: MIME type matching the format
        filename: Download filename including extension
    """
    content: bytes
    content_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'
