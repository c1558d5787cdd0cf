"""Build downloadable documents from HTML."""

import logging
from typing import Optional

from src.config.models import DocumentStyleConfig
from src.document_converter.docx_writer import DocxWriter
from src.document_converter.html_converter import HtmlConverter
from src.document_converter.pdf_renderer import PdfRenderer

from .models import DocumentFormat, DownloadedDocument

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Turns an HTML string into .docx or PDF bytes.

    .docx goes through the block converter and python-docx; PDF hands the
    raw HTML to the headless browser.
    """

    def __init__(
        self,
        converter: Optional[HtmlConverter] = None,
        writer: Optional[DocxWriter] = None,
        renderer: Optional[PdfRenderer] = None,
        filename_stem: str = "document",
    ):
        self.converter = converter or HtmlConverter()
        self.writer = writer or DocxWriter()
        self.renderer = renderer or PdfRenderer()
        self.filename_stem = filename_stem

    @classmethod
    def from_style(cls, style: Optional[DocumentStyleConfig] = None) -> "DocumentBuilder":
        style = style or DocumentStyleConfig()
        return cls(
            converter=HtmlConverter(link_color=style.link_color),
            renderer=PdfRenderer(page_format=style.page_format, timeout_ms=style.render_timeout_ms),
            filename_stem=style.filename_stem,
        )

    def build(self, html: str, document_format: DocumentFormat) -> DownloadedDocument:
        """Build a document of the given format.

        Raises:
            ConversionError: If parsing, serialization or rendering fails
        """
        if document_format is DocumentFormat.PDF:
            content = self.renderer.render(html)
        else:
            blocks = self.converter.convert(html)
            content = self.writer.write(blocks)

        filename = f"{self.filename_stem}.{document_format.extension}"
        logger.info(f"Built {filename} ({len(content)} bytes)")
        return DownloadedDocument(
            content=content,
            content_type=document_format.content_type,
            filename=filename,
        )
