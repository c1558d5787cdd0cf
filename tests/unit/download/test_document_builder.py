"""Unit tests for download.document_builder module."""

import io
from unittest.mock import MagicMock

import pytest
from docx import Document

from src.config.models import DocumentStyleConfig
from src.document_converter.docx_writer import DOCX_CONTENT_TYPE
from src.document_converter.errors import DocumentParseError
from src.document_converter.pdf_renderer import PDF_CONTENT_TYPE
from src.download.document_builder import DocumentBuilder
from src.download.models import DocumentFormat, DownloadedDocument


@pytest.fixture
def renderer():
    """Mock PdfRenderer so no browser is launched."""
    renderer = MagicMock()
    renderer.render.return_value = b"%PDF-1.7"
    return renderer


class TestDocumentBuilder:
    """Test cases for DocumentBuilder."""

    def test_build_docx(self, renderer, resume_html):
        """docx output goes through the converter and writer."""
        builder = DocumentBuilder(renderer=renderer)

        document = builder.build(resume_html, DocumentFormat.DOCX)

        assert document.content_type == DOCX_CONTENT_TYPE
        assert document.filename == "document.docx"
        docx = Document(io.BytesIO(document.content))
        assert docx.paragraphs[0].text == "Jane Doe"
        renderer.render.assert_not_called()

    def test_build_pdf_uses_raw_html(self, renderer, resume_html):
        """PDF output hands the HTML unchanged to the renderer."""
        converter = MagicMock()
        builder = DocumentBuilder(converter=converter, renderer=renderer)

        document = builder.build(resume_html, DocumentFormat.PDF)

        assert document.content == b"%PDF-1.7"
        assert document.content_type == PDF_CONTENT_TYPE
        assert document.filename == "document.pdf"
        renderer.render.assert_called_once_with(resume_html)
        converter.convert.assert_not_called()

    def test_filename_stem(self, renderer):
        """The filename stem is configurable."""
        builder = DocumentBuilder(renderer=renderer, filename_stem="Jane_Doe")

        assert builder.build("<p>x</p>", DocumentFormat.PDF).filename == "Jane_Doe.pdf"

    def test_conversion_errors_propagate(self, renderer):
        """Conversion errors are raised to the caller unchanged."""
        converter = MagicMock()
        converter.convert.side_effect = DocumentParseError("broken")
        builder = DocumentBuilder(converter=converter, renderer=renderer)

        with pytest.raises(DocumentParseError):
            builder.build("<p>x</p>", DocumentFormat.DOCX)

    def test_from_style(self):
        """from_style configures each component from the style options."""
        style = DocumentStyleConfig(link_color="AA0000", page_format="A5",
                                    render_timeout_ms=1234, filename_stem="letter")

        builder = DocumentBuilder.from_style(style)

        assert builder.converter.link_color == "AA0000"
        assert builder.renderer.page_format == "A5"
        assert builder.renderer.timeout_ms == 1234
        assert builder.filename_stem == "letter"

    def test_from_style_defaults(self):
        """Without a style the defaults are used."""
        builder = DocumentBuilder.from_style()

        assert builder.filename_stem == "document"
        assert builder.renderer.page_format == "A4"


class TestDownloadedDocument:
    """Test cases for DownloadedDocument and DocumentFormat."""

    def test_content_disposition(self):
        document = DownloadedDocument(content=b"", content_type=PDF_CONTENT_TYPE, filename="document.pdf")

        assert document.content_disposition == 'attachment; filename="document.pdf"'

    def test_format_properties(self):
        assert DocumentFormat.DOCX.content_type == DOCX_CONTENT_TYPE
        assert DocumentFormat.PDF.content_type == "application/pdf"
        assert DocumentFormat.DOCX.extension == "docx"
