"""Document conversion for stored resume and cover-letter HTML.

This package converts editor HTML into a block model (paragraphs, headings
and list items made of styled runs), serializes it as .docx with python-docx,
and renders PDF pages through a headless browser.
"""

from .docx_writer import DOCX_CONTENT_TYPE, DocxWriter
from .errors import (
    ResumeDocsError,
    ConversionError,
    DocumentParseError,
    DocumentWriteError,
    RenderError,
)
from .html_converter import DEFAULT_LINK_COLOR, HtmlConverter
from .models import (
    Block,
    Heading,
    ListContext,
    ListItem,
    ListKind,
    Paragraph,
    TextRun,
    TextRunStyle,
    join_runs,
    number_list_items,
)
from .pdf_renderer import PDF_CONTENT_TYPE, PdfRenderer

__all__ = [
    'DOCX_CONTENT_TYPE',
    'PDF_CONTENT_TYPE',
    'DEFAULT_LINK_COLOR',
    'HtmlConverter',
    'DocxWriter',
    'PdfRenderer',
    'Block',
    'Heading',
    'ListContext',
    'ListItem',
    'ListKind',
    'Paragraph',
    'TextRun',
    'TextRunStyle',
    'join_runs',
    'number_list_items',
    'ResumeDocsError',
    'ConversionError',
    'DocumentParseError',
    'DocumentWriteError',
    'RenderError',
]
