"""Data models for configuration."""

from dataclasses import dataclass
from typing import Optional

from src.document_converter.html_converter import DEFAULT_LINK_COLOR
from src.document_converter.pdf_renderer import DEFAULT_PAGE_FORMAT, DEFAULT_RENDER_TIMEOUT_MS


@dataclass
class Settings:
    """Environment settings for object store access.

    Attributes:
        bucket: S3 bucket holding user documents (S3_BUCKET_NAME)
        region: AWS region for the S3 client (AWS_REGION), None for the default
        style_config_path: Optional YAML style file (RESUME_DOCS_CONFIG)
    """
    bucket: str
    region: Optional[str] = None
    style_config_path: Optional[str] = None


@dataclass
class DocumentStyleConfig:
    """Output options for generated documents.

    Attributes:
        link_color: RGB hex colour for hyperlinks in .docx output
        page_format: Paper format for PDF output
        render_timeout_ms: Timeout for the headless browser
        filename_stem: Base name of the downloaded file (without extension)
    """
    link_color: str = DEFAULT_LINK_COLOR
    page_format: str = DEFAULT_PAGE_FORMAT
    render_timeout_ms: int = DEFAULT_RENDER_TIMEOUT_MS
    filename_stem: str = "document"
