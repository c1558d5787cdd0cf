"""PDF rendering through a headless Chromium.

The HTML is handed to Playwright unchanged; the block converter is not
involved. Each call launches and closes its own browser.
"""

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .errors import RenderError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_RENDER_TIMEOUT_MS = 30000


class PdfRenderer:
    """Renders HTML into fixed-layout PDF pages.

    Attributes:
        page_format: Paper format understood by Chromium (A4, Letter, ...)
        timeout_ms: Upper bound for loading the content and printing it
        headless: Launch the browser without a window
    """

    def __init__(
        self,
        page_format: str = DEFAULT_PAGE_FORMAT,
        timeout_ms: int = DEFAULT_RENDER_TIMEOUT_MS,
        headless: bool = True,
    ):
        self.page_format = page_format
        self.timeout_ms = timeout_ms
        self.headless = headless

    def render(self, html: str) -> bytes:
        """Render an HTML string to PDF bytes.

        Args:
            html: Complete HTML document or fragment

        Returns:
            PDF file content

        Raises:
            RenderError: If the browser fails, times out, or returns nothing
        """
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=self.headless)
                try:
                    page = browser.new_page()
                    page.set_default_timeout(self.timeout_ms)
                    page.set_content(html, wait_until="networkidle", timeout=self.timeout_ms)
                    pdf_bytes = page.pdf(format=self.page_format, print_background=True)
                finally:
                    browser.close()
        except PlaywrightError as e:
            logger.error(f"Headless browser failed to render PDF: {e}")
            raise RenderError(str(e), timeout_ms=self.timeout_ms) from e

        if not pdf_bytes:
            raise RenderError("browser returned an empty PDF")

        logger.debug(f"Rendered PDF ({self.page_format}), {len(pdf_bytes)} bytes")
        return pdf_bytes
