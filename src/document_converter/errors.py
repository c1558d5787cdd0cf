"""Typed exception hierarchy for document conversion errors.

This module defines the base exception for the whole resume-docs package
and the errors raised while converting HTML into documents. All exceptions
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class ResumeDocsError(Exception):
    """Base exception for all resume-docs errors.

    Use this to catch any application-level error from the package.
    """
    pass


class ConversionError(ResumeDocsError):
    """Base exception for document conversion errors."""
    pass


class DocumentParseError(ConversionError):
    """Raised when the HTML parser fails structurally.

    Malformed-but-parseable markup never raises this; only a failure of the
    parser itself does.
    """

    def __init__(self, reason: str):
        super().__init__(f"Failed to parse HTML document: {reason}")
        self.reason = reason


class DocumentWriteError(ConversionError):
    """Raised when serializing blocks into a .docx byte stream fails."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to write .docx document: {reason}")
        self.reason = reason


class RenderError(ConversionError):
    """Raised when the headless browser fails to render a PDF."""

    def __init__(self, reason: str, timeout_ms: Optional[int] = None):
        message = f"PDF rendering failed: {reason}"
        if timeout_ms is not None:
            message += f" (timeout {timeout_ms}ms)"
        super().__init__(message)
        self.reason = reason
        self.timeout_ms = timeout_ms
