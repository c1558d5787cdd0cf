"""Test fixtures for document conversion tests.

This module provides sample editor HTML used across converter, writer,
service and CLI tests.
"""

from .sample_html import RESUME_HTML, COVER_LETTER_HTML

__all__ = ['RESUME_HTML', 'COVER_LETTER_HTML']
