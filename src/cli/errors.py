"""Typed exception hierarchy for CLI-related errors."""

from typing import Optional

from src.document_converter.errors import ResumeDocsError


class CLIError(ResumeDocsError):
    """Base exception for all CLI-related errors."""
    pass


class InputFileError(CLIError):
    """Raised when the HTML input file cannot be read."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Cannot read input file {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class OutputFileError(CLIError):
    """Raised when the generated document cannot be written."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Cannot write output file {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
