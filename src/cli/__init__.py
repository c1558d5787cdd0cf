"""Command-line interface for resume-docs.

This package provides the `resume-docs` CLI tool that converts saved
resume and cover-letter HTML (local files or stored objects) into .docx
or PDF files, with progress indication and error handling.
"""

from .convert_command import ConvertCommand
from .models import ExitCode
from .errors import CLIError, InputFileError, OutputFileError

__all__ = [
    'ConvertCommand',
    'ExitCode',
    'CLIError',
    'InputFileError',
    'OutputFileError',
]
