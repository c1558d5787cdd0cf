"""Unit tests for the exception hierarchy."""

import pytest

from src.cli.errors import CLIError, InputFileError, OutputFileError
from src.config.errors import ConfigError
from src.document_converter.errors import (
    ConversionError,
    DocumentParseError,
    DocumentWriteError,
    RenderError,
    ResumeDocsError,
)
from src.download.errors import (
    AccessDeniedError,
    DocumentDownloadError,
    DownloadError,
    InvalidDownloadRequestError,
)
from src.storage.errors import ObjectNotFoundError, StorageAccessError, StorageError


class TestHierarchy:
    """All errors share the ResumeDocsError base."""

    @pytest.mark.parametrize("error", [
        DocumentParseError("x"),
        DocumentWriteError("x"),
        RenderError("x"),
        ObjectNotFoundError("b", "k"),
        StorageAccessError("k"),
        ConfigError("x"),
        InvalidDownloadRequestError("x"),
        AccessDeniedError("u", "k"),
        DocumentDownloadError("k"),
        InputFileError("f"),
        OutputFileError("f"),
    ])
    def test_base_class(self, error):
        assert isinstance(error, ResumeDocsError)

    def test_groups(self):
        assert issubclass(RenderError, ConversionError)
        assert issubclass(DocumentParseError, ConversionError)
        assert issubclass(ObjectNotFoundError, StorageError)
        assert issubclass(AccessDeniedError, DownloadError)
        assert issubclass(InputFileError, CLIError)


class TestMessages:
    """Error messages carry their context."""

    def test_parse_error(self):
        assert str(DocumentParseError("bad")) == "Failed to parse HTML document: bad"

    def test_render_error_with_timeout(self):
        error = RenderError("Timeout exceeded", timeout_ms=30000)

        assert str(error) == "PDF rendering failed: Timeout exceeded (timeout 30000ms)"
        assert error.timeout_ms == 30000

    def test_storage_messages(self):
        assert str(ObjectNotFoundError("bucket", "users/u1/r.html")) == \
            "Object users/u1/r.html not found in bucket bucket"
        assert str(StorageAccessError("k", "denied")) == "Failed to read object k: denied"
        assert str(StorageAccessError("k")) == "Failed to read object k"

    def test_config_messages(self):
        assert str(ConfigError("bad value", "page_format")) == \
            "Configuration error in field 'page_format': bad value"
        assert str(ConfigError("bad file")) == "Configuration error: bad file"

    @pytest.mark.parametrize("error,status", [
        (InvalidDownloadRequestError("Invalid format"), 400),
        (AccessDeniedError("u", "k"), 403),
        (DocumentDownloadError("k"), 500),
    ])
    def test_download_status_codes(self, error, status):
        assert error.status_code == status

    def test_input_file_message(self):
        assert str(InputFileError("r.html", "file not found")) == \
            "Cannot read input file r.html: file not found"
