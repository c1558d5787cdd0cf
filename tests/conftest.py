"""Root pytest configuration for all tests."""

import logging

import pytest

from tests.fixtures.sample_html import RESUME_HTML

# botocore logs retry and credential lookups at DEBUG/INFO; keep test output quiet.
logging.getLogger("botocore").setLevel(logging.WARNING)


@pytest.fixture
def resume_html():
    """Editor HTML for a short resume."""
    return RESUME_HTML


@pytest.fixture
def resume_file(tmp_path):
    """Resume HTML saved to a temporary file."""
    path = tmp_path / "resume.html"
    path.write_text(RESUME_HTML, encoding="utf-8")
    return path
