"""Pytest configuration and fixtures for integration tests.

Provides a stubbed S3 client (botocore Stubber) for the storage pipeline
and a check for an installed Chromium for real PDF rendering.
"""

import boto3
import pytest
from botocore.stub import Stubber
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright


@pytest.fixture
def s3_client():
    """S3 client with dummy credentials; every call must be stubbed."""
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def s3_stubber(s3_client):
    """Activate a Stubber on the client and verify all responses were used."""
    with Stubber(s3_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture(scope="session")
def chromium_available() -> None:
    """Skip the test when Playwright's Chromium is not installed."""
    try:
        with sync_playwright() as p:
            p.chromium.launch(headless=True).close()
    except PlaywrightError as e:
        pytest.skip(f"Chromium not available: {e}")
