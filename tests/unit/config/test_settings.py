"""Unit tests for config.settings module."""

from unittest.mock import patch

import pytest

from src.config.errors import ConfigError
from src.config.settings import SettingsLoader


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's .env file out of the tests."""
    with patch("src.config.settings.load_dotenv") as mock_load:
        yield mock_load


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("S3_BUCKET_NAME", "AWS_REGION", "RESUME_DOCS_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsLoader:
    """Test cases for SettingsLoader."""

    def test_loads_dotenv_on_init(self, no_dotenv):
        """The loader should read a .env file when created."""
        SettingsLoader()

        no_dotenv.assert_called_once()

    def test_load_all_values(self, clean_env):
        """All variables should be copied into Settings."""
        clean_env.setenv("S3_BUCKET_NAME", "resume-bucket")
        clean_env.setenv("AWS_REGION", "us-east-2")
        clean_env.setenv("RESUME_DOCS_CONFIG", "/etc/resume-docs.yaml")

        settings = SettingsLoader().load()

        assert settings.bucket == "resume-bucket"
        assert settings.region == "us-east-2"
        assert settings.style_config_path == "/etc/resume-docs.yaml"

    def test_optional_values_default_to_none(self, clean_env):
        """Region and style path are optional."""
        clean_env.setenv("S3_BUCKET_NAME", "resume-bucket")

        settings = SettingsLoader().load()

        assert settings.region is None
        assert settings.style_config_path is None

    def test_bucket_is_stripped(self, clean_env):
        """Surrounding whitespace in the bucket name is removed."""
        clean_env.setenv("S3_BUCKET_NAME", "  resume-bucket \n")

        assert SettingsLoader().load().bucket == "resume-bucket"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_bucket_raises(self, clean_env, value):
        """A missing or blank bucket name is a configuration error."""
        if value is not None:
            clean_env.setenv("S3_BUCKET_NAME", value)

        with pytest.raises(ConfigError) as exc_info:
            SettingsLoader().load()

        assert exc_info.value.config_field == "S3_BUCKET_NAME"
        assert "S3_BUCKET_NAME is not set" in str(exc_info.value)
