"""Environment settings loading.

Settings are read from environment variables, with a .env file loaded
through python-dotenv. Values are never cached or logged.
"""

import os

from dotenv import load_dotenv

from .errors import ConfigError
from .models import Settings


class SettingsLoader:
    """Loads and validates settings from environment variables.

    Required environment variables:
        S3_BUCKET_NAME: Bucket holding user documents

    Optional environment variables:
        AWS_REGION: Region for the S3 client
        RESUME_DOCS_CONFIG: Path to the YAML document style file

    Example:
        >>> settings = SettingsLoader().load()
        >>> print(f"Reading from {settings.bucket}")
    """

    def __init__(self):
        """Initialize the loader by loading environment variables from .env file."""
        load_dotenv()

    def load(self) -> Settings:
        """Build Settings from the environment.

        Returns:
            Settings with bucket, region and style config path

        Raises:
            ConfigError: If S3_BUCKET_NAME is missing or empty
        """
        bucket = os.getenv('S3_BUCKET_NAME')
        if not bucket or not bucket.strip():
            raise ConfigError("S3_BUCKET_NAME is not set", 'S3_BUCKET_NAME')

        region = os.getenv('AWS_REGION') or None
        style_config_path = os.getenv('RESUME_DOCS_CONFIG') or None

        return Settings(
            bucket=bucket.strip(),
            region=region,
            style_config_path=style_config_path,
        )
