"""YAML document style configuration loading and validation.

Configuration file structure:
    link_color: "0563C1"
    page_format: "A4"
    render_timeout_ms: 30000
    filename_stem: "document"

All fields are optional; a missing file means all defaults.
"""

import re
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .models import DocumentStyleConfig


class StyleConfigLoader:
    """Handles document style file loading and validation."""

    DEFAULT_CONFIG_PATH = '.resume-docs/config.yaml'

    KNOWN_FIELDS = {'link_color', 'page_format', 'render_timeout_ms', 'filename_stem'}

    PAGE_FORMATS = {'Letter', 'Legal', 'Tabloid', 'Ledger', 'A0', 'A1', 'A2', 'A3', 'A4', 'A5', 'A6'}

    HEX_COLOR_PATTERN = re.compile(r'^[0-9A-Fa-f]{6}$')
    FILENAME_STEM_PATTERN = re.compile(r'^[\w.-]+$')

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> DocumentStyleConfig:
        """Load style configuration from a YAML file.

        Args:
            config_path: Path to the YAML file (default: .resume-docs/config.yaml)

        Returns:
            DocumentStyleConfig; defaults when the file does not exist

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        path = config_path or cls.DEFAULT_CONFIG_PATH

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return DocumentStyleConfig()
        except PermissionError:
            raise ConfigError(f"Permission denied reading {path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if not content.strip():
            return DocumentStyleConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return DocumentStyleConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> DocumentStyleConfig:
        """Validate fields and build DocumentStyleConfig.

        Raises:
            ConfigError: If a field is unknown or has an invalid value
        """
        unknown = set(config_dict) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown field(s): {', '.join(sorted(map(str, unknown)))}")

        config = DocumentStyleConfig()

        if 'link_color' in config_dict:
            link_color = config_dict['link_color']
            if not isinstance(link_color, str):
                raise ConfigError(
                    f"Must be a string, got {type(link_color).__name__}",
                    'link_color'
                )
            link_color = link_color.strip().lstrip('#')
            if not cls.HEX_COLOR_PATTERN.match(link_color):
                raise ConfigError(
                    f"Must be a 6-digit hex colour, got '{config_dict['link_color']}'",
                    'link_color'
                )
            config.link_color = link_color.upper()

        if 'page_format' in config_dict:
            page_format = config_dict['page_format']
            if not isinstance(page_format, str) or page_format not in cls.PAGE_FORMATS:
                raise ConfigError(
                    f"Must be one of {', '.join(sorted(cls.PAGE_FORMATS))}, got '{page_format}'",
                    'page_format'
                )
            config.page_format = page_format

        if 'render_timeout_ms' in config_dict:
            timeout = config_dict['render_timeout_ms']
            # bool is a subclass of int
            if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout <= 0:
                raise ConfigError(
                    f"Must be a positive integer, got {timeout!r}",
                    'render_timeout_ms'
                )
            config.render_timeout_ms = timeout

        if 'filename_stem' in config_dict:
            stem = config_dict['filename_stem']
            if not isinstance(stem, str) or not cls.FILENAME_STEM_PATTERN.match(stem):
                raise ConfigError(
                    f"Must contain only letters, digits, '.', '_' or '-', got {stem!r}",
                    'filename_stem'
                )
            config.filename_stem = stem

        return config
