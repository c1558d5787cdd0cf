"""Configuration for resume-docs.

Environment settings (object store bucket and region) come from the
environment and a .env file; document style options come from YAML.
"""

from .errors import ConfigError
from .models import DocumentStyleConfig, Settings
from .settings import SettingsLoader
from .style_config import StyleConfigLoader

__all__ = [
    'ConfigError',
    'DocumentStyleConfig',
    'Settings',
    'SettingsLoader',
    'StyleConfigLoader',
]
