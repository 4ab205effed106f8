"""Module de configuration."""

from linux_php_env.config.loader import ConfigLoader, FileConfigLoader
from linux_php_env.config.settings import (
    DEFAULT_EXTENSIONS,
    EnvironmentSettings,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "DEFAULT_EXTENSIONS",
    "EnvironmentSettings",
    "load_settings",
]
