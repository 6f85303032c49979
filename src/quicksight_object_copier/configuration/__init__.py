"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_copy_context
from .runtime_settings import AwsSettings, CopyContext, FileConfiguration

__all__ = [
    "AwsSettings",
    "CopyContext",
    "FileConfiguration",
    "ConfigurationError",
    "load_configuration",
    "resolve_copy_context",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
