"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_registry, configure_logging, load_configuration
from .runtime_settings import Configuration, LoggingSettings, SchemaSourceSettings

__all__ = [
    "Configuration",
    "LoggingSettings",
    "SchemaSourceSettings",
    "ConfigurationError",
    "build_registry",
    "configure_logging",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
