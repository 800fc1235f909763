"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_bridge.schema_management import SchemaLoadError, SchemaRegistry, load_schema_directory
from schema_bridge.schema_management.schema_loader import DEFAULT_DEFINITION_PATTERNS

from .runtime_settings import Configuration, LoggingSettings, SchemaSourceSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schemas = _parse_schemas_section(parsed.get("schemas"), path.parent)
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(path=path, schemas=schemas, logging=logging_settings)


def build_registry(configuration: Configuration) -> SchemaRegistry:
    """Create a registry populated from every configured schema directory."""
    registry = SchemaRegistry()
    for directory in configuration.schemas.directories:
        try:
            load_schema_directory(
                directory,
                registry,
                patterns=configuration.schemas.patterns,
                strict=configuration.schemas.strict,
            )
        except SchemaLoadError as exc:
            raise ConfigurationError(str(exc)) from exc
    return registry


def _parse_schemas_section(value: Any, base_path: Path) -> SchemaSourceSettings:
    section = _require_mapping(value, "schemas")
    raw_directories = section.get("directories")
    if isinstance(raw_directories, str):
        raw_directories = [raw_directories]
    if not isinstance(raw_directories, Sequence) or not raw_directories:
        raise ConfigurationError("schemas.directories must list at least one folder.")
    directories = tuple(
        _resolve_path(base_path, _require_non_empty_string(item, "schemas.directories entry"))
        for item in raw_directories
    )

    raw_patterns = section.get("patterns")
    if raw_patterns is None:
        patterns = DEFAULT_DEFINITION_PATTERNS
    else:
        if isinstance(raw_patterns, str) or not isinstance(raw_patterns, Sequence):
            raise ConfigurationError("schemas.patterns must be a list of glob patterns.")
        patterns = tuple(
            _require_non_empty_string(item, "schemas.patterns entry") for item in raw_patterns
        )
        if not patterns:
            raise ConfigurationError("schemas.patterns must not be empty.")

    strict = section.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigurationError("schemas.strict must be a boolean.")

    return SchemaSourceSettings(directories=directories, patterns=patterns, strict=strict)


def _parse_logging_section(value: Any) -> LoggingSettings:
    if value is None:
        return LoggingSettings(level="WARNING")
    section = _require_mapping(value, "logging")
    level = _require_non_empty_string(section.get("level", "WARNING"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"logging.level must be one of {', '.join(_LOG_LEVELS)}; got '{level}'."
        )
    return LoggingSettings(level=level)


def configure_logging(level: str) -> None:
    """Apply a log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
