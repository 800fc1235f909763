"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSourceSettings:
    """Where schema definition files are read from."""

    directories: tuple[Path, ...]
    patterns: tuple[str, ...]
    strict: bool


@dataclass(frozen=True)
class LoggingSettings:
    """Log output configuration."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schemas: SchemaSourceSettings
    logging: LoggingSettings
