"""Schema definition loading from a directory of JSON/YAML files."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_bridge.bridge_errors import SchemaBridgeError

from .schema_registry import SchemaRegistry

_LOGGER = logging.getLogger(__name__)

DEFAULT_DEFINITION_PATTERNS = ("*.json", "*.yaml", "*.yml")
META_SCHEMA_SUFFIX = "-schema.json"


class SchemaLoadError(Exception):
    """Raised when schema definition files cannot be loaded."""


def load_schema_directory(
    directory: Path | str,
    registry: SchemaRegistry,
    *,
    patterns: Sequence[str] = DEFAULT_DEFINITION_PATTERNS,
    strict: bool = False,
) -> tuple[str, ...]:
    """Register every definition file found in directory.

    Files ending in ``-schema.json`` describe the definition format itself and
    are skipped. Broken files are logged and skipped unless ``strict`` is set.

    Returns:
      Type keys registered from this directory, in file order.

    Raises:
      SchemaLoadError: If the directory is missing, or a file is invalid in
        strict mode.
    """
    folder = Path(directory)
    if not folder.is_dir():
        raise SchemaLoadError(f"Schema definitions folder not found: {folder}")

    definition_files = _collect_definition_files(folder, patterns)
    if not definition_files:
        _LOGGER.warning("No schema definition files found in folder: %s", folder)
        return ()

    loaded: list[str] = []
    for path in definition_files:
        try:
            schema = registry.define(load_definition_file(path))
        except (SchemaLoadError, SchemaBridgeError) as exc:
            if strict:
                raise SchemaLoadError(f"Failed to load schema definition {path.name}: {exc}") from exc
            _LOGGER.warning("Failed to load schema definition %s: %s", path.name, exc)
            continue
        _LOGGER.debug("Registered schema %s from %s", schema.type_key, path.name)
        loaded.append(schema.type_key)
    return tuple(loaded)


def load_definition_file(path: Path | str) -> Any:
    """Parse one JSON or YAML definition file."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema definition {file_path}: {exc}") from exc

    if file_path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid JSON in {file_path.name}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Invalid YAML in {file_path.name}: {exc}") from exc


def _collect_definition_files(folder: Path, patterns: Sequence[str]) -> list[Path]:
    found: set[Path] = set()
    for pattern in patterns:
        found.update(path for path in folder.glob(pattern) if path.is_file())
    return sorted(path for path in found if not path.name.endswith(META_SCHEMA_SUFFIX))
