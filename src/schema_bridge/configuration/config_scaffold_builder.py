"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-bridge.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-bridge.
# Replace every <REQUIRED> placeholder before running list-types, create or resolve.
# Commented entries are optional and show their default values.

schemas:
  # Folders holding type schema definition files (JSON or YAML).
  # Relative folders are resolved against this file's location.
  directories:
    - "<REQUIRED>"
  # Glob patterns selecting definition files. Files ending in -schema.json are skipped.
  # patterns: ["*.json", "*.yaml", "*.yml"]
  # Fail on the first broken definition file instead of logging and skipping it.
  # strict: false

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
