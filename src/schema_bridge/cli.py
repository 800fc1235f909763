"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from schema_bridge.bridge_errors import SchemaBridgeError
from schema_bridge.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    build_registry,
    configure_logging,
    load_configuration,
    write_placeholder_configuration,
)
from schema_bridge.model_paths import ModelPath, validate_path_syntax
from schema_bridge.record_factory import GenericRecord, RecordFactory
from schema_bridge.schema_management import SchemaRegistry


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-bridge")
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Schema-driven object/JSON bridge utility."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-types")
@_CONFIG_OPTION
@click.pass_context
def list_types(ctx: click.Context, config_path: str) -> None:
    """List the registered type schemas."""
    registry = _load_registry(ctx, config_path)
    for schema in registry:
        click.echo(f"{schema.type_key}\t{schema.display_name}")


@cli.command(name="check-path")
@click.argument("path_string")
def check_path(path_string: str) -> None:
    """Validate a model path and print its segments."""
    try:
        validate_path_syntax(path_string)
        model_path = ModelPath(path_string)
    except SchemaBridgeError as exc:
        raise CliError(str(exc)) from exc
    segments = [
        {"property": segment.property, "index": segment.index} for segment in model_path.segments
    ]
    click.echo(json.dumps(segments))


@cli.command(name="create")
@_CONFIG_OPTION
@click.option("--type", "type_key", required=True, help="Type key of the record to build")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to read",
)
@click.pass_context
def create(ctx: click.Context, config_path: str, type_key: str, input_path: str) -> None:
    """Build a record from a JSON document and print the normalized payload."""
    record = _create_record(_load_registry(ctx, config_path), type_key, input_path)
    click.echo(json.dumps(record, indent=2))


@cli.command(name="resolve")
@_CONFIG_OPTION
@click.option("--type", "type_key", required=True, help="Type key of the root record")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to read",
)
@click.option("--path", "path_string", required=True, help="Model path to resolve, e.g. Items[1]")
@click.pass_context
def resolve(
    ctx: click.Context, config_path: str, type_key: str, input_path: str, path_string: str
) -> None:
    """Build a record from a JSON document and print the node at a model path."""
    record = _create_record(_load_registry(ctx, config_path), type_key, input_path)
    try:
        node = ModelPath(path_string).resolve(record)
    except SchemaBridgeError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(node, indent=2))


def _load_registry(ctx: click.Context, config_path: str) -> SchemaRegistry:
    try:
        configuration = load_configuration(config_path)
        _apply_log_level(ctx, configuration)
        return build_registry(configuration)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _apply_log_level(ctx: click.Context, configuration: Configuration) -> None:
    override = (ctx.obj or {}).get("log_level")
    configure_logging(override or configuration.logging.level)


def _create_record(registry: SchemaRegistry, type_key: str, input_path: str) -> GenericRecord | None:
    document = _read_json_document(input_path)
    try:
        return RecordFactory(registry).create(type_key, document)
    except (SchemaBridgeError, TypeError) as exc:
        raise CliError(str(exc)) from exc


def _read_json_document(input_path: str) -> Any:
    path = Path(input_path)
    if not path.exists():
        raise CliError(f"Input file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CliError(f"Failed to read JSON input {path}: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
