"""CLI smoke tests."""

from click.testing import CliRunner
from schema_bridge.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate-config", "list-types", "check-path", "create", "resolve"):
        assert command in result.output
    assert "--log-level" in result.output
