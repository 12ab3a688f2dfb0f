"""CLI smoke tests."""

from click.testing import CliRunner
from fieldname_access.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "plan" in result.output
    assert "check" in result.output
