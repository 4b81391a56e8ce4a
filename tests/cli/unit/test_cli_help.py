"""CLI smoke tests."""

from click.testing import CliRunner
from packtest_runner.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "--comma-separate" in result.output
    assert "--github" in result.output
    assert "--minecraft-version" in result.output
    assert "--packtest-url" in result.output
    assert "--fabric-api-url" in result.output
    assert "PACKS" in result.output
