"""Tests for the root CLI group."""

import pytest
from click.testing import CliRunner

from formguard import __version__
from formguard.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "check" in result.output

    def test_help_lists_global_flags(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        for flag in ("--json", "--verbose", "--log-json", "--config", "--locale"):
            assert flag in result.output

    def test_invalid_toml_is_reported(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "formguard.toml").write_text("[broken\n")
        result = cli_runner.invoke(cli, ["check", "boolean", "true"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_explicit_config(self, cli_runner: CliRunner, tmp_path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[messages]\ndefault_locale = "ja"\n')
        result = cli_runner.invoke(
            cli, ["-c", str(config), "check", "number", "5", "--max", "1"]
        )
        assert "valueは1以下で入力してください。" in result.output
