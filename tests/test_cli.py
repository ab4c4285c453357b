"""Tests for the root textops CLI."""

import pytest
from click.testing import CliRunner

from textops import __version__
from textops.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_config")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "textops" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/nonexistent/textops.toml", "--version"])
    assert result.exit_code == 0


def test_invalid_toml_is_reported(cli_runner: CliRunner, tmp_path) -> None:  # noqa: ANN001
    (tmp_path / "textops.toml").write_text("[slugify\n")
    result = cli_runner.invoke(cli, ["text", "reverse", "abc"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_verbose_error_shows_detail(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "num", "clamp", "--strict", "1", "9", "3"])
    assert result.exit_code == 1
    assert "code: INVALID_RANGE" in result.stderr


# --- Command groups registered ---

EXPECTED_GROUPS = ["text", "check", "num"]


@pytest.mark.parametrize("group", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0


def test_main_help_lists_groups(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for group in EXPECTED_GROUPS:
        assert group in result.output
