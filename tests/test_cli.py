"""Tests for the root timemask CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from timemask import __version__
from timemask.cli import cli


def test_cli_help(cli_runner: CliRunner, isolated_cwd: object) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "timemask" in result.output
    for name in ("tokenize", "mask", "duration"):
        assert name in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner, isolated_cwd: object) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


def test_verbose_shows_element_count(cli_runner: CliRunner, isolated_cwd: object) -> None:
    result = cli_runner.invoke(cli, ["-v", "mask", "MM"])
    assert result.exit_code == 0
    assert "elements: 2" in result.output


def test_invalid_toml_reports_error(cli_runner: CliRunner, isolated_cwd: object) -> None:
    Path("timemask.toml").write_text("[duration\n")
    result = cli_runner.invoke(cli, ["duration", "1000"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_env_var_sets_duration_policy(
    cli_runner: CliRunner, isolated_cwd: object, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TIMEMASK_DURATION__PAD_SECONDS", "true")
    result = cli_runner.invoke(cli, ["-q", "duration", "5000"])
    assert result.exit_code == 0
    assert result.output.strip() == "05"


def test_missing_config_path_rejected(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(tmp_path / "absent.toml"), "duration", "1000"])
    assert result.exit_code == 2
    assert "does not exist" in result.output
