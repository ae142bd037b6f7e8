"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from timemask.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["tokenize", "--help"], ["FORMAT", "--examples"]),
    (["mask", "--help"], ["FORMAT", "--regex", "--no-regex"]),
    (["duration", "--help"], ["MILLISECONDS", "--show-days", "--show-ms", "--pad-seconds"]),
    (["duration", "--help"], ["--group", "--no-group", "always", "non_zero", "never"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["tokenize", "--examples"], ["timemask tokenize", "[Week]"]),
    (["mask", "--examples"], ["timemask mask", "--regex"]),
    (["duration", "--examples"], ["--pad-seconds", "--show-ms always", "--no-group"]),
]


def _id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if not a.startswith("--"))


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_id(item) for item in HELP_COMMANDS],
)
def test_help(
    cli_runner: CliRunner, isolated_cwd: object, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, isolated_cwd: object, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


def test_examples_skips_missing_argument(cli_runner: CliRunner, isolated_cwd: object) -> None:
    result = cli_runner.invoke(cli, ["mask", "--examples"])
    assert result.exit_code == 0
    assert "Missing argument" not in result.output
