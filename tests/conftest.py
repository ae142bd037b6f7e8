"""Shared pytest fixtures for timemask tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tm = logging.getLogger("timemask")
    tm_level = tm.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tm.setLevel(tm_level)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run inside an empty temp directory with no config env overrides."""
    monkeypatch.delenv("TIMEMASK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
