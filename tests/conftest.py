"""Shared pytest fixtures for textops tests."""

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


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run from an empty temp directory so no textops.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on CLI test
    classes. Tests that write a config can request ``tmp_path`` directly
    (pytest deduplicates; it's the same directory).
    """
    monkeypatch.delenv("TEXTOPS_CONFIG", raising=False)
    for name in ("TEXTOPS_JSON_OUTPUT", "TEXTOPS_QUIET", "TEXTOPS_VERBOSE", "TEXTOPS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    textops_logger = logging.getLogger("textops")
    textops_level = textops_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    textops_logger.setLevel(textops_level)
