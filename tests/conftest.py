"""Shared pytest fixtures and test helpers for dumpjson tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dumpjson.config.settings import DumpJsonSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DumpJsonSettings:
    """Default settings, isolated from any real dumpjson.toml."""
    monkeypatch.delenv("DUMPJSON_CONFIG", raising=False)
    return DumpJsonSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp dir so config discovery finds nothing.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("DUMPJSON_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

