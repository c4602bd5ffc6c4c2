"""Integration-test fixtures for CLI invocations."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI runner."""

    return CliRunner()


@pytest.fixture
def input_file(_isolated_workdir: Path) -> Path:
    """Write a small messy text file into the working directory."""

    path = _isolated_workdir / "input.txt"
    path.write_text("hello   world ( foo )  .", encoding="utf-8")
    return path
