"""Shared pytest fixtures for the full Text Processor test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

_ENV_KEYS = (
    "TEXTPROCESSOR_HISTORY_FILE",
    "TEXTPROCESSOR_ENCODING",
    "TEXTPROCESSOR_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_workdir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run every test in its own directory with no `TEXTPROCESSOR_*` overrides."""

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_text() -> str:
    """Provide a short mixed-case text with repeated words and characters."""

    return "Hello, hello WORLD!"
