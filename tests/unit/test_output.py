"""Unit tests for the command output sink."""

from __future__ import annotations

from pathlib import Path

import pytest

from textprocessor.errors import OutputTargetError
from textprocessor.io.output import check_output_target, write_output_file


def test_write_output_file_creates_parents_and_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.txt"

    write_output_file(target, "first")
    write_output_file(target, "second")

    assert target.read_text(encoding="utf-8") == "second"


def test_check_output_target_rejects_directory(tmp_path: Path) -> None:
    """A directory can never be overwritten as an output file."""

    with pytest.raises(OutputTargetError, match="Output path is a directory"):
        check_output_target(tmp_path)


def test_check_output_target_rejects_file_parent(tmp_path: Path) -> None:
    """A regular file in the parent chain blocks the target."""

    blocker = tmp_path / "blocker.txt"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(OutputTargetError, match="Output parent is not a directory"):
        check_output_target(blocker / "deeper" / "out.txt")

    assert not (blocker.parent / "deeper").exists()


def test_check_output_target_accepts_missing_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "out.txt"

    assert check_output_target(target) == target
    assert not (tmp_path / "a").exists()
