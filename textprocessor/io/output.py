"""Command output sink for file targets."""

from __future__ import annotations

from pathlib import Path

from ..errors import OutputTargetError


def check_output_target(path: Path) -> Path:
    """Reject output targets that can never be written as a regular file.

    Raises:
        OutputTargetError: If `path` is a directory or sits below a non-directory.
    """

    hint = "Pass a regular file path via `--output <path>`."
    if path.is_dir():
        raise OutputTargetError(
            stage="output",
            detail=f"Output path is a directory: `{path}`.",
            hint=hint,
        )
    for ancestor in path.parents:
        if ancestor.exists():
            if not ancestor.is_dir():
                raise OutputTargetError(
                    stage="output",
                    detail=f"Output parent is not a directory: `{ancestor}`.",
                    hint=hint,
                )
            break
    return path


def write_output_file(path: Path, content: str, encoding: str = "utf-8") -> Path:
    """Overwrite `path` with `content` and return the path."""

    check_output_target(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
    return path
