"""Input source resolution.

Responsibilities:
- Select between literal text and file input for a command invocation.
- Read raw input for a tagged `InputSource`.
- Collect interactive text lines until a blank line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..errors import EmptyInputError, InputFileNotFoundError
from ..models.datatypes import InputSource, SourceKind
from ..parsing import normalize_optional_string

INTERACTIVE_PROMPT = "Enter text (enter a blank line to end):"


def _require_file(path_text: str) -> Path:
    """Return `path_text` as a path, failing when no such file exists."""

    path = Path(path_text)
    if not path.is_file():
        raise InputFileNotFoundError(
            stage="input",
            detail=f"Input file not found: `{path_text}`.",
            hint="Pass an existing file via `--input <path>` or omit it to type text.",
        )
    return path


def file_source(input_value: str) -> InputSource:
    """Build a file source after checking the file exists."""

    _require_file(input_value)
    return InputSource.file(input_value)


def resolve_input(source: InputSource, encoding: str = "utf-8") -> str:
    """Return the raw text behind an input source.

    Raises:
        InputFileNotFoundError: If a file source points to a missing file.
    """

    if source.kind is SourceKind.TEXT:
        return source.value
    return _require_file(source.value).read_text(encoding=encoding)


def collect_interactive_text(lines: Iterable[str]) -> str:
    """Join lines up to the first blank one and trim the result.

    Raises:
        EmptyInputError: If no non-blank line precedes the terminator.
    """

    collected: list[str] = []
    for line in lines:
        if normalize_optional_string(line) is None:
            break
        collected.append(line.rstrip("\r\n"))
    text = "\n".join(collected).strip()
    if not text:
        raise EmptyInputError(
            stage="input",
            detail="No text provided!",
            hint="Type at least one line, then finish with a blank line.",
        )
    return text
