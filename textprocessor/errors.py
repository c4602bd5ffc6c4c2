"""Domain exceptions for command diagnostics."""

from __future__ import annotations


class TextProcessorError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class InvalidArgumentError(TextProcessorError):
    """Raised for unsupported or conflicting command-line argument combinations."""


class InputFileNotFoundError(TextProcessorError):
    """Raised when a named input file does not exist."""


class EmptyInputError(TextProcessorError):
    """Raised when interactive input ends without any text."""


class MalformedHistoryError(TextProcessorError):
    """Raised when the persisted history file exists but cannot be parsed."""


class ConfigError(TextProcessorError):
    """Raised when configuration files or environment values are invalid."""


class OutputTargetError(TextProcessorError):
    """Raised when the `--output` path cannot be written as a file."""
