"""Shared parsing helpers for configuration and input value normalization."""

from __future__ import annotations

import codecs


_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_log_level(value: object, field_name: str) -> str:
    """Parse a loguru level name case-insensitively.

    Args:
        value: Level token such as `info` or ` WARNING `.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not a known loguru level.
    """

    normalized = normalize_optional_string(value)
    token = normalized.upper() if normalized is not None else ""
    if token in _LOG_LEVELS:
        return token

    supported = ", ".join(sorted(_LOG_LEVELS))
    raise ValueError(f"`{field_name}` must be one of: {supported}.")


def parse_encoding(value: object, field_name: str) -> str:
    """Validate a text encoding name against the codec registry.

    Raises:
        ValueError: If the encoding is blank or unknown.
    """

    normalized = normalize_optional_string(value)
    if normalized is None:
        raise ValueError(f"`{field_name}` must be a non-empty encoding name.")
    try:
        codecs.lookup(normalized)
    except LookupError as exc:
        raise ValueError(f"`{field_name}` names an unknown encoding `{normalized}`.") from exc
    return normalized
