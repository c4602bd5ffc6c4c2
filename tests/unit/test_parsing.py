"""Unit tests for shared configuration parsing helpers."""

import pytest

from textprocessor.parsing import normalize_optional_string, parse_encoding, parse_log_level


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("info", "INFO"), (" Warning ", "WARNING"), ("TRACE", "TRACE")],
)
def test_parse_log_level_accepts_mixed_case(token: str, expected: str) -> None:
    """Level parsing should accept loguru level names case-insensitively."""

    assert parse_log_level(token, "log_level") == expected


@pytest.mark.parametrize("value", ["", "verbose", None])
def test_parse_log_level_rejects_unknown_values(value: object) -> None:
    """Unknown or blank levels should raise with the field name."""

    with pytest.raises(ValueError, match="`log_level` must be one of"):
        parse_log_level(value, "log_level")


def test_parse_encoding_validates_codec_names() -> None:
    """Known codecs pass through stripped; unknown ones raise."""

    assert parse_encoding(" utf8 ", "encoding") == "utf8"
    with pytest.raises(ValueError, match="non-empty encoding"):
        parse_encoding("  ", "encoding")
    with pytest.raises(ValueError, match="unknown encoding"):
        parse_encoding("klingon-8", "encoding")
