"""Text normalization and statistics components.

This package provides the deterministic rewrite pipeline, frequency counting,
and statistics derivation used by the CLI modes.
"""

from .frequency import (
    build_frequency_table,
    most_used,
    most_used_count,
    most_used_record,
    no_most_used,
)
from .normalizer import TextNormalizer
from .rules import (
    CapitalizeSentences,
    CollapseSpaces,
    NormalizePunctuationSpacing,
    SpaceAfterClosingBracket,
    SpaceBeforeOpeningBracket,
    StripSpaceAfterOpeningBracket,
    StripSpaceBeforeClosingBracket,
    TrimLines,
)
from .statistics import StatisticsCalculator, extract_words

__all__ = [
    "TextNormalizer",
    "StatisticsCalculator",
    "extract_words",
    "build_frequency_table",
    "most_used",
    "most_used_count",
    "most_used_record",
    "no_most_used",
    "StripSpaceAfterOpeningBracket",
    "StripSpaceBeforeClosingBracket",
    "SpaceBeforeOpeningBracket",
    "SpaceAfterClosingBracket",
    "NormalizePunctuationSpacing",
    "CollapseSpaces",
    "TrimLines",
    "CapitalizeSentences",
]
