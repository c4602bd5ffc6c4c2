"""Character and word statistics.

Responsibilities:
- Extract lowercased words from raw text.
- Derive counts and most-used records into an immutable `StatisticsRecord`.
"""

from __future__ import annotations

import re

from ..models.datatypes import MostUsedKind, StatisticsRecord
from .frequency import build_frequency_table, most_used_record

_WORD_RE = re.compile(r"\w+")


def extract_words(text: str) -> list[str]:
    """Return maximal runs of letters, digits, and underscores, lowercased."""

    return [match.group(0).lower() for match in _WORD_RE.finditer(text)]


class StatisticsCalculator:
    """Compute `StatisticsRecord` values from raw input text."""

    def calculate(self, text: str) -> StatisticsRecord:
        """Derive all statistics eagerly from one input snapshot."""

        characters = [character for character in text if not character.isspace()]
        words = extract_words(text)
        return StatisticsRecord(
            characters=len(text),
            characters_excluding_spaces=len(characters),
            most_used_characters=most_used_record(
                build_frequency_table(characters), MostUsedKind.CHARACTER
            ),
            words=len(words),
            most_used_words=most_used_record(build_frequency_table(words), MostUsedKind.WORD),
        )
