"""Plain-text layout for statistics and history reports.

This module owns the fixed field labels shown by the `statistics` and
`history` modes. Functions return strings; printing is left to the CLI.
"""

from __future__ import annotations

from typing import Sequence

from .models.datatypes import HistoryEntry, MostUsed, SourceKind, StatisticsRecord

HISTORY_HEADER = "== History =="

_SOURCE_LABELS = {
    SourceKind.TEXT: "Text:",
    SourceKind.FILE: "File:",
}


def format_most_used(most_used: MostUsed) -> str:
    """Render one most-used line, e.g. `Most used words: a, b (2 times)`."""

    name = most_used.kind.value
    if most_used.is_empty:
        return f"Most used {name}: -"
    suffix = "s" if len(most_used.elements) > 1 else ""
    elements = ", ".join(most_used.elements)
    return f"Most used {name}{suffix}: {elements} ({most_used.count} times)"


def format_character_stats(record: StatisticsRecord) -> str:
    """Render the character block of a statistics record."""

    return "\n".join(
        [
            f"Characters: {record.characters}",
            f"Characters excluding spaces: {record.characters_excluding_spaces}",
            format_most_used(record.most_used_characters),
        ]
    )


def format_word_stats(record: StatisticsRecord) -> str:
    """Render the word block of a statistics record."""

    return "\n".join(
        [
            f"Words: {record.words}",
            format_most_used(record.most_used_words),
        ]
    )


def format_statistics(record: StatisticsRecord) -> str:
    """Render character and word blocks separated by a blank line."""

    return f"{format_character_stats(record)}\n\n{format_word_stats(record)}"


def format_history_entry(entry: HistoryEntry) -> str:
    """Render one history entry: source, then character and word stats."""

    return "\n".join(
        [
            _SOURCE_LABELS[entry.source_kind],
            entry.content,
            "",
            format_statistics(entry.statistics),
        ]
    )


def format_history(entries: Sequence[HistoryEntry]) -> str:
    """Render the full history report with a header line."""

    blocks = [HISTORY_HEADER]
    blocks.extend(format_history_entry(entry) for entry in entries)
    return "\n\n".join(blocks)
