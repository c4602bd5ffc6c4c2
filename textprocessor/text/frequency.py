"""Frequency counting and most-used selection.

Responsibilities:
- Count exact-string occurrences of characters or words.
- Select the subset of items sharing the maximal count.

A single occurrence is never "most used": when every count is at most one,
callers receive the empty `MostUsed` record.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..models.datatypes import FrequencyTable, MostUsed, MostUsedKind


def build_frequency_table(items: Iterable[str]) -> FrequencyTable:
    """Count items by exact equality and order them by descending count.

    `Counter.most_common` sorts stably, so equal counts keep the order in which
    items were first encountered.
    """

    return FrequencyTable(entries=tuple(Counter(items).most_common()))


def most_used_count(table: FrequencyTable) -> int:
    """Return the maximal count of a non-empty table.

    Raises:
        ValueError: If the table is empty.
    """

    if table.is_empty:
        raise ValueError("Frequency table is empty; no maximal count exists.")
    return table.entries[0][1]


def most_used(table: FrequencyTable) -> tuple[str, ...]:
    """Return every item whose count equals the table maximum, in table order."""

    if table.is_empty:
        return ()
    top_count = most_used_count(table)
    selected: list[str] = []
    for item, count in table.entries:
        if count != top_count:
            break
        selected.append(item)
    return tuple(selected)


def no_most_used(table: FrequencyTable) -> bool:
    """Return whether no item occurs more than once."""

    return all(count <= 1 for count in table.as_dict().values())


def most_used_record(table: FrequencyTable, kind: MostUsedKind) -> MostUsed:
    """Wrap the most-used selection of `table` into a typed record."""

    if no_most_used(table):
        return MostUsed.empty(kind)
    return MostUsed(kind=kind, elements=most_used(table), count=most_used_count(table))
