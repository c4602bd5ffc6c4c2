"""Core datatypes shared across Text Processor modules.

Responsibilities:
- Represent immutable records exchanged between text, io, and reporting stages.
- Provide explicit typing for deterministic serialization.

Key types:
- `SourceKind`, `InputSource`, `FrequencyTable`, `MostUsedKind`, `MostUsed`,
  `StatisticsRecord`, and `HistoryEntry`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SourceKind(str, Enum):
    """Where an analysed input came from.

    Values are the lowercase tokens used in the persisted history file.
    """

    TEXT = "text"
    FILE = "file"


class MostUsedKind(str, Enum):
    """Item kind reported by a most-used record."""

    CHARACTER = "character"
    WORD = "word"


@dataclass(frozen=True, slots=True)
class InputSource:
    """Tagged input descriptor.

    Attributes:
        kind: Whether `value` is literal text or a file path.
        value: Literal text for `TEXT`, file path for `FILE`.
    """

    kind: SourceKind
    value: str

    @classmethod
    def text(cls, value: str) -> InputSource:
        """Build a literal-text source."""

        return cls(kind=SourceKind.TEXT, value=value)

    @classmethod
    def file(cls, path: str) -> InputSource:
        """Build a file-reference source."""

        return cls(kind=SourceKind.FILE, value=path)


@dataclass(frozen=True, slots=True)
class FrequencyTable:
    """Item occurrence counts ordered by descending count.

    Attributes:
        entries: `(item, count)` pairs; ties keep first-encountered order.
    """

    entries: tuple[tuple[str, int], ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Return whether no items were counted."""

        return not self.entries

    def as_dict(self) -> dict[str, int]:
        """Return an insertion-ordered item to count mapping."""

        return dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class MostUsed:
    """Items sharing the maximal occurrence count.

    Attributes:
        kind: Whether elements are characters or words.
        elements: Items in descending-count table order.
        count: Shared occurrence count, `0` for an empty record.
    """

    kind: MostUsedKind
    elements: tuple[str, ...] = field(default_factory=tuple)
    count: int = 0

    @classmethod
    def empty(cls, kind: MostUsedKind) -> MostUsed:
        """Build the "no most used" record for a kind."""

        return cls(kind=kind)

    @property
    def is_empty(self) -> bool:
        return not self.elements


@dataclass(frozen=True, slots=True)
class StatisticsRecord:
    """Character and word statistics derived from one raw input snapshot.

    Attributes:
        characters: Input length including whitespace and newlines.
        characters_excluding_spaces: Count of non-whitespace characters.
        most_used_characters: Most used non-whitespace characters (case preserved).
        words: Number of extracted words.
        most_used_words: Most used lowercased words.
    """

    characters: int
    characters_excluding_spaces: int
    most_used_characters: MostUsed
    words: int
    most_used_words: MostUsed


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One persisted statistics analysis.

    Attributes:
        source_kind: Whether the input was literal text or a file.
        content: Literal text or the file path as given.
        statistics: Statistics computed for that input.
    """

    source_kind: SourceKind
    content: str
    statistics: StatisticsRecord
