"""Persistent statistics history.

Responsibilities:
- Load the JSON history file fully into memory.
- Append entries and rewrite the whole file after every addition.
- Convert between `HistoryEntry` records and their JSON payloads.

The serialized form is a JSON list in append order. Multi-word keys are
hyphenated (`exclude-spaces`, `most-used`) and source kinds are lowercase.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..errors import MalformedHistoryError
from ..models.datatypes import (
    HistoryEntry,
    InputSource,
    MostUsed,
    MostUsedKind,
    SourceKind,
    StatisticsRecord,
)
from ..reporting import format_history

DEFAULT_HISTORY_FILE = Path("history.json")


def most_used_payload(most_used: MostUsed) -> dict[str, object]:
    """Serialize a most-used record without its kind (implied by the parent key)."""

    return {"elements": list(most_used.elements), "count": most_used.count}


def history_entry_payload(entry: HistoryEntry) -> dict[str, object]:
    """Serialize one history entry into its persisted JSON object."""

    stats = entry.statistics
    return {
        "type": entry.source_kind.value,
        "content": entry.content,
        "characters": {
            "count": stats.characters,
            "exclude-spaces": stats.characters_excluding_spaces,
            "most-used": most_used_payload(stats.most_used_characters),
        },
        "words": {
            "count": stats.words,
            "most-used": most_used_payload(stats.most_used_words),
        },
    }


def _require_mapping(payload: Any, scope: str) -> Mapping[str, Any]:
    """Require a JSON object at `scope`."""

    if not isinstance(payload, Mapping):
        raise ValueError(f"`{scope}` must be a JSON object.")
    return payload


def _require_int(payload: Mapping[str, Any], key: str, scope: str) -> int:
    """Require a non-negative integer field (booleans rejected)."""

    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"`{scope}.{key}` must be a non-negative integer.")
    return value


def _load_most_used(payload: Any, kind: MostUsedKind, scope: str) -> MostUsed:
    """Parse a persisted most-used object."""

    mapping = _require_mapping(payload, scope)
    elements = mapping.get("elements")
    if not isinstance(elements, list) or not all(isinstance(item, str) for item in elements):
        raise ValueError(f"`{scope}.elements` must be a list of strings.")
    return MostUsed(
        kind=kind,
        elements=tuple(elements),
        count=_require_int(mapping, "count", scope),
    )


def load_history_entry(payload: Any, index: int) -> HistoryEntry:
    """Parse one persisted history entry.

    Raises:
        ValueError: If any required field is missing or has the wrong type.
    """

    scope = f"history[{index}]"
    mapping = _require_mapping(payload, scope)

    raw_kind = mapping.get("type")
    try:
        source_kind = SourceKind(raw_kind)
    except ValueError as exc:
        raise ValueError(f"`{scope}.type` must be `text` or `file`.") from exc

    content = mapping.get("content")
    if not isinstance(content, str):
        raise ValueError(f"`{scope}.content` must be a string.")

    characters = _require_mapping(mapping.get("characters"), f"{scope}.characters")
    words = _require_mapping(mapping.get("words"), f"{scope}.words")
    statistics = StatisticsRecord(
        characters=_require_int(characters, "count", f"{scope}.characters"),
        characters_excluding_spaces=_require_int(
            characters, "exclude-spaces", f"{scope}.characters"
        ),
        most_used_characters=_load_most_used(
            characters.get("most-used"),
            MostUsedKind.CHARACTER,
            f"{scope}.characters.most-used",
        ),
        words=_require_int(words, "count", f"{scope}.words"),
        most_used_words=_load_most_used(
            words.get("most-used"),
            MostUsedKind.WORD,
            f"{scope}.words.most-used",
        ),
    )
    return HistoryEntry(source_kind=source_kind, content=content, statistics=statistics)


class HistoryStore:
    """File-backed, in-memory ordered list of statistics analyses."""

    def __init__(self, path: Path = DEFAULT_HISTORY_FILE, encoding: str = "utf-8") -> None:
        """Initialize the store; call `load()` before reading entries."""

        self.path = path
        self.encoding = encoding
        self._entries: list[HistoryEntry] = []

    @classmethod
    def open(cls, path: Path = DEFAULT_HISTORY_FILE, encoding: str = "utf-8") -> HistoryStore:
        """Create a store and load its persisted entries."""

        store = cls(path, encoding=encoding)
        store.load()
        return store

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> None:
        """Replace in-memory entries with the persisted history.

        A missing file yields an empty history.

        Raises:
            MalformedHistoryError: If the file is not a valid history list.
        """

        if not self.path.exists():
            self._entries = []
            return

        hint = f"Fix or move `{self.path}` aside and rerun; a new history will be started."
        try:
            payload = json.loads(self.path.read_text(encoding=self.encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedHistoryError(
                stage="history",
                detail=f"History file is not valid JSON: `{self.path}`.",
                hint=hint,
            ) from exc
        if not isinstance(payload, list):
            raise MalformedHistoryError(
                stage="history",
                detail=f"History root must be a JSON list: `{self.path}`.",
                hint=hint,
            )
        try:
            self._entries = [
                load_history_entry(item, index) for index, item in enumerate(payload)
            ]
        except ValueError as exc:
            raise MalformedHistoryError(
                stage="history",
                detail=f"Invalid history file `{self.path}`: {exc}",
                hint=hint,
            ) from exc

    def save(self) -> Path:
        """Rewrite the whole history file and return its path."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(
                [history_entry_payload(entry) for entry in self._entries],
                ensure_ascii=False,
                indent=4,
            ),
            encoding=self.encoding,
        )
        return self.path

    def add(self, source: InputSource, statistics: StatisticsRecord) -> HistoryEntry:
        """Append an entry for `source` and persist the full history."""

        entry = HistoryEntry(
            source_kind=source.kind,
            content=source.value,
            statistics=statistics,
        )
        self._entries.append(entry)
        self.save()
        return entry

    def last_item(self) -> HistoryEntry:
        """Return the most recently added entry.

        Raises:
            LookupError: If the history is empty.
        """

        if not self._entries:
            raise LookupError("History is empty.")
        return self._entries[-1]

    def render(self) -> str:
        """Render the full history report."""

        return format_history(self._entries)
