"""Unit tests for the JSON-backed statistics history store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from textprocessor.errors import MalformedHistoryError
from textprocessor.io.history import HistoryStore, history_entry_payload
from textprocessor.models.datatypes import InputSource, SourceKind
from textprocessor.text.statistics import StatisticsCalculator


def test_missing_file_loads_empty_history(tmp_path: Path) -> None:
    """A store without a persisted file starts empty and renders a header."""

    store = HistoryStore.open(tmp_path / "history.json")

    assert len(store) == 0
    assert store.entries == ()
    assert store.render() == "== History =="
    with pytest.raises(LookupError):
        store.last_item()


def test_add_then_last_item_returns_added_entry(tmp_path: Path, sample_text: str) -> None:
    """`last_item` should return exactly what `add` appended."""

    store = HistoryStore.open(tmp_path / "history.json")
    record = StatisticsCalculator().calculate(sample_text)

    entry = store.add(InputSource.text(sample_text), record)

    assert store.last_item() == entry
    assert entry.source_kind is SourceKind.TEXT
    assert entry.content == sample_text
    assert entry.statistics == record


def test_add_rewrites_whole_file_with_hyphenated_keys(tmp_path: Path, sample_text: str) -> None:
    """Every addition persists the full list with hyphenated keys and lowercase kinds."""

    history_path = tmp_path / "nested" / "history.json"
    store = HistoryStore.open(history_path)
    calculator = StatisticsCalculator()

    store.add(InputSource.text(sample_text), calculator.calculate(sample_text))
    store.add(InputSource.file("notes.txt"), calculator.calculate("ab ba"))

    payload = json.loads(history_path.read_text(encoding="utf-8"))
    assert [item["type"] for item in payload] == ["text", "file"]
    assert payload[0] == {
        "type": "text",
        "content": "Hello, hello WORLD!",
        "characters": {
            "count": 19,
            "exclude-spaces": 17,
            "most-used": {"elements": ["l"], "count": 4},
        },
        "words": {
            "count": 3,
            "most-used": {"elements": ["hello"], "count": 2},
        },
    }
    assert payload[1]["words"]["most-used"] == {"elements": [], "count": 0}
    assert history_path.read_text(encoding="utf-8").startswith("[\n    {")


def test_reopened_store_restores_entries_in_order(tmp_path: Path, sample_text: str) -> None:
    """Entries written by one store should load unchanged into a new one."""

    history_path = tmp_path / "history.json"
    store = HistoryStore.open(history_path)
    calculator = StatisticsCalculator()
    store.add(InputSource.text(sample_text), calculator.calculate(sample_text))
    store.add(InputSource.file("notes.txt"), calculator.calculate("ab ba"))

    reopened = HistoryStore.open(history_path)

    assert reopened.entries == store.entries
    assert reopened.render() == store.render()


def test_loaded_entry_payload_matches_written_payload(tmp_path: Path) -> None:
    """Loading a handwritten file should keep its values."""

    history_path = tmp_path / "history.json"
    raw_entry = {
        "type": "file",
        "content": "essay.txt",
        "characters": {
            "count": 10,
            "exclude-spaces": 8,
            "most-used": {"elements": ["e", "s"], "count": 3},
        },
        "words": {"count": 2, "most-used": {"elements": [], "count": 0}},
    }
    history_path.write_text(json.dumps([raw_entry]), encoding="utf-8")

    store = HistoryStore.open(history_path)

    assert history_entry_payload(store.last_item()) == raw_entry


@pytest.mark.parametrize(
    ("content", "detail"),
    [
        ("not json", "not valid JSON"),
        ('{"type": "text"}', "must be a JSON list"),
        ('[{"type": "url", "content": "x"}]', "`history[0].type` must be `text` or `file`"),
        (
            '[{"type": "text", "content": "x", "characters": {"count": 1}, "words": {}}]',
            "`history[0].characters.exclude-spaces` must be a non-negative integer",
        ),
    ],
)
def test_malformed_history_fails_fast(tmp_path: Path, content: str, detail: str) -> None:
    """Corrupt history files should raise and stay untouched."""

    history_path = tmp_path / "history.json"
    history_path.write_text(content, encoding="utf-8")

    with pytest.raises(MalformedHistoryError) as exc_info:
        HistoryStore.open(history_path)

    assert detail in exc_info.value.detail
    assert exc_info.value.stage == "history"
    assert history_path.read_text(encoding="utf-8") == content
