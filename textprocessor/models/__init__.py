"""Shared typed data models for Text Processor.

This package contains dataclasses used across text, io, and reporting modules
to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    FrequencyTable,
    HistoryEntry,
    InputSource,
    MostUsed,
    MostUsedKind,
    SourceKind,
    StatisticsRecord,
)

__all__ = [
    "FrequencyTable",
    "HistoryEntry",
    "InputSource",
    "MostUsed",
    "MostUsedKind",
    "SourceKind",
    "StatisticsRecord",
]
