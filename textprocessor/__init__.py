"""Top-level package for Text Processor.

This package normalizes spacing and capitalization in text, computes
character/word frequency statistics, and keeps a JSON history of analyses.
The main entry points are `TextNormalizer`, `StatisticsCalculator`, and
`HistoryStore`.
"""

from .io.history import HistoryStore
from .text.normalizer import TextNormalizer
from .text.statistics import StatisticsCalculator

__all__ = ["HistoryStore", "StatisticsCalculator", "TextNormalizer", "__version__"]

__version__ = "0.1.0"
