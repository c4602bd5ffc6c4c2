"""Input/output components for Text Processor.

This package contains input resolution, the command output sink, and the
persistent statistics history store.
"""

from .history import HistoryStore
from .output import check_output_target, write_output_file
from .sources import collect_interactive_text, file_source, resolve_input

__all__ = [
    "HistoryStore",
    "check_output_target",
    "collect_interactive_text",
    "file_source",
    "resolve_input",
    "write_output_file",
]
