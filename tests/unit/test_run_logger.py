"""Unit tests for deterministic loguru-backed run logging."""

from __future__ import annotations

import io

from textprocessor.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Stage lines should list context keys in order with shell-safe values."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, level="INFO")

    run_logger.log_stage_start("history-load", path="my history.json", entries=3)
    run_logger.log_stage_complete("format")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=history-load event=start entries=3 path=my_history.json",
        "[phase] level=INFO stage=format event=complete",
    ]


def test_run_logger_default_level_only_emits_failures() -> None:
    """The default level hides stage progress but keeps failure events."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("statistics")
    run_logger.log_stage_failure("input", "InputFileNotFoundError")

    assert sink.getvalue() == (
        "[phase] level=ERROR stage=input event=failure error_type=InputFileNotFoundError\n"
    )
