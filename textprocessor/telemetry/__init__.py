"""Telemetry and observability helpers.

This package emits deterministic run events for CLI diagnostics.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
