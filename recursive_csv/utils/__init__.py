"""Utility helpers."""

from .logging import configure_logging
from .telemetry import RunStats, write_stats
from .validation import parse_reference, resolve_reference

__all__ = ["configure_logging", "RunStats", "write_stats", "parse_reference", "resolve_reference"]
