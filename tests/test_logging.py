from __future__ import annotations

import logging

import pytest

from recursive_csv.utils.logging import resolve_level


def test_level_from_argument() -> None:
    assert resolve_level("debug") == logging.DEBUG


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECURSIVE_CSV_LOG_LEVEL", "info")
    assert resolve_level() == logging.INFO


def test_unknown_level_falls_back_to_warning() -> None:
    assert resolve_level("chatty") == logging.WARNING
