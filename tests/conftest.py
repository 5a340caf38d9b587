from __future__ import annotations

from pathlib import Path

import pytest

from recursive_csv import RecursiveCSVWriter, Settings
from recursive_csv.schema import SchemaContext

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RECURSIVE_CSV_CONFIG", "RECURSIVE_CSV_PROFILE", "RECURSIVE_CSV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def writer() -> RecursiveCSVWriter:
    return RecursiveCSVWriter()


@pytest.fixture()
def config_path() -> Path:
    return FIXTURES / "config_test.yml"


@pytest.fixture()
def make_context():
    def _make(**changes: object) -> SchemaContext:
        return SchemaContext.for_run(Settings(**changes))

    return _make
