"""Per-run conversion statistics."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict


@dataclass
class RunStats:
    record_type: str
    columns: int
    records_seen: int = 0
    rows_written: int = 0
    records_skipped: int = 0

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def write_stats(path: Path, stats: RunStats) -> None:
    """Write stats as a JSON document."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(stats.as_dict(), indent=2, sort_keys=True), encoding="utf-8")


__all__ = ["RunStats", "write_stats"]
