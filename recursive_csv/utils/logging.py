"""Logging utilities."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "RECURSIVE_CSV_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_state = {"configured": False}


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (argument, then environment) to a ``logging`` constant."""
    name = str(level or os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> int:
    """Install the root handler on first use and return the level applied."""
    resolved = resolve_level(level)
    if not _state["configured"]:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _state["configured"] = True
    return resolved


__all__ = ["LOG_FORMAT", "configure_logging", "resolve_level"]
