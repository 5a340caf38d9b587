"""Write finished CSV text to a file or stream."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO, Union

logger = logging.getLogger(__name__)

Target = Union[str, os.PathLike, TextIO]


def write_text(target: Target, text: str) -> None:
    """Write ``text`` in a single call, overwriting any existing file."""
    if hasattr(target, "write"):
        target.write(text)
        return
    path = Path(target)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    logger.info("Wrote %d characters to %s", len(text), path)


__all__ = ["write_text"]
