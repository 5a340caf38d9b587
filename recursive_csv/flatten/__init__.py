"""Header and row flattening."""

from .header import build_header
from .rows import build_row, format_cell

__all__ = ["build_header", "build_row", "format_cell"]
