"""Cell values for a single record."""
from __future__ import annotations

import enum
from typing import Any, Iterable, List

from ..schema import Kind, SchemaContext, leaf_count


def format_cell(value: Any) -> str:
    """Text for one value; enum members use their name and ``None`` is empty.

    Flag values without a single member name (``Perm(0)``, and combined
    flags on Python 3.10) fall back to their integer value.
    """
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return value.name if value.name is not None else str(value.value)
    return str(value)


def join_elements(values: Iterable[Any], delimiter: str) -> str:
    return delimiter.join(format_cell(value) for value in values)


def build_row(context: SchemaContext, record: object, record_type: Any) -> List[str]:
    """Return one cell per column that :func:`build_header` emits for ``record_type``."""
    cells: List[str] = []
    _fill(context, record, record_type, 0, cells)
    return cells


def _fill(context: SchemaContext, instance: object, declared: Any, depth: int, cells: List[str]) -> None:
    settings = context.settings
    for field in context.fields(declared):
        value = field.read(instance)
        kind = context.kind(field.declared_type)
        if value is None:
            cells.extend([""] * leaf_count(context, field.declared_type, depth + 1))
        elif kind is Kind.LEAF:
            cells.append(format_cell(value))
        elif kind is Kind.ARRAY:
            cells.append(join_elements(value, settings.array_element_delimiter))
        elif depth < settings.max_depth:
            _fill(context, value, field.declared_type, depth + 1, cells)


__all__ = ["build_row", "format_cell", "join_elements"]
