"""Column names for a record type."""
from __future__ import annotations

from typing import Any, List

from ..schema import Kind, SchemaContext


def build_header(context: SchemaContext, record_type: Any) -> List[str]:
    """Return the ordered column names for ``record_type``.

    Columns follow a depth-first walk of the declared fields. Nested names
    are joined with the configured path separator; composites past
    ``max_depth`` contribute no columns.
    """
    columns: List[str] = []
    _collect(context, record_type, "", 0, columns)
    return columns


def _collect(context: SchemaContext, declared: Any, prefix: str, depth: int, columns: List[str]) -> None:
    settings = context.settings
    for field in context.fields(declared):
        name = prefix + field.name
        if context.kind(field.declared_type) is not Kind.COMPOSITE:
            columns.append(name)
        elif depth < settings.max_depth:
            _collect(context, field.declared_type, name + settings.path_separator, depth + 1, columns)


__all__ = ["build_header"]
