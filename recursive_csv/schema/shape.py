"""Column counts derived from declared types alone.

Used to pad rows when a field holds ``None``: the padding must match what
the header builder emits for the same declared type at the same depth.
"""
from __future__ import annotations

from typing import Any

from .classifier import Kind
from .context import SchemaContext


def leaf_count(context: SchemaContext, declared: Any, depth: int) -> int:
    """Number of columns a value of ``declared`` occupies starting at ``depth``."""
    if context.kind(declared) is not Kind.COMPOSITE:
        return 1
    max_depth = context.settings.max_depth
    if depth > max_depth:
        return 0
    count = 0
    for field in context.fields(declared):
        if context.kind(field.declared_type) is not Kind.COMPOSITE:
            count += 1
        elif depth < max_depth:
            count += leaf_count(context, field.declared_type, depth + 1)
    return count


__all__ = ["leaf_count"]
