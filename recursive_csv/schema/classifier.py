"""Classify declared field types as leaf, array or composite."""
from __future__ import annotations

import collections
import collections.abc
import enum
import numbers
import types
import typing
from typing import Any, Iterable, Tuple


class Kind(enum.Enum):
    """Traversal outcome for a declared type."""

    LEAF = "leaf"
    ARRAY = "array"
    COMPOSITE = "composite"


LEAF_BASES: Tuple[type, ...] = (numbers.Number, bool, str, enum.Enum)

ARRAY_BASES: Tuple[type, ...] = (
    list,
    tuple,
    set,
    frozenset,
    collections.deque,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)

# Sequence types that are never joined as arrays.
_TEXT_TYPES: Tuple[type, ...] = (str, bytes, bytearray)

_UNION_ORIGINS = (typing.Union, types.UnionType)


def unwrap(declared: Any) -> Any:
    """Strip ``Optional`` and ``Annotated`` wrappers from a declared type."""
    while True:
        origin = typing.get_origin(declared)
        if origin is typing.Annotated:
            declared = typing.get_args(declared)[0]
            continue
        if origin in _UNION_ORIGINS:
            members = [arg for arg in typing.get_args(declared) if arg is not type(None)]
            if len(members) == 1:
                declared = members[0]
                continue
        return declared


class TypeClassifier:
    """Decide how a declared type is traversed.

    ``extra_leaf_types`` registers additional classes (``datetime``,
    ``UUID``, ...) whose values are written as a single cell.
    """

    def __init__(self, extra_leaf_types: Iterable[type] = ()) -> None:
        self.leaf_bases = LEAF_BASES + tuple(extra_leaf_types)

    def is_leaf(self, declared: Any) -> bool:
        declared = unwrap(declared)
        origin = typing.get_origin(declared)
        if origin is typing.Literal:
            return True
        if origin in _UNION_ORIGINS:
            return all(self.is_leaf(arg) for arg in typing.get_args(declared) if arg is not type(None))
        return isinstance(declared, type) and origin is None and issubclass(declared, self.leaf_bases)

    def is_array(self, declared: Any) -> bool:
        declared = unwrap(declared)
        base = typing.get_origin(declared) or declared
        if not isinstance(base, type) or issubclass(base, _TEXT_TYPES):
            return False
        if issubclass(base, tuple) and hasattr(base, "_fields"):
            # NamedTuple records are traversed field by field.
            return False
        return issubclass(base, ARRAY_BASES)

    def classify(self, declared: Any) -> Kind:
        if self.is_leaf(declared):
            return Kind.LEAF
        if self.is_array(declared):
            return Kind.ARRAY
        return Kind.COMPOSITE


__all__ = ["Kind", "TypeClassifier", "unwrap", "LEAF_BASES", "ARRAY_BASES"]
