"""Exceptions raised while converting records to CSV."""
from __future__ import annotations

from typing import Optional


class RecursiveCSVError(Exception):
    """Base class for conversion failures."""


class EmptyCollectionError(RecursiveCSVError, ValueError):
    """Raised when there is no first record to take the schema from."""

    def __init__(self, message: str = "cannot convert an empty collection") -> None:
        super().__init__(message)


class MismatchedTypeError(RecursiveCSVError, TypeError):
    """Raised when a record's type differs from the first record's type."""

    def __init__(self, expected: type, actual: type, index: int) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            f"record {index} is {actual.__qualname__}, expected {expected.__qualname__}"
        )


class FieldAccessError(RecursiveCSVError, AttributeError):
    """Raised when a declared field cannot be read from a record."""

    def __init__(self, owner: type, field_name: str, reason: Optional[str] = None) -> None:
        self.owner = owner
        self.field_name = field_name
        message = f"cannot read field {owner.__qualname__}.{field_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SchemaResolutionError(RecursiveCSVError, TypeError):
    """Raised when a class's field annotations cannot be resolved."""


__all__ = [
    "RecursiveCSVError",
    "EmptyCollectionError",
    "MismatchedTypeError",
    "FieldAccessError",
    "SchemaResolutionError",
]
