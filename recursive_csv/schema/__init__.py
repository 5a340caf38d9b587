"""Type classification, field enumeration and shape traversal."""

from .classifier import Kind, TypeClassifier
from .context import SchemaContext
from .fields import FieldDescriptor, FieldEnumerator
from .shape import leaf_count

__all__ = [
    "FieldDescriptor",
    "FieldEnumerator",
    "Kind",
    "SchemaContext",
    "TypeClassifier",
    "leaf_count",
]
