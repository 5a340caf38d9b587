"""Per-run view of the schema shared by every traversal."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..config import Settings
from .classifier import Kind, TypeClassifier
from .fields import FieldDescriptor, FieldEnumerator


@dataclass(frozen=True)
class SchemaContext:
    """Settings, classifier and field lookup captured for one run."""

    settings: Settings
    classifier: TypeClassifier
    enumerator: FieldEnumerator

    @classmethod
    def for_run(cls, settings: Settings, classifier: Optional[TypeClassifier] = None) -> "SchemaContext":
        return cls(
            settings=settings,
            classifier=classifier or TypeClassifier(),
            enumerator=FieldEnumerator(use_all_fields=settings.use_all_fields),
        )

    def kind(self, declared: Any) -> Kind:
        """Classify ``declared``; disallowed arrays fall back to composites."""
        kind = self.classifier.classify(declared)
        if kind is Kind.ARRAY and not self.settings.allow_arrays:
            return Kind.COMPOSITE
        return kind

    def fields(self, declared: Any) -> Tuple[FieldDescriptor, ...]:
        return self.enumerator.fields(declared)


__all__ = ["SchemaContext"]
