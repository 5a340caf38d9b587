"""Enumerate the annotated fields of record classes."""
from __future__ import annotations

import dataclasses
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..errors import FieldAccessError, SchemaResolutionError
from .classifier import unwrap


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field declared on ``owner``."""

    name: str
    declared_type: Any
    owner: type

    def read(self, instance: object) -> Any:
        try:
            return getattr(instance, self.name)
        except AttributeError as exc:
            raise FieldAccessError(self.owner, self.name, str(exc)) from exc


def _is_field_annotation(annotation: Any) -> bool:
    if annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar:
        return False
    if annotation is dataclasses.InitVar or isinstance(annotation, dataclasses.InitVar):
        return False
    return True


def declared_annotations(cls: type) -> Dict[str, Any]:
    """Return the resolved field annotations written on ``cls`` itself."""
    try:
        own_names = list(inspect.get_annotations(cls))
        if not own_names:
            return {}
        hints = typing.get_type_hints(cls)
    except (NameError, AttributeError, SyntaxError, TypeError) as exc:
        raise SchemaResolutionError(
            f"cannot resolve annotations of {cls.__qualname__}: {exc}"
        ) from exc
    resolved = {name: hints[name] for name in own_names if name in hints}
    return {name: hint for name, hint in resolved.items() if _is_field_annotation(hint)}


class FieldEnumerator:
    """Ordered field lookup for one conversion run.

    With ``use_all_fields`` every field declared directly on the class is
    returned, private ones included and inherited ones excluded. Otherwise
    only public fields are returned, inherited ones first.
    """

    def __init__(self, use_all_fields: bool = True) -> None:
        self.use_all_fields = use_all_fields
        self._cache: Dict[type, Tuple[FieldDescriptor, ...]] = {}

    def fields(self, declared: Any) -> Tuple[FieldDescriptor, ...]:
        cls = unwrap(declared)
        if typing.get_origin(cls) is not None or not isinstance(cls, type):
            return ()
        cached = self._cache.get(cls)
        if cached is None:
            cached = self._cache[cls] = self._collect(cls)
        return cached

    def _collect(self, cls: type) -> Tuple[FieldDescriptor, ...]:
        if self.use_all_fields:
            hints = declared_annotations(cls)
        else:
            hints = {}
            for klass in reversed(cls.__mro__):
                if klass is object:
                    continue
                for name, hint in declared_annotations(klass).items():
                    if not name.startswith("_"):
                        hints[name] = hint
        return tuple(
            FieldDescriptor(name=name, declared_type=unwrap(hint), owner=cls)
            for name, hint in hints.items()
        )


__all__ = ["FieldDescriptor", "FieldEnumerator", "declared_annotations"]
