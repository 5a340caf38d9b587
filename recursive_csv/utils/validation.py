"""Input validation helpers."""
from __future__ import annotations

import importlib
from typing import Tuple


def parse_reference(reference: str) -> Tuple[str, str]:
    """Split ``package.module:attribute`` into its two halves."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name.strip() or not attribute.strip():
        raise ValueError(f"expected 'module:attribute', got {reference!r}")
    return module_name.strip(), attribute.strip()


def resolve_reference(reference: str) -> object:
    """Import the object named by ``package.module:attribute``."""
    module_name, attribute = parse_reference(reference)
    target: object = importlib.import_module(module_name)
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ValueError(f"{module_name} has no attribute {attribute!r}") from exc
    return target


__all__ = ["parse_reference", "resolve_reference"]
