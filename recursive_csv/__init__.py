"""Flatten collections of typed records into delimiter-separated text."""

from .config import Settings, load_config, settings_from_config
from .errors import (
    EmptyCollectionError,
    FieldAccessError,
    MismatchedTypeError,
    RecursiveCSVError,
    SchemaResolutionError,
)
from .writer import RecursiveCSVWriter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EmptyCollectionError",
    "FieldAccessError",
    "MismatchedTypeError",
    "RecursiveCSVError",
    "RecursiveCSVWriter",
    "SchemaResolutionError",
    "Settings",
    "load_config",
    "settings_from_config",
]
