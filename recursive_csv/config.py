"""Conversion settings and the YAML configuration loader."""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RECURSIVE_CSV_CONFIG"
PROFILE_ENV_VAR = "RECURSIVE_CSV_PROFILE"

DEFAULT_CONFIG: Dict[str, Any] = {
    "use_all_fields": True,
    "max_depth": 0,
    "allow_arrays": False,
    "array_element_delimiter": "|",
    "column_delimiter": ",",
    "ignore_mismatched_type": True,
    "path_separator": ".",
    "profiles": {},
}

_FLAGS = ("use_all_fields", "allow_arrays", "ignore_mismatched_type")
_SEPARATORS = ("array_element_delimiter", "column_delimiter", "path_separator")


@dataclass(frozen=True)
class Settings:
    """Options for one conversion run.

    Instances are immutable; use :meth:`replace` to derive a changed copy.
    """

    use_all_fields: bool = True
    max_depth: int = 0
    allow_arrays: bool = False
    array_element_delimiter: str = "|"
    column_delimiter: str = ","
    ignore_mismatched_type: bool = True
    path_separator: str = "."

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        for name in _FLAGS:
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        for name in _SEPARATORS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string")

    def replace(self, **changes: Any) -> "Settings":
        return dataclasses.replace(self, **changes)


SETTING_NAMES = tuple(f.name for f in dataclasses.fields(Settings))


def _overlay(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Layer ``override`` on ``base``; nested mappings such as ``profiles`` merge key by key."""
    merged = {**base}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _overlay(current, value)
        merged[key] = value
    return merged


def load_config(
    path: Union[str, Path, None] = None,
    profile: Optional[str] = None,
) -> Dict[str, Any]:
    """Load configuration from a YAML file, falling back to defaults.

    The file comes from ``path`` or the ``RECURSIVE_CSV_CONFIG`` environment
    variable. A named entry under ``profiles`` (from ``profile`` or
    ``RECURSIVE_CSV_PROFILE``) is merged over the result.
    """
    cfg = dict(DEFAULT_CONFIG)
    config_path = path or os.getenv(CONFIG_ENV_VAR)
    if config_path:
        file = Path(config_path)
        if not file.exists():
            raise FileNotFoundError(f"{file} not found")
        data = yaml.safe_load(file.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{file} must contain a mapping, got {type(data).__name__}")
        cfg = _overlay(cfg, data)
    profile_name = profile or os.getenv(PROFILE_ENV_VAR)
    if profile_name:
        overrides = (cfg.get("profiles") or {}).get(profile_name)
        if not isinstance(overrides, dict):
            raise ValueError(f"unknown configuration profile {profile_name!r}")
        cfg = _overlay(cfg, overrides)
    return cfg


def settings_from_config(cfg: Dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a loaded configuration mapping."""
    unknown = sorted(key for key in cfg if key not in SETTING_NAMES and key != "profiles")
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
    return Settings(**{name: cfg[name] for name in SETTING_NAMES if name in cfg})


__all__ = [
    "DEFAULT_CONFIG",
    "SETTING_NAMES",
    "Settings",
    "load_config",
    "settings_from_config",
]
