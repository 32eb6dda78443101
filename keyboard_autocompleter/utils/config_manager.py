# config_manager.py - JSON config manager

from __future__ import annotations
import json
import os
from typing import Any, Dict, List, Optional

from .logger_utils import LEVELS, Log

DEFAULTS: Dict[str, Any] = {
    "max_suggestions": 10,  # 0 = show everything
    "lowercase": True,      # lowercase input before train/lookup
    "show_confidence": True,
    "log_level": "WARNING",
    "log_file": "",         # empty = don't write a log file
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Unknown option or a value that doesn't fit the option's type."""


def _coerce(key: str, val: Any) -> Any:
    current = DEFAULTS[key]
    if isinstance(current, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ConfigError(f"{key}: expected a boolean, got {val!r}")
    if isinstance(current, int):
        try:
            out = int(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key}: expected an integer, got {val!r}") from e
        if out < 0:
            raise ConfigError(f"{key}: must be >= 0")
        return out
    out = str(val)
    if key == "log_level":
        out = out.upper()
        if out not in LEVELS:
            raise ConfigError(f"log_level: one of {', '.join(LEVELS)}")
    return out


class Config:
    """
    Options for the console front ends.
    path=None keeps everything in memory; otherwise values in the JSON file
    are merged over DEFAULTS and save() writes them back.
    """

    def __init__(self, path: Optional[str] = None, log: Optional[Log] = None):
        self.path = path
        self.log = log or Log.quiet()
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self) -> None:
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self.log.warning(f"config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(raw, dict):
            self.log.warning(f"config {self.path} is not a JSON object, using defaults")
            return
        for k, v in raw.items():
            try:
                self.data[k] = self._check(k, v)
            except ConfigError as e:
                self.log.warning(f"config {self.path}: {e}")

    def _check(self, key: str, val: Any) -> Any:
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        return _coerce(key, val)

    def save(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        return self.data[key]

    def set(self, key: str, val: Any) -> None:
        self.data[key] = self._check(key, val)
        self.save()

    def show(self) -> List[str]:
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)
