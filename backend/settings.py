from __future__ import annotations

"""Utility functions for loading and saving user settings.

The settings are stored as a list of dictionaries to preserve order.
Each dictionary contains ``key``, ``value`` and ``type`` entries.
"""

from pathlib import Path
import json
import logging
from typing import Any, List, Dict

from backend import DEFAULT_ROUTINE, data_dir

# Default settings to initialize the file on first run.
DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "routine_id", "value": DEFAULT_ROUTINE, "type": "str"},
    {"key": "weight_unit", "value": "kg", "type": "str"},
    {"key": "prefill_previous", "value": True, "type": "bool"},
]

# Internal cache so settings are only read from disk once.
_settings_cache: List[Dict[str, Any]] | None = None


def settings_path() -> Path:
    """Return the JSON file where settings are persisted."""
    return data_dir() / "settings.json"


def _defaults() -> List[Dict[str, Any]]:
    return [dict(item) for item in DEFAULT_SETTINGS]


def load_settings() -> List[Dict[str, Any]]:
    """Load settings from :func:`settings_path` or create defaults."""
    path = settings_path()
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, list):
                return data
        except (OSError, json.JSONDecodeError):
            logging.warning("Settings file %s is unreadable; using defaults", path)
    defaults = _defaults()
    save_settings(defaults)
    return defaults


def save_settings(settings: List[Dict[str, Any]]) -> None:
    """Persist ``settings`` to :func:`settings_path`."""
    path = settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh)


def get_settings() -> List[Dict[str, Any]]:
    """Return the cached settings list, loading from disk if needed."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def reset_cache() -> None:
    global _settings_cache
    _settings_cache = None


def get_value(key: str) -> Any:
    """Fetch the value associated with ``key``.

    Keys missing from the stored file fall back to :data:`DEFAULT_SETTINGS`.
    """
    for item in get_settings():
        if item.get("key") == key:
            return item.get("value")
    for item in DEFAULT_SETTINGS:
        if item["key"] == key:
            return item["value"]
    return None


def set_value(key: str, value: Any) -> None:
    """Update ``key`` with ``value`` and persist the change."""
    settings = get_settings()
    for item in settings:
        if item.get("key") == key:
            item["value"] = value
            break
    else:
        settings.append({"key": key, "value": value, "type": type(value).__name__})
    save_settings(settings)
