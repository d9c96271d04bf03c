"""Shared constants and globals for backend modules."""

from __future__ import annotations

import os
from pathlib import Path

# Name of the blob holding every saved session
STORAGE_KEY = "workoutLogs"

# Routine used when the settings do not name one
DEFAULT_ROUTINE = "PPL"

MS_PER_MINUTE = 60_000

# Seconds between stopwatch display refreshes
TIMER_REFRESH_INTERVAL = 1.0

# Directory holding the persisted key-value files
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def data_dir() -> Path:
    """Return the data directory, honouring ``WORKOUT_LOG_DATA_DIR``."""

    override = os.environ.get("WORKOUT_LOG_DATA_DIR")
    return Path(override).expanduser() if override else DEFAULT_DATA_DIR


__all__ = [
    "STORAGE_KEY",
    "DEFAULT_ROUTINE",
    "MS_PER_MINUTE",
    "TIMER_REFRESH_INTERVAL",
    "DEFAULT_DATA_DIR",
    "data_dir",
]
