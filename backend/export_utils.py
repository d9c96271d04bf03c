"""Export and import the saved sessions as JSON files."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path

from backend.sessions import InvalidFormatError, SessionStore, validate_session


def make_export_name() -> str:
    """Return an auto-generated export filename.

    The name follows the format ``workout-logs-YYYY-MM-DD.json`` using the
    current local date.
    """
    return datetime.now().strftime("workout-logs-%Y-%m-%d.json")


def default_export_dir() -> Path:
    """Return ``WORKOUT_LOG_EXPORT_DIR`` or the user's ``Downloads`` folder."""

    override = os.environ.get("WORKOUT_LOG_EXPORT_DIR")
    dest = Path(override).expanduser() if override else Path.home() / "Downloads"
    dest.mkdir(parents=True, exist_ok=True)
    return dest


def export_sessions(store: SessionStore, dest_dir: Path | None = None) -> Path:
    """Write every stored session to ``dest_dir`` as pretty-printed JSON.

    Returns the absolute path of the written file.  Raises ``ValueError``
    when there is nothing to export.  File-system errors are logged and
    re-raised so the caller can tell the user what went wrong.
    """

    sessions = store.list()
    if not sessions:
        raise ValueError("No workout data to export")

    dest_dir = dest_dir or default_export_dir()
    dest = (Path(dest_dir) / make_export_name()).resolve()
    try:
        with dest.open("w", encoding="utf-8") as fh:
            json.dump(sessions, fh, indent=2)
    except FileNotFoundError:
        logging.exception("Destination not found for export: %s", dest)
        raise
    except PermissionError:
        logging.exception("Permission denied writing export to %s", dest)
        raise
    except OSError:
        logging.exception("OS error exporting sessions to %s", dest)
        raise
    logging.info("Exported %d sessions to %s", len(sessions), dest)
    return dest


def load_import_file(path: Path) -> list:
    """Parse ``path`` and return the sessions it contains.

    Raises :class:`InvalidFormatError` if the file is not UTF-8 JSON, its
    top level value is not a list or any record is malformed.  Nothing is
    written.
    """

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        logging.error("Import failed validation: %s is not UTF-8 text", path)
        raise InvalidFormatError("Invalid file encoding") from exc
    except json.JSONDecodeError as exc:
        logging.error("Import failed validation: %s is not valid JSON", path)
        raise InvalidFormatError(f"Invalid JSON: {exc.msg}") from exc
    if not isinstance(data, list):
        logging.error("Import failed validation: %s does not hold a list", path)
        raise InvalidFormatError("Invalid data format")
    try:
        for record in data:
            validate_session(record)
    except InvalidFormatError as exc:
        logging.error("Import failed validation: %s: %s", path, exc)
        raise
    return data
