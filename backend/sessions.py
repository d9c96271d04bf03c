"""Persistence of completed workout sessions.

Every saved session lives in one JSON array stored under
:data:`backend.STORAGE_KEY`, most recent session first.  The store never
caches: each call decodes the blob again and each mutation writes the
whole collection back in a single atomic write.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping

from backend import STORAGE_KEY
from backend.storage import LocalStorage

# Keys written by the original browser client mapped to their current names
_LEGACY_KEYS = {"date": "createdAt", "routine": "routineId"}


class SessionNotFoundError(LookupError):
    """Raised when a session id does not exist in the store."""


class InvalidFormatError(ValueError):
    """Raised when data to import is not a list of session objects."""


def normalize_session(data: Mapping) -> dict:
    """Return ``data`` with legacy keys renamed to the current layout.

    Older exports used ``date``/``routine``/``setNum`` and had no
    ``durationMinutes``.  The ``displayDate`` field is dropped since dates
    are formatted when displayed.  Exercises and sets that are not objects
    are discarded so a damaged record still reads.
    """

    session = dict(data)
    for old, new in _LEGACY_KEYS.items():
        if old in session:
            value = session.pop(old)
            session.setdefault(new, value)
    session.pop("displayDate", None)
    session.setdefault("durationMinutes", 0)
    exercises = []
    for ex in _as_list(session.get("exercises")):
        if not isinstance(ex, Mapping):
            continue
        ex = dict(ex)
        sets = []
        for s in _as_list(ex.get("sets")):
            if not isinstance(s, Mapping):
                continue
            s = dict(s)
            if "setNum" in s:
                s.setdefault("setNumber", s.pop("setNum"))
            sets.append(s)
        ex["sets"] = sets
        exercises.append(ex)
    session["exercises"] = exercises
    return session


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def validate_session(data) -> None:
    """Raise :class:`InvalidFormatError` unless ``data`` looks like a session.

    A session needs an ``id`` and a ``day``.  ``exercises``, when present,
    must be a list of objects whose ``sets`` are lists of objects.
    """

    if not isinstance(data, Mapping):
        raise InvalidFormatError("Invalid data format: sessions must be objects")
    for key in ("id", "day"):
        if data.get(key) in (None, ""):
            raise InvalidFormatError(f"Invalid data format: session is missing {key!r}")
    exercises = data.get("exercises", [])
    if not isinstance(exercises, list):
        raise InvalidFormatError("Invalid data format: exercises must be a list")
    for ex in exercises:
        if not isinstance(ex, Mapping):
            raise InvalidFormatError("Invalid data format: exercises must be objects")
        sets = ex.get("sets", [])
        if not isinstance(sets, list) or not all(isinstance(s, Mapping) for s in sets):
            raise InvalidFormatError("Invalid data format: sets must be a list of objects")


class SessionStore:
    """Create, list, update and delete saved sessions."""

    def __init__(self, storage: LocalStorage | None = None, key: str = STORAGE_KEY) -> None:
        self.storage = storage if storage is not None else LocalStorage()
        self.key = key

    # ------------------------------------------------------------------
    # Raw blob access
    # ------------------------------------------------------------------
    def _write(self, sessions: list[dict]) -> None:
        self.storage.set_item(self.key, json.dumps(sessions))

    def list(self) -> list[dict]:
        """Return every stored session, most recent first.

        Missing or unreadable data yields an empty list instead of an
        error.
        """

        try:
            raw = self.storage.get_item(self.key)
            if not raw:
                return []
            data = json.loads(raw)
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError
            logging.warning("Stored sessions under %r are corrupt; ignoring", self.key)
            return []
        if not isinstance(data, list):
            logging.warning("Stored sessions under %r are not a list; ignoring", self.key)
            return []
        return [normalize_session(s) for s in data if isinstance(s, Mapping)]

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def find_by_day(self, day: str) -> dict | None:
        """Return the most recent session recorded for ``day``."""

        for session in self.list():
            if session.get("day") == day:
                return session
        return None

    def find_by_id(self, session_id) -> dict | None:
        target = str(session_id)
        for session in self.list():
            if str(session.get("id")) == target:
                return session
        return None

    def next_id(self, now_ms: int | None = None) -> int:
        """Return an id larger than any stored id.

        Ids stay timestamp-like (milliseconds since the epoch) but two
        sessions created within the same millisecond still differ.
        """

        if now_ms is None:
            now_ms = int(time.time() * 1000)
        highest = 0
        for session in self.list():
            try:
                highest = max(highest, int(session.get("id")))
            except (TypeError, ValueError, OverflowError):
                continue
        return max(now_ms, highest + 1)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def append(self, session: dict) -> None:
        """Insert ``session`` at the front of the collection."""

        sessions = self.list()
        sessions.insert(0, session)
        self._write(sessions)
        logging.info("Saved session %s (%s)", session.get("id"), session.get("day"))

    def replace(self, session_id, updated: Mapping) -> dict:
        """Overwrite the exercises of ``session_id`` with ``updated``'s.

        The id, creation time, day, routine and duration of the stored
        record are preserved.  Raises :class:`SessionNotFoundError` without
        writing anything when the id is unknown.
        """

        sessions = self.list()
        target = str(session_id)
        for index, session in enumerate(sessions):
            if str(session.get("id")) == target:
                break
        else:
            raise SessionNotFoundError(f"Session {session_id} not found")

        record = dict(sessions[index])
        record["exercises"] = list(updated["exercises"])
        sessions[index] = record
        self._write(sessions)
        logging.info("Updated session %s", session_id)
        return record

    def remove(self, session_id) -> None:
        """Delete ``session_id``. Unknown ids are ignored."""

        target = str(session_id)
        sessions = self.list()
        remaining = [s for s in sessions if str(s.get("id")) != target]
        if len(remaining) == len(sessions):
            return
        self._write(remaining)
        logging.info("Deleted session %s", session_id)

    def replace_all(self, sessions) -> None:
        """Replace the whole collection with ``sessions``.

        ``sessions`` must be a list or tuple of session objects (see
        :func:`validate_session`), otherwise :class:`InvalidFormatError` is
        raised and nothing is written.
        """

        if not isinstance(sessions, (list, tuple)):
            raise InvalidFormatError("Invalid data format: expected a list of sessions")
        for item in sessions:
            validate_session(item)
        self._write([dict(s) for s in sessions])
        logging.info("Replaced stored sessions with %d entries", len(sessions))

    def clear(self) -> None:
        """Remove every stored session."""

        self.storage.remove_item(self.key)
        logging.info("Cleared all stored sessions")
