"""Text helpers shared by the history and details views."""

from __future__ import annotations

from datetime import datetime


def _format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_session_date(created_at: str | None) -> str:
    """Return ``created_at`` as e.g. ``Tue, Nov 14, 2023`` in local time.

    Unparseable values are returned unchanged.
    """

    if not created_at:
        return ""
    try:
        dt = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return created_at
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return f"{dt:%a}, {dt:%b} {dt.day}, {dt.year}"


def describe_set(set_log: dict, unit: str = "kg") -> str:
    number = set_log.get("setNumber", "?")
    weight = _format_number(set_log.get("weight", 0))
    reps = set_log.get("reps", 0)
    return f"Set {number}: {weight} {unit} × {reps} reps"


def session_details(session: dict, unit: str = "kg") -> str:
    """Return a multi-line description of every exercise in ``session``."""

    lines: list[str] = []
    for exercise in session.get("exercises", []):
        sets = exercise.get("sets", [])
        if not sets:
            continue
        lines.append(exercise.get("name", ""))
        lines.extend(f"  {describe_set(s, unit)}" for s in sets)
    if not lines:
        return "No exercise data recorded"
    return "\n".join(lines)


def session_subtitle(session: dict) -> str:
    text = format_session_date(session.get("createdAt"))
    minutes = session.get("durationMinutes") or 0
    if minutes:
        text = f"{text} · {minutes} min"
    return text
