"""Turn the text entered on the log screen into session records.

The input grid mirrors the form: ``grid[i][j]`` is the ``(weight, reps)``
text pair for set ``j`` of exercise ``i``.  Blank or unparseable text is
stored as ``0`` so every session has one entry per planned set.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timezone

from backend import DEFAULT_ROUTINE
from backend.routines import ExerciseSpec, get_day

InputGrid = Sequence[Sequence[tuple]]


class NoDataWarning(UserWarning):
    """Raised when a session would be saved without any entered values."""


def is_blank(raw) -> bool:
    return raw is None or not str(raw).strip()


def _parse_number(raw) -> float:
    if is_blank(raw):
        return 0.0
    try:
        value = float(str(raw).strip())
    except ValueError:
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_weight(raw) -> float:
    """Return ``raw`` as a weight, ``0.0`` when blank or invalid."""

    return _parse_number(raw)


def parse_reps(raw) -> int:
    """Return ``raw`` as a rep count, truncating decimals like ``"8.5"``."""

    return int(_parse_number(raw))


def _cell(grid: InputGrid, ex_idx: int, set_idx: int) -> tuple:
    try:
        weight, reps = grid[ex_idx][set_idx]
    except (IndexError, TypeError, ValueError):
        return None, None
    return weight, reps


def build_exercise_logs(
    exercises: Sequence[ExerciseSpec], grid: InputGrid
) -> tuple[list[dict], bool]:
    """Return the exercise logs for ``exercises`` and whether any input was given."""

    has_data = False
    logs: list[dict] = []
    for ex_idx, spec in enumerate(exercises):
        sets = []
        for set_idx in range(max(spec.sets, 0)):
            weight, reps = _cell(grid, ex_idx, set_idx)
            if not is_blank(weight) or not is_blank(reps):
                has_data = True
            sets.append(
                {
                    "setNumber": set_idx + 1,
                    "weight": parse_weight(weight),
                    "reps": parse_reps(reps),
                }
            )
        logs.append({"name": spec.name, "sets": sets})
    return logs, has_data


def _iso_timestamp(now: datetime) -> str:
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def build_session(
    day: str,
    grid: InputGrid,
    duration_minutes: int,
    *,
    routine_id: str = DEFAULT_ROUTINE,
    catalog=None,
    session_id: int | None = None,
    now: datetime | None = None,
    allow_empty: bool = False,
) -> dict:
    """Assemble a new session for ``day`` from the entered ``grid``.

    ``duration_minutes`` should be read from the stopwatch right before
    calling.  Raises :class:`NoDataWarning` when nothing was entered unless
    ``allow_empty`` is true, and ``KeyError`` for an unknown day.
    """

    exercises = get_day(day, routine_id, catalog)
    logs, has_data = build_exercise_logs(exercises, grid)
    if not has_data and not allow_empty:
        raise NoDataWarning("No weight or rep data was entered")

    now = now or datetime.now(timezone.utc)
    if session_id is None:
        session_id = int(now.timestamp() * 1000)
    return {
        "id": session_id,
        "createdAt": _iso_timestamp(now),
        "day": day,
        "routineId": routine_id,
        "durationMinutes": max(int(duration_minutes), 0),
        "exercises": logs,
    }


def build_update(
    session: dict, grid: InputGrid, *, catalog=None, allow_empty: bool = False
) -> dict:
    """Return ``session`` with exercises rebuilt from an edited ``grid``."""

    exercises = get_day(
        session["day"], session.get("routineId", DEFAULT_ROUTINE), catalog
    )
    logs, has_data = build_exercise_logs(exercises, grid)
    if not has_data and not allow_empty:
        raise NoDataWarning("No weight or rep data was entered")
    updated = dict(session)
    updated["exercises"] = logs
    return updated


def _as_text(value) -> str:
    if not value:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _set_texts(sets: list[dict]) -> dict[int, tuple[str, str]]:
    texts = {}
    for index, s in enumerate(sets, 1):
        number = s.get("setNumber", index)
        texts[number] = (_as_text(s.get("weight")), _as_text(s.get("reps")))
    return texts


def previous_values(
    exercises: Sequence[ExerciseSpec], previous_session: dict | None
) -> list[list[tuple[str, str]]]:
    """Return prefill text for ``exercises`` from ``previous_session``.

    Exercises are matched by name so reordering a day keeps the right
    values next to each exercise.
    """

    by_name = {}
    if previous_session:
        for ex in previous_session.get("exercises", []):
            by_name.setdefault(ex.get("name"), _set_texts(ex.get("sets", [])))

    grid = []
    for spec in exercises:
        texts = by_name.get(spec.name, {})
        grid.append(
            [texts.get(number, ("", "")) for number in range(1, max(spec.sets, 0) + 1)]
        )
    return grid

