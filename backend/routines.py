"""Predefined workout routines.

Each routine maps a day name to the ordered exercises performed on that
day.  The catalog is read-only; sessions copy exercise names out of it
when they are created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from backend import DEFAULT_ROUTINE


class MuscleGroup(str, Enum):
    UPPER_CHEST = "Upper Chest"
    FRONT_SHOULDERS = "Front Shoulders"
    TRICEPS = "Triceps"
    MID_CHEST = "Mid Chest"
    SIDE_SHOULDERS = "Side Shoulders"
    LATS = "Lats"
    BICEPS = "Biceps"
    LOWER_BACK = "Lower Back"
    GLUTES = "Glutes"
    HAMSTRINGS = "Hamstrings"
    TRAPS = "Traps"
    FOREARMS = "Forearms"
    GRIP = "Grip"
    QUADS = "Quads"
    CORE = "Core"
    CALVES = "Calves"
    ABS = "Abs"
    REAR_SHOULDERS = "Rear Shoulders"
    UPPER_BACK = "Upper Back"
    LOWER_CHEST = "Lower Chest"


@dataclass(frozen=True)
class ExerciseSpec:
    """Catalog definition of an exercise and how many sets it gets."""

    name: str
    sets: int
    muscles: tuple[MuscleGroup, ...] = field(default=())


M = MuscleGroup

WORKOUT_ROUTINES: dict[str, dict[str, list[ExerciseSpec]]] = {
    "PPL": {
        "Push A": [
            ExerciseSpec("Incline Dumbbell Bench Press", 4, (M.UPPER_CHEST, M.FRONT_SHOULDERS, M.TRICEPS)),
            ExerciseSpec("Seated Chest Press", 3, (M.MID_CHEST, M.TRICEPS)),
            ExerciseSpec("Arnold Press", 3, (M.FRONT_SHOULDERS, M.SIDE_SHOULDERS, M.TRICEPS)),
            ExerciseSpec("Chest Fly", 3, (M.MID_CHEST,)),
            ExerciseSpec("Dumbbell/Cable Lateral Raises", 3, (M.SIDE_SHOULDERS,)),
            ExerciseSpec("Overhead Tricep Extension", 3, (M.TRICEPS,)),
            ExerciseSpec("Tricep Pushdowns", 3, (M.TRICEPS,)),
        ],
        "Pull A": [
            ExerciseSpec("Lat Pulldown / Weighted Chin-ups", 4, (M.LATS, M.BICEPS)),
            ExerciseSpec("Seated Cable Row / Barbell Row", 3, (M.UPPER_BACK, M.LATS)),
            ExerciseSpec("Lower Back Hyperextensions", 3, (M.LOWER_BACK, M.GLUTES, M.HAMSTRINGS)),
            ExerciseSpec("Shrugs", 3, (M.TRAPS,)),
            ExerciseSpec("Incline Dumbbell Curls / Bayesian Curls", 4, (M.BICEPS,)),
            ExerciseSpec("Preacher Curls / Spider Curls", 3, (M.BICEPS,)),
            ExerciseSpec("Wrist Curls + Dead Hangs", 3, (M.FOREARMS, M.GRIP)),
        ],
        "Legs A": [
            ExerciseSpec("Barbell Squat", 4, (M.QUADS, M.GLUTES, M.CORE)),
            ExerciseSpec("Hip Thrust", 3, (M.GLUTES, M.HAMSTRINGS)),
            ExerciseSpec("Leg Extensions", 3, (M.QUADS,)),
            ExerciseSpec("Standing Calf Raises", 4, (M.CALVES,)),
            ExerciseSpec("Weighted Crunches", 3, (M.ABS,)),
        ],
        "Push B": [
            ExerciseSpec("Dumbbell Shoulder Press", 3, (M.FRONT_SHOULDERS, M.SIDE_SHOULDERS, M.TRICEPS)),
            ExerciseSpec("Flat Bench Press", 3, (M.MID_CHEST, M.FRONT_SHOULDERS, M.TRICEPS)),
            ExerciseSpec("Dumbbell/Cable Lateral Raises", 3, (M.SIDE_SHOULDERS,)),
            ExerciseSpec("Incline Dumbbell Fly", 3, (M.UPPER_CHEST,)),
            ExerciseSpec("Front Dumbbell/Cable Raise", 3, (M.FRONT_SHOULDERS,)),
            ExerciseSpec("Skull Crushers", 3, (M.TRICEPS,)),
            ExerciseSpec("Weighted Dips / Cable Kickbacks", 3, (M.TRICEPS, M.LOWER_CHEST)),
        ],
        "Pull B": [
            ExerciseSpec("Barbell Row (Overhand)", 4, (M.UPPER_BACK, M.LATS)),
            ExerciseSpec("Pull-ups (Close/Neutral Grip)", 3, (M.LATS, M.BICEPS)),
            ExerciseSpec("Rear Delt Fly / Face Pulls", 3, (M.REAR_SHOULDERS, M.UPPER_BACK)),
            ExerciseSpec("Cable Pullovers", 3, (M.LATS,)),
            ExerciseSpec("Standing Cable Curls", 4, (M.BICEPS,)),
            ExerciseSpec("Hammer Curls / Reverse Cable Curls", 3, (M.BICEPS, M.FOREARMS)),
            ExerciseSpec("Wrist Curls + Dead Hangs", 3, (M.FOREARMS, M.GRIP)),
        ],
        "Legs B": [
            ExerciseSpec("Leg Press", 4, (M.QUADS, M.GLUTES)),
            ExerciseSpec("Romanian Deadlift (RDL)", 3, (M.HAMSTRINGS, M.GLUTES, M.LOWER_BACK)),
            ExerciseSpec("Dumbbell Lunges", 3, (M.QUADS, M.GLUTES, M.HAMSTRINGS)),
            ExerciseSpec("Hamstring Curls", 3, (M.HAMSTRINGS,)),
            ExerciseSpec("Seated Calf Raises", 4, (M.CALVES,)),
            ExerciseSpec("Weighted Crunches", 3, (M.ABS,)),
        ],
    },
}


def get_routine(
    routine_id: str = DEFAULT_ROUTINE,
    catalog: dict[str, dict[str, list[ExerciseSpec]]] | None = None,
) -> dict[str, list[ExerciseSpec]]:
    """Return the days of ``routine_id``. Raises ``KeyError`` if unknown."""

    catalog = WORKOUT_ROUTINES if catalog is None else catalog
    try:
        return catalog[routine_id]
    except KeyError:
        raise KeyError(f"Routine '{routine_id}' not found") from None


def get_day_names(routine_id: str = DEFAULT_ROUTINE, catalog=None) -> list[str]:
    return list(get_routine(routine_id, catalog))


def get_day(
    day: str, routine_id: str = DEFAULT_ROUTINE, catalog=None
) -> list[ExerciseSpec]:
    """Return the ordered exercises scheduled for ``day``."""

    routine = get_routine(routine_id, catalog)
    try:
        return routine[day]
    except KeyError:
        raise KeyError(f"Day '{day}' not found in routine '{routine_id}'") from None


def resolve_routine_id(routine_id, catalog=None) -> str:
    """Return ``routine_id`` if the catalog has it, else :data:`DEFAULT_ROUTINE`."""

    catalog = WORKOUT_ROUTINES if catalog is None else catalog
    if isinstance(routine_id, str) and routine_id in catalog:
        return routine_id
    logging.warning("Unknown routine %r; using %r", routine_id, DEFAULT_ROUTINE)
    return DEFAULT_ROUTINE
