"""Strength math: estimated one-rep max and per-set statistics.

References:
    Epley, B. (1985). Poundage Chart. Boyd Epley Workout.
"""

from __future__ import annotations

from datetime import datetime

from training_engine.models.enums import (
    EPLEY_REPS_DIVISOR,
    FEEDBACK_EASY_RPE,
    FEEDBACK_HARD_RPE,
)
from training_engine.models.exercise import PersonalRecord, WorkoutSet


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max from a weight/rep pair with the Epley formula.

    A single rep is already a 1RM and is returned unchanged. Rounding to
    0.1 kg flattens the curve for loads under ~3 kg and can return less than
    ``weight`` (0.01 kg x 2 gives 0.0); callers reporting a lifted 1RM floor
    the result at ``weight``.

    Args:
        weight: Load lifted in kg.
        reps: Repetitions completed (>= 1).

    Returns:
        Estimated 1RM in kg, rounded to one decimal.

    Raises:
        ValueError: If reps < 1.
    """
    if reps < 1:
        raise ValueError(f"Reps must be at least 1, got {reps}")
    if reps == 1:
        return weight
    return round(weight * (1 + reps / EPLEY_REPS_DIVISOR), 1)


def set_volume(weight: float, reps: int) -> float:
    """Volume load of a set (weight x reps)."""
    return weight * reps


def intensity_label(rpe: int | None) -> str:
    return f"RPE {rpe}" if rpe else "Not recorded"


def set_feedback(rpe: int | None) -> str:
    """Short coaching feedback after a logged set."""
    if rpe and rpe >= FEEDBACK_HARD_RPE:
        return (
            "Great effort! Consider slightly lower weight next set "
            "for optimal training stimulus."
        )
    if rpe and rpe <= FEEDBACK_EASY_RPE:
        return "Feeling strong! You could increase weight on the next set."
    return "Good set! Keep it up."


def personal_record_from_set(
    workout_set: WorkoutSet, achieved_at: datetime
) -> PersonalRecord:
    """Normalise a logged set into a PersonalRecord candidate."""
    return PersonalRecord(
        exercise_id=workout_set.exercise_id,
        exercise_name=workout_set.exercise_name,
        weight=workout_set.weight,
        reps=workout_set.reps,
        # Rounding can dip below the lifted load for tiny weights.
        estimated_1rm=max(
            estimate_one_rep_max(workout_set.weight, workout_set.reps),
            workout_set.weight,
        ),
        achieved_at=achieved_at,
    )
