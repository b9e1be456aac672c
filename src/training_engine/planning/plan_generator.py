"""Plan generator — turn a split template and goal into a TrainingPlan."""

from __future__ import annotations

import time

from training_engine.models.enums import (
    CARDIO_DAY_EXERCISE_ID,
    CARDIO_DAY_MINUTES,
    MAX_EXERCISES_PER_DAY,
    PlanGoal,
    SplitType,
    WorkoutType,
)
from training_engine.models.plan import PlanDay, PlanExercise, RepRange, TrainingPlan

# Day structure of every named split. Unknown split tags fall back to PPL_3.
SPLIT_TEMPLATES: dict[SplitType, tuple[WorkoutType, ...]] = {
    SplitType.PPL: (
        WorkoutType.PUSH,
        WorkoutType.PULL,
        WorkoutType.LEGS,
        WorkoutType.PUSH,
        WorkoutType.PULL,
        WorkoutType.LEGS,
    ),
    SplitType.PPL_3: (WorkoutType.PUSH, WorkoutType.PULL, WorkoutType.LEGS),
    SplitType.UPPER_LOWER: (
        WorkoutType.UPPER,
        WorkoutType.LOWER,
        WorkoutType.UPPER,
        WorkoutType.LOWER,
    ),
    SplitType.TORSO_LIMBS: (
        WorkoutType.TORSO,
        WorkoutType.LIMBS,
        WorkoutType.TORSO,
        WorkoutType.LIMBS,
    ),
    SplitType.FULL_BODY: (
        WorkoutType.FULL_BODY,
        WorkoutType.FULL_BODY,
        WorkoutType.FULL_BODY,
    ),
    SplitType.BRO_SPLIT: (
        WorkoutType.PUSH,
        WorkoutType.PULL,
        WorkoutType.LEGS,
        WorkoutType.UPPER,
        WorkoutType.LOWER,
    ),
}

DEFAULT_SPLIT = SplitType.PPL_3

EXERCISE_RECOMMENDATIONS: dict[WorkoutType, tuple[str, ...]] = {
    WorkoutType.PUSH: (
        "Bench Press", "Overhead Press", "Incline Dumbbell Press",
        "Dips", "Lateral Raises", "Tricep Pushdowns",
    ),
    WorkoutType.PULL: (
        "Deadlift", "Barbell Row", "Pull-Ups",
        "Face Pulls", "Barbell Curls", "Hammer Curls",
    ),
    WorkoutType.LEGS: (
        "Squat", "Romanian Deadlift", "Leg Press",
        "Leg Curl", "Calf Raises", "Lunges",
    ),
    WorkoutType.TORSO: (
        "Bench Press", "Barbell Row", "Overhead Press",
        "Pull-Ups", "Dumbbell Flyes", "Face Pulls",
    ),
    WorkoutType.LIMBS: (
        "Squat", "Romanian Deadlift", "Barbell Curls",
        "Tricep Extensions", "Lateral Raises", "Calf Raises",
    ),
    WorkoutType.UPPER: (
        "Bench Press", "Barbell Row", "Overhead Press",
        "Pull-Ups", "Bicep Curls", "Tricep Extensions",
    ),
    WorkoutType.LOWER: (
        "Squat", "Romanian Deadlift", "Leg Press",
        "Leg Curl", "Calf Raises", "Hip Thrusts",
    ),
    WorkoutType.FULL_BODY: (
        "Squat", "Bench Press", "Barbell Row",
        "Overhead Press", "Romanian Deadlift", "Pull-Ups",
    ),
    WorkoutType.CUSTOM: (),
}

# (rep min, rep max, sets per exercise) per goal
GOAL_PRESCRIPTIONS: dict[PlanGoal, tuple[int, int, int]] = {
    PlanGoal.HYPERTROPHY: (8, 12, 4),
    PlanGoal.STRENGTH: (3, 6, 5),
    PlanGoal.ENDURANCE: (12, 20, 3),
}

_SPLIT_EXPLANATIONS: dict[SplitType, str] = {
    SplitType.PPL: (
        "Push/Pull/Legs split trains each muscle group twice per week "
        "with optimal recovery between sessions."
    ),
    SplitType.PPL_3: (
        "3-day PPL provides full coverage with one session per movement "
        "pattern per week."
    ),
    SplitType.UPPER_LOWER: (
        "Upper/Lower split balances training frequency with recovery, "
        "ideal for intermediate lifters."
    ),
    SplitType.TORSO_LIMBS: "Torso/Limbs separates core movements from arm/leg focus days.",
    SplitType.FULL_BODY: (
        "Full body training maximizes frequency and is ideal for beginners "
        "or time-constrained lifters."
    ),
    SplitType.BRO_SPLIT: (
        "Traditional bodybuilding split with high volume per muscle group "
        "once per week."
    ),
}


def resolve_split(split_type: str) -> tuple[WorkoutType, ...]:
    """Day structure for a split tag; unknown tags get the 3-day PPL."""
    try:
        return SPLIT_TEMPLATES[SplitType(split_type)]
    except ValueError:
        return SPLIT_TEMPLATES[DEFAULT_SPLIT]


def exercise_id_for(name: str) -> str:
    """Slug id for a recommended exercise, e.g. 'exercise-bench-press'."""
    return "exercise-" + "-".join(name.lower().split())


def day_name(workout_type: WorkoutType) -> str:
    """Display name of a plan day, e.g. 'Full body Day'."""
    label = workout_type.value
    return f"{label[0].upper()}{label[1:].replace('_', ' ', 1)} Day"


def generate_plan(
    name: str,
    split_type: str,
    days_per_week: int,
    goal: PlanGoal,
    include_cardio: bool = False,
    plan_id: str | None = None,
) -> TrainingPlan:
    """Generate a training plan from a split template.

    Args:
        name: Display name of the plan.
        split_type: Split tag (see SplitType); unknown tags fall back to PPL_3.
        days_per_week: Training days the athlete has available (2-6).
        goal: Selects sets and rep range for every exercise.
        include_cardio: Append one easy run when days remain after the split.
        plan_id: Explicit plan id; defaults to a millisecond timestamp id.

    Returns:
        The generated TrainingPlan.
    """
    structure = resolve_split(split_type)
    rep_min, rep_max, sets = GOAL_PRESCRIPTIONS[PlanGoal(goal)]

    days: list[PlanDay] = []
    for index, workout_type in enumerate(structure[: min(days_per_week, len(structure))]):
        exercises = EXERCISE_RECOMMENDATIONS.get(workout_type, ())
        days.append(
            PlanDay(
                day_number=index + 1,
                name=day_name(workout_type),
                workout_type=workout_type,
                exercises=tuple(
                    PlanExercise(
                        exercise_id=exercise_id_for(exercise),
                        order=order,
                        target_sets=sets,
                        target_reps=RepRange(rep_min, rep_max),
                    )
                    for order, exercise in enumerate(
                        exercises[:MAX_EXERCISES_PER_DAY], start=1
                    )
                ),
            )
        )

    if include_cardio and days_per_week > len(days):
        days.append(_easy_run_day(len(days) + 1))

    return TrainingPlan(
        id=plan_id or f"plan-{int(time.time() * 1000)}",
        name=name,
        days_per_week=days_per_week,
        split_type=str(getattr(split_type, "value", split_type)),
        days=tuple(days),
    )


def split_explanation(split_type: str, goal: str) -> str:
    """One-paragraph rationale for a split, tailored to the goal."""
    try:
        explanation = _SPLIT_EXPLANATIONS[SplitType(split_type)]
    except ValueError:
        explanation = "Custom split configuration."
    goal_label = getattr(goal, "value", goal)
    return (
        f"{explanation} Optimized for {goal_label} with appropriate rep ranges "
        f"and volume."
    )


def _easy_run_day(day_number: int) -> PlanDay:
    low, high = CARDIO_DAY_MINUTES
    return PlanDay(
        day_number=day_number,
        name="Easy Run",
        workout_type=WorkoutType.CUSTOM,
        exercises=(
            PlanExercise(
                exercise_id=CARDIO_DAY_EXERCISE_ID,
                order=1,
                target_sets=1,
                target_reps=RepRange(low, high),
                notes=f"{low}-{high} minutes Zone 2 running",
            ),
        ),
    )
