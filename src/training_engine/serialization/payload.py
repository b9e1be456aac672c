"""Tool payload serialization for training-engine models.

Converts internal frozen dataclasses → the camelCase JSON dicts returned by
the coaching tools. Field names and nesting are part of the tool contract
the agent prompt relies on, so they do not follow Python naming.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from typing import Any

from training_engine.models.block import PhaseWeek
from training_engine.models.exercise import PersonalRecord, WorkoutSet
from training_engine.models.plan import PlanDay, PlanExercise, RepRange, TrainingPlan
from training_engine.models.recommendation import (
    EffortInterpretation,
    ProgressionRecommendation,
    SplitRecommendation,
)
from training_engine.models.schedule import ScheduleEntry


def rep_range_payload(reps: RepRange) -> dict:
    return {"min": reps.min, "max": reps.max}


def progression_payload(rec: ProgressionRecommendation) -> dict:
    return {
        "exerciseId": rec.exercise_id,
        "exerciseName": rec.exercise_name,
        "recommendedWeight": rec.recommended_weight,
        "recommendedReps": rep_range_payload(rec.recommended_reps),
        "previousWeight": rec.previous_weight,
        "previousReps": rec.previous_reps,
        "reasoning": rec.reasoning,
        "trend": rec.trend.value,
        "confidence": rec.confidence.value,
    }


def workout_set_payload(workout_set: WorkoutSet) -> dict:
    """Logged set; optional fields are omitted when unset."""
    result: dict[str, Any] = {
        "exerciseId": workout_set.exercise_id,
        "exerciseName": workout_set.exercise_name,
        "weight": workout_set.weight,
        "reps": workout_set.reps,
    }
    if workout_set.rpe is not None:
        result["rpe"] = workout_set.rpe
    if workout_set.notes is not None:
        result["notes"] = workout_set.notes
    return result


def personal_record_payload(record: PersonalRecord) -> dict:
    return {
        "exerciseId": record.exercise_id,
        "exerciseName": record.exercise_name,
        "weight": record.weight,
        "reps": record.reps,
        "estimated1RM": record.estimated_1rm,
        "achievedAt": record.achieved_at.isoformat(),
    }


def effort_payload(effort: EffortInterpretation, description: str) -> dict:
    return {
        "rpe": effort.rpe,
        "reasoning": effort.reasoning,
        "originalDescription": description,
    }


def plan_exercise_payload(exercise: PlanExercise) -> dict:
    result: dict[str, Any] = {
        "exerciseId": exercise.exercise_id,
        "order": exercise.order,
        "targetSets": exercise.target_sets,
        "targetRepsMin": exercise.target_reps.min,
        "targetRepsMax": exercise.target_reps.max,
    }
    if exercise.notes is not None:
        result["notes"] = exercise.notes
    return result


def plan_day_payload(day: PlanDay) -> dict:
    return {
        "dayNumber": day.day_number,
        "name": day.name,
        "workoutType": day.workout_type.value,
        "exercises": [plan_exercise_payload(ex) for ex in day.exercises],
    }


def plan_payload(plan: TrainingPlan) -> dict:
    return {
        "id": plan.id,
        "name": plan.name,
        "daysPerWeek": plan.days_per_week,
        "splitType": plan.split_type,
        "days": [plan_day_payload(day) for day in plan.days],
    }


def split_recommendation_payload(rec: SplitRecommendation) -> dict:
    return {"split": rec.split, "reason": rec.reason, "optimal": rec.optimal}


def phase_week_payload(week: PhaseWeek) -> dict:
    return {
        "week": week.week,
        "phase": week.phase,
        "intensity": week.intensity,
        "volume": week.volume,
        "notes": week.notes,
    }


def schedule_entry_payload(entry: ScheduleEntry) -> dict:
    return {"day": entry.day, "activity": entry.activity, "notes": entry.notes}


def to_json_string(payload: dict, indent: int = 2) -> str:
    """Render a payload the way tools return it to the agent."""
    return json.dumps(payload, indent=indent)
