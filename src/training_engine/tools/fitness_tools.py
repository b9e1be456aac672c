"""fitness-tools: set-level coaching (progression, logging, effort, form)."""

from __future__ import annotations

from datetime import datetime, timezone

from training_engine.coaching.form_cues import lookup_form_cues
from training_engine.math.one_rep_max import (
    intensity_label,
    personal_record_from_set,
    set_feedback,
    set_volume,
)
from training_engine.models.exercise import WorkoutSet
from training_engine.rules.effort import interpret_effort
from training_engine.rules.progression import build_recommendation
from training_engine.serialization.payload import (
    effort_payload,
    personal_record_payload,
    progression_payload,
    workout_set_payload,
)
from training_engine.tools.base import FITNESS_SERVER, CoachTool
from training_engine.tools.schemas import (
    GetFormCuesArgs,
    GetProgressionArgs,
    InterpretEffortArgs,
    LogSetArgs,
)


class GetProgressionTool(CoachTool):
    """Next-session weight and reps from last session's top set."""

    name = "get_progression"
    description = (
        "Get weight and rep recommendations for an exercise based on "
        "progressive overload principles and RPE"
    )
    server = FITNESS_SERVER
    args_model = GetProgressionArgs

    def run(self, args: GetProgressionArgs) -> dict:
        recommendation = build_recommendation(
            exercise_id=args.exercise_id,
            exercise_name=args.exercise_name,
            last_weight=args.last_weight,
            last_reps=args.last_reps,
            last_rpe=args.last_rpe,
            equipment=args.equipment,
        )
        return progression_payload(recommendation)


class LogSetTool(CoachTool):
    """Record a completed set and report its statistics.

    Nothing is persisted; the payload echoes the set back with its estimated
    1RM, volume and a personal-record candidate the host may store.
    """

    name = "log_set"
    description = "Log a completed workout set with weight, reps, and optional RPE"
    server = FITNESS_SERVER
    args_model = LogSetArgs

    def run(self, args: LogSetArgs) -> dict:
        workout_set = WorkoutSet(
            exercise_id=args.exercise_id,
            exercise_name=args.exercise_name,
            weight=args.weight,
            reps=args.reps,
            rpe=args.rpe,
            notes=args.notes,
        )
        record = personal_record_from_set(workout_set, datetime.now(timezone.utc))
        return {
            "success": True,
            "logged": workout_set_payload(workout_set),
            "stats": {
                "estimated1RM": record.estimated_1rm,
                "volume": set_volume(args.weight, args.reps),
                "intensity": intensity_label(args.rpe),
            },
            "feedback": set_feedback(args.rpe),
            "personalRecordCandidate": personal_record_payload(record),
        }


class InterpretEffortTool(CoachTool):
    name = "interpret_effort"
    description = "Convert natural language effort descriptions to RPE values"
    server = FITNESS_SERVER
    args_model = InterpretEffortArgs

    def run(self, args: InterpretEffortArgs) -> dict:
        return effort_payload(interpret_effort(args.description), args.description)


class GetFormCuesTool(CoachTool):
    name = "get_form_cues"
    description = "Get form cues and technique tips for an exercise"
    server = FITNESS_SERVER
    args_model = GetFormCuesArgs

    def run(self, args: GetFormCuesArgs) -> dict:
        matched, cues = lookup_form_cues(args.exercise_name)
        return {
            "exercise": args.exercise_name,
            "matched": matched,
            "formCues": cues,
        }
