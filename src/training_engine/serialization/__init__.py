"""Serialization module — render engine models as tool payloads."""

from training_engine.serialization.payload import (
    effort_payload,
    personal_record_payload,
    phase_week_payload,
    plan_payload,
    progression_payload,
    schedule_entry_payload,
    split_recommendation_payload,
    to_json_string,
    workout_set_payload,
)

__all__ = [
    "effort_payload",
    "personal_record_payload",
    "phase_week_payload",
    "plan_payload",
    "progression_payload",
    "schedule_entry_payload",
    "split_recommendation_payload",
    "to_json_string",
    "workout_set_payload",
]
