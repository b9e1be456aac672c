"""Tests for model invariants: exercises, sets, records, plans."""

from __future__ import annotations

from datetime import datetime

import pytest

from training_engine.models import (
    EffortInterpretation,
    Exercise,
    PersonalRecord,
    PhaseWeek,
    RepRange,
    ScheduleEntry,
    TrainingPlan,
    WorkoutSet,
)
from training_engine.models.enums import Equipment, MuscleGroup


def _exercise(**overrides) -> Exercise:
    fields = dict(
        id="exercise-squat",
        name="Squat",
        muscle_group=MuscleGroup.QUADRICEPS,
        equipment=Equipment.BARBELL,
        is_compound=True,
        default_sets=5,
        default_reps_min=3,
        default_reps_max=5,
        rest_seconds=180,
    )
    fields.update(overrides)
    return Exercise(**fields)


class TestExercise:
    def test_valid(self) -> None:
        assert _exercise().form_cues == ()

    def test_inverted_rep_range_raises(self) -> None:
        with pytest.raises(ValueError):
            _exercise(default_reps_min=8, default_reps_max=5)

    def test_zero_sets_raises(self) -> None:
        with pytest.raises(ValueError):
            _exercise(default_sets=0)


class TestWorkoutSet:
    def test_optional_fields_default_none(self) -> None:
        workout_set = WorkoutSet("exercise-row", "Row", 60.0, 10)
        assert workout_set.rpe is None
        assert workout_set.notes is None

    @pytest.mark.parametrize("rpe", [0, 11])
    def test_rpe_out_of_range_raises(self, rpe: int) -> None:
        with pytest.raises(ValueError):
            WorkoutSet("exercise-row", "Row", 60.0, 10, rpe=rpe)

    def test_negative_weight_raises(self) -> None:
        with pytest.raises(ValueError):
            WorkoutSet("exercise-row", "Row", -1.0, 10)

    def test_zero_reps_raises(self) -> None:
        with pytest.raises(ValueError):
            WorkoutSet("exercise-row", "Row", 60.0, 0)

    def test_bodyweight_set_allows_zero_load(self) -> None:
        assert WorkoutSet("exercise-pull-ups", "Pull-Ups", 0.0, 12).weight == 0.0


class TestPersonalRecord:
    def test_estimate_below_weight_raises(self) -> None:
        with pytest.raises(ValueError):
            PersonalRecord("x", "Squat", 100.0, 3, 95.0, datetime(2025, 1, 1))


class TestRepRange:
    def test_inverted_raises(self) -> None:
        with pytest.raises(ValueError):
            RepRange(10, 8)

    def test_single_value(self) -> None:
        assert RepRange(5, 5).min == 5


class TestEffortInterpretation:
    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            EffortInterpretation(rpe=11, reasoning="")


class TestDerivedProperties:
    def test_plan_day_count(self, ppl_strength_plan: TrainingPlan) -> None:
        assert ppl_strength_plan.day_count == len(ppl_strength_plan.days)
        assert ppl_strength_plan.exercises_per_day == [6, 6, 6]

    def test_empty_plan(self) -> None:
        plan = TrainingPlan(id="p", name="Empty", days_per_week=3, split_type="custom")
        assert plan.day_count == 0
        assert plan.exercises_per_day == []

    def test_deload_week(self) -> None:
        assert PhaseWeek(4, "Deload", "60% 1RM", "Low", "Recovery").is_deload
        assert not PhaseWeek(3, "Week 3", "86% 1RM", "Moderate", "Building to peak").is_deload

    def test_rest_day(self) -> None:
        assert ScheduleEntry("Sunday", "Rest", "Recovery day").is_rest
        assert not ScheduleEntry("Monday", "Lower Body", "Full strength session").is_rest
