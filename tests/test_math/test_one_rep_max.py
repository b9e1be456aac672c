"""Tests for strength math: Epley 1RM, set volume, feedback, personal records."""

from datetime import datetime, timezone

import pytest

from training_engine.math.one_rep_max import (
    estimate_one_rep_max,
    intensity_label,
    personal_record_from_set,
    set_feedback,
    set_volume,
)
from training_engine.models.exercise import WorkoutSet


class TestEstimateOneRepMax:
    def test_single_rep_is_the_max(self) -> None:
        for weight in [20.0, 82.5, 140.0, 227.5]:
            assert estimate_one_rep_max(weight, 1) == weight

    def test_epley_formula(self) -> None:
        # 100 * (1 + 5/30) = 116.67
        assert estimate_one_rep_max(100.0, 5) == 116.7

    def test_rounds_to_one_decimal(self) -> None:
        # 80 * (1 + 8/30) = 101.333...
        assert estimate_one_rep_max(80.0, 8) == 101.3

    def test_strictly_increasing_in_reps(self) -> None:
        estimates = [estimate_one_rep_max(100.0, reps) for reps in range(1, 21)]
        for lower, higher in zip(estimates, estimates[1:]):
            assert higher > lower

    def test_rounding_flattens_tiny_loads(self) -> None:
        estimates = [estimate_one_rep_max(1.0, reps) for reps in range(1, 6)]
        assert estimates == [1.0, 1.1, 1.1, 1.1, 1.2]
        assert estimate_one_rep_max(0.01, 2) == 0.0

    def test_zero_reps_raises(self) -> None:
        with pytest.raises(ValueError):
            estimate_one_rep_max(100.0, 0)


class TestSetStats:
    def test_volume_is_weight_times_reps(self) -> None:
        assert set_volume(80.0, 8) == 640.0

    def test_intensity_label_with_rpe(self) -> None:
        assert intensity_label(8) == "RPE 8"

    def test_intensity_label_without_rpe(self) -> None:
        assert intensity_label(None) == "Not recorded"


class TestSetFeedback:
    def test_hard_set_suggests_lighter_weight(self) -> None:
        assert set_feedback(9).startswith("Great effort!")
        assert set_feedback(10).startswith("Great effort!")

    def test_easy_set_suggests_heavier_weight(self) -> None:
        assert set_feedback(6) == "Feeling strong! You could increase weight on the next set."

    def test_target_effort_is_encouraged(self) -> None:
        assert set_feedback(7) == "Good set! Keep it up."
        assert set_feedback(8) == "Good set! Keep it up."

    def test_missing_rpe_is_neutral(self) -> None:
        assert set_feedback(None) == "Good set! Keep it up."


class TestPersonalRecordFromSet:
    def test_record_carries_estimated_max(self, bench_set: WorkoutSet) -> None:
        achieved = datetime(2025, 3, 1, 18, 30, tzinfo=timezone.utc)
        record = personal_record_from_set(bench_set, achieved)
        assert record.exercise_id == "exercise-bench-press"
        assert record.estimated_1rm == 101.3
        assert record.achieved_at == achieved

    def test_estimate_never_below_lifted_weight(self) -> None:
        tiny = WorkoutSet(exercise_id="x", exercise_name="Plate Pinch", weight=0.04, reps=2)
        record = personal_record_from_set(tiny, datetime(2025, 1, 1))
        assert record.estimated_1rm >= record.weight
