"""Tests for fitness-tools payloads."""

from __future__ import annotations

import pytest

from training_engine.tools.exceptions import ToolValidationError
from training_engine.tools.fitness_tools import (
    GetFormCuesTool,
    GetProgressionTool,
    InterpretEffortTool,
    LogSetTool,
)


class TestGetProgressionTool:
    def setup_method(self) -> None:
        self.tool = GetProgressionTool()

    def test_payload(self) -> None:
        result = self.tool(
            {
                "exerciseId": "exercise-squat",
                "exerciseName": "Squat",
                "lastWeight": 100,
                "lastReps": 5,
                "lastRPE": 10,
                "equipment": "barbell",
            }
        )
        assert result["recommendedWeight"] == 90.0
        assert result["recommendedReps"] == {"min": 5, "max": 7}
        assert result["trend"] == "deload_needed"
        assert result["confidence"] == "high"
        assert result["previousWeight"] == 100.0

    def test_dumbbell_increment(self) -> None:
        result = self.tool(
            {
                "exerciseId": "exercise-lateral-raises",
                "exerciseName": "Lateral Raises",
                "lastWeight": 10,
                "lastReps": 12,
                "lastRPE": 6,
                "equipment": "dumbbell",
            }
        )
        assert result["recommendedWeight"] == 11.25

    def test_rpe_out_of_range_rejected(self) -> None:
        with pytest.raises(ToolValidationError) as exc_info:
            self.tool(
                {
                    "exerciseId": "x",
                    "exerciseName": "Squat",
                    "lastWeight": 100,
                    "lastReps": 5,
                    "lastRPE": 11,
                    "equipment": "barbell",
                }
            )
        assert exc_info.value.tool_name == "get_progression"
        assert exc_info.value.errors

    def test_unknown_equipment_rejected(self) -> None:
        with pytest.raises(ToolValidationError):
            self.tool(
                {
                    "exerciseId": "x",
                    "exerciseName": "Squat",
                    "lastWeight": 100,
                    "lastReps": 5,
                    "lastRPE": 8,
                    "equipment": "trx",
                }
            )

    def test_metadata(self) -> None:
        assert self.tool.qualified_name == "mcp__fitness-tools__get_progression"


class TestLogSetTool:
    def setup_method(self) -> None:
        self.tool = LogSetTool()

    def test_payload(self) -> None:
        result = self.tool(
            {
                "exerciseId": "exercise-bench-press",
                "exerciseName": "Bench Press",
                "weight": 80,
                "reps": 8,
                "rpe": 8,
            }
        )
        assert result["success"] is True
        assert result["logged"]["rpe"] == 8
        assert result["stats"] == {"estimated1RM": 101.3, "volume": 640.0, "intensity": "RPE 8"}
        assert result["feedback"] == "Good set! Keep it up."
        candidate = result["personalRecordCandidate"]
        assert candidate["estimated1RM"] == 101.3
        assert "achievedAt" in candidate

    def test_without_rpe(self) -> None:
        result = self.tool(
            {"exerciseId": "x", "exerciseName": "Row", "weight": 60, "reps": 10, "notes": "strict"}
        )
        assert result["stats"]["intensity"] == "Not recorded"
        assert result["logged"]["notes"] == "strict"
        assert "rpe" not in result["logged"]

    def test_tiny_load_estimate_never_below_weight(self) -> None:
        result = self.tool(
            {"exerciseId": "x", "exerciseName": "Band Pull", "weight": 0.01, "reps": 2}
        )
        assert result["stats"]["estimated1RM"] == 0.01
        assert result["personalRecordCandidate"]["estimated1RM"] == 0.01

    def test_hard_set_feedback(self) -> None:
        result = self.tool(
            {"exerciseId": "x", "exerciseName": "Row", "weight": 60, "reps": 10, "rpe": 9}
        )
        assert result["feedback"].startswith("Great effort!")

    @pytest.mark.parametrize(
        "bad",
        [{"weight": 0}, {"weight": -5}, {"reps": 0}, {"reps": 2.5}, {"rpe": 0}],
    )
    def test_invalid_set_rejected(self, bad: dict) -> None:
        args = {"exerciseId": "x", "exerciseName": "Row", "weight": 60, "reps": 10}
        args.update(bad)
        with pytest.raises(ToolValidationError):
            self.tool(args)


class TestInterpretEffortTool:
    def test_payload(self) -> None:
        result = InterpretEffortTool()({"description": "could do 2 more"})
        assert result == {
            "rpe": 8,
            "reasoning": "2 reps in reserve translates to RPE 8",
            "originalDescription": "could do 2 more",
        }

    def test_missing_description_rejected(self) -> None:
        with pytest.raises(ToolValidationError):
            InterpretEffortTool()({})


class TestGetFormCuesTool:
    def test_matched_exercise(self) -> None:
        result = GetFormCuesTool()({"exerciseName": "Front Squat"})
        assert result["exercise"] == "Front Squat"
        assert result["matched"] == "squat"
        assert len(result["formCues"]) == 5

    def test_general_fallback(self) -> None:
        result = GetFormCuesTool()({"exerciseName": "Farmer Carry"})
        assert result["matched"] == "general"
        assert len(result["formCues"]) == 4

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ToolValidationError):
            GetFormCuesTool()({"exerciseName": ""})
