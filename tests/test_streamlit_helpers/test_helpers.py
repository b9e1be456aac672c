"""Tests for the Streamlit helper functions (no Streamlit runtime needed)."""

from __future__ import annotations

import helpers
from helpers import (
    ACTIVITY_COLORS,
    exercise_display_name,
    format_prescription,
    format_rep_range,
    format_weight,
    list_profiles,
    load_profile,
    periodization_rows,
    phase_color,
    plan_table_rows,
    save_profile,
    schedule_cells,
)
from training_engine.math.periodization import calculate_periodization
from training_engine.models.enums import BlockGoal, CardioType, SchedulePriority
from training_engine.models.plan import RepRange
from training_engine.planning.hybrid_schedule import LOWER_BODY, optimize_hybrid_schedule


class TestFormatting:
    def test_weight(self) -> None:
        assert format_weight(80.0) == "80 kg"
        assert format_weight(82.5) == "82.5 kg"
        assert format_weight(0) == "--"

    def test_rep_range(self) -> None:
        assert format_rep_range(RepRange(8, 12)) == "8-12"
        assert format_rep_range(RepRange(5, 5)) == "5"

    def test_prescription(self) -> None:
        assert format_prescription(4, RepRange(8, 12)) == "4 x 8-12"

    def test_display_name(self) -> None:
        assert exercise_display_name("exercise-bench-press") == "Bench Press"
        assert exercise_display_name("exercise-pull-ups") == "Pull Ups"


class TestColors:
    def test_known_phase(self) -> None:
        assert phase_color("Deload") == "#D5DBDB"

    def test_peaking_build_week(self) -> None:
        assert phase_color("Week 3") == helpers._BUILD_WEEK_COLOR

    def test_unknown_phase(self) -> None:
        assert phase_color("Mystery") == "#CCCCCC"


class TestTables:
    def test_plan_rows(self, ppl_strength_plan) -> None:
        rows = plan_table_rows(ppl_strength_plan)
        assert len(rows) == 18
        assert rows[0] == {
            "Day": "1. Push Day",
            "#": 1,
            "Exercise": "Bench Press",
            "Sets x Reps": "5 x 3-6",
            "Notes": "",
        }

    def test_periodization_rows(self) -> None:
        weeks = calculate_periodization(8, BlockGoal.HYPERTROPHY, True)
        rows = periodization_rows(weeks)
        assert [row["Week"] for row in rows] == list(range(1, 9))
        assert rows[-1]["Phase"] == "Deload"

    def test_schedule_cells(self) -> None:
        schedule = optimize_hybrid_schedule(
            3, 2, CardioType.RUNNING, SchedulePriority.BALANCED
        )
        cells = schedule_cells(schedule)
        assert [cell[0] for cell in cells] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert cells[0][1] == LOWER_BODY
        assert cells[0][3] == ACTIVITY_COLORS[LOWER_BODY]


class TestProfiles:
    def test_save_load_list(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(helpers, "_PROFILES_DIR", tmp_path / "profiles")
        profile = {"split_type": "ppl", "available_days": 6}

        path = save_profile("Alex's plan!", profile)

        assert path.name == "Alexs plan.json"
        assert list_profiles() == ["Alexs plan"]
        assert load_profile("Alexs plan") == profile

    def test_blank_name_falls_back(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(helpers, "_PROFILES_DIR", tmp_path)
        assert save_profile("???", {}).name == "profile.json"

    def test_empty_dir(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(helpers, "_PROFILES_DIR", tmp_path / "none")
        assert list_profiles() == []
