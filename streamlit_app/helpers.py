"""Utility helpers bridging the Streamlit UI and the training engine.

Pure functions for formatting, table construction and profile persistence.
"""

from __future__ import annotations

import json
from pathlib import Path

from training_engine.models.block import PhaseWeek
from training_engine.models.enums import WEEKDAYS, Trend
from training_engine.models.plan import RepRange, TrainingPlan
from training_engine.models.schedule import ScheduleEntry
from training_engine.planning.hybrid_schedule import (
    EASY_CARDIO,
    LOWER_BODY,
    QUALITY_CARDIO,
    REST,
    UPPER_BODY,
)

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_weight(kg: float) -> str:
    """Format a load without trailing zeros. e.g. 80.0 -> '80 kg', 82.5 -> '82.5 kg'."""
    if kg <= 0:
        return "--"
    return f"{kg:g} kg"


def format_rep_range(reps: RepRange) -> str:
    """e.g. RepRange(8, 12) -> '8-12', RepRange(5, 5) -> '5'."""
    if reps.min == reps.max:
        return str(reps.min)
    return f"{reps.min}-{reps.max}"


def format_prescription(sets: int, reps: RepRange) -> str:
    """e.g. 4, RepRange(8, 12) -> '4 x 8-12'."""
    return f"{sets} x {format_rep_range(reps)}"


def exercise_display_name(exercise_id: str) -> str:
    """Turn a slug id back into a title. e.g. 'exercise-bench-press' -> 'Bench Press'."""
    slug = exercise_id.removeprefix("exercise-")
    return " ".join(part.capitalize() for part in slug.split("-") if part)


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

ACTIVITY_COLORS: dict[str, str] = {
    LOWER_BODY: "#E74C3C",      # red
    UPPER_BODY: "#F5B041",      # amber
    QUALITY_CARDIO: "#8E44AD",  # purple
    EASY_CARDIO: "#82E0AA",     # green
    REST: "#D5DBDB",            # grey
}

PHASE_COLORS: dict[str, str] = {
    "Accumulation": "#82E0AA",
    "Intensification": "#F5B041",
    "Volume": "#AED6F1",
    "Strength": "#3498DB",
    "Peaking": "#E74C3C",
    "Deload": "#D5DBDB",
}

# Peaking blocks label weeks "Week n" rather than by phase.
_BUILD_WEEK_COLOR = "#F9E79F"

TREND_COLORS: dict[Trend, str] = {
    Trend.PROGRESSING: "#2ECC71",
    Trend.PLATEAU: "#F5B041",
    Trend.REGRESSING: "#E67E22",
    Trend.DELOAD_NEEDED: "#E74C3C",
}

DAY_NAMES = tuple(day[:3] for day in WEEKDAYS)


def phase_color(phase: str) -> str:
    if phase.startswith("Week "):
        return _BUILD_WEEK_COLOR
    return PHASE_COLORS.get(phase, "#CCCCCC")


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------


def plan_table_rows(plan: TrainingPlan) -> list[dict]:
    """Flatten a plan into one row per exercise for st.dataframe."""
    rows: list[dict] = []
    for day in plan.days:
        for exercise in day.exercises:
            rows.append(
                {
                    "Day": f"{day.day_number}. {day.name}",
                    "#": exercise.order,
                    "Exercise": exercise_display_name(exercise.exercise_id),
                    "Sets x Reps": format_prescription(
                        exercise.target_sets, exercise.target_reps
                    ),
                    "Notes": exercise.notes or "",
                }
            )
    return rows


def periodization_rows(weeks: list[PhaseWeek]) -> list[dict]:
    return [
        {
            "Week": week.week,
            "Phase": week.phase,
            "Intensity": week.intensity,
            "Volume": week.volume,
            "Notes": week.notes,
        }
        for week in weeks
    ]


def schedule_cells(entries: list[ScheduleEntry]) -> list[tuple[str, str, str, str]]:
    """(short day, activity, notes, color) per entry for the 7-column grid."""
    return [
        (
            DAY_NAMES[WEEKDAYS.index(entry.day)],
            entry.activity,
            entry.notes,
            ACTIVITY_COLORS.get(entry.activity, "#CCCCCC"),
        )
        for entry in entries
    ]


# ---------------------------------------------------------------------------
# Profile persistence
# ---------------------------------------------------------------------------

_PROFILES_DIR = Path(__file__).parent / "profiles"


def _ensure_profiles_dir() -> Path:
    _PROFILES_DIR.mkdir(parents=True, exist_ok=True)
    return _PROFILES_DIR


def save_profile(name: str, profile: dict) -> Path:
    """Save a profile dict as JSON. Returns the file path."""
    d = _ensure_profiles_dir()
    # Sanitise filename
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name).strip()
    if not safe:
        safe = "profile"
    path = d / f"{safe}.json"
    with open(path, "w") as f:
        json.dump(profile, f, indent=2)
    return path


def load_profile(name: str) -> dict:
    """Load a profile dict from JSON."""
    path = _PROFILES_DIR / f"{name}.json"
    with open(path) as f:
        return json.load(f)


def list_profiles() -> list[str]:
    """List available profile names (without .json extension)."""
    d = _ensure_profiles_dir()
    return sorted(p.stem for p in d.glob("*.json"))
