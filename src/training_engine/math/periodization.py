"""Periodization math: split a training block into labelled phase weeks.

Three block models, selected by goal:
- hypertrophy: Accumulation → Intensification → Deload
- strength: Volume → Strength → Peaking (final week Deload)
- peaking: linear intensity ramp with a deload every 4th week

Whatever the goal, the returned weeks cover 1..total_weeks exactly once.
Proportional phase lengths are floored, so the leftover weeks always fall to
the last phase of the block.

References:
    Schoenfeld (2010), The mechanisms of muscle hypertrophy and their
        application to resistance training.
    Issurin (2010), New horizons for the methodology and physiology of
        training periodization.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from training_engine.models.block import PhaseWeek
from training_engine.models.enums import (
    DELOAD_INTERVAL_WEEKS,
    HYPERTROPHY_ACCUMULATION_FRACTION,
    HYPERTROPHY_INTENSIFICATION_FRACTION,
    MAX_BLOCK_WEEKS,
    MIN_BLOCK_WEEKS,
    PEAKING_BASE_INTENSITY_PCT,
    PEAKING_MAX_BUMP_PCT,
    PEAKING_WEEKLY_STEP_PCT,
    STRENGTH_INTENSITY_FRACTION,
    STRENGTH_VOLUME_FRACTION,
    BlockGoal,
)


@dataclass(frozen=True)
class PhaseProfile:
    """Fixed labels for every week of one phase."""

    phase: str
    intensity: str
    volume: str
    notes: str

    def week(self, number: int) -> PhaseWeek:
        return PhaseWeek(
            week=number,
            phase=self.phase,
            intensity=self.intensity,
            volume=self.volume,
            notes=self.notes,
        )


ACCUMULATION = PhaseProfile(
    "Accumulation", "65-75% 1RM", "High (15-20 sets/muscle)", "Focus on volume, RPE 7-8"
)
INTENSIFICATION = PhaseProfile(
    "Intensification", "75-85% 1RM", "Moderate (12-16 sets/muscle)", "Increase weight, RPE 8-9"
)
HYPERTROPHY_DELOAD = PhaseProfile(
    "Deload", "50-60% 1RM", "Low (8-10 sets/muscle)", "Recovery focus, RPE 5-6"
)

VOLUME = PhaseProfile("Volume", "70-80% 1RM", "High (5x5-8)", "Build work capacity")
STRENGTH = PhaseProfile("Strength", "80-90% 1RM", "Moderate (5x3-5)", "Progressive overload focus")
PEAKING = PhaseProfile("Peaking", "90-95% 1RM", "Low (3x1-3)", "Test new maxes")
STRENGTH_DELOAD = PhaseProfile("Deload", "60% 1RM", "Low (3x1-3)", "Active recovery")

PEAKING_DELOAD = PhaseProfile("Deload", "60% 1RM", "Low", "Recovery")


def calculate_periodization(
    total_weeks: int, goal: BlockGoal, include_deload: bool = True
) -> list[PhaseWeek]:
    """Partition a training block into labelled weeks.

    Args:
        total_weeks: Length of the block (4-16 weeks).
        goal: Block goal, selects the periodization model.
        include_deload: Whether recovery weeks are scheduled.

    Returns:
        One PhaseWeek per week, in chronological order.

    Raises:
        ValueError: If total_weeks is outside 4-16.
    """
    if not MIN_BLOCK_WEEKS <= total_weeks <= MAX_BLOCK_WEEKS:
        raise ValueError(
            f"Block must be {MIN_BLOCK_WEEKS}-{MAX_BLOCK_WEEKS} weeks, got {total_weeks}"
        )

    goal = BlockGoal(goal)
    if goal == BlockGoal.HYPERTROPHY:
        return _hypertrophy_block(total_weeks, include_deload)
    if goal == BlockGoal.STRENGTH:
        return _strength_block(total_weeks, include_deload)
    return _peaking_block(total_weeks, include_deload)


def phase_counts(weeks: list[PhaseWeek]) -> dict[str, int]:
    """Count weeks per phase label, in first-seen order."""
    counts: dict[str, int] = {}
    for week in weeks:
        counts[week.phase] = counts.get(week.phase, 0) + 1
    return counts


def peaking_intensity_pct(week: int) -> int:
    """Linear peaking ramp: 80% plus 2% per week, capped at 95%."""
    return PEAKING_BASE_INTENSITY_PCT + min(week * PEAKING_WEEKLY_STEP_PCT, PEAKING_MAX_BUMP_PCT)


# ---------------------------------------------------------------------------
# Block models
# ---------------------------------------------------------------------------


def _hypertrophy_block(total_weeks: int, include_deload: bool) -> list[PhaseWeek]:
    accumulation_weeks = math.floor(total_weeks * HYPERTROPHY_ACCUMULATION_FRACTION)
    intensification_end = accumulation_weeks + math.floor(
        total_weeks * HYPERTROPHY_INTENSIFICATION_FRACTION
    )

    weeks: list[PhaseWeek] = []
    for w in range(1, total_weeks + 1):
        if w <= accumulation_weeks:
            profile = ACCUMULATION
        elif w <= intensification_end or not include_deload:
            profile = INTENSIFICATION
        else:
            profile = HYPERTROPHY_DELOAD
        weeks.append(profile.week(w))
    return weeks


def _strength_block(total_weeks: int, include_deload: bool) -> list[PhaseWeek]:
    volume_end = math.floor(total_weeks * STRENGTH_VOLUME_FRACTION)
    strength_end = volume_end + math.floor(total_weeks * STRENGTH_INTENSITY_FRACTION)

    weeks: list[PhaseWeek] = []
    for w in range(1, total_weeks + 1):
        if w <= volume_end:
            profile = VOLUME
        elif w <= strength_end:
            profile = STRENGTH
        elif include_deload and w == total_weeks:
            profile = STRENGTH_DELOAD
        else:
            profile = PEAKING
        weeks.append(profile.week(w))
    return weeks


def _peaking_block(total_weeks: int, include_deload: bool) -> list[PhaseWeek]:
    weeks: list[PhaseWeek] = []
    for w in range(1, total_weeks + 1):
        if include_deload and w % DELOAD_INTERVAL_WEEKS == 0:
            weeks.append(PEAKING_DELOAD.week(w))
            continue
        weeks.append(
            PhaseWeek(
                week=w,
                phase=f"Week {w}",
                intensity=f"{peaking_intensity_pct(w)}% 1RM",
                volume="Moderate",
                notes="Building to peak",
            )
        )
    return weeks
