"""Progressive overload — next-session load from last session's RPE.

Rule table, evaluated as exclusive RPE bands:

    RPE <= 7   add the equipment increment, reps ±1          progressing
    RPE == 8   hold weight, add up to 2 reps                  progressing
    RPE == 9   hold weight, reps -1..0                        plateau
    RPE >= 10  drop 10% (one decimal), reps 0..+2             deload_needed

References:
    Helms et al. (2016). Application of the Repetitions in Reserve-Based
    Rating of Perceived Exertion Scale for Resistance Training. Strength
    Cond J 38(4):42-49.
"""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.models.enums import (
    BARBELL_CLASS_EQUIPMENT,
    BARBELL_INCREMENT_KG,
    DEFAULT_INCREMENT_KG,
    DELOAD_WEIGHT_FRACTION,
    HARD_RPE,
    PROGRESSION_RPE_CEILING,
    TARGET_RPE,
    Confidence,
    Equipment,
    Trend,
)
from training_engine.models.plan import RepRange
from training_engine.models.recommendation import ProgressionRecommendation


@dataclass(frozen=True)
class ProgressionDecision:
    """Raw output of the rule table before it is attached to an exercise."""

    weight: float
    rep_range: RepRange
    reasoning: str
    trend: Trend


def weight_increment(equipment: Equipment) -> float:
    """Smallest practical load jump for the given equipment (kg)."""
    if Equipment(equipment) in BARBELL_CLASS_EQUIPMENT:
        return BARBELL_INCREMENT_KG
    return DEFAULT_INCREMENT_KG


def recommend_progression(
    last_weight: float,
    last_reps: int,
    last_rpe: int,
    equipment: Equipment,
) -> ProgressionDecision:
    """Apply the RPE rule table to last session's top set.

    Inputs are expected to be validated by the caller; an RPE outside 1-10
    is a schema error, not something this function clamps.
    """
    increment = weight_increment(equipment)

    if last_rpe <= PROGRESSION_RPE_CEILING:
        return ProgressionDecision(
            weight=last_weight + increment,
            rep_range=RepRange(last_reps - 1, last_reps + 1),
            reasoning=(
                f"RPE {last_rpe} indicates room for progression. "
                f"Increasing weight by {increment}kg."
            ),
            trend=Trend.PROGRESSING,
        )

    if last_rpe == TARGET_RPE:
        return ProgressionDecision(
            weight=last_weight,
            rep_range=RepRange(last_reps, last_reps + 2),
            reasoning="RPE 8 is ideal. Try to add 1-2 reps before increasing weight.",
            trend=Trend.PROGRESSING,
        )

    if last_rpe == HARD_RPE:
        return ProgressionDecision(
            weight=last_weight,
            rep_range=RepRange(last_reps - 1, last_reps),
            reasoning="RPE 9 is challenging. Maintain current weight and aim for consistency.",
            trend=Trend.PLATEAU,
        )

    return ProgressionDecision(
        weight=round(last_weight * DELOAD_WEIGHT_FRACTION, 1),
        rep_range=RepRange(last_reps, last_reps + 2),
        reasoning=(
            f"RPE {last_rpe} indicates fatigue. Reducing weight by 10% for recovery."
        ),
        trend=Trend.DELOAD_NEEDED,
    )


def build_recommendation(
    exercise_id: str,
    exercise_name: str,
    last_weight: float,
    last_reps: int,
    last_rpe: int | None,
    equipment: Equipment,
) -> ProgressionRecommendation:
    """Attach a progression decision to an exercise.

    Confidence is high when the athlete reported an RPE for the last
    session. Without one the decision assumes the target RPE.
    """
    rpe = last_rpe if last_rpe is not None else TARGET_RPE
    decision = recommend_progression(last_weight, last_reps, rpe, equipment)
    return ProgressionRecommendation(
        exercise_id=exercise_id,
        exercise_name=exercise_name,
        recommended_weight=decision.weight,
        recommended_reps=decision.rep_range,
        previous_weight=last_weight,
        previous_reps=last_reps,
        reasoning=decision.reasoning,
        trend=decision.trend,
        confidence=Confidence.HIGH if last_rpe is not None else Confidence.MEDIUM,
    )
