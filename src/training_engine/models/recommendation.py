"""Recommendation outputs — what a single rule or lookup suggests."""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.models.enums import RPE_MAX, RPE_MIN, Confidence, Trend
from training_engine.models.plan import RepRange


@dataclass(frozen=True)
class ProgressionRecommendation:
    """Next-session weight and rep targets for one exercise."""

    exercise_id: str
    exercise_name: str
    recommended_weight: float
    recommended_reps: RepRange
    previous_weight: float
    previous_reps: int
    reasoning: str
    trend: Trend
    confidence: Confidence


@dataclass(frozen=True)
class SplitRecommendation:
    """A candidate split with the reason it suits the athlete."""

    split: str
    reason: str
    optimal: bool


@dataclass(frozen=True)
class EffortInterpretation:
    """RPE inferred from a free-text effort description."""

    rpe: int
    reasoning: str

    def __post_init__(self) -> None:
        if not RPE_MIN <= self.rpe <= RPE_MAX:
            raise ValueError(f"RPE must be within {RPE_MIN}-{RPE_MAX}, got {self.rpe}")
