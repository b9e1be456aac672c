"""Split recommender — rank splits by experience level and available days."""

from __future__ import annotations

from training_engine.models.enums import ExperienceLevel, SplitType
from training_engine.models.recommendation import SplitRecommendation
from training_engine.planning.plan_generator import SPLIT_TEMPLATES


def recommend_splits(
    experience_level: ExperienceLevel, available_days: int
) -> list[SplitRecommendation]:
    """Candidate splits for an athlete, most suitable first.

    Candidates whose template needs more days than the athlete has are
    dropped, so the 6-day PPL only survives with 6 days free even though it
    is flagged optimal from 5 days.
    """
    level = ExperienceLevel(experience_level)
    days = available_days

    if level == ExperienceLevel.BEGINNER:
        candidates = [
            SplitRecommendation(
                SplitType.FULL_BODY.value,
                "Best for beginners - high frequency, motor learning",
                days <= 3,
            ),
            SplitRecommendation(
                SplitType.UPPER_LOWER.value, "Good progression from full body", days == 4
            ),
        ]
    elif level == ExperienceLevel.INTERMEDIATE:
        candidates = [
            SplitRecommendation(
                SplitType.UPPER_LOWER.value,
                "Good volume distribution, recovery balance",
                days == 4,
            ),
            SplitRecommendation(
                SplitType.PPL_3.value, "Classic bodybuilding split, good volume", days == 3
            ),
            SplitRecommendation(
                SplitType.PPL.value, "Maximum frequency and volume", days >= 5
            ),
        ]
    else:
        candidates = [
            SplitRecommendation(
                SplitType.PPL.value, "High frequency for advanced lifters", days >= 5
            ),
            SplitRecommendation(
                SplitType.TORSO_LIMBS.value,
                "Alternative to PPL with different emphasis",
                days == 4,
            ),
        ]

    return [
        rec
        for rec in candidates
        if len(SPLIT_TEMPLATES[SplitType(rec.split)]) <= available_days
    ]


def best_choice(recommendations: list[SplitRecommendation]) -> str | None:
    """First optimal split, else the first candidate, else None."""
    for rec in recommendations:
        if rec.optimal:
            return rec.split
    return recommendations[0].split if recommendations else None
