"""Tests for split recommendations by experience level and availability."""

from __future__ import annotations

from training_engine.models.enums import ExperienceLevel
from training_engine.models.recommendation import SplitRecommendation
from training_engine.planning.split_recommender import best_choice, recommend_splits


def _splits(recs: list[SplitRecommendation]) -> list[str]:
    return [r.split for r in recs]


class TestRecommendSplits:
    def test_beginner_3_days(self) -> None:
        recs = recommend_splits(ExperienceLevel.BEGINNER, 3)
        assert _splits(recs) == ["full_body"]
        assert recs[0].optimal

    def test_beginner_4_days_prefers_upper_lower(self) -> None:
        recs = recommend_splits(ExperienceLevel.BEGINNER, 4)
        assert _splits(recs) == ["full_body", "upper_lower"]
        assert best_choice(recs) == "upper_lower"

    def test_intermediate_3_days(self) -> None:
        recs = recommend_splits(ExperienceLevel.INTERMEDIATE, 3)
        assert _splits(recs) == ["ppl_3"]

    def test_intermediate_5_days_drops_6_day_ppl(self) -> None:
        recs = recommend_splits(ExperienceLevel.INTERMEDIATE, 5)
        assert _splits(recs) == ["upper_lower", "ppl_3"]
        assert not any(r.optimal for r in recs)
        assert best_choice(recs) == "upper_lower"

    def test_intermediate_6_days(self) -> None:
        recs = recommend_splits(ExperienceLevel.INTERMEDIATE, 6)
        assert best_choice(recs) == "ppl"

    def test_advanced_4_days(self) -> None:
        recs = recommend_splits(ExperienceLevel.ADVANCED, 4)
        assert _splits(recs) == ["torso_limbs"]
        assert recs[0].reason == "Alternative to PPL with different emphasis"

    def test_two_days_fits_nothing(self) -> None:
        for level in ExperienceLevel:
            assert recommend_splits(level, 2) == []

    def test_accepts_plain_string_level(self) -> None:
        assert _splits(recommend_splits("advanced", 6)) == ["ppl", "torso_limbs"]


class TestBestChoice:
    def test_empty_is_none(self) -> None:
        assert best_choice([]) is None

    def test_first_optimal_wins(self) -> None:
        recs = [
            SplitRecommendation("a", "", False),
            SplitRecommendation("b", "", True),
            SplitRecommendation("c", "", True),
        ]
        assert best_choice(recs) == "b"
