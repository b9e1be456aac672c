"""Shared test fixtures: tool registry, logged sets, plans and mocked API responses."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable

import pytest

from training_engine.models.enums import PlanGoal, SplitType
from training_engine.models.exercise import WorkoutSet
from training_engine.models.plan import TrainingPlan
from training_engine.planning.plan_generator import generate_plan
from training_engine.registry import ToolRegistry


@pytest.fixture
def registry() -> ToolRegistry:
    """Registry with every built-in tool discovered."""
    reg = ToolRegistry()
    reg.discover_tools()
    return reg


@pytest.fixture
def bench_set() -> WorkoutSet:
    """80 kg x 8 bench press at RPE 8."""
    return WorkoutSet(
        exercise_id="exercise-bench-press",
        exercise_name="Bench Press",
        weight=80.0,
        reps=8,
        rpe=8,
    )


@pytest.fixture
def ppl_strength_plan() -> TrainingPlan:
    """3-day PPL strength plan with a fixed id."""
    return generate_plan(
        name="Strength PPL",
        split_type=SplitType.PPL_3,
        days_per_week=3,
        goal=PlanGoal.STRENGTH,
        plan_id="plan-test",
    )


@pytest.fixture
def text_block() -> Callable[[str], Any]:
    """Factory for Messages API text content blocks."""

    def _make(text: str) -> Any:
        return SimpleNamespace(type="text", text=text)

    return _make


@pytest.fixture
def tool_use_block() -> Callable[..., Any]:
    """Factory for Messages API tool_use content blocks."""

    def _make(name: str, tool_input: dict, block_id: str = "toolu_01") -> Any:
        return SimpleNamespace(type="tool_use", id=block_id, name=name, input=tool_input)

    return _make


@pytest.fixture
def api_response() -> Callable[..., Any]:
    """Factory for Messages API responses."""

    def _make(
        content: list[Any],
        stop_reason: str = "end_turn",
        input_tokens: int = 100,
        output_tokens: int = 50,
    ) -> Any:
        return SimpleNamespace(
            content=content,
            stop_reason=stop_reason,
            usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
        )

    return _make
