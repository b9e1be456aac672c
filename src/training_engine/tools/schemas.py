"""Argument models for the coaching tools.

Field names are snake_case in Python and camelCase on the wire, which is
how the agent sends them. Populating by field name is allowed so tests and
the CLI can use either spelling.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from training_engine.models.enums import (
    MAX_BLOCK_WEEKS,
    MAX_CARDIO_DAYS,
    MAX_DAYS_PER_WEEK,
    MAX_STRENGTH_DAYS,
    MIN_BLOCK_WEEKS,
    MIN_CARDIO_DAYS,
    MIN_DAYS_PER_WEEK,
    MIN_STRENGTH_DAYS,
    RPE_MAX,
    RPE_MIN,
    BlockGoal,
    CardioType,
    Equipment,
    ExperienceLevel,
    PlanGoal,
    SchedulePriority,
    SplitGoal,
    SplitType,
)


class ToolArgs(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# fitness-tools
# ---------------------------------------------------------------------------


class GetProgressionArgs(ToolArgs):
    exercise_id: str = Field(description="UUID of the exercise")
    exercise_name: str = Field(description="Name of the exercise for display")
    last_weight: float = Field(gt=0, description="Weight used in last session (kg)")
    last_reps: int = Field(gt=0, description="Reps completed in last session")
    last_rpe: int = Field(
        alias="lastRPE",
        ge=RPE_MIN,
        le=RPE_MAX,
        description="Rate of Perceived Exertion (1-10) from last session",
    )
    equipment: Equipment = Field(description="Equipment type affects weight increments")


class LogSetArgs(ToolArgs):
    exercise_id: str = Field(description="UUID of the exercise")
    exercise_name: str = Field(description="Name of the exercise")
    weight: float = Field(gt=0, description="Weight used (kg)")
    reps: int = Field(gt=0, description="Number of reps completed")
    rpe: Optional[int] = Field(
        default=None, ge=RPE_MIN, le=RPE_MAX, description="Rate of Perceived Exertion (1-10)"
    )
    notes: Optional[str] = Field(default=None, description="Optional notes about the set")


class InterpretEffortArgs(ToolArgs):
    description: str = Field(
        description=(
            "Natural language description of effort "
            "(e.g., 'felt easy', 'was a grind', 'could do 2 more')"
        )
    )


class GetFormCuesArgs(ToolArgs):
    exercise_name: str = Field(min_length=1, description="Name of the exercise")


# ---------------------------------------------------------------------------
# plan-tools
# ---------------------------------------------------------------------------


class GeneratePlanArgs(ToolArgs):
    name: str = Field(description="Name for the training plan")
    split_type: SplitType = Field(description="Training split type")
    days_per_week: int = Field(
        ge=MIN_DAYS_PER_WEEK, le=MAX_DAYS_PER_WEEK, description="Number of training days per week"
    )
    goal: PlanGoal = Field(description="Primary training goal")
    include_cardio: bool = Field(
        default=False, description="Whether to include cardio sessions"
    )


class SplitRecommendationArgs(ToolArgs):
    experience_level: ExperienceLevel = Field(description="Training experience level")
    available_days: int = Field(
        ge=MIN_DAYS_PER_WEEK,
        le=MAX_DAYS_PER_WEEK,
        description="Number of days available for training",
    )
    goal: SplitGoal = Field(description="Primary goal")


class PeriodizationArgs(ToolArgs):
    total_weeks: int = Field(
        ge=MIN_BLOCK_WEEKS,
        le=MAX_BLOCK_WEEKS,
        description="Total number of weeks in the training block",
    )
    goal: BlockGoal = Field(description="Primary goal of the block")
    include_deload: bool = Field(default=True, description="Whether to include deload weeks")


class HybridScheduleArgs(ToolArgs):
    strength_days: int = Field(
        ge=MIN_STRENGTH_DAYS, le=MAX_STRENGTH_DAYS, description="Number of strength training days"
    )
    cardio_days: int = Field(
        ge=MIN_CARDIO_DAYS, le=MAX_CARDIO_DAYS, description="Number of cardio sessions"
    )
    cardio_type: CardioType = Field(description="Primary cardio type")
    prioritize: SchedulePriority = Field(description="What to prioritize")
