"""Data models for the training engine."""

from training_engine.models.block import PhaseWeek
from training_engine.models.enums import (
    BlockGoal,
    CardioType,
    Confidence,
    Equipment,
    ExperienceLevel,
    MuscleGroup,
    PlanGoal,
    SchedulePriority,
    SplitGoal,
    SplitType,
    Trend,
    WorkoutType,
)
from training_engine.models.exercise import Exercise, PersonalRecord, WorkoutSet
from training_engine.models.plan import PlanDay, PlanExercise, RepRange, TrainingPlan
from training_engine.models.recommendation import (
    EffortInterpretation,
    ProgressionRecommendation,
    SplitRecommendation,
)
from training_engine.models.schedule import ScheduleEntry

__all__ = [
    "BlockGoal",
    "CardioType",
    "Confidence",
    "EffortInterpretation",
    "Equipment",
    "Exercise",
    "ExperienceLevel",
    "MuscleGroup",
    "PersonalRecord",
    "PhaseWeek",
    "PlanDay",
    "PlanExercise",
    "PlanGoal",
    "ProgressionRecommendation",
    "RepRange",
    "ScheduleEntry",
    "SchedulePriority",
    "SplitGoal",
    "SplitRecommendation",
    "SplitType",
    "TrainingPlan",
    "Trend",
    "WorkoutSet",
    "WorkoutType",
]
