"""Training plan models: TrainingPlan → PlanDay → PlanExercise."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_engine.models.enums import WorkoutType


@dataclass(frozen=True)
class RepRange:
    """Inclusive target repetition range."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Rep range {self.min}-{self.max} is inverted")


@dataclass(frozen=True)
class PlanExercise:
    """A slot within a plan day."""

    exercise_id: str
    order: int  # 1-indexed within the day
    target_sets: int
    target_reps: RepRange
    notes: str | None = None


@dataclass(frozen=True)
class PlanDay:
    """One training day of a plan."""

    day_number: int  # 1-indexed within the plan
    name: str
    workout_type: WorkoutType
    exercises: tuple[PlanExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TrainingPlan:
    """A multi-day program produced by the plan generator.

    ``days_per_week`` records what the athlete asked for; the number of days
    actually generated can be lower when the split template is shorter.
    """

    id: str
    name: str
    days_per_week: int
    split_type: str
    days: tuple[PlanDay, ...] = field(default_factory=tuple)

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def exercises_per_day(self) -> list[int]:
        return [len(day.exercises) for day in self.days]
