"""Exercise library entries and logged performance records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from training_engine.models.enums import RPE_MAX, RPE_MIN, Equipment, MuscleGroup


@dataclass(frozen=True)
class Exercise:
    """A liftable or trainable movement from the exercise library."""

    id: str
    name: str
    muscle_group: MuscleGroup
    equipment: Equipment
    is_compound: bool
    default_sets: int
    default_reps_min: int
    default_reps_max: int
    rest_seconds: int
    form_cues: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.default_sets <= 0:
            raise ValueError(f"default_sets must be positive, got {self.default_sets}")
        if self.default_reps_min > self.default_reps_max:
            raise ValueError(
                f"Rep range {self.default_reps_min}-{self.default_reps_max} is inverted"
            )


@dataclass(frozen=True)
class WorkoutSet:
    """One completed set as reported by the athlete."""

    exercise_id: str
    exercise_name: str
    weight: float  # kg
    reps: int
    rpe: int | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise ValueError(f"Weight cannot be negative, got {self.weight}")
        if self.reps <= 0:
            raise ValueError(f"Reps must be positive, got {self.reps}")
        if self.rpe is not None and not RPE_MIN <= self.rpe <= RPE_MAX:
            raise ValueError(f"RPE must be within {RPE_MIN}-{RPE_MAX}, got {self.rpe}")


@dataclass(frozen=True)
class PersonalRecord:
    """Best performance for an exercise, normalised to an estimated 1RM."""

    exercise_id: str
    exercise_name: str
    weight: float
    reps: int
    estimated_1rm: float
    achieved_at: datetime

    def __post_init__(self) -> None:
        if self.estimated_1rm < self.weight:
            raise ValueError(
                f"Estimated 1RM {self.estimated_1rm} is below lifted weight {self.weight}"
            )
