"""Enumerations and rule-table constants for the training engine.

Every number used by a progression, plan or periodization rule lives here so
the rule modules read as tables rather than magic numbers.
"""

from enum import Enum


class MuscleGroup(str, Enum):
    """Primary muscle group trained by an exercise."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    FOREARMS = "forearms"


class Equipment(str, Enum):
    """Loading implement — decides the weight increment for progression."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    CABLE = "cable"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    KETTLEBELL = "kettlebell"
    EZ_BAR = "ez_bar"


class WorkoutType(str, Enum):
    """Day-level workout tag used by split templates."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    TORSO = "torso"
    LIMBS = "limbs"
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full_body"
    CUSTOM = "custom"


class Trend(str, Enum):
    """Qualitative direction of an exercise's progression."""

    PROGRESSING = "progressing"
    PLATEAU = "plateau"
    REGRESSING = "regressing"
    DELOAD_NEEDED = "deload_needed"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SplitType(str, Enum):
    """Named weekly splits with a fixed day structure."""

    PPL = "ppl"
    PPL_3 = "ppl_3"
    UPPER_LOWER = "upper_lower"
    TORSO_LIMBS = "torso_limbs"
    FULL_BODY = "full_body"
    BRO_SPLIT = "bro_split"


class PlanGoal(str, Enum):
    """Goal of a generated plan — selects sets and rep range."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    ENDURANCE = "endurance"


class BlockGoal(str, Enum):
    """Goal of a periodized training block."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    PEAKING = "peaking"


class SplitGoal(str, Enum):
    """Goal used when recommending a split."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    GENERAL_FITNESS = "general_fitness"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CardioType(str, Enum):
    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    MIXED = "mixed"


class SchedulePriority(str, Enum):
    """What a hybrid week is built around."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    BALANCED = "balanced"


WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# ---------------------------------------------------------------------------
# RPE scale
# ---------------------------------------------------------------------------
RPE_MIN = 1
RPE_MAX = 10
DEFAULT_RPE = 7  # Moderate effort when free text gives no clue
DEFAULT_REPS_IN_RESERVE = 3  # "could do more" without a number

# ---------------------------------------------------------------------------
# Progressive overload
# ---------------------------------------------------------------------------
BARBELL_INCREMENT_KG = 2.5
DEFAULT_INCREMENT_KG = 1.25
BARBELL_CLASS_EQUIPMENT = frozenset({Equipment.BARBELL})

PROGRESSION_RPE_CEILING = 7  # <= this: add weight
TARGET_RPE = 8  # add reps before weight
HARD_RPE = 9  # hold weight
DELOAD_WEIGHT_FRACTION = 0.9  # RPE 10: drop 10%

# Post-set feedback thresholds
FEEDBACK_HARD_RPE = 9
FEEDBACK_EASY_RPE = 6

# Epley (1985): 1RM = w * (1 + reps / 30)
EPLEY_REPS_DIVISOR = 30

# ---------------------------------------------------------------------------
# Plan generation
# ---------------------------------------------------------------------------
MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6
MAX_EXERCISES_PER_DAY = 6

CARDIO_DAY_EXERCISE_ID = "cardio-easy-run"
CARDIO_DAY_MINUTES = (20, 40)

# ---------------------------------------------------------------------------
# Periodization
# ---------------------------------------------------------------------------
MIN_BLOCK_WEEKS = 4
MAX_BLOCK_WEEKS = 16

HYPERTROPHY_ACCUMULATION_FRACTION = 0.5
HYPERTROPHY_INTENSIFICATION_FRACTION = 0.35
STRENGTH_VOLUME_FRACTION = 0.4
STRENGTH_INTENSITY_FRACTION = 0.4

PEAKING_BASE_INTENSITY_PCT = 80
PEAKING_WEEKLY_STEP_PCT = 2
PEAKING_MAX_BUMP_PCT = 15
DELOAD_INTERVAL_WEEKS = 4  # Every 4th week of a peaking block

# ---------------------------------------------------------------------------
# Hybrid schedule
# ---------------------------------------------------------------------------
MIN_STRENGTH_DAYS = 2
MAX_STRENGTH_DAYS = 4
MIN_CARDIO_DAYS = 1
MAX_CARDIO_DAYS = 3
