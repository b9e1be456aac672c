"""Hybrid schedule optimizer — fit strength and cardio sessions into a week.

Two strategies keyed by priority:

strength-first (priority strength or balanced)
    Strength goes on a fixed weekday pattern; cardio fills the free days in
    weekday order. A cardio day is kept easy when the next day holds a leg
    session (or whenever strength is the priority). The look-ahead is one
    day only, not the full 48 hours the tips recommend.

cardio-first (priority cardio)
    Cardio goes on a fixed pattern; strength fills days that are neither a
    cardio day nor the day after one. Monday never counts as "after
    Sunday", and fewer strength days than requested may fit.

Days left over are rest days. Entries are returned Monday to Sunday.
"""

from __future__ import annotations

from training_engine.models.enums import WEEKDAYS, CardioType, SchedulePriority
from training_engine.models.schedule import ScheduleEntry

# Weekday indices (0 = Monday) keyed by session count; other counts use the
# fallback pattern.
_STRENGTH_PATTERNS: dict[int, tuple[int, ...]] = {
    4: (0, 2, 4, 5),  # Mon, Wed, Fri, Sat
    3: (0, 2, 4),  # Mon, Wed, Fri
}
_STRENGTH_FALLBACK = (0, 3)  # Mon, Thu

_CARDIO_PATTERNS: dict[int, tuple[int, ...]] = {
    3: (1, 3, 5),  # Tue, Thu, Sat
}
_CARDIO_FALLBACK = (1, 4)  # Tue, Fri

LOWER_BODY = "Lower Body"
UPPER_BODY = "Upper Body"
EASY_CARDIO = "Easy Cardio"
QUALITY_CARDIO = "Quality Cardio"
REST = "Rest"


def optimize_hybrid_schedule(
    strength_days: int,
    cardio_days: int,
    cardio_type: CardioType,
    priority: SchedulePriority,
) -> list[ScheduleEntry]:
    """Build a 7-day strength/cardio schedule.

    Args:
        strength_days: Strength sessions wanted (2-4).
        cardio_days: Cardio sessions wanted (1-3).
        cardio_type: Cardio modality, used in the session notes.
        priority: Which modality the week is built around.

    Returns:
        Exactly seven entries, one per weekday, Monday first.
    """
    priority = SchedulePriority(priority)
    modality = CardioType(cardio_type).value

    if priority == SchedulePriority.CARDIO:
        placed = _cardio_first(strength_days, cardio_days, modality)
    else:
        placed = _strength_first(strength_days, cardio_days, modality, priority)

    return [
        placed.get(index, ScheduleEntry(day=day, activity=REST, notes="Recovery day"))
        for index, day in enumerate(WEEKDAYS)
    ]


def schedule_tips(priority: SchedulePriority) -> list[str]:
    """General tips returned alongside a hybrid schedule."""
    return [
        "Keep hard cardio sessions 48h away from leg day",
        "Easy Zone 2 cardio can be done more frequently",
        "Listen to your body and adjust as needed",
        "Prioritize strength sessions when fatigued"
        if SchedulePriority(priority) == SchedulePriority.STRENGTH
        else "Schedule quality cardio when fresh",
    ]


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def _strength_first(
    strength_days: int,
    cardio_days: int,
    modality: str,
    priority: SchedulePriority,
) -> dict[int, ScheduleEntry]:
    pattern = _STRENGTH_PATTERNS.get(strength_days, _STRENGTH_FALLBACK)
    leg_parity = 0 if strength_days > 2 else 1

    placed: dict[int, ScheduleEntry] = {}
    for slot, day_index in enumerate(pattern):
        placed[day_index] = ScheduleEntry(
            day=WEEKDAYS[day_index],
            activity=LOWER_BODY if slot % 2 == leg_parity else UPPER_BODY,
            notes="Full strength session",
        )

    # Even slots are treated as leg days here regardless of leg_parity.
    leg_days = {day_index for slot, day_index in enumerate(pattern) if slot % 2 == 0}

    added = 0
    for day_index in range(len(WEEKDAYS)):
        if added >= cardio_days:
            break
        if day_index in placed:
            continue
        next_is_legs = (day_index + 1) % len(WEEKDAYS) in leg_days
        if next_is_legs or priority == SchedulePriority.STRENGTH:
            entry = ScheduleEntry(
                day=WEEKDAYS[day_index],
                activity=EASY_CARDIO,
                notes=f"Zone 2 {modality}, 30-40 min",
            )
        else:
            entry = ScheduleEntry(
                day=WEEKDAYS[day_index],
                activity=QUALITY_CARDIO,
                notes=f"Intervals or tempo {modality}, 20-30 min",
            )
        placed[day_index] = entry
        added += 1

    return placed


def _cardio_first(
    strength_days: int, cardio_days: int, modality: str
) -> dict[int, ScheduleEntry]:
    pattern = _CARDIO_PATTERNS.get(cardio_days, _CARDIO_FALLBACK)

    placed: dict[int, ScheduleEntry] = {
        day_index: ScheduleEntry(
            day=WEEKDAYS[day_index],
            activity=QUALITY_CARDIO,
            notes=f"Main {modality} session",
        )
        for day_index in pattern
    }

    added = 0
    for day_index in range(len(WEEKDAYS)):
        if added >= strength_days:
            break
        if day_index in pattern or (day_index - 1) in pattern:
            continue
        placed[day_index] = ScheduleEntry(
            day=WEEKDAYS[day_index],
            activity=UPPER_BODY if added % 2 == 0 else LOWER_BODY,
            notes="Strength session",
        )
        added += 1

    return placed
