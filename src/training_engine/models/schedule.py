"""Weekly hybrid schedule entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    """What happens on one weekday of a hybrid strength/cardio week."""

    day: str
    activity: str
    notes: str

    @property
    def is_rest(self) -> bool:
        return self.activity == "Rest"
