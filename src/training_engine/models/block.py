"""Periodized block models: one PhaseWeek per week of the block."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhaseWeek:
    """Phase assignment and load bands for one week of a training block."""

    week: int  # 1-indexed
    phase: str
    intensity: str
    volume: str
    notes: str

    @property
    def is_deload(self) -> bool:
        return self.phase == "Deload"
