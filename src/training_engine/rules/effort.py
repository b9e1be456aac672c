"""Effort interpretation — free-text effort descriptions to an RPE value.

Categories are evaluated top to bottom and the first match wins. Order is
significant: "could do 2 more" must be caught before the generic "good",
and "easy" before everything else. English and German keywords are
recognised. Unrecognised text falls back to a moderate RPE 7; this
interpreter never raises.
"""

from __future__ import annotations

import re
from typing import Callable

from training_engine.models.enums import DEFAULT_REPS_IN_RESERVE, DEFAULT_RPE, RPE_MAX, RPE_MIN
from training_engine.models.recommendation import EffortInterpretation

_REPS_IN_RESERVE = re.compile(r"(\d+)\s*more")

Matcher = Callable[[str], bool]
Interpreter = Callable[[str], EffortInterpretation]


def _contains_any(*keywords: str) -> Matcher:
    return lambda text: any(keyword in text for keyword in keywords)


def _contains_all(*keywords: str) -> Matcher:
    return lambda text: all(keyword in text for keyword in keywords)


def _fixed(rpe: int, reasoning: str) -> Interpreter:
    return lambda text: EffortInterpretation(rpe=rpe, reasoning=reasoning)


def _from_reps_in_reserve(text: str) -> EffortInterpretation:
    match = _REPS_IN_RESERVE.search(text)
    reps_in_reserve = int(match.group(1)) if match else DEFAULT_REPS_IN_RESERVE
    rpe = min(max(10 - reps_in_reserve, RPE_MIN), RPE_MAX)
    return EffortInterpretation(
        rpe=rpe,
        reasoning=f"{reps_in_reserve} reps in reserve translates to RPE {rpe}",
    )


_CATEGORIES: tuple[tuple[Matcher, Interpreter], ...] = (
    (
        _contains_any("easy", "warm-up", "leicht"),
        _fixed(5, "Easy/warm-up effort indicates low intensity"),
    ),
    (
        _contains_all("could do", "more"),
        _from_reps_in_reserve,
    ),
    (
        _contains_any("good", "solid", "gut"),
        _fixed(7, "Good/solid effort typically indicates RPE 7-8"),
    ),
    (
        _contains_any("hard", "tough", "schwer"),
        _fixed(8, "Hard/tough effort indicates RPE 8-9"),
    ),
    (
        _contains_any("grind", "struggle", "max"),
        _fixed(9, "Grinding/struggling indicates near-maximal effort"),
    ),
    (
        _contains_any("fail", "couldn't"),
        _fixed(10, "Failure or inability to complete indicates RPE 10"),
    ),
)

_DEFAULT = EffortInterpretation(
    rpe=DEFAULT_RPE,
    reasoning=f"Defaulting to moderate effort (RPE {DEFAULT_RPE}) based on description",
)


def interpret_effort(description: str) -> EffortInterpretation:
    """Map a natural-language effort description to an RPE (1-10).

    Args:
        description: e.g. "felt easy", "was a grind", "could do 2 more".

    Returns:
        EffortInterpretation with the RPE and the reason for it.
    """
    text = description.lower()
    for matches, interpret in _CATEGORIES:
        if matches(text):
            return interpret(text)
    return _DEFAULT
