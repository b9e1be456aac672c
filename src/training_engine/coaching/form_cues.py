"""Form cues — technique reminders keyed by exercise name.

Lookups are substring matches in both directions ("Paused Bench Press"
matches "bench press", and "bench" matches it too). The first table entry
that matches wins; anything else gets the generic cues.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Cue lookup: lower-case exercise key -> ordered cues
# ---------------------------------------------------------------------------

_CUES: dict[str, tuple[str, ...]] = {
    "bench press": (
        "Retract and depress shoulder blades",
        "Plant feet firmly on the floor",
        "Lower bar to mid-chest with control",
        "Drive through feet on the press",
        "Keep wrists straight over elbows",
    ),
    "squat": (
        "Brace core before descending",
        "Push knees out over toes",
        "Keep chest up throughout",
        "Descend until hip crease below knee",
        "Drive through full foot on ascent",
    ),
    "deadlift": (
        "Bar over mid-foot at start",
        "Shoulders slightly in front of bar",
        "Brace core and engage lats",
        "Push floor away, don't pull bar",
        "Lock out hips and knees together",
    ),
    "overhead press": (
        "Grip slightly outside shoulders",
        "Elbows slightly in front of bar",
        "Squeeze glutes for stability",
        "Press bar in slight arc around face",
        "Lock out fully overhead",
    ),
    "row": (
        "Hinge at hips, keep back flat",
        "Pull to lower chest/upper abs",
        "Lead with elbows, not hands",
        "Squeeze shoulder blades at top",
        "Control the negative",
    ),
}

GENERAL_KEY = "general"

_GENERAL_CUES: tuple[str, ...] = (
    "Focus on controlled movement",
    "Maintain proper breathing",
    "Use full range of motion",
    "Keep core engaged throughout",
)


def lookup_form_cues(exercise_name: str) -> tuple[str, list[str]]:
    """Find technique cues for an exercise.

    Args:
        exercise_name: Free-form exercise name as the athlete typed it.

    Returns:
        Tuple of (matched table key, cues). The key is "general" when no
        exercise-specific cues exist.
    """
    name = exercise_name.lower()
    for key, cues in _CUES.items():
        if key in name or name in key:
            return key, list(cues)
    return GENERAL_KEY, list(_GENERAL_CUES)
