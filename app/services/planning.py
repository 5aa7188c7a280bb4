"""
Shared helpers for building planned weeks.

Used by both mesocycle creation (week 1 from a submitted plan) and
next-week generation.
"""

from typing import Optional

from app.autoregulation import DeloadPolicy, classify_exercise
from app.autoregulation.landmarks import MuscleGroup, parse_muscle_group
from app.autoregulation.progression import DEFAULT_DURATION_SECONDS
from app.core.config import settings
from app.models.exercise import Exercise, ExerciseSet


def deload_policy_from_settings() -> DeloadPolicy:
    return DeloadPolicy(enabled=settings.DELOAD_ENABLED, volume_factor=settings.DELOAD_VOLUME_FACTOR)


def resolve_muscle_group(name: str, explicit: MuscleGroup | str | None = None) -> MuscleGroup:
    """Explicit muscle group if given and known, otherwise inferred from the name."""
    group = parse_muscle_group(explicit)
    return group if group is not None else classify_exercise(name)


def fill_sets(
    exercise: Exercise,
    count: int,
    weight: float,
    reps: int,
    time_based: bool = False,
    duration: Optional[int] = None,
    notes: Optional[str] = None,
) -> None:
    """Append *count* identical planned sets to *exercise*.

    Time-based exercises get a duration instead of weight and reps.
    """
    for set_number in range(1, count + 1):
        if time_based:
            planned = ExerciseSet(set_number=set_number, duration=duration or DEFAULT_DURATION_SECONDS, notes=notes)
        else:
            planned = ExerciseSet(set_number=set_number, weight=weight, reps=reps, notes=notes)
        exercise.sets.append(planned)
