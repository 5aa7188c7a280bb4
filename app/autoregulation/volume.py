"""
Volume progression: weekly set targets per muscle group.

Model
-----
Volume starts at MEV in week 1 and climbs linearly towards MRV over a
fixed four-week window::

    step = (MRV - MEV) / 4
    base = max(MEV, round(MEV + step × (week - 1)))

Feedback from the previous week then nudges the target additively:

    difficulty easy      +2   (capped at MRV)
    difficulty moderate   0
    difficulty hard      -1   (floored at MEV)
    difficulty too_hard  -2   (floored at MEV)
    soreness severe      -1   (floored at MEV, stacks with difficulty)

The result is the **weekly total** for the muscle group.  Exercises of the
same week that train that group share it through :func:`distribute_sets`.

Muscle groups without landmarks get :data:`DEFAULT_SETS` and no further
computation.  Nothing in this module raises on bad input; every number is
clamped inline.

Deload handling is *not* part of :func:`calculate_sets`.  It is an optional
:class:`DeloadPolicy` applied to per-exercise counts by the week planner.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from app.autoregulation.feedback import Difficulty, Feedback, Soreness, find_feedback
from app.autoregulation.landmarks import MuscleGroup, get_landmarks, parse_muscle_group, round_half_up

logger = logging.getLogger(__name__)

# ======================================================================
# Constants
# ======================================================================

DEFAULT_SETS = 3
MIN_SETS = 2

# Weeks over which volume ramps from MEV to MRV.
PROGRESSION_WEEKS = 4

_DIFFICULTY_DELTA: dict[Difficulty, int] = {
    Difficulty.EASY: 2,
    Difficulty.MODERATE: 0,
    Difficulty.HARD: -1,
    Difficulty.TOO_HARD: -2,
}

_SEVERE_SORENESS_DELTA = -1


# ======================================================================
# Core computation
# ======================================================================


def calculate_sets(
    muscle_group: MuscleGroup | str,
    week: int,
    feedback: Sequence[Feedback] = (),
) -> int:
    """Recommended weekly set total for *muscle_group* in *week*.

    Args:
        muscle_group: Muscle group label.  Groups without landmarks
            (including unrecognised labels) return :data:`DEFAULT_SETS`.
        week: 1-indexed week within the mesocycle.
        feedback: Feedback records.  Only the first record for
            *muscle_group* is consulted.

    Returns:
        Set count, always ``>= 2``.
    """
    landmarks = get_landmarks(muscle_group)
    if landmarks is None:
        return DEFAULT_SETS

    group = parse_muscle_group(muscle_group)
    mev, mrv = landmarks.mev, landmarks.mrv

    step = (mrv - mev) / PROGRESSION_WEEKS
    base = max(mev, round_half_up(mev + step * (week - 1)))

    record = find_feedback(feedback, group.value)
    if record is not None:
        delta = _DIFFICULTY_DELTA[record.difficulty]
        if delta > 0:
            base = min(mrv, base + delta)
        elif delta < 0:
            base = max(mev, base + delta)

        if record.soreness == Soreness.SEVERE:
            base = max(mev, base + _SEVERE_SORENESS_DELTA)

    result = max(MIN_SETS, base)
    logger.debug("volume %s week %d -> %d sets", group.value, week, result)
    return result


def distribute_sets(total: int, exercise_count: int) -> int:
    """Per-exercise share of a weekly total, never below :data:`MIN_SETS`."""
    count = max(1, exercise_count)
    return max(MIN_SETS, round_half_up(total / count))


# ======================================================================
# Deload policy
# ======================================================================


class DeloadPolicy(BaseModel):
    """Optional volume cut for the final week of a mesocycle."""

    enabled: bool = False
    volume_factor: float = Field(0.6, gt=0.0, le=1.0)

    def is_deload_week(self, week: int, number_of_weeks: int) -> bool:
        return self.enabled and number_of_weeks > 1 and week == number_of_weeks

    def apply(self, sets: int, week: int, number_of_weeks: int) -> int:
        """Scale a per-exercise set count when *week* is a deload week."""
        if not self.is_deload_week(week, number_of_weeks):
            return sets
        return max(MIN_SETS, round_half_up(sets * self.volume_factor))


# ======================================================================
# Week planning
# ======================================================================


def weekly_totals(
    groups: Iterable[MuscleGroup],
    week: int,
    feedback: Sequence[Feedback] = (),
) -> dict[MuscleGroup, int]:
    """Weekly set total for every distinct landmark-bearing group in *groups*."""
    return {
        group: calculate_sets(group, week, feedback)
        for group in dict.fromkeys(groups)
        if get_landmarks(group) is not None
    }


def plan_exercise_sets(
    exercise_groups: Sequence[MuscleGroup],
    week: int,
    feedback: Sequence[Feedback] = (),
    number_of_weeks: Optional[int] = None,
    deload: Optional[DeloadPolicy] = None,
) -> list[int]:
    """Per-exercise set counts for one week.

    Args:
        exercise_groups: Muscle group of every exercise in the week, in
            order (exercises across all workout days of the week).
        week: 1-indexed week number.
        feedback: Feedback records from the previous week.
        number_of_weeks: Mesocycle length, needed by the deload policy.
        deload: Optional deload policy.

    Returns:
        A list parallel to *exercise_groups*.
    """
    counts: dict[MuscleGroup, int] = defaultdict(int)
    for group in exercise_groups:
        counts[group] += 1

    totals = weekly_totals(exercise_groups, week, feedback)

    planned: list[int] = []
    for group in exercise_groups:
        if group in totals:
            sets = distribute_sets(totals[group], counts[group])
        else:
            sets = DEFAULT_SETS
        if deload is not None and number_of_weeks is not None:
            sets = deload.apply(sets, week, number_of_weeks)
        planned.append(sets)
    return planned
