"""
Load, rep and effort progression between weeks.

Companion rules to :mod:`app.autoregulation.volume`.  Volume decides *how
many* sets; these rules decide the weight, target reps, reps-in-reserve
guidance and (for cardio) the duration of each generated set.

Weight
    Previous weight × a per-exercise progression rate, adjusted by the
    difficulty / recovery feedback.  Changes larger than 10 % are refused
    (plates come in fixed increments; the lifter progresses reps instead).

Reps
    A week-indexed rep target, nudged by feedback and clamped to the rep
    range of the movement pattern.

RIR
    Reps-in-reserve guidance per week, used as the set note.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from pydantic import BaseModel

from app.autoregulation.feedback import Difficulty, Feedback, Recovery, find_feedback
from app.autoregulation.landmarks import MuscleGroup, parse_muscle_group, round_half_up

# ======================================================================
# Configuration
# ======================================================================

_COMPOUND_KEYWORDS = ("bench", "squat", "deadlift")
_ISOLATION_KEYWORDS = ("curl", "lateral", "tricep")

_COMPOUND_RATE = 0.05
_SMALL_MUSCLE_RATE = 0.025
_LARGE_MUSCLE_RATE = 0.04
_DEFAULT_RATE = 0.025

_SMALL_MUSCLES = {MuscleGroup.BICEPS, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS}
_LARGE_MUSCLES = {MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.QUADRICEPS, MuscleGroup.HAMSTRINGS}

# Extra increase on top of the base rate.
_EASY_BONUS = 0.025
_EXCELLENT_RECOVERY_BONUS = 0.02

_DIFFICULTY_WEIGHT_FACTOR: dict[Difficulty, float] = {
    Difficulty.TOO_HARD: 0.90,
    Difficulty.HARD: 0.95,
}
_POOR_RECOVERY_FACTOR = 0.95

# Largest accepted week-to-week weight change, in percent.
MAX_WEIGHT_JUMP_PCT = 10.0
WEIGHT_INCREMENT_KG = 0.25

REP_TABLE: dict[int, tuple[int, str]] = {
    1: (8, "MEV"),
    2: (10, "MAV"),
    3: (12, "MAV"),
    4: (12, "MRV"),
    5: (8, "Deload"),
}
_DEFAULT_REP_WEEK = 2
MIN_REPS = 6
MAX_REPS = 20
_COMPOUND_REP_RANGE = (6, 12)
_ISOLATION_REP_RANGE = (8, 20)

DEFAULT_DURATION_SECONDS = 600
_DURATION_WEEKLY_INCREASE = 0.05


class RIRGuidance(BaseModel):
    """Reps-in-reserve target for a week."""

    rir: int
    description: str


RIR_TABLE: dict[int, RIRGuidance] = {
    1: RIRGuidance(rir=3, description="Week 1: 3 RIR - Building base volume"),
    2: RIRGuidance(rir=2, description="Week 2: 2 RIR - Moderate intensity"),
    3: RIRGuidance(rir=1, description="Week 3: 1 RIR - High intensity"),
    4: RIRGuidance(rir=0, description="Week 4: 0 RIR - Peak intensity"),
    5: RIRGuidance(rir=0, description="Week 5: 0 RIR - Overreaching (optional)"),
}
DELOAD_RIR = RIRGuidance(rir=3, description="Deload: 3-4 RIR - Active recovery")
_DEFAULT_RIR_WEEK = 4


# ======================================================================
# Helpers
# ======================================================================


def _has_keyword(name: str, keywords: Sequence[str]) -> bool:
    lowered = (name or "").lower()
    return any(k in lowered for k in keywords)


def _poor_recovery(record: Feedback) -> bool:
    return record.recovery == Recovery.POOR and record.pump_quality is not None and record.pump_quality <= 2


def _excellent_recovery(record: Feedback) -> bool:
    return record.recovery == Recovery.EXCELLENT and record.pump_quality is not None and record.pump_quality >= 4


def _lookup(feedback: Sequence[Feedback], muscle_group: MuscleGroup | str) -> Optional[Feedback]:
    group = parse_muscle_group(muscle_group)
    label = group.value if group else str(muscle_group)
    return find_feedback(feedback, label)


def progression_rate(exercise_name: str, muscle_group: MuscleGroup | str) -> float:
    """Default week-to-week weight increase for an exercise (fraction)."""
    if _has_keyword(exercise_name, _COMPOUND_KEYWORDS):
        return _COMPOUND_RATE
    group = parse_muscle_group(muscle_group)
    if group in _SMALL_MUSCLES:
        return _SMALL_MUSCLE_RATE
    if group in _LARGE_MUSCLES:
        return _LARGE_MUSCLE_RATE
    return _DEFAULT_RATE


# ======================================================================
# Weight
# ======================================================================


def progress_weight(
    base_weight: float,
    muscle_group: MuscleGroup | str,
    feedback: Sequence[Feedback] = (),
    exercise_name: str = "",
) -> float:
    """Working weight for next week, rounded to 0.25 kg.

    Returns *base_weight* unchanged when the computed change exceeds
    :data:`MAX_WEIGHT_JUMP_PCT`, and ``0.0`` when there is no usable base.
    """
    if base_weight is None or base_weight <= 0:
        return 0.0

    rate = progression_rate(exercise_name, muscle_group)
    record = _lookup(feedback, muscle_group)
    weight = float(base_weight)

    if record is None:
        weight *= 1 + rate
    else:
        if record.difficulty == Difficulty.EASY:
            weight *= 1 + rate + _EASY_BONUS
        elif record.difficulty == Difficulty.MODERATE:
            weight *= 1 + rate
        else:
            weight *= _DIFFICULTY_WEIGHT_FACTOR[record.difficulty]

        if _poor_recovery(record):
            weight *= _POOR_RECOVERY_FACTOR
        elif _excellent_recovery(record):
            weight *= 1 + rate + _EXCELLENT_RECOVERY_BONUS

    jump_pct = abs(weight - base_weight) / base_weight * 100
    if jump_pct > MAX_WEIGHT_JUMP_PCT:
        return float(base_weight)

    return math.floor(weight / WEIGHT_INCREMENT_KG + 0.5) * WEIGHT_INCREMENT_KG


# ======================================================================
# Reps
# ======================================================================


def rep_phase(week: int) -> str:
    """Training phase label of *week* (``MEV`` / ``MAV`` / ``MRV`` / ``Deload``)."""
    return REP_TABLE.get(week, REP_TABLE[_DEFAULT_REP_WEEK])[1]


def target_reps(
    week: int,
    muscle_group: MuscleGroup | str,
    feedback: Sequence[Feedback] = (),
    exercise_name: str = "",
) -> int:
    """Target reps per set for an exercise in *week*."""
    reps = REP_TABLE.get(week, REP_TABLE[_DEFAULT_REP_WEEK])[0]

    record = _lookup(feedback, muscle_group)
    if record is not None:
        if record.difficulty == Difficulty.TOO_HARD:
            reps = max(MIN_REPS, reps - 2)
        elif record.difficulty == Difficulty.HARD:
            reps = max(MIN_REPS, reps - 1)
        elif record.difficulty == Difficulty.EASY:
            reps = min(MAX_REPS, reps + 2)

        if _poor_recovery(record):
            reps = max(MIN_REPS, reps - 1)
        elif _excellent_recovery(record):
            reps = min(MAX_REPS, reps + 1)

    if _has_keyword(exercise_name, _COMPOUND_KEYWORDS):
        low, high = _COMPOUND_REP_RANGE
        reps = max(low, min(high, reps))
    elif _has_keyword(exercise_name, _ISOLATION_KEYWORDS):
        low, high = _ISOLATION_REP_RANGE
        reps = max(low, min(high, reps))

    return reps


# ======================================================================
# RIR & duration
# ======================================================================


def rir_for_week(week: int, deload: bool = False) -> RIRGuidance:
    """Reps-in-reserve guidance for *week*."""
    if deload:
        return DELOAD_RIR
    return RIR_TABLE.get(week, RIR_TABLE[_DEFAULT_RIR_WEEK])


def progress_duration(base_duration: Optional[int], week: int) -> int:
    """Duration in seconds for a time-based set, +5 % per week after week 1."""
    base = base_duration if base_duration and base_duration > 0 else DEFAULT_DURATION_SECONDS
    return round_half_up(base * (1 + (week - 1) * _DURATION_WEEKLY_INCREASE))
