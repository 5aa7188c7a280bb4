"""
Muscle groups and volume landmarks.

Volume landmarks are weekly set counts per muscle group, following the
Renaissance Periodization vocabulary:

    MEV (minimum effective volume): the least volume that still grows muscle
    MAV (maximum adaptive volume): where most growth happens
    MRV (maximum recoverable volume): the most volume that can be recovered from

The table is compiled in and never edited at runtime.  Groups emitted by
the exercise classifier that have no entry (``Abs``, ``Cardio``, ``Other``)
are treated as *unknown* by the volume calculator.
"""

from __future__ import annotations

import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ======================================================================
# Muscle groups
# ======================================================================

class MuscleGroup(str, Enum):
    """Muscle-group label attached to an exercise."""
    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    QUADRICEPS = "Quadriceps"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    ABS = "Abs"
    CARDIO = "Cardio"
    OTHER = "Other"


_BY_LOWER: dict[str, MuscleGroup] = {g.value.lower(): g for g in MuscleGroup}


def parse_muscle_group(value: MuscleGroup | str | None) -> Optional[MuscleGroup]:
    """Resolve a label case-insensitively.  Returns ``None`` if unknown."""
    if value is None:
        return None
    if isinstance(value, MuscleGroup):
        return value
    return _BY_LOWER.get(str(value).strip().lower())


# ======================================================================
# Landmarks
# ======================================================================

class VolumeLandmarks(BaseModel):
    """Weekly set landmarks for one muscle group."""

    model_config = ConfigDict(frozen=True)

    mev: int = Field(..., ge=0, description="Minimum effective volume (sets/week)")
    mav: int = Field(..., ge=0, description="Maximum adaptive volume (sets/week)")
    mrv: int = Field(..., ge=0, description="Maximum recoverable volume (sets/week)")

    @model_validator(mode="after")
    def validate_ordering(self) -> VolumeLandmarks:
        if self.mrv < self.mev:
            raise ValueError(f"MRV ({self.mrv}) must not be below MEV ({self.mev})")
        return self


VOLUME_LANDMARKS: Mapping[MuscleGroup, VolumeLandmarks] = MappingProxyType({
    MuscleGroup.CHEST: VolumeLandmarks(mev=10, mav=16, mrv=22),
    MuscleGroup.BACK: VolumeLandmarks(mev=10, mav=18, mrv=25),
    MuscleGroup.SHOULDERS: VolumeLandmarks(mev=8, mav=19, mrv=26),
    MuscleGroup.BICEPS: VolumeLandmarks(mev=6, mav=17, mrv=20),
    MuscleGroup.TRICEPS: VolumeLandmarks(mev=8, mav=17, mrv=20),
    MuscleGroup.QUADRICEPS: VolumeLandmarks(mev=8, mav=15, mrv=20),
    MuscleGroup.HAMSTRINGS: VolumeLandmarks(mev=6, mav=13, mrv=20),
    MuscleGroup.GLUTES: VolumeLandmarks(mev=6, mav=12, mrv=16),
    MuscleGroup.CALVES: VolumeLandmarks(mev=8, mav=16, mrv=25),
})

LANDMARK_GROUPS: tuple[MuscleGroup, ...] = tuple(VOLUME_LANDMARKS.keys())


def get_landmarks(muscle_group: MuscleGroup | str | None) -> Optional[VolumeLandmarks]:
    """Landmarks for *muscle_group*, or ``None`` when it has none."""
    group = parse_muscle_group(muscle_group)
    if group is None:
        return None
    return VOLUME_LANDMARKS.get(group)


# ======================================================================
# Rounding
# ======================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves always rounding up.

    Python's :func:`round` rounds halves to even (``round(12.5) == 12``);
    set counts need ``12.5 -> 13``.
    """
    return int(math.floor(value + 0.5))
