"""
Weekly feedback records.

One :class:`Feedback` record describes how a muscle group responded to the
previous week of training.  The records feed the volume calculator and the
weight / rep progression rules.
"""

from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from app.autoregulation.landmarks import parse_muscle_group


class Difficulty(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"
    TOO_HARD = "too_hard"


class Soreness(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    SEVERE = "severe"


class Performance(str, Enum):
    IMPROVED = "improved"
    MAINTAINED = "maintained"
    DECREASED = "decreased"


class Recovery(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class Feedback(BaseModel):
    """Self-reported feedback for one muscle group."""

    muscle_group: str = Field(..., min_length=1, max_length=50, description="Muscle group label, e.g. 'Chest'")
    difficulty: Difficulty = Difficulty.MODERATE
    soreness: Soreness = Soreness.LIGHT
    performance: Performance = Performance.MAINTAINED
    pump_quality: Optional[int] = Field(None, ge=1, le=5, description="Pump rating 1 (none) to 5 (great)")
    recovery: Optional[Recovery] = None

    @field_validator("muscle_group")
    @classmethod
    def normalise_muscle_group(cls, value: str) -> str:
        """Canonicalise known labels (``'chest'`` -> ``'Chest'``); keep others as given."""
        group = parse_muscle_group(value)
        return group.value if group else value.strip()


def find_feedback(feedback: Sequence[Feedback], muscle_group: str) -> Optional[Feedback]:
    """Return the first record for *muscle_group*.  Later duplicates are ignored."""
    for record in feedback:
        if record.muscle_group == muscle_group:
            return record
    return None


def ensure_unique_muscle_groups(feedback: Sequence[Feedback]) -> Sequence[Feedback]:
    """Raise ``ValueError`` when two records name the same muscle group.

    Labels are canonicalised by :class:`Feedback`, so ``chest`` and
    ``Chest`` collide.  Used as a field validator by the request schemas.
    """
    seen: set[str] = set()
    for record in feedback:
        if record.muscle_group in seen:
            raise ValueError(f"Duplicate feedback for muscle group '{record.muscle_group}'")
        seen.add(record.muscle_group)
    return feedback
