"""
Next-week generation schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.autoregulation.feedback import Feedback, ensure_unique_muscle_groups
from app.core.config import settings
from app.schemas.mesocycle import WeekResponse

DEFAULT_SPLIT = ["Push", "Pull", "Legs"]


class ProgressiveWeekRequest(BaseModel):
    """Request to generate week ``week_number`` from the previous week."""

    week_number: int = Field(..., ge=1, le=52)
    feedback: list[Feedback] = Field(default_factory=list)
    training_days: int = Field(default_factory=lambda: settings.DEFAULT_TRAINING_DAYS, ge=1, le=7,
                                description="Days per week when no previous week exists")
    split: list[str] = Field(default_factory=lambda: list(DEFAULT_SPLIT), min_length=1)

    @field_validator("feedback")
    @classmethod
    def unique_muscle_groups(cls, value: list[Feedback]) -> list[Feedback]:
        return ensure_unique_muscle_groups(value)


class MuscleGroupVolume(BaseModel):
    """Planned weekly volume for one muscle group."""

    muscle_group: str
    weekly_sets: int
    exercises: int
    mev: int
    mrv: int


class ProgressionSummary(BaseModel):
    week_number: int
    rir: int
    rir_description: str
    rep_phase: str
    deload: bool
    volume: list[MuscleGroupVolume]


class ProgressiveWeekResponse(BaseModel):
    """Either the generated week, or ``completed=True`` past the last week."""

    completed: bool = False
    message: str
    week: Optional[WeekResponse] = None
    summary: Optional[ProgressionSummary] = None
