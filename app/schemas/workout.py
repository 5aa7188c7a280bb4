"""
Workout, exercise and set API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.autoregulation.landmarks import MuscleGroup


class WorkoutUpdate(BaseModel):
    """Schema for updating a workout.  Unset fields are left unchanged."""

    day_name: Optional[str] = Field(None, min_length=1, max_length=255)
    workout_date: Optional[datetime.date] = None
    is_completed: Optional[bool] = None
    notes: Optional[str] = Field(None, max_length=1000)


class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to a workout."""

    name: str = Field(..., max_length=255)
    sets: int = Field(3, ge=1, le=20, description="Number of sets to create")
    weight: float = Field(0.0, ge=0.0)
    reps: int = Field(8, ge=0, le=100)
    muscle_group: Optional[MuscleGroup] = Field(None, description="Overrides the muscle group inferred from the name")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Exercise name must not be blank")
        return value


class SetCreate(BaseModel):
    """Schema for appending a set to an exercise."""

    weight: Optional[float] = Field(None, ge=0.0)
    reps: Optional[int] = Field(None, ge=0, le=100)
    duration: Optional[int] = Field(None, ge=0, description="Seconds, for time-based exercises")
    notes: Optional[str] = Field(None, max_length=500)


class SetUpdate(BaseModel):
    """Schema for logging or correcting a set."""

    weight: Optional[float] = Field(None, ge=0.0)
    reps: Optional[int] = Field(None, ge=0, le=100)
    duration: Optional[int] = Field(None, ge=0)
    is_completed: Optional[bool] = None
    notes: Optional[str] = Field(None, max_length=500)
