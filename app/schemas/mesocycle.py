"""
Mesocycle API schemas.

Covers creation from a week-1 plan, updates, the legacy JSON import format
and the nested read models (mesocycle -> week -> workout -> exercise -> set).
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.autoregulation.landmarks import MuscleGroup


# ======================================================================
# Week-1 plan
# ======================================================================

class PlannedExercise(BaseModel):
    """One exercise of the initial plan."""

    name: str = Field(..., min_length=1, max_length=255)
    weight: float = Field(0.0, ge=0.0, description="Starting weight in kg")
    reps: int = Field(8, ge=1, le=100)
    muscle_group: Optional[MuscleGroup] = Field(
        None, description="Overrides the muscle group inferred from the name"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Exercise name must not be blank")
        return value


class PlannedDay(BaseModel):
    """One training day of the initial plan."""

    day_name: str = Field(..., min_length=1, max_length=255)
    exercises: list[PlannedExercise] = Field(default_factory=list)


class MesocycleCreate(BaseModel):
    """Schema for creating a mesocycle together with its first week."""

    name: str = Field(..., min_length=1, max_length=255)
    number_of_weeks: int = Field(4, ge=1, le=12)
    start_date: Optional[datetime.date] = None
    days: list[PlannedDay] = Field(default_factory=list)


class MesocycleUpdate(BaseModel):
    """Schema for updating a mesocycle.  Unset fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    number_of_weeks: Optional[int] = Field(None, ge=1, le=12)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    is_active: Optional[bool] = None


# ======================================================================
# Legacy import format
# ======================================================================

class ImportSet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1, description="Set number")
    weight: Optional[float] = Field(None, alias="Weight", ge=0.0)
    reps: Optional[int] = Field(None, alias="Reps", ge=0)


class ImportExercise(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1, description="Exercise order")
    name: str = Field(..., alias="Name", min_length=1, max_length=255)
    sets: list[ImportSet] = Field(default_factory=list, alias="Sets")


class ImportDay(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day_name: str = Field(..., alias="DayName", min_length=1, max_length=255)
    exercises: list[ImportExercise] = Field(default_factory=list, alias="Exercises")


class ImportWeek(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1, description="Week number")
    name: str = Field(..., alias="Name", min_length=1, max_length=100)
    days: list[ImportDay] = Field(default_factory=list, alias="Days")


class MesocycleImport(BaseModel):
    """A mesocycle exported by the previous version of the app.

    Keys are PascalCase (``Name``, ``NumberOfWeeks``, ``Weeks``...); the
    ``id`` of weeks, exercises and sets carries the week number, exercise
    order and set number respectively.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name", min_length=1, max_length=255)
    number_of_weeks: int = Field(..., alias="NumberOfWeeks", ge=1, le=52)
    weeks: list[ImportWeek] = Field(default_factory=list, alias="Weeks")


# ======================================================================
# Read models
# ======================================================================

class ExerciseSetResponse(BaseModel):
    id: int
    set_number: int
    weight: Optional[float]
    reps: Optional[int]
    duration: Optional[int]
    is_completed: bool
    notes: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class ExerciseResponse(BaseModel):
    id: int
    name: str
    exercise_order: int
    muscle_group: Optional[str] = None
    notes: Optional[str]
    sets: list[ExerciseSetResponse] = []

    model_config = ConfigDict(from_attributes=True)


class WorkoutResponse(BaseModel):
    id: int
    week_id: int
    day_name: str
    workout_date: Optional[datetime.date]
    is_completed: bool
    notes: Optional[str]
    exercises: list[ExerciseResponse] = []

    model_config = ConfigDict(from_attributes=True)


class WeekResponse(BaseModel):
    id: int
    mesocycle_id: int
    week_number: int
    name: str
    start_date: Optional[datetime.date]
    end_date: Optional[datetime.date]
    workouts: list[WorkoutResponse] = []

    model_config = ConfigDict(from_attributes=True)


class MesocycleSummary(BaseModel):
    """Mesocycle without its weeks, used by list views."""

    id: int
    name: str
    number_of_weeks: int
    start_date: Optional[datetime.date]
    end_date: Optional[datetime.date]
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class MesocycleResponse(MesocycleSummary):
    """Mesocycle with the full nested week hierarchy."""

    weeks: list[WeekResponse] = []


class MesocycleCompletion(BaseModel):
    """Progress through a mesocycle."""

    mesocycle_id: int
    total_weeks: int
    weeks_created: int
    weeks_completed: int
    workouts_planned: int
    workouts_completed: int
    completion_rate: float = Field(..., ge=0.0, le=1.0, description="Completed / planned workouts")
    is_finished: bool


class DuplicateWeeksCleanup(BaseModel):
    mesocycle_id: int
    removed_week_ids: list[int]
