"""
Exercise and set database models.

An exercise is identified by free-text ``name``.  Its muscle group is the
explicit ``muscle_group`` when one was given, otherwise it is inferred at
planning time by :func:`app.autoregulation.classify_exercise`.
Sets store either weight × reps or, for time-based exercises, a duration.
"""

import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import timestamp_type, utc_now

if TYPE_CHECKING:
    from app.models.workout import Workout


class Exercise(SQLModel, table=True):
    """An exercise within a workout, ordered by ``exercise_order``."""

    __tablename__ = "exercises"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: int = Field(foreign_key="workouts.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    exercise_order: int = Field(default=1, nullable=False)
    muscle_group: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    workout: Optional["Workout"] = Relationship(back_populates="exercises")
    sets: List["ExerciseSet"] = Relationship(
        back_populates="exercise",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "[ExerciseSet.set_number, ExerciseSet.id]",
        },
    )


class ExerciseSet(SQLModel, table=True):
    """A single set.  ``weight`` in kg, ``duration`` in seconds."""

    __tablename__ = "sets"

    id: Optional[int] = Field(default=None, primary_key=True)
    exercise_id: int = Field(foreign_key="exercises.id", nullable=False, index=True)
    set_number: int = Field(nullable=False)

    weight: Optional[float] = Field(default=None, ge=0.0)
    reps: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    is_completed: bool = Field(default=False, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    exercise: Optional[Exercise] = Relationship(back_populates="sets")
