"""
Workout (training day) database model.
"""

import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import timestamp_type, utc_now

if TYPE_CHECKING:
    from app.models.exercise import Exercise
    from app.models.week import Week


class Workout(SQLModel, table=True):
    """A training day within a week, e.g. ``'Day 1 - Push'``."""

    __tablename__ = "workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    week_id: int = Field(foreign_key="weeks.id", nullable=False, index=True)
    day_name: str = Field(nullable=False, max_length=255)

    # Calendar date the workout was (or is planned to be) performed
    workout_date: Optional[datetime.date] = Field(default=None, index=True)
    is_completed: bool = Field(default=False, nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    week: Optional["Week"] = Relationship(back_populates="workouts")
    exercises: List["Exercise"] = Relationship(
        back_populates="workout",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "[Exercise.exercise_order, Exercise.id]"},
    )
