"""
Week database model.
"""

import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import timestamp_type, utc_now

if TYPE_CHECKING:
    from app.models.mesocycle import Mesocycle
    from app.models.workout import Workout


class Week(SQLModel, table=True):
    """One week of a mesocycle.

    ``week_number`` is 1-indexed.  Uniqueness per mesocycle is checked by
    the services rather than the schema so that legacy duplicates can be
    imported and cleaned up afterwards.
    """

    __tablename__ = "weeks"

    id: Optional[int] = Field(default=None, primary_key=True)
    mesocycle_id: int = Field(foreign_key="mesocycles.id", nullable=False, index=True)
    week_number: int = Field(nullable=False, index=True)
    name: str = Field(nullable=False, max_length=100)

    start_date: Optional[datetime.date] = Field(default=None)
    end_date: Optional[datetime.date] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    mesocycle: Optional["Mesocycle"] = Relationship(back_populates="weeks")
    workouts: List["Workout"] = Relationship(
        back_populates="week",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Workout.id"},
    )
