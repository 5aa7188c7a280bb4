"""
Mesocycle database model.

A mesocycle is a multi-week training block owned by a user.  It is the root
of the ``mesocycle -> week -> workout -> exercise -> set`` hierarchy;
deleting it deletes everything below.
"""

import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.core.clock import timestamp_type, utc_now

if TYPE_CHECKING:
    from app.models.week import Week


class Mesocycle(SQLModel, table=True):
    """A training block of ``number_of_weeks`` weeks.

    At most one mesocycle per user is expected to be active; the
    :class:`MesocycleService` enforces this when activating.
    """

    __tablename__ = "mesocycles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    number_of_weeks: int = Field(default=4, nullable=False)

    start_date: Optional[datetime.date] = Field(default=None)
    end_date: Optional[datetime.date] = Field(default=None)
    is_active: bool = Field(default=False, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=timestamp_type())

    weeks: List["Week"] = Relationship(
        back_populates="mesocycle",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "[Week.week_number, Week.id]"},
    )
