"""
Analytics schemas.
"""

import datetime

from pydantic import BaseModel


class HeatmapDay(BaseModel):
    date: datetime.date
    planned: int
    completed: int


class HeatmapResponse(BaseModel):
    """Workouts per calendar day of one month."""

    year: int
    month: int
    days: list[HeatmapDay]
    total_planned: int
    total_completed: int
