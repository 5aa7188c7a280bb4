"""
Analytics service.

Calendar heatmap of dated workouts across all of a user's mesocycles.
"""

import calendar
import datetime
from collections import defaultdict

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.mesocycle import MesocycleRepository
from app.models.user import User
from app.schemas.analytics import HeatmapDay, HeatmapResponse


class AnalyticsService:
    """Service for training analytics."""

    def __init__(self, session: Session):
        self.repository = MesocycleRepository(session)

    def heatmap(self, user: User, year: int, month: int) -> HeatmapResponse:
        """
        Planned and completed workout counts per day of a month.

        Only workouts with a ``workout_date`` are counted; days without
        workouts are omitted.
        """
        if not 1 <= month <= 12:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid month: {month}")

        start = datetime.date(year, month, 1)
        end = datetime.date(year, month, calendar.monthrange(year, month)[1])

        planned: dict[datetime.date, int] = defaultdict(int)
        completed: dict[datetime.date, int] = defaultdict(int)
        for workout in self.repository.get_user_workouts_in_range(user.id, start, end):
            planned[workout.workout_date] += 1
            if workout.is_completed:
                completed[workout.workout_date] += 1

        days = [
            HeatmapDay(date=day, planned=planned[day], completed=completed[day])
            for day in sorted(planned)
        ]
        return HeatmapResponse(
            year=year,
            month=month,
            days=days,
            total_planned=sum(planned.values()),
            total_completed=sum(completed.values()),
        )
