"""
Mesocycle repository.

Handles database operations for :class:`Mesocycle` and its weeks.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.mesocycle import Mesocycle
from app.models.week import Week
from app.models.workout import Workout


class MesocycleRepository:
    """Repository for Mesocycle database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, mesocycle: Mesocycle) -> Mesocycle:
        self.session.add(mesocycle)
        self.session.commit()
        self.session.refresh(mesocycle)
        return mesocycle

    def get_by_id(self, mesocycle_id: int) -> Optional[Mesocycle]:
        return self.session.get(Mesocycle, mesocycle_id)

    def get_all_by_user(self, user_id: int) -> list[Mesocycle]:
        """Newest first."""
        statement = (
            select(Mesocycle)
            .where(Mesocycle.user_id == user_id)
            .order_by(Mesocycle.created_at.desc(), Mesocycle.id.desc())
        )
        return list(self.session.exec(statement).all())

    def get_active_by_user(self, user_id: int) -> list[Mesocycle]:
        statement = select(Mesocycle).where(
            Mesocycle.user_id == user_id,
            Mesocycle.is_active == True,  # noqa: E712
        )
        return list(self.session.exec(statement).all())

    def has_active(self, user_id: int) -> bool:
        return len(self.get_active_by_user(user_id)) > 0

    def update(self, mesocycle: Mesocycle) -> Mesocycle:
        self.session.add(mesocycle)
        self.session.commit()
        self.session.refresh(mesocycle)
        return mesocycle

    def delete(self, mesocycle_id: int) -> bool:
        mesocycle = self.get_by_id(mesocycle_id)
        if mesocycle:
            self.session.delete(mesocycle)
            self.session.commit()
            return True
        return False

    # ------------------------------------------------------------------
    # Weeks
    # ------------------------------------------------------------------

    def get_week(self, mesocycle_id: int, week_number: int) -> Optional[Week]:
        """Oldest week with *week_number* (legacy data may hold duplicates)."""
        statement = (
            select(Week)
            .where(Week.mesocycle_id == mesocycle_id, Week.week_number == week_number)
            .order_by(Week.created_at, Week.id)
        )
        return self.session.exec(statement).first()

    def get_weeks(self, mesocycle_id: int) -> list[Week]:
        statement = (
            select(Week)
            .where(Week.mesocycle_id == mesocycle_id)
            .order_by(Week.week_number, Week.created_at, Week.id)
        )
        return list(self.session.exec(statement).all())

    def create_week(self, week: Week) -> Week:
        self.session.add(week)
        self.session.commit()
        self.session.refresh(week)
        return week

    def delete_weeks(self, weeks: list[Week]) -> None:
        for week in weeks:
            self.session.delete(week)
        self.session.commit()

    # ------------------------------------------------------------------
    # Workouts across mesocycles
    # ------------------------------------------------------------------

    def get_user_workouts_in_range(
        self,
        user_id: int,
        start: datetime.date,
        end: datetime.date,
    ) -> list[Workout]:
        """Dated workouts of all the user's mesocycles within ``[start, end]``."""
        statement = (
            select(Workout)
            .join(Week, Workout.week_id == Week.id)
            .join(Mesocycle, Week.mesocycle_id == Mesocycle.id)
            .where(
                Mesocycle.user_id == user_id,
                Workout.workout_date >= start,
                Workout.workout_date <= end,
            )
            .order_by(Workout.workout_date)
        )
        return list(self.session.exec(statement).all())
