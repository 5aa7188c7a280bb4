"""
Workout, exercise and set repository.

Every lookup that serves an API call goes through ``get_owned_*``, which
joins up to the mesocycle and filters by user; a record belonging to a
different user is indistinguishable from a missing one.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.exercise import Exercise, ExerciseSet
from app.models.mesocycle import Mesocycle
from app.models.week import Week
from app.models.workout import Workout


class WorkoutRepository:
    """Repository for Workout, Exercise and ExerciseSet database operations."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Ownership-checked lookups
    # ------------------------------------------------------------------

    def get_owned_workout(self, workout_id: int, user_id: int) -> Optional[Workout]:
        statement = (
            select(Workout)
            .join(Week, Workout.week_id == Week.id)
            .join(Mesocycle, Week.mesocycle_id == Mesocycle.id)
            .where(Workout.id == workout_id, Mesocycle.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def get_owned_exercise(self, exercise_id: int, user_id: int) -> Optional[Exercise]:
        statement = (
            select(Exercise)
            .join(Workout, Exercise.workout_id == Workout.id)
            .join(Week, Workout.week_id == Week.id)
            .join(Mesocycle, Week.mesocycle_id == Mesocycle.id)
            .where(Exercise.id == exercise_id, Mesocycle.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def get_owned_set(self, set_id: int, user_id: int) -> Optional[ExerciseSet]:
        statement = (
            select(ExerciseSet)
            .join(Exercise, ExerciseSet.exercise_id == Exercise.id)
            .join(Workout, Exercise.workout_id == Workout.id)
            .join(Week, Workout.week_id == Week.id)
            .join(Mesocycle, Week.mesocycle_id == Mesocycle.id)
            .where(ExerciseSet.id == set_id, Mesocycle.user_id == user_id)
        )
        return self.session.exec(statement).first()

    # ------------------------------------------------------------------
    # Ordering helpers
    # ------------------------------------------------------------------

    def next_exercise_order(self, workout_id: int) -> int:
        statement = select(func.max(Exercise.exercise_order)).where(Exercise.workout_id == workout_id)
        current = self.session.exec(statement).first()
        return (current or 0) + 1

    def next_set_number(self, exercise_id: int) -> int:
        statement = select(func.max(ExerciseSet.set_number)).where(ExerciseSet.exercise_id == exercise_id)
        current = self.session.exec(statement).first()
        return (current or 0) + 1

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, obj):
        """Add or update any workout-tree record and return it refreshed."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete(self, obj) -> None:
        self.session.delete(obj)
        self.session.commit()
