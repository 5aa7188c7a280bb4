"""
Workout service.

Logging a workout: completing days, adding and removing exercises, and
recording sets.  Every record is looked up through its mesocycle owner, so
another user's workout, exercise or set yields 404.
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.autoregulation.landmarks import MuscleGroup
from app.autoregulation.progression import DEFAULT_DURATION_SECONDS
from app.db.repositories.workout import WorkoutRepository
from app.models.exercise import Exercise, ExerciseSet
from app.models.user import User
from app.models.workout import Workout
from app.schemas.workout import ExerciseCreate, SetCreate, SetUpdate, WorkoutUpdate
from app.services.planning import fill_sets, resolve_muscle_group

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout, exercise and set logging."""

    def __init__(self, session: Session):
        self.repository = WorkoutRepository(session)

    # ------------------------------------------------------------------
    # Workouts
    # ------------------------------------------------------------------

    def get(self, user: User, workout_id: int) -> Workout:
        workout = self.repository.get_owned_workout(workout_id, user.id)
        if workout is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
        return workout

    def update(self, user: User, workout_id: int, data: WorkoutUpdate) -> Workout:
        """
        Update a workout.

        Completing a workout without an explicit date stamps it with today;
        reopening it without an explicit date clears the date.
        """
        workout = self.get(user, workout_id)

        if data.day_name is not None:
            workout.day_name = data.day_name.strip()
        if data.notes is not None:
            workout.notes = data.notes
        if data.workout_date is not None:
            workout.workout_date = data.workout_date
        if data.is_completed is not None:
            workout.is_completed = data.is_completed
            if data.workout_date is None:
                workout.workout_date = datetime.date.today() if data.is_completed else None

        return self.repository.save(workout)

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    def add_exercise(self, user: User, workout_id: int, data: ExerciseCreate) -> Exercise:
        """Append an exercise with ``data.sets`` identical sets to the end of a workout."""
        workout = self.get(user, workout_id)

        exercise = Exercise(
            workout_id=workout.id,
            name=data.name,
            exercise_order=self.repository.next_exercise_order(workout.id),
            muscle_group=data.muscle_group.value if data.muscle_group is not None else None,
        )
        time_based = resolve_muscle_group(data.name, data.muscle_group) is MuscleGroup.CARDIO
        fill_sets(exercise, data.sets, weight=data.weight, reps=data.reps, time_based=time_based)
        exercise = self.repository.save(exercise)
        logger.info("Added exercise %d '%s' to workout %d", exercise.id, exercise.name, workout.id)
        return exercise

    def delete_exercise(self, user: User, exercise_id: int) -> None:
        exercise = self.repository.get_owned_exercise(exercise_id, user.id)
        if exercise is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
        self.repository.delete(exercise)
        logger.info("Deleted exercise %d", exercise_id)

    # ------------------------------------------------------------------
    # Sets
    # ------------------------------------------------------------------

    def add_set(self, user: User, exercise_id: int, data: SetCreate) -> ExerciseSet:
        exercise = self.repository.get_owned_exercise(exercise_id, user.id)
        if exercise is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")

        exercise_set = ExerciseSet(
            exercise_id=exercise.id,
            set_number=self.repository.next_set_number(exercise.id),
            weight=data.weight,
            reps=data.reps,
            duration=data.duration,
            notes=data.notes,
        )
        group = resolve_muscle_group(exercise.name, exercise.muscle_group)
        if exercise_set.duration is None and group is MuscleGroup.CARDIO:
            exercise_set.duration = DEFAULT_DURATION_SECONDS
        return self.repository.save(exercise_set)

    def update_set(self, user: User, set_id: int, data: SetUpdate) -> ExerciseSet:
        """
        Record weight, reps, duration or completion of a set.

        When the last open set of a workout is completed the workout is
        marked completed and dated today.
        """
        exercise_set = self._get_owned_set(user, set_id)

        if data.weight is not None:
            exercise_set.weight = data.weight
        if data.reps is not None:
            exercise_set.reps = data.reps
        if data.duration is not None:
            exercise_set.duration = data.duration
        if data.notes is not None:
            exercise_set.notes = data.notes
        if data.is_completed is not None:
            exercise_set.is_completed = data.is_completed

        exercise_set = self.repository.save(exercise_set)

        if data.is_completed:
            workout = exercise_set.exercise.workout
            if not workout.is_completed and self._all_sets_completed(workout):
                workout.is_completed = True
                workout.workout_date = workout.workout_date or datetime.date.today()
                self.repository.save(workout)
                logger.info("Workout %d completed", workout.id)

        return exercise_set

    def delete_set(self, user: User, set_id: int) -> None:
        exercise_set = self._get_owned_set(user, set_id)
        self.repository.delete(exercise_set)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_set(self, user: User, set_id: int) -> ExerciseSet:
        exercise_set = self.repository.get_owned_set(set_id, user.id)
        if exercise_set is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
        return exercise_set

    @staticmethod
    def _all_sets_completed(workout: Workout) -> bool:
        sets = [s for exercise in workout.exercises for s in exercise.sets]
        return bool(sets) and all(s.is_completed for s in sets)
