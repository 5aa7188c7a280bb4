"""
Mesocycle service.

Creation (with the week-1 plan), listing, updates, deletion, the legacy
JSON import, completion statistics and duplicate-week cleanup.

At most one mesocycle per user is active.  A new mesocycle becomes active
only when the user has none; activating one through :meth:`update` or
:meth:`import_data` deactivates the others.
"""

import datetime
import logging
from collections import defaultdict

from fastapi import HTTPException, status
from sqlmodel import Session

from app.autoregulation import DeloadPolicy, plan_exercise_sets
from app.autoregulation.landmarks import MuscleGroup
from app.autoregulation.progression import rir_for_week
from app.core.clock import utc_now
from app.db.repositories.mesocycle import MesocycleRepository
from app.models.exercise import Exercise, ExerciseSet
from app.models.mesocycle import Mesocycle
from app.models.user import User
from app.models.week import Week
from app.models.workout import Workout
from app.schemas.mesocycle import (
    DuplicateWeeksCleanup,
    MesocycleCompletion,
    MesocycleCreate,
    MesocycleImport,
    MesocycleUpdate,
)
from app.services.planning import deload_policy_from_settings, fill_sets, resolve_muscle_group

logger = logging.getLogger(__name__)


def week_dates(start_date: datetime.date | None, week_number: int) -> tuple[datetime.date | None, datetime.date | None]:
    """Calendar span of *week_number* for a mesocycle starting on *start_date*."""
    if start_date is None:
        return None, None
    start = start_date + datetime.timedelta(weeks=week_number - 1)
    return start, start + datetime.timedelta(days=6)


class MesocycleService:
    """Service for mesocycle management."""

    def __init__(self, session: Session, deload: DeloadPolicy | None = None):
        self.repository = MesocycleRepository(session)
        self.deload = deload if deload is not None else deload_policy_from_settings()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, user: User, mesocycle_id: int) -> Mesocycle:
        """Return the user's mesocycle or raise 404."""
        mesocycle = self.repository.get_by_id(mesocycle_id)
        if mesocycle is None or mesocycle.user_id != user.id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mesocycle not found")
        return mesocycle

    def get_all(self, user: User) -> list[Mesocycle]:
        return self.repository.get_all_by_user(user.id)

    # ------------------------------------------------------------------
    # Create / update / delete
    # ------------------------------------------------------------------

    def create(self, user: User, data: MesocycleCreate) -> Mesocycle:
        """
        Create a mesocycle and its first week from the submitted plan.

        Set counts come from the volume calculator for week 1; exercises of
        the plan that train the same muscle group share the weekly total.

        Args:
            user: Owner
            data: Name, length and the week-1 plan

        Returns:
            Created mesocycle with its nested week
        """
        is_active = not self.repository.has_active(user.id)
        end_date = None
        if data.start_date is not None:
            end_date = data.start_date + datetime.timedelta(weeks=data.number_of_weeks, days=-1)

        mesocycle = Mesocycle(
            user_id=user.id,
            name=data.name.strip(),
            number_of_weeks=data.number_of_weeks,
            start_date=data.start_date,
            end_date=end_date,
            is_active=is_active,
        )

        start, end = week_dates(data.start_date, 1)
        week = Week(week_number=1, name="Week 1", start_date=start, end_date=end)

        entries = [entry for day in data.days for entry in day.exercises]
        groups = [resolve_muscle_group(entry.name, entry.muscle_group) for entry in entries]
        set_counts = iter(plan_exercise_sets(groups, 1, (), data.number_of_weeks, self.deload))
        group_iter = iter(groups)
        notes = rir_for_week(1).description

        for day in data.days:
            workout = Workout(day_name=day.day_name.strip())
            for order, entry in enumerate(day.exercises, start=1):
                exercise = Exercise(
                    name=entry.name,
                    exercise_order=order,
                    muscle_group=entry.muscle_group.value if entry.muscle_group is not None else None,
                )
                group = next(group_iter)
                fill_sets(
                    exercise,
                    next(set_counts),
                    weight=entry.weight,
                    reps=entry.reps,
                    time_based=group is MuscleGroup.CARDIO,
                    notes=notes,
                )
                workout.exercises.append(exercise)
            week.workouts.append(workout)
        mesocycle.weeks.append(week)

        mesocycle = self.repository.create(mesocycle)
        logger.info(
            "Created mesocycle %d '%s' for user %d (%d weeks, %d days, active=%s)",
            mesocycle.id, mesocycle.name, user.id, mesocycle.number_of_weeks, len(data.days), is_active,
        )
        return mesocycle

    def update(self, user: User, mesocycle_id: int, data: MesocycleUpdate) -> Mesocycle:
        mesocycle = self.get(user, mesocycle_id)

        if data.name is not None:
            mesocycle.name = data.name.strip()
        if data.number_of_weeks is not None:
            mesocycle.number_of_weeks = data.number_of_weeks
        if data.start_date is not None:
            mesocycle.start_date = data.start_date
        if data.end_date is not None:
            mesocycle.end_date = data.end_date
        if data.is_active is not None:
            if data.is_active:
                self._deactivate_others(user, mesocycle.id)
            mesocycle.is_active = data.is_active

        mesocycle.updated_at = utc_now()
        return self.repository.update(mesocycle)

    def delete(self, user: User, mesocycle_id: int) -> None:
        mesocycle = self.get(user, mesocycle_id)
        self.repository.delete(mesocycle.id)
        logger.info("Deleted mesocycle %d of user %d", mesocycle_id, user.id)

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_data(self, user: User, data: MesocycleImport) -> Mesocycle:
        """
        Import a mesocycle exported by the previous version of the app.

        The imported mesocycle becomes the active one.  Week, exercise and
        set ``id`` values map to week number, exercise order and set number.
        """
        self._deactivate_others(user, None)

        mesocycle = Mesocycle(
            user_id=user.id,
            name=data.name.strip(),
            number_of_weeks=data.number_of_weeks,
            is_active=True,
        )
        for week_data in data.weeks:
            week = Week(week_number=week_data.id, name=week_data.name)
            for day_data in week_data.days:
                workout = Workout(day_name=day_data.day_name)
                for exercise_data in day_data.exercises:
                    exercise = Exercise(name=exercise_data.name.strip(), exercise_order=exercise_data.id)
                    for set_data in exercise_data.sets:
                        exercise.sets.append(
                            ExerciseSet(set_number=set_data.id, weight=set_data.weight, reps=set_data.reps)
                        )
                    workout.exercises.append(exercise)
                week.workouts.append(workout)
            mesocycle.weeks.append(week)

        mesocycle = self.repository.create(mesocycle)
        logger.info("Imported mesocycle %d '%s' for user %d (%d weeks)",
                    mesocycle.id, mesocycle.name, user.id, len(data.weeks))
        return mesocycle

    # ------------------------------------------------------------------
    # Statistics & maintenance
    # ------------------------------------------------------------------

    def completion(self, user: User, mesocycle_id: int) -> MesocycleCompletion:
        """Planned vs. completed workouts.  A week counts as completed when all its workouts are."""
        mesocycle = self.get(user, mesocycle_id)

        planned = completed = weeks_completed = 0
        for week in mesocycle.weeks:
            done = sum(1 for workout in week.workouts if workout.is_completed)
            planned += len(week.workouts)
            completed += done
            if week.workouts and done == len(week.workouts):
                weeks_completed += 1

        rate = completed / planned if planned else 0.0
        return MesocycleCompletion(
            mesocycle_id=mesocycle.id,
            total_weeks=mesocycle.number_of_weeks,
            weeks_created=len({week.week_number for week in mesocycle.weeks}),
            weeks_completed=weeks_completed,
            workouts_planned=planned,
            workouts_completed=completed,
            completion_rate=round(rate, 4),
            is_finished=weeks_completed >= mesocycle.number_of_weeks,
        )

    def remove_duplicate_weeks(self, user: User, mesocycle_id: int) -> DuplicateWeeksCleanup:
        """Keep the oldest week for every week number and delete the rest."""
        mesocycle = self.get(user, mesocycle_id)

        by_number: dict[int, list[Week]] = defaultdict(list)
        for week in self.repository.get_weeks(mesocycle.id):
            by_number[week.week_number].append(week)

        duplicates = [week for weeks in by_number.values() for week in weeks[1:]]
        removed_ids = [week.id for week in duplicates]
        if duplicates:
            self.repository.delete_weeks(duplicates)
            logger.info("Removed %d duplicate weeks from mesocycle %d: %s",
                        len(removed_ids), mesocycle.id, removed_ids)

        return DuplicateWeeksCleanup(mesocycle_id=mesocycle.id, removed_week_ids=removed_ids)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _deactivate_others(self, user: User, keep_id: int | None) -> None:
        for other in self.repository.get_active_by_user(user.id):
            if other.id != keep_id:
                other.is_active = False
                other.updated_at = utc_now()
                self.repository.session.add(other)
