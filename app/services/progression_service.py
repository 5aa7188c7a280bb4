"""
Progression service: generates the next week of a mesocycle.

When the previous week exists it is copied workout by workout and exercise
by exercise, with

* set counts from the volume calculator (weekly total per muscle group,
  shared by the exercises of the group across the whole week, deload
  policy applied),
* weights progressed from the last set of the previous week,
* rep targets and RIR notes for the new week,
* durations progressed for time-based exercises.

Without a previous week a default split (Push / Pull / Legs) is laid out
with basic exercises for every training day.
"""

import logging
from collections import Counter
from typing import Optional, Sequence

from fastapi import HTTPException, status
from sqlmodel import Session

from app.autoregulation import DeloadPolicy, Feedback, plan_exercise_sets
from app.autoregulation.landmarks import MuscleGroup, get_landmarks
from app.autoregulation.progression import (
    progress_duration,
    progress_weight,
    rep_phase,
    rir_for_week,
    target_reps,
)
from app.autoregulation.volume import weekly_totals
from app.db.repositories.mesocycle import MesocycleRepository
from app.models.exercise import Exercise
from app.models.mesocycle import Mesocycle
from app.models.user import User
from app.models.week import Week
from app.models.workout import Workout
from app.schemas.mesocycle import WeekResponse
from app.schemas.progression import (
    MuscleGroupVolume,
    ProgressionSummary,
    ProgressiveWeekRequest,
    ProgressiveWeekResponse,
)
from app.services.mesocycle_service import week_dates
from app.services.planning import deload_policy_from_settings, fill_sets, resolve_muscle_group

logger = logging.getLogger(__name__)

BASIC_EXERCISES: dict[str, list[str]] = {
    "Push": ["Barbell Bench Press", "Overhead Press", "Incline Dumbbell Press", "Dips"],
    "Pull": ["Barbell Rows", "Pull-ups", "Lat Pulldowns", "Face Pulls"],
    "Legs": ["Squats", "Romanian Deadlifts", "Leg Press", "Calf Raises"],
}
GENERIC_EXERCISES = ["General Exercise 1", "General Exercise 2", "General Exercise 3"]

DEFAULT_WEIGHT = 0.0
DEFAULT_REPS = 8


def basic_exercises(workout_type: str) -> list[str]:
    """Starter exercises for a split day; unknown types get generic placeholders."""
    return list(BASIC_EXERCISES.get(workout_type, GENERIC_EXERCISES))


class _PlannedExercise:
    """Exercise of the week being generated, before set counts are known."""

    __slots__ = ("name", "group", "override", "copied", "base_weight", "base_duration")

    def __init__(
        self,
        name: str,
        group: MuscleGroup,
        override: Optional[str] = None,
        copied: bool = False,
        base_weight: Optional[float] = None,
        base_duration: Optional[int] = None,
    ):
        self.name = name
        self.group = group
        self.override = override
        self.copied = copied
        self.base_weight = base_weight
        self.base_duration = base_duration


class ProgressionService:
    """Service for next-week generation."""

    def __init__(self, session: Session, deload: DeloadPolicy | None = None):
        self.repository = MesocycleRepository(session)
        self.deload = deload if deload is not None else deload_policy_from_settings()

    def generate_week(self, user: User, mesocycle_id: int, request: ProgressiveWeekRequest) -> ProgressiveWeekResponse:
        """
        Create week ``request.week_number`` of a mesocycle.

        Args:
            user: Owner of the mesocycle
            mesocycle_id: Target mesocycle
            request: Week number, feedback on the previous week and the
                split used when there is no previous week

        Returns:
            The generated week and a progression summary, or a completion
            response when the week number is past the end of the mesocycle

        Raises:
            HTTPException 404: Mesocycle missing or not owned by the user
            HTTPException 409: The week already exists
        """
        mesocycle = self.repository.get_by_id(mesocycle_id)
        if mesocycle is None or mesocycle.user_id != user.id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mesocycle not found")

        week_number = request.week_number
        if week_number > mesocycle.number_of_weeks:
            logger.info("Mesocycle %d completed (requested week %d of %d)",
                        mesocycle.id, week_number, mesocycle.number_of_weeks)
            return ProgressiveWeekResponse(
                completed=True,
                message=(f"Congratulations! You've completed all {mesocycle.number_of_weeks} weeks "
                         f"of your \"{mesocycle.name}\" mesocycle!"),
            )

        if self.repository.get_week(mesocycle.id, week_number) is not None:
            logger.warning("Week %d of mesocycle %d already exists", week_number, mesocycle.id)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Week {week_number} already exists for this mesocycle",
            )

        previous = self.repository.get_week(mesocycle.id, week_number - 1) if week_number > 1 else None
        if previous is not None and previous.workouts:
            days = self._days_from_previous(previous, week_number)
        else:
            days = self._days_from_split(request.training_days, request.split)

        week, summary = self._build_week(mesocycle, week_number, days, request.feedback)
        week = self.repository.create_week(week)

        logger.info(
            "Generated week %d of mesocycle %d: %d workouts, %d exercises (from %s)",
            week_number, mesocycle.id, len(week.workouts), sum(len(w.exercises) for w in week.workouts),
            "previous week" if previous is not None and previous.workouts else "default split",
        )
        return ProgressiveWeekResponse(
            message=f"Week {week_number} created",
            week=WeekResponse.model_validate(week),
            summary=summary,
        )

    # ------------------------------------------------------------------
    # Week layout
    # ------------------------------------------------------------------

    @staticmethod
    def _days_from_previous(previous: Week, week_number: int) -> list[tuple[str, list[_PlannedExercise]]]:
        old_label = f"Week {week_number - 1}"
        new_label = f"Week {week_number}"
        days = []
        for workout in previous.workouts:
            exercises = []
            for exercise in workout.exercises:
                last_set = exercise.sets[-1] if exercise.sets else None
                exercises.append(_PlannedExercise(
                    name=exercise.name,
                    group=resolve_muscle_group(exercise.name, exercise.muscle_group),
                    override=exercise.muscle_group,
                    copied=True,
                    base_weight=last_set.weight if last_set else None,
                    base_duration=last_set.duration if last_set else None,
                ))
            days.append((workout.day_name.replace(old_label, new_label), exercises))
        return days

    @staticmethod
    def _days_from_split(training_days: int, split: Sequence[str]) -> list[tuple[str, list[_PlannedExercise]]]:
        days = []
        for index in range(training_days):
            workout_type = split[index % len(split)]
            exercises = [
                _PlannedExercise(name=name, group=resolve_muscle_group(name))
                for name in basic_exercises(workout_type)
            ]
            days.append((f"Day {index + 1} - {workout_type}", exercises))
        return days

    def _build_week(
        self,
        mesocycle: Mesocycle,
        week_number: int,
        days: list[tuple[str, list[_PlannedExercise]]],
        feedback: Sequence[Feedback],
    ) -> tuple[Week, ProgressionSummary]:
        planned = [exercise for _, exercises in days for exercise in exercises]
        groups = [exercise.group for exercise in planned]
        set_counts = iter(plan_exercise_sets(groups, week_number, feedback, mesocycle.number_of_weeks, self.deload))

        deload = self.deload.is_deload_week(week_number, mesocycle.number_of_weeks)
        rir = rir_for_week(week_number, deload=deload)

        start, end = week_dates(mesocycle.start_date, week_number)
        week = Week(
            mesocycle_id=mesocycle.id,
            week_number=week_number,
            name=f"Week {week_number}",
            start_date=start,
            end_date=end,
        )
        for day_name, exercises in days:
            workout = Workout(day_name=day_name)
            for order, planned_exercise in enumerate(exercises, start=1):
                exercise = Exercise(
                    name=planned_exercise.name,
                    exercise_order=order,
                    muscle_group=planned_exercise.override,
                )
                if planned_exercise.base_weight:
                    weight = progress_weight(planned_exercise.base_weight, planned_exercise.group, feedback,
                                             planned_exercise.name)
                else:
                    weight = DEFAULT_WEIGHT
                if planned_exercise.copied:
                    reps = target_reps(week_number, planned_exercise.group, feedback, planned_exercise.name)
                else:
                    reps = DEFAULT_REPS
                time_based = planned_exercise.group is MuscleGroup.CARDIO
                fill_sets(
                    exercise,
                    next(set_counts),
                    weight=weight,
                    reps=reps,
                    time_based=time_based,
                    duration=progress_duration(planned_exercise.base_duration, week_number) if time_based else None,
                    notes=f"Week {week_number} - {rir.description}",
                )
                workout.exercises.append(exercise)
            week.workouts.append(workout)

        summary = self._summary(week_number, groups, feedback, rir.rir, rir.description, deload)
        return week, summary

    @staticmethod
    def _summary(
        week_number: int,
        groups: list[MuscleGroup],
        feedback: Sequence[Feedback],
        rir: int,
        rir_description: str,
        deload: bool,
    ) -> ProgressionSummary:
        counts = Counter(groups)
        volume = []
        for group, weekly_sets in weekly_totals(groups, week_number, feedback).items():
            landmarks = get_landmarks(group)
            volume.append(MuscleGroupVolume(
                muscle_group=group.value,
                weekly_sets=weekly_sets,
                exercises=counts[group],
                mev=landmarks.mev,
                mrv=landmarks.mrv,
            ))
        return ProgressionSummary(
            week_number=week_number,
            rir=rir,
            rir_description=rir_description,
            rep_phase=rep_phase(week_number),
            deload=deload,
            volume=volume,
        )
