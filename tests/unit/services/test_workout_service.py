"""Tests for WorkoutService: workout, exercise and set logging."""

import datetime

import pytest
from fastapi import HTTPException

from app.schemas.mesocycle import MesocycleCreate
from app.schemas.workout import ExerciseCreate, SetCreate, SetUpdate, WorkoutUpdate
from app.services.mesocycle_service import MesocycleService
from app.services.workout_service import WorkoutService


@pytest.fixture
def service(session):
    return WorkoutService(session)


def _workout(session, owner, no_deload):
    plan = MesocycleCreate(
        name="Block",
        days=[{"day_name": "Upper", "exercises": [
            {"name": "Barbell Curl", "weight": 20, "reps": 10},
            {"name": "Overhead Press", "weight": 40, "reps": 8},
        ]}],
    )
    mesocycle = MesocycleService(session, deload=no_deload).create(owner, plan)
    return mesocycle.weeks[0].workouts[0]


@pytest.fixture
def workout(session, user, no_deload):
    return _workout(session, user, no_deload)


# ======================================================================
# Workouts
# ======================================================================


class TestWorkouts:
    def test_get(self, service, user, workout):
        assert service.get(user, workout.id).day_name == "Upper"

    def test_get_not_owned(self, service, session, other_user, user, no_deload):
        foreign = _workout(session, other_user, no_deload)
        with pytest.raises(HTTPException) as exc:
            service.get(user, foreign.id)
        assert exc.value.status_code == 404

    def test_completing_stamps_today(self, service, user, workout):
        updated = service.update(user, workout.id, WorkoutUpdate(is_completed=True))

        assert updated.is_completed
        assert updated.workout_date == datetime.date.today()

    def test_explicit_date_kept(self, service, user, workout):
        day = datetime.date(2026, 3, 2)
        updated = service.update(user, workout.id, WorkoutUpdate(is_completed=True, workout_date=day))
        assert updated.workout_date == day

    def test_reopening_clears_date(self, service, user, workout):
        service.update(user, workout.id, WorkoutUpdate(is_completed=True))
        reopened = service.update(user, workout.id, WorkoutUpdate(is_completed=False))

        assert not reopened.is_completed
        assert reopened.workout_date is None

    def test_rename_and_notes(self, service, user, workout):
        updated = service.update(user, workout.id, WorkoutUpdate(day_name=" Arms ", notes="felt good"))

        assert updated.day_name == "Arms"
        assert updated.notes == "felt good"
        assert updated.workout_date is None


# ======================================================================
# Exercises
# ======================================================================


class TestExercises:
    def test_appended_after_existing(self, service, user, workout):
        exercise = service.add_exercise(user, workout.id, ExerciseCreate(name="  Cable Fly ", weight=12.5, reps=15))

        assert exercise.name == "Cable Fly"
        assert exercise.exercise_order == 3
        assert [s.set_number for s in exercise.sets] == [1, 2, 3]
        assert all(s.weight == 12.5 and s.reps == 15 for s in exercise.sets)

    def test_defaults(self, service, user, workout):
        exercise = service.add_exercise(user, workout.id, ExerciseCreate(name="Lunges", sets=2))

        assert len(exercise.sets) == 2
        assert all(s.weight == 0.0 and s.reps == 8 for s in exercise.sets)

    def test_cardio_gets_duration(self, service, user, workout):
        exercise = service.add_exercise(user, workout.id, ExerciseCreate(name="Stationary Bike"))
        assert all(s.duration == 600 and s.weight is None for s in exercise.sets)

    def test_explicit_cardio_group(self, service, user, workout):
        sled = service.add_exercise(user, workout.id, ExerciseCreate(name="Sled Push", sets=2, muscle_group="Cardio"))

        assert sled.muscle_group == "Cardio"
        assert all(s.duration == 600 and s.weight is None for s in sled.sets)
        assert service.add_set(user, sled.id, SetCreate()).duration == 600

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            ExerciseCreate(name="  ")

    def test_delete(self, service, user, workout):
        curl_id = workout.exercises[0].id
        service.delete_exercise(user, curl_id)

        assert [e.name for e in service.get(user, workout.id).exercises] == ["Overhead Press"]

    def test_delete_not_owned(self, service, session, user, other_user, no_deload):
        foreign = _workout(session, other_user, no_deload)
        with pytest.raises(HTTPException) as exc:
            service.delete_exercise(user, foreign.exercises[0].id)
        assert exc.value.status_code == 404


# ======================================================================
# Sets
# ======================================================================


class TestSets:
    def test_add_set_numbering(self, service, user, workout):
        curl = workout.exercises[0]
        count = len(curl.sets)

        added = service.add_set(user, curl.id, SetCreate(weight=22.5, reps=8))

        assert added.set_number == count + 1
        assert added.weight == 22.5
        assert not added.is_completed

    def test_add_set_to_cardio_defaults_duration(self, service, user, workout):
        bike = service.add_exercise(user, workout.id, ExerciseCreate(name="Stationary Bike", sets=1))
        added = service.add_set(user, bike.id, SetCreate())
        assert added.duration == 600

    def test_update_set(self, service, user, workout):
        first = workout.exercises[0].sets[0]
        updated = service.update_set(user, first.id, SetUpdate(weight=25, reps=9, notes="grip slipped"))

        assert (updated.weight, updated.reps, updated.notes) == (25, 9, "grip slipped")
        assert not updated.is_completed

    def test_completing_every_set_completes_workout(self, service, user, workout):
        set_ids = [s.id for e in workout.exercises for s in e.sets]

        for set_id in set_ids[:-1]:
            service.update_set(user, set_id, SetUpdate(is_completed=True))
        assert not service.get(user, workout.id).is_completed

        service.update_set(user, set_ids[-1], SetUpdate(is_completed=True))
        completed = service.get(user, workout.id)
        assert completed.is_completed
        assert completed.workout_date == datetime.date.today()

    def test_delete_set(self, service, user, workout):
        curl = workout.exercises[0]
        count = len(curl.sets)
        service.delete_set(user, curl.sets[-1].id)

        assert len(service.get(user, workout.id).exercises[0].sets) == count - 1

    def test_sets_not_owned(self, service, session, user, other_user, no_deload):
        foreign = _workout(session, other_user, no_deload)
        set_id = foreign.exercises[0].sets[0].id

        for call in (
            lambda: service.update_set(user, set_id, SetUpdate(reps=1)),
            lambda: service.delete_set(user, set_id),
            lambda: service.add_set(user, foreign.exercises[0].id, SetCreate()),
        ):
            with pytest.raises(HTTPException) as exc:
                call()
            assert exc.value.status_code == 404
