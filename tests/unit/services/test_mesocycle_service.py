"""Tests for MesocycleService against an in-memory SQLite database."""

import datetime

import pytest
from fastapi import HTTPException
from sqlmodel import select

from app.models.exercise import Exercise, ExerciseSet
from app.models.week import Week
from app.schemas.mesocycle import MesocycleCreate, MesocycleImport, MesocycleUpdate
from app.services.mesocycle_service import MesocycleService


def _plan(name: str = "Hypertrophy Block", **overrides) -> MesocycleCreate:
    payload = {
        "name": name,
        "number_of_weeks": 4,
        "days": [
            {
                "day_name": "Week 1 - Push",
                "exercises": [
                    {"name": "Barbell Bench Press", "weight": 60, "reps": 8},
                    {"name": "Incline Dumbbell Press", "weight": 20, "reps": 10},
                    {"name": "Dips"},
                ],
            },
            {
                "day_name": "Week 1 - Pull",
                "exercises": [
                    {"name": "Barbell Rows", "weight": 50, "reps": 8},
                    {"name": "Barbell Curl", "weight": 15, "reps": 12},
                ],
            },
        ],
    }
    payload.update(overrides)
    return MesocycleCreate.model_validate(payload)


def _legacy_export() -> dict:
    return {
        "Name": "Old Program",
        "NumberOfWeeks": 5,
        "Weeks": [
            {
                "id": 1,
                "Name": "Week 1",
                "Days": [
                    {
                        "DayName": "Monday",
                        "Exercises": [
                            {"id": 1, "Name": "Squats", "Sets": [
                                {"id": 1, "Weight": 100, "Reps": 5},
                                {"id": 2, "Weight": 100, "Reps": 5},
                            ]},
                            {"id": 2, "Name": "Leg Press", "Sets": [{"id": 1, "Weight": 180, "Reps": 10}]},
                        ],
                    },
                ],
            },
            {"id": 1, "Name": "Week 1 (copy)", "Days": [{"DayName": "Monday", "Exercises": []}]},
            {"id": 2, "Name": "Week 2", "Days": []},
        ],
    }


@pytest.fixture
def service(session, no_deload):
    return MesocycleService(session, deload=no_deload)


# ======================================================================
# Create
# ======================================================================


class TestCreate:
    def test_creates_week_one(self, service, user):
        mesocycle = service.create(user, _plan())

        assert mesocycle.id is not None
        assert mesocycle.user_id == user.id
        assert [w.week_number for w in mesocycle.weeks] == [1]
        week = mesocycle.weeks[0]
        assert week.name == "Week 1"
        assert [w.day_name for w in week.workouts] == ["Week 1 - Push", "Week 1 - Pull"]

    def test_set_counts_share_weekly_totals(self, service, user):
        mesocycle = service.create(user, _plan())
        push, pull = mesocycle.weeks[0].workouts

        # Chest 10 over two exercises, Triceps 8, Back 10, Biceps 6
        assert [len(e.sets) for e in push.exercises] == [5, 5, 8]
        assert [len(e.sets) for e in pull.exercises] == [10, 6]

    def test_sets_carry_planned_load(self, service, user):
        mesocycle = service.create(user, _plan())
        bench = mesocycle.weeks[0].workouts[0].exercises[0]

        assert bench.name == "Barbell Bench Press"
        assert bench.exercise_order == 1
        assert [s.set_number for s in bench.sets] == [1, 2, 3, 4, 5]
        assert all(s.weight == 60 and s.reps == 8 for s in bench.sets)
        assert bench.sets[0].notes == "Week 1: 3 RIR - Building base volume"

    def test_explicit_muscle_group_overrides_name(self, service, user):
        plan = _plan(days=[{"day_name": "Day 1", "exercises": [
            {"name": "Machine Thing", "muscle_group": "Back"},
        ]}])
        mesocycle = service.create(user, plan)
        exercise = mesocycle.weeks[0].workouts[0].exercises[0]

        assert len(exercise.sets) == 10
        assert exercise.muscle_group == "Back"

    def test_inferred_muscle_group_not_stored(self, service, user):
        bench = service.create(user, _plan()).weeks[0].workouts[0].exercises[0]
        assert bench.muscle_group is None

    def test_cardio_sets_get_duration(self, service, user):
        plan = _plan(days=[{"day_name": "Cardio", "exercises": [{"name": "Treadmill Running"}]}])
        mesocycle = service.create(user, plan)
        sets = mesocycle.weeks[0].workouts[0].exercises[0].sets

        assert len(sets) == 3
        assert all(s.duration == 600 and s.weight is None for s in sets)

    def test_dates(self, service, user):
        mesocycle = service.create(user, _plan(start_date="2026-01-05"))

        assert mesocycle.end_date == datetime.date(2026, 2, 1)
        assert mesocycle.weeks[0].start_date == datetime.date(2026, 1, 5)
        assert mesocycle.weeks[0].end_date == datetime.date(2026, 1, 11)

    def test_first_mesocycle_is_activated(self, service, user):
        first = service.create(user, _plan("First"))
        second = service.create(user, _plan("Second"))

        assert first.is_active
        assert not second.is_active

    def test_blank_exercise_name_rejected(self):
        with pytest.raises(ValueError):
            _plan(days=[{"day_name": "Day 1", "exercises": [{"name": "   "}]}])


# ======================================================================
# Read / update / delete
# ======================================================================


class TestReadUpdateDelete:
    def test_get_all_newest_first(self, service, user, other_user):
        service.create(user, _plan("First"))
        service.create(user, _plan("Second"))
        service.create(other_user, _plan("Not mine"))

        assert [m.name for m in service.get_all(user)] == ["Second", "First"]

    def test_get_not_owned(self, service, user, other_user):
        mesocycle = service.create(other_user, _plan())

        with pytest.raises(HTTPException) as exc:
            service.get(user, mesocycle.id)
        assert exc.value.status_code == 404

    def test_get_missing(self, service, user):
        with pytest.raises(HTTPException) as exc:
            service.get(user, 999)
        assert exc.value.status_code == 404

    def test_update_fields(self, service, user):
        mesocycle = service.create(user, _plan())
        updated = service.update(user, mesocycle.id, MesocycleUpdate(name="  Renamed  ", number_of_weeks=6))

        assert updated.name == "Renamed"
        assert updated.number_of_weeks == 6

    def test_activating_deactivates_others(self, service, user):
        first = service.create(user, _plan("First"))
        second = service.create(user, _plan("Second"))

        service.update(user, second.id, MesocycleUpdate(is_active=True))

        assert service.get(user, second.id).is_active
        assert not service.get(user, first.id).is_active

    def test_delete_cascades(self, service, session, user):
        mesocycle = service.create(user, _plan())
        service.delete(user, mesocycle.id)

        assert session.exec(select(Week)).all() == []
        assert session.exec(select(Exercise)).all() == []
        assert session.exec(select(ExerciseSet)).all() == []

    def test_delete_not_owned(self, service, user, other_user):
        mesocycle = service.create(other_user, _plan())
        with pytest.raises(HTTPException) as exc:
            service.delete(user, mesocycle.id)
        assert exc.value.status_code == 404


# ======================================================================
# Import, completion and cleanup
# ======================================================================


class TestImport:
    def test_imports_legacy_format(self, service, user):
        mesocycle = service.import_data(user, MesocycleImport.model_validate(_legacy_export()))

        assert mesocycle.name == "Old Program"
        assert mesocycle.number_of_weeks == 5
        assert mesocycle.is_active
        assert [w.week_number for w in mesocycle.weeks] == [1, 1, 2]

        squats = mesocycle.weeks[0].workouts[0].exercises[0]
        assert squats.name == "Squats"
        assert [(s.set_number, s.weight, s.reps) for s in squats.sets] == [(1, 100, 5), (2, 100, 5)]

    def test_import_becomes_the_active_mesocycle(self, service, user):
        existing = service.create(user, _plan())
        imported = service.import_data(user, MesocycleImport.model_validate(_legacy_export()))

        assert imported.is_active
        assert not service.get(user, existing.id).is_active

    def test_invalid_payload(self):
        with pytest.raises(ValueError):
            MesocycleImport.model_validate({"Name": "x"})


class TestCompletion:
    def test_counts_completed_workouts(self, service, session, user):
        mesocycle = service.create(user, _plan())
        push = mesocycle.weeks[0].workouts[0]
        push.is_completed = True
        session.add(push)
        session.commit()

        completion = service.completion(user, mesocycle.id)

        assert completion.total_weeks == 4
        assert completion.weeks_created == 1
        assert completion.workouts_planned == 2
        assert completion.workouts_completed == 1
        assert completion.completion_rate == 0.5
        assert completion.weeks_completed == 0
        assert not completion.is_finished

    def test_empty_mesocycle(self, service, user):
        mesocycle = service.create(user, _plan(days=[]))
        assert service.completion(user, mesocycle.id).completion_rate == 0.0


class TestRemoveDuplicateWeeks:
    def test_keeps_oldest_week(self, service, user):
        mesocycle = service.import_data(user, MesocycleImport.model_validate(_legacy_export()))
        original_id, duplicate_id, week_two_id = [w.id for w in mesocycle.weeks]

        result = service.remove_duplicate_weeks(user, mesocycle.id)

        assert result.removed_week_ids == [duplicate_id]
        remaining = service.get(user, mesocycle.id).weeks
        assert [w.id for w in remaining] == [original_id, week_two_id]
        assert [w.week_number for w in remaining] == [1, 2]

    def test_nothing_to_remove(self, service, user):
        mesocycle = service.create(user, _plan())
        assert service.remove_duplicate_weeks(user, mesocycle.id).removed_week_ids == []
