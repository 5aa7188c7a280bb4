"""Tests for the training heatmap."""

import datetime

import pytest
from fastapi import HTTPException

from app.schemas.mesocycle import MesocycleCreate
from app.schemas.workout import WorkoutUpdate
from app.services.analytics_service import AnalyticsService
from app.services.mesocycle_service import MesocycleService
from app.services.workout_service import WorkoutService


def _workouts(session, owner, no_deload, count: int = 3):
    plan = MesocycleCreate(
        name="Block",
        days=[{"day_name": f"Day {i}", "exercises": [{"name": "Squats"}]} for i in range(1, count + 1)],
    )
    return MesocycleService(session, deload=no_deload).create(owner, plan).weeks[0].workouts


class TestHeatmap:
    def test_counts_planned_and_completed(self, session, user, no_deload):
        workouts = WorkoutService(session)
        first, second, third = _workouts(session, user, no_deload)
        workouts.update(user, first.id, WorkoutUpdate(workout_date=datetime.date(2026, 3, 2), is_completed=True))
        workouts.update(user, second.id, WorkoutUpdate(workout_date=datetime.date(2026, 3, 2)))
        workouts.update(user, third.id, WorkoutUpdate(workout_date=datetime.date(2026, 3, 9)))

        heatmap = AnalyticsService(session).heatmap(user, 2026, 3)

        assert [(d.date, d.planned, d.completed) for d in heatmap.days] == [
            (datetime.date(2026, 3, 2), 2, 1),
            (datetime.date(2026, 3, 9), 1, 0),
        ]
        assert heatmap.total_planned == 3
        assert heatmap.total_completed == 1

    def test_other_months_and_undated_ignored(self, session, user, no_deload):
        first, second, _ = _workouts(session, user, no_deload)
        WorkoutService(session).update(user, first.id, WorkoutUpdate(workout_date=datetime.date(2026, 4, 1)))

        heatmap = AnalyticsService(session).heatmap(user, 2026, 3)

        assert heatmap.days == []
        assert heatmap.total_planned == 0

    def test_month_boundaries_included(self, session, user, no_deload):
        first, second, _ = _workouts(session, user, no_deload)
        workouts = WorkoutService(session)
        workouts.update(user, first.id, WorkoutUpdate(workout_date=datetime.date(2026, 2, 1)))
        workouts.update(user, second.id, WorkoutUpdate(workout_date=datetime.date(2026, 2, 28)))

        assert AnalyticsService(session).heatmap(user, 2026, 2).total_planned == 2

    def test_only_own_workouts(self, session, user, other_user, no_deload):
        foreign = _workouts(session, other_user, no_deload, count=1)[0]
        WorkoutService(session).update(other_user, foreign.id, WorkoutUpdate(workout_date=datetime.date(2026, 3, 2)))

        assert AnalyticsService(session).heatmap(user, 2026, 3).days == []

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, session, user, month):
        with pytest.raises(HTTPException) as exc:
            AnalyticsService(session).heatmap(user, 2026, month)
        assert exc.value.status_code == 400
