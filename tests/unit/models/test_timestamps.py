"""Tests for model timestamp defaults."""

import datetime

from sqlmodel import select

from app.core.clock import utc_now
from app.models.exercise import Exercise
from app.models.mesocycle import Mesocycle


UTC_OFFSET = datetime.timedelta(0)


class TestTimestamps:
    def test_utc_now_is_aware(self):
        assert utc_now().utcoffset() == UTC_OFFSET

    def test_model_defaults_are_aware(self):
        mesocycle = Mesocycle(user_id=1, name="Block")
        assert mesocycle.created_at.utcoffset() == UTC_OFFSET
        assert mesocycle.updated_at.utcoffset() == UTC_OFFSET
        assert Exercise(workout_id=1, name="Squats").created_at.utcoffset() == UTC_OFFSET

    def test_timestamp_columns_are_timezone_aware(self):
        assert Mesocycle.__table__.c.created_at.type.timezone
        assert Exercise.__table__.c.created_at.type.timezone

    def test_round_trip_through_database(self, session, user):
        before = utc_now().replace(tzinfo=None)
        session.add(Mesocycle(user_id=user.id, name="Block"))
        session.commit()

        stored = session.exec(select(Mesocycle)).one()
        assert stored.created_at.replace(tzinfo=None) >= before - datetime.timedelta(seconds=1)
