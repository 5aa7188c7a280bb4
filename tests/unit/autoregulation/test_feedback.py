"""Tests for feedback records and landmark lookup."""

import pytest
from pydantic import ValidationError

from app.autoregulation.feedback import Difficulty, Feedback, Soreness, ensure_unique_muscle_groups, find_feedback
from app.autoregulation.landmarks import (
    VOLUME_LANDMARKS,
    MuscleGroup,
    VolumeLandmarks,
    get_landmarks,
    parse_muscle_group,
)


class TestFeedback:
    def test_defaults(self):
        record = Feedback(muscle_group="Chest")
        assert record.difficulty is Difficulty.MODERATE
        assert record.soreness is Soreness.LIGHT
        assert record.pump_quality is None

    def test_known_labels_are_canonicalised(self):
        assert Feedback(muscle_group=" quadriceps ").muscle_group == "Quadriceps"

    def test_unknown_labels_are_kept(self):
        assert Feedback(muscle_group="Forearms").muscle_group == "Forearms"

    @pytest.mark.parametrize("payload", [
        {"muscle_group": "Chest", "difficulty": "brutal"},
        {"muscle_group": "Chest", "pump_quality": 6},
        {"muscle_group": ""},
    ])
    def test_invalid(self, payload):
        with pytest.raises(ValidationError):
            Feedback(**payload)

    def test_find_feedback_first_match(self):
        records = [Feedback(muscle_group="Back"), Feedback(muscle_group="Chest", difficulty="easy"),
                   Feedback(muscle_group="Chest", difficulty="hard")]
        assert find_feedback(records, "Chest").difficulty is Difficulty.EASY
        assert find_feedback(records, "Glutes") is None


class TestLandmarks:
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            VOLUME_LANDMARKS[MuscleGroup.CHEST] = VolumeLandmarks(mev=1, mav=2, mrv=3)  # type: ignore[index]

    def test_landmarks_are_frozen(self):
        with pytest.raises(ValidationError):
            VOLUME_LANDMARKS[MuscleGroup.CHEST].mev = 1

    def test_mrv_below_mev_rejected(self):
        with pytest.raises(ValidationError):
            VolumeLandmarks(mev=10, mav=12, mrv=8)

    def test_lookup(self):
        assert get_landmarks("back") == VolumeLandmarks(mev=10, mav=18, mrv=25)
        assert get_landmarks("Abs") is None
        assert get_landmarks(None) is None

    def test_parse_muscle_group(self):
        assert parse_muscle_group("CALVES") is MuscleGroup.CALVES
        assert parse_muscle_group("Forearms") is None


DUPLICATE_BACK = [{"muscle_group": "Back"}, {"muscle_group": "BACK", "difficulty": "hard"}]


class TestUniqueMuscleGroups:
    def test_distinct_groups_pass(self):
        records = [Feedback(muscle_group="Chest"), Feedback(muscle_group="Back")]
        assert ensure_unique_muscle_groups(records) == records

    def test_case_insensitive_duplicates_rejected(self):
        records = [Feedback(muscle_group="Chest", difficulty="easy"), Feedback(muscle_group="chest")]
        with pytest.raises(ValueError, match="Chest"):
            ensure_unique_muscle_groups(records)

    def test_preview_request_rejects_duplicates(self):
        from app.schemas.autoregulation import SetPreviewRequest

        with pytest.raises(ValidationError):
            SetPreviewRequest(week=2, exercises=["Barbell Rows"], feedback=DUPLICATE_BACK)

    def test_progression_request_rejects_duplicates(self):
        from app.schemas.progression import ProgressiveWeekRequest

        with pytest.raises(ValidationError):
            ProgressiveWeekRequest(week_number=2, feedback=DUPLICATE_BACK)
