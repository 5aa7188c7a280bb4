"""Tests for exercise name -> muscle group classification."""

import pytest

from app.autoregulation.classifier import CLASSIFICATION_RULES, classify_exercise, is_time_based
from app.autoregulation.landmarks import MuscleGroup


# ======================================================================
# Basic split exercises
# ======================================================================


class TestBasicExercises:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Barbell Bench Press", MuscleGroup.CHEST),
            ("Overhead Press", MuscleGroup.SHOULDERS),
            ("Incline Dumbbell Press", MuscleGroup.CHEST),
            ("Dips", MuscleGroup.TRICEPS),
            ("Barbell Rows", MuscleGroup.BACK),
            ("Pull-ups", MuscleGroup.BACK),
            ("Lat Pulldowns", MuscleGroup.BACK),
            ("Face Pulls", MuscleGroup.SHOULDERS),
            ("Squats", MuscleGroup.QUADRICEPS),
            ("Romanian Deadlifts", MuscleGroup.HAMSTRINGS),
            ("Leg Press", MuscleGroup.QUADRICEPS),
            ("Calf Raises", MuscleGroup.CALVES),
        ],
    )
    def test_classification(self, name, expected):
        assert classify_exercise(name) is expected


# ======================================================================
# Rule ordering
# ======================================================================


class TestRuleOrder:
    def test_leg_curl_is_hamstrings_not_biceps(self):
        assert classify_exercise("Lying Leg Curl") is MuscleGroup.HAMSTRINGS

    def test_barbell_curl_is_biceps(self):
        assert classify_exercise("Barbell Curl") is MuscleGroup.BICEPS

    def test_cable_kickback_is_glutes(self):
        assert classify_exercise("Cable Kickback") is MuscleGroup.GLUTES

    def test_tricep_kickback_is_triceps(self):
        assert classify_exercise("Tricep Kickback") is MuscleGroup.TRICEPS

    def test_overhead_tricep_extension_is_triceps(self):
        assert classify_exercise("Overhead Tricep Extension") is MuscleGroup.TRICEPS

    def test_rowing_machine_is_cardio(self):
        assert classify_exercise("Rowing Machine") is MuscleGroup.CARDIO

    def test_upright_row_is_shoulders(self):
        assert classify_exercise("Upright Row") is MuscleGroup.SHOULDERS

    def test_first_rule_is_cardio(self):
        assert CLASSIFICATION_RULES[0][1] is MuscleGroup.CARDIO
        assert CLASSIFICATION_RULES[-1][1] is MuscleGroup.CHEST


# ======================================================================
# Fallbacks & time-based exercises
# ======================================================================


class TestFallback:
    @pytest.mark.parametrize("name", ["Mystery Movement", "General Exercise 1", ""])
    def test_unknown_is_other(self, name):
        assert classify_exercise(name) is MuscleGroup.OTHER

    def test_case_insensitive(self):
        assert classify_exercise("BENCH PRESS") is MuscleGroup.CHEST
        assert classify_exercise("plank") is MuscleGroup.ABS


class TestTimeBased:
    @pytest.mark.parametrize("name", ["Treadmill Running", "Elliptical", "Jump Rope", "Steady State Cardio"])
    def test_cardio_is_time_based(self, name):
        assert is_time_based(name)

    @pytest.mark.parametrize("name", ["Squats", "Barbell Rows", "Crunches"])
    def test_lifts_are_not_time_based(self, name):
        assert not is_time_based(name)
