"""Autoregulation: volume landmarks, set targets and load/rep progression."""

from app.autoregulation.classifier import classify_exercise, is_time_based
from app.autoregulation.feedback import Feedback
from app.autoregulation.landmarks import VOLUME_LANDMARKS, MuscleGroup, VolumeLandmarks
from app.autoregulation.volume import DeloadPolicy, calculate_sets, distribute_sets, plan_exercise_sets

__all__ = [
    "classify_exercise",
    "is_time_based",
    "Feedback",
    "VOLUME_LANDMARKS",
    "MuscleGroup",
    "VolumeLandmarks",
    "DeloadPolicy",
    "calculate_sets",
    "distribute_sets",
    "plan_exercise_sets",
]
