"""SQLModel database models."""

from app.models.user import User
from app.models.mesocycle import Mesocycle
from app.models.week import Week
from app.models.workout import Workout
from app.models.exercise import Exercise, ExerciseSet

__all__ = [
    "User",
    "Mesocycle",
    "Week",
    "Workout",
    "Exercise",
    "ExerciseSet",
]
