"""Business logic services."""

from app.services.user_service import UserService
from app.services.mesocycle_service import MesocycleService
from app.services.progression_service import ProgressionService
from app.services.workout_service import WorkoutService
from app.services.analytics_service import AnalyticsService

__all__ = [
    "UserService",
    "MesocycleService",
    "ProgressionService",
    "WorkoutService",
    "AnalyticsService",
]
