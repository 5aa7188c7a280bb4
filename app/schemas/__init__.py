"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token, TokenData
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.schemas.mesocycle import (
    MesocycleCompletion,
    MesocycleCreate,
    MesocycleImport,
    MesocycleResponse,
    MesocycleSummary,
    MesocycleUpdate,
    WeekResponse,
    WorkoutResponse,
    ExerciseResponse,
    ExerciseSetResponse,
)
from app.schemas.workout import ExerciseCreate, SetCreate, SetUpdate, WorkoutUpdate
from app.schemas.progression import ProgressiveWeekRequest, ProgressiveWeekResponse
from app.schemas.analytics import HeatmapResponse

__all__ = [
    "Token",
    "TokenData",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "MesocycleCompletion",
    "MesocycleCreate",
    "MesocycleImport",
    "MesocycleResponse",
    "MesocycleSummary",
    "MesocycleUpdate",
    "WeekResponse",
    "WorkoutResponse",
    "ExerciseResponse",
    "ExerciseSetResponse",
    "ExerciseCreate",
    "SetCreate",
    "SetUpdate",
    "WorkoutUpdate",
    "ProgressiveWeekRequest",
    "ProgressiveWeekResponse",
    "HeatmapResponse",
]
