"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.mesocycle import Mesocycle  # noqa: F401
from app.models.week import Week  # noqa: F401
from app.models.workout import Workout  # noqa: F401
from app.models.exercise import Exercise, ExerciseSet  # noqa: F401
