"""
Stateless autoregulation preview schemas.
"""

from pydantic import BaseModel, Field, field_validator

from app.autoregulation.feedback import Feedback, ensure_unique_muscle_groups


class LandmarkResponse(BaseModel):
    muscle_group: str
    mev: int
    mav: int
    mrv: int


class SetPreviewRequest(BaseModel):
    """Preview the sets for a list of exercises in one week."""

    week: int = Field(..., ge=1, le=52)
    exercises: list[str] = Field(..., min_length=1)
    feedback: list[Feedback] = Field(default_factory=list)
    number_of_weeks: int = Field(4, ge=1, le=52)

    @field_validator("feedback")
    @classmethod
    def unique_muscle_groups(cls, value: list[Feedback]) -> list[Feedback]:
        return ensure_unique_muscle_groups(value)


class ExerciseSetPreview(BaseModel):
    name: str
    muscle_group: str
    sets: int


class SetPreviewResponse(BaseModel):
    week: int
    weekly_totals: dict[str, int]
    exercises: list[ExerciseSetPreview]


class ClassifyRequest(BaseModel):
    names: list[str] = Field(..., min_length=1)


class ClassifiedExercise(BaseModel):
    name: str
    muscle_group: str
    time_based: bool
