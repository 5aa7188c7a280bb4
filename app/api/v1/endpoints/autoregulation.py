"""
Autoregulation endpoints.

Stateless previews of the volume calculator and the exercise classifier.
Nothing is read from or written to the database.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_user
from app.autoregulation import VOLUME_LANDMARKS, classify_exercise, is_time_based, plan_exercise_sets
from app.autoregulation.volume import weekly_totals
from app.models.user import User
from app.schemas.autoregulation import (
    ClassifiedExercise,
    ClassifyRequest,
    ExerciseSetPreview,
    LandmarkResponse,
    SetPreviewRequest,
    SetPreviewResponse,
)
from app.services.planning import deload_policy_from_settings

router = APIRouter()


@router.get("/landmarks", summary="Volume landmarks (sets per week) per muscle group.",
            response_model=list[LandmarkResponse])
def get_landmarks():
    return [
        LandmarkResponse(muscle_group=group.value, mev=landmarks.mev, mav=landmarks.mav, mrv=landmarks.mrv)
        for group, landmarks in VOLUME_LANDMARKS.items()
    ]


@router.post("/sets", summary="Preview set counts for a week of exercises.", response_model=SetPreviewResponse)
def preview_sets(data: SetPreviewRequest, user: User = Depends(get_current_user)):
    groups = [classify_exercise(name) for name in data.exercises]
    sets = plan_exercise_sets(groups, data.week, data.feedback, data.number_of_weeks, deload_policy_from_settings())
    totals = weekly_totals(groups, data.week, data.feedback)
    return SetPreviewResponse(
        week=data.week,
        weekly_totals={group.value: total for group, total in totals.items()},
        exercises=[
            ExerciseSetPreview(name=name, muscle_group=group.value, sets=count)
            for name, group, count in zip(data.exercises, groups, sets)
        ],
    )


@router.post("/classify", summary="Infer muscle groups from exercise names.",
             response_model=list[ClassifiedExercise])
def classify(data: ClassifyRequest, user: User = Depends(get_current_user)):
    return [
        ClassifiedExercise(name=name, muscle_group=classify_exercise(name).value, time_based=is_time_based(name))
        for name in data.names
    ]
