"""
Workout logging endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.mesocycle import ExerciseResponse, ExerciseSetResponse, WorkoutResponse
from app.schemas.workout import ExerciseCreate, SetCreate, SetUpdate, WorkoutUpdate
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.get("/workouts/{workout_id}", summary="Get a workout with its exercises and sets.",
            response_model=WorkoutResponse)
def get_workout(workout_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    return service.get(user, workout_id)


@router.patch("/workouts/{workout_id}", summary="Update or complete a workout.", response_model=WorkoutResponse)
def update_workout(workout_id: int, data: WorkoutUpdate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    return service.update(user, workout_id, data)


@router.post("/workouts/{workout_id}/exercises", summary="Add an exercise to a workout.",
             response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
def add_exercise(workout_id: int, data: ExerciseCreate, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    return service.add_exercise(user, workout_id, data)


@router.delete("/exercises/{exercise_id}", summary="Delete an exercise and its sets.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    service.delete_exercise(user, exercise_id)


@router.post("/exercises/{exercise_id}/sets", summary="Append a set to an exercise.",
             response_model=ExerciseSetResponse, status_code=status.HTTP_201_CREATED)
def add_set(exercise_id: int, data: SetCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    return service.add_set(user, exercise_id, data)


@router.patch("/sets/{set_id}", summary="Log or correct a set.", response_model=ExerciseSetResponse)
def update_set(set_id: int, data: SetUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    return service.update_set(user, set_id, data)


@router.delete("/sets/{set_id}", summary="Delete a set.", status_code=status.HTTP_204_NO_CONTENT)
def delete_set(set_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = WorkoutService(db)
    service.delete_set(user, set_id)
