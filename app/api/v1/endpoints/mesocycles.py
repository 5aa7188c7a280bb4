"""
Mesocycle endpoints.

CRUD, legacy import, completion statistics, duplicate-week cleanup and
next-week generation.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.mesocycle import (
    DuplicateWeeksCleanup,
    MesocycleCompletion,
    MesocycleCreate,
    MesocycleImport,
    MesocycleResponse,
    MesocycleSummary,
    MesocycleUpdate,
)
from app.schemas.progression import ProgressiveWeekRequest, ProgressiveWeekResponse
from app.services.mesocycle_service import MesocycleService
from app.services.progression_service import ProgressionService

router = APIRouter()


@router.post("", summary="Create a mesocycle with its first week.", response_model=MesocycleResponse,
             status_code=status.HTTP_201_CREATED)
def create_mesocycle(data: MesocycleCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.create(user, data)


@router.get("", summary="List the user's mesocycles, newest first.", response_model=list[MesocycleSummary])
def list_mesocycles(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.get_all(user)


@router.post("/import", summary="Import a mesocycle exported by the previous app.", response_model=MesocycleResponse,
             status_code=status.HTTP_201_CREATED)
def import_mesocycle(data: MesocycleImport, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.import_data(user, data)


@router.get("/{mesocycle_id}", summary="Get a mesocycle with all weeks, workouts, exercises and sets.",
            response_model=MesocycleResponse)
def get_mesocycle(mesocycle_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.get(user, mesocycle_id)


@router.patch("/{mesocycle_id}", summary="Update a mesocycle.", response_model=MesocycleSummary)
def update_mesocycle(mesocycle_id: int, data: MesocycleUpdate, db: Session = Depends(get_db),
                     user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.update(user, mesocycle_id, data)


@router.delete("/{mesocycle_id}", summary="Delete a mesocycle and everything in it.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_mesocycle(mesocycle_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    service.delete(user, mesocycle_id)


@router.get("/{mesocycle_id}/completion", summary="Planned vs. completed workouts.",
            response_model=MesocycleCompletion)
def get_completion(mesocycle_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.completion(user, mesocycle_id)


@router.post("/{mesocycle_id}/weeks/deduplicate", summary="Remove duplicate weeks, keeping the oldest.",
             response_model=DuplicateWeeksCleanup)
def deduplicate_weeks(mesocycle_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = MesocycleService(db)
    return service.remove_duplicate_weeks(user, mesocycle_id)


@router.post("/{mesocycle_id}/weeks", summary="Generate the next week from feedback on the previous one.",
             response_model=ProgressiveWeekResponse)
def generate_week(mesocycle_id: int, data: ProgressiveWeekRequest, db: Session = Depends(get_db),
                  user: User = Depends(get_current_user)):
    service = ProgressionService(db)
    return service.generate_week(user, mesocycle_id, data)
