"""
Analytics endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.analytics import HeatmapResponse
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get(
    "/heatmap",
    summary="Workouts per day of a month.",
    response_model=HeatmapResponse,
)
def get_heatmap(
    year: Optional[int] = Query(None, ge=1, le=9999, description="Defaults to the current year"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Defaults to the current month"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    today = datetime.date.today()
    service = AnalyticsService(db)
    return service.heatmap(user, year or today.year, month or today.month)
