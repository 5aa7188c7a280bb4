"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, auth, autoregulation, mesocycles, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    mesocycles.router, prefix="/mesocycles", tags=["Mesocycles"]
)
api_router.include_router(
    workouts.router, tags=["Workouts"]
)
api_router.include_router(
    autoregulation.router, prefix="/autoregulation", tags=["Autoregulation"]
)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
