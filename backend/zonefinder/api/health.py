"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from zonefinder.config import Settings
from zonefinder.dependencies import get_settings
from zonefinder.engine.directions import DIRECTION_COUNT
from zonefinder.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        env=settings.zonefinder_env,
        directions=DIRECTION_COUNT,
    )
