"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    store: str
    auth: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the store and token validation are configured. Does
    not contact the store.
    """
    store_ready = bool(settings.supabase_url and settings.supabase_service_role_key)
    auth_ready = bool(settings.supabase_jwt_secret)
    return ReadinessResponse(
        status="ready" if store_ready and auth_ready else "not_ready",
        store="configured" if store_ready else "missing",
        auth="configured" if auth_ready else "missing",
    )
