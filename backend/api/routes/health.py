"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.exceptions import AuthBackendError, AuthTransportError
from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    auth_backend: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=container.settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    The auth backend counts as available when it answers at all; any
    backend-reported error still proves it is up. The database is only
    checked for configuration.
    """
    settings = container.settings
    try:
        await container.auth_backend.get_session()
        auth_backend = "available"
    except AuthBackendError:
        auth_backend = "available"
    except AuthTransportError as e:
        logger.warning(f"Readiness: auth backend unavailable: {e.message}")
        auth_backend = "unavailable"

    configured = bool(settings.supabase_url and settings.supabase_service_role_key)
    database = "configured" if configured else "not_configured"

    return ReadinessResponse(
        status="ready" if auth_backend == "available" else "degraded",
        auth_backend=auth_backend,
        database=database,
    )
