# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.dependencies import DbSessionDep, SettingsDep
from lib.database import check_connection

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    database: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(session: DbSessionDep):
    """
    Readiness check endpoint.

    Returns whether the service is ready to accept requests.
    Checks database connectivity.
    """
    checks = ChecksResponse(database="unknown")

    try:
        check_connection(session)
        checks.database = "healthy"
    except SQLAlchemyError as e:
        logger.warning(f"Readiness check failed: {e}")
        checks.database = f"unhealthy: {str(e)[:50]}"

    return ReadinessResponse(
        status="ready" if checks.database == "healthy" else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by container orchestrators for restart decisions.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
