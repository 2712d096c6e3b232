"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

from blog_api.config.settings import settings
from blog_api.shared.db import ping
from blog_api.shared.schemas.common import HealthResponse
from blog_api.api.dependencies.database import DbSession


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower().replace(" ", "-"),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check.

    Runs a trivial query; a database failure is answered with 400 by the
    data-layer exception handler.
    """
    await ping(db)
    return {"status": "ready"}
