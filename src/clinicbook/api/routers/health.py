"""
Health check endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from ...core.config import get_settings
from ...core.structured_logger import get_logger
from ..deps import DoctorRepositoryDep
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/health", tags=["health"])

logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    version: str
    service: str


@router.get("", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns the current status of the service.
    """
    settings = get_settings()
    return ok(request, data=HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow(),
        version=settings.app_version,
        service=settings.app_name,
    ), message="OK")


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness_check(request: Request, response: Response, repository: DoctorRepositoryDep):
    """
    Readiness check endpoint.

    Runs a one-row read against the doctor repository and answers 503 when
    it fails.
    """
    try:
        await repository.find_all(limit=1)
        checks = {"database": "ok"}
    except Exception as e:
        logger.error("Readiness check failed", error=str(e))
        checks = {"database": f"error: {str(e)[:50]}"}

    ready = all(value == "ok" for value in checks.values())
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ok(
        request,
        data={"ready": ready, "backend": get_settings().database.backend, "checks": checks},
        message="Ready" if ready else "Not ready",
    )
