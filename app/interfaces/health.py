"""
Health check and root routers.

Provides a simple health endpoint for liveness/readiness probes
and a greeting on the root path. No business logic.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.users.schemas import HealthResponse, MessageResponse

router = APIRouter(tags=["health"])
root_router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@root_router.get("/", response_model=MessageResponse, include_in_schema=False)
def root() -> MessageResponse:
    return MessageResponse(status=200, message=f"{settings.project_name} is running")
