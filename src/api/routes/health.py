"""Health check endpoint."""

from fastapi import APIRouter

from api.schemas import HealthResponse
from config import settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the analysis service is up.",
)
async def health_check() -> HealthResponse:
    """Return service status."""
    return HealthResponse(service=settings.app_name.lower())
