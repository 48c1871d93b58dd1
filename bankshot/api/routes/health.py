"""Health check endpoint."""

from fastapi import APIRouter

from bankshot import __version__

from ..models.responses import HealthResponse, HealthStatus

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(status=HealthStatus.HEALTHY, version=__version__)
