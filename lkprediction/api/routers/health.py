"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from lkprediction import __version__
from lkprediction.api.schemas import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=StatusResponse)
async def root():
    """Simple liveness check."""
    return StatusResponse(status="ok", message="LKprediction backend online")


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report API version and server time."""
    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
