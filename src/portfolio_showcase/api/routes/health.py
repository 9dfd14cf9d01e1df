"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from portfolio_showcase.api.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return the current status of the API."""
    return HealthResponse(status="healthy")
