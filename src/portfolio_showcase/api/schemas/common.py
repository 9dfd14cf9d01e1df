"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned when a request fails on the server side."""

    message: str = Field(description="Raw description of what went wrong")


class HealthResponse(BaseModel):
    status: str = Field(description="Liveness status of the API")
