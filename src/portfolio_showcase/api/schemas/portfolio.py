"""Pydantic schemas for portfolio endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PortfolioItemResponse(BaseModel):
    """Response model for a portfolio item.

    Fields are serialized in camelCase (``imageUrl``) for the frontend.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    title: str
    description: str | None = Field(None, description="Free-text description")
    image_url: str | None = Field(None, description="Location of a preview image")
