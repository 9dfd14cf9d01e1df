"""Portfolio routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from portfolio_showcase.api.schemas.common import ErrorResponse
from portfolio_showcase.api.schemas.portfolio import PortfolioItemResponse
from portfolio_showcase.services.portfolio import list_portfolio_items

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get(
    "",
    response_model=list[PortfolioItemResponse],
    summary="List portfolio items",
    description="Return every portfolio item. An empty table yields an empty list.",
    responses={500: {"model": ErrorResponse, "description": "Database query failed"}},
)
def get_portfolio_items() -> list[PortfolioItemResponse]:
    """List all portfolio items.

    Database failures surface as ``PortfolioQueryError`` and are turned into a
    500 response by the handler registered in ``api.main``.
    """
    return [PortfolioItemResponse(**item) for item in list_portfolio_items()]
