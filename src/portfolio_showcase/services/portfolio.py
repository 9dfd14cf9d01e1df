"""Read access to the showcased portfolio items."""

from __future__ import annotations

import logging
from typing import TypedDict

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from portfolio_showcase.data.db import get_session
from portfolio_showcase.data.models import PortfolioItem

logger = logging.getLogger(__name__)

__all__ = ["PortfolioItemData", "PortfolioQueryError", "list_portfolio_items"]

_FALLBACK_MESSAGE = "Failed to query portfolio items"


class PortfolioQueryError(Exception):
    """Raised when the portfolio items could not be read from the database."""

    def __init__(self, message: str) -> None:
        super().__init__(message or _FALLBACK_MESSAGE)

    @property
    def message(self) -> str:
        return str(self.args[0])


class PortfolioItemData(TypedDict):
    id: int
    title: str
    description: str | None
    image_url: str | None


def _item_to_dict(item: PortfolioItem) -> PortfolioItemData:
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "image_url": item.image_url,
    }


def list_portfolio_items() -> list[PortfolioItemData]:
    """Return every portfolio item, ordered by id.

    Returns:
        One dictionary per row. An empty table yields an empty list.

    Raises:
        PortfolioQueryError: If the database cannot be reached or queried, or its
            connection settings are invalid.
    """
    try:
        with get_session() as session:
            items = session.scalars(select(PortfolioItem).order_by(PortfolioItem.id)).all()
            return [_item_to_dict(item) for item in items]
    except (SQLAlchemyError, ValueError) as exc:
        logger.exception("Failed to list portfolio items")
        raise PortfolioQueryError(str(exc)) from exc
