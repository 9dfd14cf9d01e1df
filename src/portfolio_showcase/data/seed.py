"""Demonstration rows inserted when the database is initialised.

The same rows live in ``db/init.sql``, which the PostgreSQL container runs on
its first start. Like that script, ``seed_portfolio_items`` is not idempotent
by default: every call inserts the rows again and duplicates accumulate. Pass
``skip_if_populated=True`` to only seed an empty table.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypedDict

from sqlalchemy import func, select

from portfolio_showcase.data.db import get_session
from portfolio_showcase.data.models import PortfolioItem

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_PORTFOLIO_ITEMS", "SeedItem", "seed_portfolio_items"]


class SeedItem(TypedDict, total=False):
    """A portfolio row to insert. Only ``title`` is required."""

    title: str
    description: str | None
    image_url: str | None


DEFAULT_PORTFOLIO_ITEMS: tuple[SeedItem, ...] = (
    {
        "title": "Project 1",
        "description": "Description of project 1",
        "image_url": "https://via.placeholder.com/150",
    },
    {
        "title": "Project 2",
        "description": "Description of project 2",
        "image_url": "https://via.placeholder.com/150",
    },
    {
        "title": "Project 3",
        "description": "Description of project 3",
        "image_url": "https://via.placeholder.com/150",
    },
)


def _validate(items: Sequence[SeedItem]) -> None:
    for index, item in enumerate(items):
        title = item.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"Seed item {index} has no title")


def seed_portfolio_items(
    items: Sequence[SeedItem] = DEFAULT_PORTFOLIO_ITEMS,
    *,
    skip_if_populated: bool = False,
) -> int:
    """Insert seed rows into ``portfolio_items``.

    Args:
        items: Rows to insert.
        skip_if_populated: When True, do nothing if the table already has rows.

    Returns:
        Number of rows inserted.

    Raises:
        ValueError: If any item lacks a title. Nothing is inserted in that case.
    """
    _validate(items)

    with get_session() as session:
        if skip_if_populated:
            existing = session.scalar(select(func.count()).select_from(PortfolioItem))
            if existing:
                logger.info("portfolio_items already holds %d rows; skipping seed", existing)
                return 0

        session.add_all(
            PortfolioItem(
                title=item["title"],
                description=item.get("description"),
                image_url=item.get("image_url"),
            )
            for item in items
        )

    logger.info("Seeded %d portfolio items", len(items))
    return len(items)
