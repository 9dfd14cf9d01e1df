"""ORM model for the showcased portfolio entries.

Rows are inserted by the seed step when the database is initialised; the
application only reads them.
"""

from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_showcase.data.db import Base


class PortfolioItem(Base):
    """Persisted portfolio item.

    Attributes:
        id: Auto-incrementing primary key.
        title: Short title of the showcased project.
        description: Optional free-text description.
        image_url: Optional location of a preview image.
    """

    __tablename__ = "portfolio_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"PortfolioItem(id={self.id!r}, title={self.title!r})"
