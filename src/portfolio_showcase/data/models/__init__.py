"""ORM models package for database tables.

- PortfolioItem: a showcased project (title, description, image link)

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_showcase.data.db import Base
from portfolio_showcase.data.models.portfolio_item import PortfolioItem

__all__ = ["Base", "PortfolioItem"]
