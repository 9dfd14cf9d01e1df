"""Service layer between the API routes and the database."""

from portfolio_showcase.services.portfolio import PortfolioQueryError, list_portfolio_items

__all__ = ["PortfolioQueryError", "list_portfolio_items"]
