"""Route handlers for the API."""

from portfolio_showcase.api.routes import health, portfolio

__all__ = ["health", "portfolio"]
