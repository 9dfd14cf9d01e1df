"""FastAPI application entry point for the Portfolio Showcase API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portfolio_showcase import __version__
from portfolio_showcase.api.routes import health, portfolio
from portfolio_showcase.api.schemas.common import ErrorResponse
from portfolio_showcase.config import (
    configure_logging,
    get_cors_origins,
    get_server_host,
    get_server_port,
)
from portfolio_showcase.services.portfolio import PortfolioQueryError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables on startup.

    An unreachable database does not prevent the API from starting; requests
    then answer with a 500 until it becomes available.
    """
    from portfolio_showcase.data.db import init_db

    try:
        init_db()
    except (SQLAlchemyError, ValueError):
        logger.exception("Database initialisation failed")
    yield


app = FastAPI(
    title="Portfolio Showcase API",
    description="Read-only API serving the showcased portfolio items",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortfolioQueryError)
async def portfolio_query_error_handler(request: Request, exc: PortfolioQueryError) -> JSONResponse:
    """Report a failed database query as a 500 with the raw error message."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


app.include_router(health.router)
app.include_router(portfolio.router, prefix="/api")


def main(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Start the API server."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "portfolio_showcase.api.main:app",
        host=host or get_server_host(),
        port=port or get_server_port(),
        reload=reload,
    )


if __name__ == "__main__":
    main()
