"""Database configuration and session management.

This module provides SQLAlchemy 2.x ORM infrastructure including:
- Database URL resolution from the environment
- Lazy engine creation (PostgreSQL in containers, SQLite for local runs)
- Session factory with proper transaction handling
- Table creation

URL resolution order:
1. ``DB_URL``, used verbatim.
2. ``POSTGRES_DB`` (with ``POSTGRES_USER``, ``POSTGRES_PASSWORD``,
   ``POSTGRES_HOST`` and ``POSTGRES_PORT``), the variables the compose file
   hands to both the database and the backend containers.
3. ``sqlite:///<project_root>/database.db``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def _get_postgres_port() -> int:
    raw = os.getenv("POSTGRES_PORT", "5432")
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"POSTGRES_PORT must be an integer, got {raw!r}") from exc


def get_database_url() -> str:
    """Return the database URL, allowing overrides via environment variables.

    Raises:
        ValueError: If ``POSTGRES_PORT`` is set but is not an integer.
    """
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    database = os.getenv("POSTGRES_DB")
    if database:
        return URL.create(
            "postgresql+psycopg",
            username=os.getenv("POSTGRES_USER"),
            password=os.getenv("POSTGRES_PASSWORD"),
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_get_postgres_port(),
            database=database,
        ).render_as_string(hide_password=False)

    project_root = Path(__file__).resolve().parents[3]
    db_path = project_root / "database.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        database_url = get_database_url()
        options: dict[str, object] = {"echo": False}
        if not database_url.startswith("sqlite"):
            options["pool_pre_ping"] = True
        _engine = create_engine(database_url, **options)
        logger.debug("Created engine for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            bind=_get_engine(),
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def init_db() -> None:
    """Create all tables defined on the Base metadata.

    Existing tables are left untouched, so calling this repeatedly is safe.
    """
    # Import ORM models so their metadata is registered on Base before create_all.
    from portfolio_showcase.data.models import portfolio_item  # noqa: F401

    Base.metadata.create_all(bind=_get_engine())


def reset_engine() -> None:
    """Dispose the cached engine so the next access re-reads the database URL."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
