from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import portfolio_showcase.data.db as app_db
from portfolio_showcase.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB with the tables created."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_engine()


@pytest.fixture
def unreachable_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point DB_URL at a SQLite file inside a directory that does not exist."""
    db_path = tmp_path / "missing" / "nested" / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    yield
    app_db.reset_engine()


@pytest.fixture
def blank_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a fresh SQLite file with no tables created."""
    monkeypatch.setenv("DB_URL", f"sqlite:///{(tmp_path / 'blank.db').as_posix()}")
    app_db.reset_engine()
    yield
    app_db.reset_engine()


@pytest.fixture
def malformed_port(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Configure PostgreSQL through POSTGRES_* with a port that is not a number."""
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.setenv("POSTGRES_DB", "portfolio")
    monkeypatch.setenv("POSTGRES_PORT", "5432x")
    app_db.reset_engine()
    yield
    app_db.reset_engine()
