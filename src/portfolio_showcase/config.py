"""Runtime configuration read from environment variables.

A ``.env`` file in the working directory is loaded once on import so local
development can keep credentials next to ``docker-compose.yml``.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = ("http://localhost:4200",)
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_cors_origins() -> list[str]:
    """Return the origins allowed to call the API (``CORS_ORIGINS``, comma separated)."""
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_server_host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def get_server_port() -> int:
    """Return the port the backend listens on.

    Raises:
        ValueError: If ``PORT`` is set but is not an integer.
    """
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from exc


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from ``LOG_LEVEL`` (default ``INFO``)."""
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=_LOG_FORMAT)
