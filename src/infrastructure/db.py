"""SQLAlchemy engine management for the billing database.

One pooled engine is created lazily from ``JIB_DB_URL`` (read from the
environment or a ``.env`` file) and shared by every repository through
``SqlAlchemyDatabaseEngineAdapter``.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


DB_URL_ENV = "JIB_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required environment variable after loading ``.env``.

    Args:
        name: Variable to read.

    Returns:
        str: Raw value.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine with connection health checks.

    Args:
        db_url: SQLAlchemy URL including driver and credentials.

    Returns:
        Engine: Engine backed by a small ``QueuePool``.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide billing engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_env_var(DB_URL_ENV))
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared billing engine.

    Passing ``db_url`` builds a dedicated engine instead, which is how
    scripts point the repositories at another database.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Return the engine repositories should execute against."""
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "DB_URL_ENV",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
