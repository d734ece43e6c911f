"""Database infrastructure for the shift close toolkit.

This module exposes helpers to create and reuse the SQLAlchemy engine
backing the key-value store. It belongs to the infrastructure layer because
it deals with an external system (SQLite by default, any SQLAlchemy URL
otherwise).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import DrawerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
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
    """Get a singleton SQLAlchemy engine for the configured database.

    Returns:
        Engine: Lazily initialized engine connected to the store database.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(DrawerSettings.from_env().db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    Without an explicit URL the adapter proxies the process-wide engine
    built from the environment.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Get the engine for the store database.

        Returns:
            Engine: SQLAlchemy engine connected to the store database.
        """
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
