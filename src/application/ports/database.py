"""Database ports for the shift close toolkit.

This module defines the application-layer protocol for accessing the
database engine backing the key-value store. Infrastructure implementations
provide the concrete adapter.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the storage database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the storage database.

        Returns:
            Engine: SQLAlchemy engine connected to the storage backend.
        """


__all__ = ["DatabaseEnginePort"]
