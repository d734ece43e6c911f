"""Factory helpers to select the key-value store backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort
from src.infrastructure.key_value_store import (
    InMemoryKeyValueStore,
    SqlAlchemyKeyValueStore,
)
from src.infrastructure.logging.logger import get_app_logger


def create_key_value_store(
    db_port: DatabaseEnginePort | None,
    logger=None,
    backend: str = "sqlalchemy",
) -> KeyValueStorePort:
    """Return a key-value store implementation based on configuration.

    Args:
        db_port: Port providing the storage engine (sqlalchemy backend).
        logger: Optional logger compatible with logging.Logger-like API.
        backend: Backend identifier (sqlalchemy or memory).

    Returns:
        KeyValueStorePort: Concrete store implementation.

    Raises:
        ValueError: If the backend is unknown.
        RuntimeError: If the sqlalchemy backend has no database port.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = backend.strip().lower()

    if selected_backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError(
                "SQLAlchemy store backend requires a database port."
            )
        return SqlAlchemyKeyValueStore(db_port)

    if selected_backend == "memory":
        resolved_logger.warning(
            "Using the in-memory store; drawer counts will not survive "
            "a restart"
        )
        return InMemoryKeyValueStore()

    raise ValueError(
        "Unsupported store backend: "
        f"{selected_backend}. Expected sqlalchemy or memory."
    )


__all__ = ["create_key_value_store"]
