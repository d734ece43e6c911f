"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort
from src.application.use_cases.drawer_session import DrawerSession
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.key_value_store_factory import (
    create_key_value_store,
)
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.settings import DrawerSettings


def build_database_adapter(
    settings: DrawerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or DrawerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_key_value_store(
    settings: DrawerSettings | None = None,
) -> KeyValueStorePort:
    """Return the configured key-value store."""
    resolved = settings or DrawerSettings.from_env()
    db_port = (
        build_database_adapter(resolved)
        if resolved.store_backend == "sqlalchemy"
        else None
    )
    return create_key_value_store(
        db_port,
        logger=get_app_logger(),
        backend=resolved.store_backend,
    )


def build_drawer_session(
    store: KeyValueStorePort | None = None,
) -> DrawerSession:
    """Return a drawer session restored from the configured store."""
    resolved_store = store or build_key_value_store()
    return DrawerSession.load(
        resolved_store,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_key_value_store",
    "build_drawer_session",
]
