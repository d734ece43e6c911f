"""Key-value store adapters for persisted drawer state."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.key_value_store import KeyValueStorePort


CREATE_KV_STORE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key TEXT PRIMARY KEY,
    store_value TEXT NOT NULL
)
"""

SELECT_VALUE_SQL = text(
    """
    SELECT store_value
    FROM kv_store
    WHERE store_key = :store_key
    """
)

UPSERT_VALUE_SQL = text(
    """
    INSERT INTO kv_store (store_key, store_value)
    VALUES (:store_key, :store_value)
    ON CONFLICT (store_key) DO UPDATE
    SET store_value = excluded.store_value
    """
)


class SqlAlchemyKeyValueStore(KeyValueStorePort):
    """Key-value store backed by a single SQL table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the storage engine.
        """
        self._db_port = db_port
        self._table_ready = False

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when absent."""
        engine = self._db_port.get_engine()
        self._ensure_table(engine)
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_VALUE_SQL,
                {"store_key": key},
            ).first()
        return row.store_value if row is not None else None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        engine = self._db_port.get_engine()
        self._ensure_table(engine)
        with engine.begin() as conn:
            conn.execute(
                UPSERT_VALUE_SQL,
                {"store_key": key, "store_value": value},
            )

    def _ensure_table(self, engine) -> None:
        """Create the kv_store table if it does not exist."""
        if self._table_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_KV_STORE_SQL)
        self._table_ready = True


class InMemoryKeyValueStore(KeyValueStorePort):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


__all__ = ["SqlAlchemyKeyValueStore", "InMemoryKeyValueStore"]
