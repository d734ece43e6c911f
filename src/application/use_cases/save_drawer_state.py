"""Use case writing the drawer state to the key-value store."""

from src.application.ports.key_value_store import KeyValueStorePort
from src.domain.constants import STORAGE_KEY
from src.domain.models import DrawerState
from src.domain.services.serialization import serialize_drawer_state
from src.infrastructure.logging.logger import get_app_logger


class SaveDrawerStateUseCase:
    """Overwrite the stored drawer document with the given state."""

    def __init__(
        self,
        store: KeyValueStorePort,
        logger=None,
        key: str = STORAGE_KEY,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing access to the key-value store.
            logger: Optional logger compatible with logging.Logger-like API.
            key: Storage key holding the drawer document.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._key = key

    def execute(self, state: DrawerState) -> None:
        """Persist the whole state; the last write wins."""
        self._store.set(self._key, serialize_drawer_state(state))
        self._logger.debug(f"Saved drawer state under {self._key}")


__all__ = ["SaveDrawerStateUseCase"]
