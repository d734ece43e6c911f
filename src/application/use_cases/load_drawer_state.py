"""Use case restoring the drawer state from the key-value store."""

from src.application.ports.key_value_store import KeyValueStorePort
from src.domain.constants import STORAGE_KEY
from src.domain.models import DrawerState
from src.domain.services.registry import default_drawer_state
from src.domain.services.serialization import (
    DrawerStateFormatError,
    deserialize_drawer_state,
)
from src.infrastructure.logging.logger import get_app_logger


class LoadDrawerStateUseCase:
    """Read the persisted drawer state, falling back to the defaults."""

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

    def execute(self) -> DrawerState:
        """Return the persisted state, or the default registry.

        Missing or malformed data is never surfaced to the user; it is
        logged and replaced by the compiled-in defaults.

        Returns:
            DrawerState: State to start the session with.
        """
        raw = self._store.get(self._key)
        if not raw:
            self._logger.info(
                f"No saved drawer under {self._key}; using defaults"
            )
            return default_drawer_state()
        try:
            state = deserialize_drawer_state(raw, logger=self._logger)
        except DrawerStateFormatError as exc:
            self._logger.warning(
                f"Discarding unreadable drawer state under {self._key}: {exc}"
            )
            return default_drawer_state()
        self._logger.info(f"Restored drawer state from {self._key}")
        return state


__all__ = ["LoadDrawerStateUseCase"]
