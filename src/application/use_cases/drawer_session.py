"""Drawer session owning the current count for one user.

The session is the single owner of the mutable drawer state. Each edit
applies a pure domain operation and, when the state actually changed, saves
the whole document through the key-value store port.
"""

from decimal import Decimal

from src.application.ports.key_value_store import KeyValueStorePort
from src.application.use_cases.load_drawer_state import (
    LoadDrawerStateUseCase,
)
from src.application.use_cases.save_drawer_state import (
    SaveDrawerStateUseCase,
)
from src.domain.models import DenominationGroup, DrawerState, DrawerTotals
from src.domain.services import registry
from src.domain.services.totals import compute_totals
from src.infrastructure.logging.logger import get_app_logger


class DrawerSession:
    """Stateful controller behind the drawer page."""

    def __init__(
        self,
        store: KeyValueStorePort,
        state: DrawerState | None = None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the session.

        Args:
            store: Port providing access to the key-value store.
            state: Initial state; defaults to the compiled-in registry.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user edits.
        """
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or self._logger
        self._saver = SaveDrawerStateUseCase(store, logger=self._logger)
        self._state = state or registry.default_drawer_state()

    @classmethod
    def load(
        cls,
        store: KeyValueStorePort,
        logger=None,
        usage_logger=None,
    ) -> "DrawerSession":
        """Build a session from the persisted state."""
        resolved_logger = logger or get_app_logger()
        state = LoadDrawerStateUseCase(
            store,
            logger=resolved_logger,
        ).execute()
        return cls(
            store,
            state=state,
            logger=resolved_logger,
            usage_logger=usage_logger,
        )

    @property
    def state(self) -> DrawerState:
        return self._state

    def totals(self) -> DrawerTotals:
        """Return the totals snapshot of the current state."""
        return compute_totals(self._state)

    def update_count(
        self,
        group: DenominationGroup | str,
        index: int,
        raw_input: str | None,
    ) -> DrawerState:
        """Apply a count edit and persist it.

        Args:
            group: Group holding the entry.
            index: Position of the entry within the group.
            raw_input: Text typed by the user.

        Returns:
            DrawerState: State after the edit.
        """
        label = DenominationGroup(group).value
        updated = registry.update_count(self._state, group, index, raw_input)
        if updated is self._state:
            self._usage_logger.info(
                f"Rejected count {raw_input!r} for {label} #{index}"
            )
        return self._commit(
            updated,
            f"count {label} #{index}={raw_input!r}",
        )

    def update_target(
        self,
        raw_input: str | int | float | Decimal | None,
    ) -> DrawerState:
        updated = registry.update_target(self._state, raw_input)
        return self._commit(updated, f"target={raw_input!r}")

    def set_rolls_visible(self, visible: bool) -> DrawerState:
        updated = registry.set_rolls_visible(self._state, visible)
        return self._commit(updated, f"rolls_visible={visible}")

    def toggle_rolls(self) -> DrawerState:
        return self.set_rolls_visible(not self._state.rolls_visible)

    def reset_all(self) -> DrawerState:
        """Zero every count, restore the default target, and persist."""
        return self._commit(registry.reset_all(self._state), "reset")

    def _commit(self, updated: DrawerState, action: str) -> DrawerState:
        if updated == self._state:
            return self._state
        self._state = updated
        self._saver.execute(updated)
        self._usage_logger.info(f"Drawer edit: {action}")
        return updated


__all__ = ["DrawerSession"]
