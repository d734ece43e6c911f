"""Domain services editing the denomination registry.

Every operation is pure: it returns a new ``DrawerState`` and leaves the
input untouched. Operations that reject their input return the very same
state object, so callers can detect a no-op with ``is``.
"""

from dataclasses import replace
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_BILLS,
    DEFAULT_COINS,
    DEFAULT_ROLLS,
    DEFAULT_TARGET_CENTS,
)
from src.domain.models import DenominationEntry, DenominationGroup, DrawerState
from src.domain.services.normalization import (
    normalize_amount_cents,
    normalize_count,
)


def default_drawer_state() -> DrawerState:
    """Return the compiled-in registry with every count at zero."""
    return DrawerState(
        bills=_build_entries(DEFAULT_BILLS),
        coins=_build_entries(DEFAULT_COINS),
        rolls=_build_entries(DEFAULT_ROLLS),
        rolls_visible=False,
        target_cents=DEFAULT_TARGET_CENTS,
    )


def update_count(
    state: DrawerState,
    group: DenominationGroup | str,
    index: int,
    raw_input: str | None,
) -> DrawerState:
    """Replace the count of one entry from raw user input.

    Args:
        state: Current drawer state.
        group: Group holding the entry.
        index: Position of the entry within the group.
        raw_input: Text typed by the user.

    Returns:
        DrawerState: Updated state, or ``state`` itself when the parsed
        count is negative.

    Raises:
        ValueError: If ``group`` is not a known group.
        IndexError: If ``index`` is outside the group.
    """
    resolved = DenominationGroup(group)
    entries = state.entries(resolved)
    if not 0 <= index < len(entries):
        raise IndexError(
            f"No {resolved.value} entry at index {index} "
            f"(group has {len(entries)})"
        )
    count = normalize_count(raw_input)
    if count < 0:
        return state
    updated = list(entries)
    updated[index] = entries[index].with_count(count)
    return state.with_entries(resolved, tuple(updated))


def update_target(
    state: DrawerState,
    raw_input: str | int | float | Decimal | None,
) -> DrawerState:
    """Replace the target float from raw user input.

    Args:
        state: Current drawer state.
        raw_input: Text or number typed by the user.

    Returns:
        DrawerState: Updated state, or ``state`` itself for a negative
        amount.
    """
    target_cents = normalize_amount_cents(raw_input)
    if target_cents < 0:
        return state
    return replace(state, target_cents=target_cents)


def set_rolls_visible(state: DrawerState, visible: bool) -> DrawerState:
    """Show or hide the coin roll group without touching its counts."""
    if state.rolls_visible == visible:
        return state
    return replace(state, rolls_visible=visible)


def toggle_rolls(state: DrawerState) -> DrawerState:
    return set_rolls_visible(state, not state.rolls_visible)


def reset_all(state: DrawerState) -> DrawerState:
    """Zero every count and restore the default target.

    Roll visibility is preserved.
    """
    return DrawerState(
        bills=_zeroed(state.bills),
        coins=_zeroed(state.coins),
        rolls=_zeroed(state.rolls),
        rolls_visible=state.rolls_visible,
        target_cents=DEFAULT_TARGET_CENTS,
    )


def _build_entries(
    definitions: tuple[tuple[str, int], ...],
) -> tuple[DenominationEntry, ...]:
    return tuple(
        DenominationEntry(name=name, unit_cents=unit_cents)
        for name, unit_cents in definitions
    )


def _zeroed(
    entries: tuple[DenominationEntry, ...],
) -> tuple[DenominationEntry, ...]:
    return tuple(entry.with_count(0) for entry in entries)


__all__ = [
    "default_drawer_state",
    "update_count",
    "update_target",
    "set_rolls_visible",
    "toggle_rolls",
    "reset_all",
]
