"""Domain package for drawer rules and core models."""

from .constants import DEFAULT_TARGET_CENTS, STORAGE_KEY
from .models import (
    DenominationEntry,
    DenominationGroup,
    DrawerState,
    DrawerTotals,
)
from .policies import DuplicateDenominationError, ensure_unique_names
from .services import (
    DrawerStateFormatError,
    compute_totals,
    default_drawer_state,
    deserialize_drawer_state,
    difference,
    grand_total,
    line_total,
    reset_all,
    serialize_drawer_state,
    set_rolls_visible,
    sum_entries,
    toggle_rolls,
    update_count,
    update_target,
)

__all__ = [
    "DEFAULT_TARGET_CENTS",
    "STORAGE_KEY",
    "DenominationEntry",
    "DenominationGroup",
    "DrawerState",
    "DrawerTotals",
    "DuplicateDenominationError",
    "ensure_unique_names",
    "DrawerStateFormatError",
    "compute_totals",
    "default_drawer_state",
    "deserialize_drawer_state",
    "difference",
    "grand_total",
    "line_total",
    "reset_all",
    "serialize_drawer_state",
    "set_rolls_visible",
    "sum_entries",
    "toggle_rolls",
    "update_count",
    "update_target",
]
