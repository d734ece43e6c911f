"""Domain services package."""

from .normalization import normalize_amount_cents, normalize_count
from .registry import (
    default_drawer_state,
    reset_all,
    set_rolls_visible,
    toggle_rolls,
    update_count,
    update_target,
)
from .serialization import (
    DrawerStateFormatError,
    deserialize_drawer_state,
    serialize_drawer_state,
)
from .totals import (
    compute_totals,
    difference,
    grand_total,
    line_total,
    sum_entries,
)

__all__ = [
    "normalize_amount_cents",
    "normalize_count",
    "default_drawer_state",
    "reset_all",
    "set_rolls_visible",
    "toggle_rolls",
    "update_count",
    "update_target",
    "DrawerStateFormatError",
    "deserialize_drawer_state",
    "serialize_drawer_state",
    "compute_totals",
    "difference",
    "grand_total",
    "line_total",
    "sum_entries",
]
