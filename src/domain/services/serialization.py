"""Domain services converting drawer state to and from its JSON form.

The stored document keeps the field names of the original browser storage:

    {"coins": [{"name": "Penny", "value": 0.01, "quantity": 3}, ...],
     "bills": [...], "rolls": [...],
     "targetDrawer": 200, "showRolls": false}

Persisted groups are merged into a registry template by name. The template
decides order and face values; only counts are read from storage.
"""

import json
import math
from collections.abc import Mapping
from decimal import InvalidOperation
from logging import Logger
from typing import Any

from src.domain.constants import DEFAULT_TARGET_CENTS
from src.domain.models import DenominationEntry, DenominationGroup, DrawerState
from src.domain.services.registry import default_drawer_state
from src.utils.decimal_utils import from_cents, to_cents


# Key order of the stored document.
_GROUP_KEYS = (
    DenominationGroup.COINS,
    DenominationGroup.BILLS,
    DenominationGroup.ROLLS,
)


class DrawerStateFormatError(ValueError):
    """Raised when persisted drawer data cannot be read."""


def serialize_drawer_state(state: DrawerState) -> str:
    """Return the JSON document persisted for a drawer state.

    Args:
        state: Drawer state to serialize.

    Returns:
        str: JSON text.
    """
    payload: dict[str, Any] = {
        group.value: [
            {
                "name": entry.name,
                "value": _dollars(entry.unit_cents),
                "quantity": entry.count,
            }
            for entry in state.entries(group)
        ]
        for group in _GROUP_KEYS
    }
    payload["targetDrawer"] = _dollars(state.target_cents)
    payload["showRolls"] = state.rolls_visible
    return json.dumps(payload)


def deserialize_drawer_state(
    raw: str,
    template: DrawerState | None = None,
    logger: Logger | None = None,
) -> DrawerState:
    """Rebuild a drawer state from its JSON document.

    Args:
        raw: JSON text read from storage.
        template: Registry supplying order and face values. Defaults to the
            compiled-in registry.
        logger: Optional logger warned about dropped denominations.

    Returns:
        DrawerState: State with persisted counts, target, and visibility.

    Raises:
        DrawerStateFormatError: If the document is not valid drawer data.
    """
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DrawerStateFormatError(
            f"Persisted drawer state is not valid JSON: {exc}"
        ) from exc
    if not isinstance(payload, Mapping):
        raise DrawerStateFormatError(
            "Persisted drawer state must be a JSON object"
        )

    registry = template or default_drawer_state()
    groups = {
        group.value: _merge_group(
            group,
            registry.entries(group),
            payload.get(group.value),
            logger,
        )
        for group in DenominationGroup
    }
    return DrawerState(
        **groups,
        rolls_visible=_read_show_rolls(payload.get("showRolls")),
        target_cents=_read_target(payload.get("targetDrawer")),
    )


def _merge_group(
    group: DenominationGroup,
    registry_entries: tuple[DenominationEntry, ...],
    stored: Any,
    logger: Logger | None,
) -> tuple[DenominationEntry, ...]:
    if stored is None:
        return registry_entries
    if not isinstance(stored, list):
        raise DrawerStateFormatError(f"Group {group.value} must be a list")

    counts: dict[str, int] = {}
    for item in stored:
        name, quantity = _read_item(group, item)
        counts[name] = quantity

    known = {entry.name for entry in registry_entries}
    dropped = sorted(set(counts) - known)
    if dropped and logger is not None:
        logger.warning(
            f"Dropping unknown {group.value} denominations from storage: "
            f"{', '.join(dropped)}"
        )
    return tuple(
        entry.with_count(counts.get(entry.name, 0))
        for entry in registry_entries
    )


def _read_item(group: DenominationGroup, item: Any) -> tuple[str, int]:
    if not isinstance(item, Mapping):
        raise DrawerStateFormatError(
            f"Entries of {group.value} must be JSON objects"
        )
    name = item.get("name")
    quantity = item.get("quantity", 0)
    if not isinstance(name, str):
        raise DrawerStateFormatError(
            f"Entry of {group.value} has no valid name"
        )
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise DrawerStateFormatError(
            f"{group.value} entry {name!r} has a non-integer quantity"
        )
    if quantity < 0:
        raise DrawerStateFormatError(
            f"{group.value} entry {name!r} has a negative quantity"
        )
    return name, quantity


def _read_target(value: Any) -> int:
    if value is None:
        return DEFAULT_TARGET_CENTS
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DrawerStateFormatError("targetDrawer must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise DrawerStateFormatError("targetDrawer must be finite")
    try:
        cents = to_cents(value)
    except InvalidOperation as exc:
        raise DrawerStateFormatError(
            f"targetDrawer is out of range: {value!r}"
        ) from exc
    if cents < 0:
        raise DrawerStateFormatError("targetDrawer cannot be negative")
    return cents


def _read_show_rolls(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DrawerStateFormatError("showRolls must be a boolean")
    return value


def _dollars(cents: int) -> int | float:
    if cents % 100 == 0:
        return cents // 100
    return float(from_cents(cents))


__all__ = [
    "DrawerStateFormatError",
    "serialize_drawer_state",
    "deserialize_drawer_state",
]
