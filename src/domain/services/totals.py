"""Domain services computing drawer totals.

Sums are accumulated in integer cents and converted to Decimal dollars only
when returned.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import DenominationEntry, DrawerState, DrawerTotals
from src.utils.decimal_utils import from_cents


def sum_entries_cents(entries: Iterable[DenominationEntry]) -> int:
    return sum(entry.unit_cents * entry.count for entry in entries)


def sum_entries(entries: Iterable[DenominationEntry]) -> Decimal:
    """Return the value of a sequence of entries in dollars."""
    return from_cents(sum_entries_cents(entries))


def line_total(entry: DenominationEntry) -> Decimal:
    """Return the value of one entry in dollars."""
    return from_cents(entry.unit_cents * entry.count)


def grand_total_cents(state: DrawerState) -> int:
    total = sum_entries_cents(state.bills) + sum_entries_cents(state.coins)
    if state.rolls_visible:
        total += sum_entries_cents(state.rolls)
    return total


def grand_total(state: DrawerState) -> Decimal:
    """Return the counted total of the drawer.

    Rolls only contribute while they are visible, whatever their counts.

    Args:
        state: Drawer state to total.

    Returns:
        Decimal: Bills plus coins plus visible rolls.
    """
    return from_cents(grand_total_cents(state))


def difference(state: DrawerState) -> Decimal:
    """Return the signed gap between the grand total and the target.

    Args:
        state: Drawer state to reconcile.

    Returns:
        Decimal: Positive on overage, negative on shortage.
    """
    return from_cents(grand_total_cents(state) - state.target_cents)


def compute_totals(state: DrawerState) -> DrawerTotals:
    """Return the totals snapshot rendered by the interface.

    Args:
        state: Drawer state to total.

    Returns:
        DrawerTotals: Group totals, grand total, target, and difference.
    """
    rolls_cents = (
        sum_entries_cents(state.rolls) if state.rolls_visible else 0
    )
    total_cents = grand_total_cents(state)
    return DrawerTotals(
        bills_total=sum_entries(state.bills),
        coins_total=sum_entries(state.coins),
        rolls_total=from_cents(rolls_cents),
        grand_total=from_cents(total_cents),
        target=from_cents(state.target_cents),
        difference=from_cents(total_cents - state.target_cents),
    )


__all__ = [
    "sum_entries_cents",
    "sum_entries",
    "line_total",
    "grand_total_cents",
    "grand_total",
    "difference",
    "compute_totals",
]
