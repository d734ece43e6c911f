"""Domain models for drawer totals."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DrawerTotals:
    """Totals snapshot rendered by the interface.

    Attributes:
        bills_total: Sum of bill entries.
        coins_total: Sum of coin entries.
        rolls_total: Sum of roll entries, zero while rolls are hidden.
        grand_total: Counted total of the drawer.
        target: Expected drawer float.
        difference: Grand total minus target, positive on overage.
    """

    bills_total: Decimal
    coins_total: Decimal
    rolls_total: Decimal
    grand_total: Decimal
    target: Decimal
    difference: Decimal


__all__ = ["DrawerTotals"]
