"""Domain models package."""

from .drawer import DenominationEntry, DenominationGroup, DrawerState
from .totals import DrawerTotals

__all__ = [
    "DenominationEntry",
    "DenominationGroup",
    "DrawerState",
    "DrawerTotals",
]
