"""Domain models for the cash drawer."""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from src.domain.policies.denomination_names import ensure_unique_names
from src.utils.decimal_utils import from_cents


class DenominationGroup(str, Enum):
    """Denomination groups shown on the drawer page."""

    BILLS = "bills"
    COINS = "coins"
    ROLLS = "rolls"


@dataclass(frozen=True)
class DenominationEntry:
    """A counted bill, coin, or coin roll.

    Attributes:
        name: Label, unique within its group.
        unit_cents: Face value in cents.
        count: Number of units counted.
    """

    name: str
    unit_cents: int
    count: int = 0

    def __post_init__(self) -> None:
        if self.unit_cents < 0:
            raise ValueError(
                f"Denomination {self.name!r} has a negative face value"
            )
        if self.count < 0:
            raise ValueError(
                f"Denomination {self.name!r} has a negative count"
            )

    @property
    def unit_value(self) -> Decimal:
        """Face value in dollars."""
        return from_cents(self.unit_cents)

    def with_count(self, count: int) -> "DenominationEntry":
        """Return a copy carrying a new count."""
        return replace(self, count=count)


@dataclass(frozen=True)
class DrawerState:
    """Full persisted state of a drawer count.

    Attributes:
        bills: Bill entries in display order.
        coins: Coin entries in display order.
        rolls: Coin roll entries in display order.
        rolls_visible: Whether rolls are shown and counted.
        target_cents: Expected drawer float in cents.
    """

    bills: tuple[DenominationEntry, ...]
    coins: tuple[DenominationEntry, ...]
    rolls: tuple[DenominationEntry, ...]
    rolls_visible: bool = False
    target_cents: int = 0

    def __post_init__(self) -> None:
        for group in DenominationGroup:
            entries = tuple(getattr(self, group.value))
            object.__setattr__(self, group.value, entries)
            ensure_unique_names(
                group.value,
                (entry.name for entry in entries),
            )
        if self.target_cents < 0:
            raise ValueError("Drawer target cannot be negative")

    @property
    def target_amount(self) -> Decimal:
        """Target float in dollars."""
        return from_cents(self.target_cents)

    def entries(
        self,
        group: DenominationGroup | str,
    ) -> tuple[DenominationEntry, ...]:
        """Return the entries of a group."""
        return getattr(self, DenominationGroup(group).value)

    def with_entries(
        self,
        group: DenominationGroup | str,
        entries: tuple[DenominationEntry, ...],
    ) -> "DrawerState":
        """Return a copy with one group replaced."""
        return replace(self, **{DenominationGroup(group).value: entries})


__all__ = ["DenominationGroup", "DenominationEntry", "DrawerState"]
