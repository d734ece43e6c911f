"""Tests for the drawer domain models."""

from decimal import Decimal

import pytest

from src.domain.models import DenominationEntry, DenominationGroup, DrawerState
from src.domain.policies import DuplicateDenominationError


def _state(**overrides) -> DrawerState:
    values = {
        "bills": [DenominationEntry("$1", 100), DenominationEntry("$5", 500)],
        "coins": [DenominationEntry("Dime", 10)],
        "rolls": [],
        "rolls_visible": False,
        "target_cents": 2500,
    }
    values.update(overrides)
    return DrawerState(**values)


def test_entry_exposes_unit_value_in_dollars() -> None:
    entry = DenominationEntry("Quarter", 25, 4)

    assert entry.unit_value == Decimal("0.25")


def test_entry_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        DenominationEntry("Penny", 1, -1)


def test_entry_rejects_negative_face_value() -> None:
    with pytest.raises(ValueError):
        DenominationEntry("Penny", -1)


def test_with_count_keeps_name_and_value() -> None:
    entry = DenominationEntry("$20", 2000)

    updated = entry.with_count(7)

    assert updated == DenominationEntry("$20", 2000, 7)
    assert entry.count == 0


def test_state_converts_groups_to_tuples() -> None:
    state = _state()

    assert isinstance(state.bills, tuple)
    assert state.entries("bills") == state.bills
    assert state.entries(DenominationGroup.COINS) == state.coins


def test_state_rejects_duplicate_names_within_a_group() -> None:
    with pytest.raises(DuplicateDenominationError) as exc_info:
        _state(
            coins=[DenominationEntry("Dime", 10), DenominationEntry("Dime", 10)]
        )

    assert "coins" in str(exc_info.value)


def test_state_allows_same_name_in_different_groups() -> None:
    state = _state(rolls=[DenominationEntry("Dime", 500)])

    assert state.rolls[0].name == "Dime"


def test_state_rejects_negative_target() -> None:
    with pytest.raises(ValueError):
        _state(target_cents=-1)


def test_unknown_group_raises_value_error() -> None:
    with pytest.raises(ValueError):
        _state().entries("checks")


def test_with_entries_replaces_only_one_group() -> None:
    state = _state()
    new_coins = (DenominationEntry("Dime", 10, 3),)

    updated = state.with_entries("coins", new_coins)

    assert updated.coins == new_coins
    assert updated.bills is state.bills
    assert updated.target_amount == Decimal("25.00")
