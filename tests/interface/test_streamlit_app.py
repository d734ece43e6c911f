"""Tests for the Streamlit app module."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.application.use_cases.drawer_session import DrawerSession
from src.domain.models import DenominationGroup, DrawerTotals
from src.infrastructure.key_value_store import InMemoryKeyValueStore


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self._owner = owner

    def __getattr__(self, name):
        return getattr(self._owner, name)


class _FakeStreamlit:
    def __init__(self) -> None:
        self.session_state: dict = {}
        self.config_kwargs = None
        self.title_text = None
        self.subheaders: list[str] = []
        self.captions: list[str] = []
        self.markdowns: list[str] = []
        self.infos: list[str] = []
        self.number_inputs: list[tuple[str, dict]] = []
        self.text_inputs: list[tuple[str, dict]] = []
        self.buttons: list[tuple[str, dict]] = []
        self.metrics: dict[str, tuple] = {}
        self.charts: list = []

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        self.subheaders.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def markdown(self, text: str):
        self.markdowns.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def divider(self):
        return None

    def number_input(self, label: str, **kwargs):
        self.number_inputs.append((label, kwargs))

    def text_input(self, label: str, **kwargs):
        self.text_inputs.append((label, kwargs))

    def button(self, label: str, **kwargs):
        self.buttons.append((label, kwargs))
        return False

    def columns(self, spec: int):
        return [_FakeColumn(self) for _ in range(spec)]

    def metric(self, label, value, delta=None, **kwargs):
        self.metrics[label] = (value, delta, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


@pytest.fixture()
def fake_st(monkeypatch) -> _FakeStreamlit:
    fake = _FakeStreamlit()
    store = InMemoryKeyValueStore()
    monkeypatch.setattr(app, "st", fake)
    monkeypatch.setattr(app, "_load_store", lambda: store)
    monkeypatch.setattr(
        app,
        "build_drawer_session",
        lambda kv_store: DrawerSession.load(
            kv_store,
            logger=MagicMock(),
            usage_logger=MagicMock(),
        ),
    )
    fake.store = store
    return fake


def _totals(**overrides) -> DrawerTotals:
    values = {
        "bills_total": Decimal("0.00"),
        "coins_total": Decimal("0.00"),
        "rolls_total": Decimal("0.00"),
        "grand_total": Decimal("0.00"),
        "target": Decimal("200.00"),
        "difference": Decimal("-200.00"),
    }
    values.update(overrides)
    return DrawerTotals(**values)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("0"), "$0.00"),
        (Decimal("-5"), "-$5.00"),
        (Decimal("-0.00"), "$0.00"),
        (Decimal("1000000"), "$1,000,000.00"),
        (
            Decimal("-123456789012345678901234567890.00"),
            "-$123,456,789,012,345,678,901,234,567,890.00",
        ),
    ],
)
def test_format_currency_matches_en_us(value, expected):
    assert app._format_currency(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("5.00"), "+$5.00"),
        (Decimal("-5.00"), "-$5.00"),
        (Decimal("0.00"), "$0.00"),
    ],
)
def test_format_difference_signs_overage_only(value, expected):
    assert app._format_difference(value) == expected


def test_difference_status_and_colors():
    assert app._difference_status(Decimal("1")) == "Over"
    assert app._difference_status(Decimal("-1")) == "Short"
    assert app._difference_status(Decimal("0")) == "Balanced"
    assert app._difference_delta_color(Decimal("1")) == "normal"
    assert app._difference_delta_color(Decimal("-1")) == "inverse"
    assert app._difference_delta_color(Decimal("0")) == "off"


def test_prepare_group_chart_data_skips_empty_groups():
    totals = _totals(
        bills_total=Decimal("150.00"),
        coins_total=Decimal("50.00"),
        grand_total=Decimal("200.00"),
    )

    data = app._prepare_group_chart_data(totals)

    assert [row["group"] for row in data] == ["Bills", "Coins"]
    assert data[0]["amount"] == 150.0
    assert data[0]["amount_label"] == "$150.00"
    assert data[0]["share_label"] == "75.0%"


def test_main_renders_default_drawer(fake_st):
    app.main()

    assert fake_st.title_text == "Shift Close Toolkit"
    assert [label for label, _ in fake_st.text_inputs] == [
        "$1", "$5", "$10", "$20", "$50", "$100",
        "Penny", "Nickel", "Dime", "Quarter",
    ]
    assert fake_st.session_state["target_drawer"] == 200.0
    assert fake_st.session_state["count_bills_0"] == ""
    labels = [label for label, _ in fake_st.buttons]
    assert labels == ["+ Show Coin Rolls", "Reset All"]
    assert fake_st.metrics["Difference"][0] == "-$200.00"
    assert fake_st.metrics["Difference"][1] == "Short"
    assert fake_st.infos
    assert fake_st.charts == []


def test_count_callbacks_update_totals_and_storage(fake_st):
    app.main()
    fake_st.session_state["count_bills_3"] = "10"
    app._on_count_change(DenominationGroup.BILLS, 3)
    fake_st.session_state["count_coins_3"] = "4"
    app._on_count_change(DenominationGroup.COINS, 3)

    app.main()

    assert "**Bills Total: $200.00**" in fake_st.markdowns
    assert "**Coins Total: $1.00**" in fake_st.markdowns
    assert fake_st.metrics["Grand Total"][0] == "$201.00"
    assert fake_st.metrics["Difference"][:2] == ("+$1.00", "Over")
    assert fake_st.store.get("cashDrawerData") is not None
    assert len(fake_st.charts) == 1


def test_negative_count_is_rejected_and_field_restored(fake_st):
    app.main()
    fake_st.session_state["count_coins_0"] = "-5"

    app._on_count_change(DenominationGroup.COINS, 0)

    assert fake_st.session_state["count_coins_0"] == ""
    session = fake_st.session_state[app.SESSION_KEY]
    assert session.state.coins[0].count == 0


def test_target_callback_updates_target(fake_st):
    app.main()
    fake_st.session_state["target_drawer"] = 150.5

    app._on_target_change()
    app.main()

    assert fake_st.metrics["Target"][0] == "$150.50"
    assert fake_st.session_state["target_drawer"] == 150.5


def test_toggle_rolls_shows_roll_inputs(fake_st):
    app.main()
    app._on_toggle_rolls()
    fake_st.text_inputs.clear()
    fake_st.buttons.clear()

    app.main()

    assert len(fake_st.text_inputs) == 14
    assert fake_st.buttons[0][0] == "− Hide Coin Rolls"
    assert "Coin Rolls (Unopened)" in fake_st.subheaders


def test_reset_clears_fields(fake_st):
    app.main()
    fake_st.session_state["count_bills_5"] = "3"
    app._on_count_change(DenominationGroup.BILLS, 5)
    fake_st.session_state["target_drawer"] = 500.0
    app._on_target_change()

    app._on_reset()

    assert fake_st.session_state["count_bills_5"] == ""
    assert fake_st.session_state["target_drawer"] == 200.0
    session = fake_st.session_state[app.SESSION_KEY]
    assert session.totals().grand_total == Decimal("0.00")


def test_session_is_restored_from_store_on_reload(fake_st):
    app.main()
    fake_st.session_state["count_coins_1"] = "8"
    app._on_count_change(DenominationGroup.COINS, 1)

    fake_st.session_state.clear()
    app.main()

    assert fake_st.session_state["count_coins_1"] == "8"
