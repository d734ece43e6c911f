"""Streamlit entry point for the shift close drawer count."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.key_value_store import KeyValueStorePort
from src.application.use_cases.drawer_session import DrawerSession
from src.domain.models import (
    DenominationEntry,
    DenominationGroup,
    DrawerState,
    DrawerTotals,
)
from src.domain.services.totals import line_total
from src.infrastructure.container import (
    build_drawer_session,
    build_key_value_store,
)


SESSION_KEY = "drawer_session"
TARGET_WIDGET_KEY = "target_drawer"

GROUP_TITLES = {
    DenominationGroup.BILLS: "Bills",
    DenominationGroup.COINS: "Coins",
    DenominationGroup.ROLLS: "Coin Rolls (Unopened)",
}
GROUP_COLUMNS = {
    DenominationGroup.BILLS: 3,
    DenominationGroup.COINS: 4,
    DenominationGroup.ROLLS: 4,
}
GROUP_TOTAL_LABELS = {
    DenominationGroup.BILLS: "Bills Total",
    DenominationGroup.COINS: "Coins Total",
    DenominationGroup.ROLLS: "Rolls Total",
}


@st.cache_resource(show_spinner=False)
def _load_store() -> KeyValueStorePort:
    """Cached key-value store shared by every browser session."""
    return build_key_value_store()


def _get_session() -> DrawerSession:
    """Return the drawer session of the current browser session."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = build_drawer_session(_load_store())
        _sync_widgets(st.session_state[SESSION_KEY].state)
    return st.session_state[SESSION_KEY]


def _format_currency(value: Decimal) -> str:
    """Format an amount as en-US dollars, e.g. ``-$1,234.50``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${value.copy_abs():,.2f}"


def _format_difference(value: Decimal) -> str:
    """Format the drawer difference with a ``+`` on overage."""
    prefix = "+" if value > 0 else ""
    return f"{prefix}{_format_currency(value)}"


def _difference_status(value: Decimal) -> str:
    if value > 0:
        return "Over"
    if value < 0:
        return "Short"
    return "Balanced"


def _difference_delta_color(value: Decimal) -> str:
    """Green on overage, red on shortage, grey when balanced."""
    if value > 0:
        return "normal"
    if value < 0:
        return "inverse"
    return "off"


def _count_widget_key(group: DenominationGroup, index: int) -> str:
    return f"count_{group.value}_{index}"


def _count_text(entry: DenominationEntry) -> str:
    """Text shown in a count field; zero renders as an empty field."""
    return str(entry.count) if entry.count else ""


def _sync_widgets(state: DrawerState) -> None:
    """Copy the drawer state into the widget values.

    Only call this before widgets are rendered or from a widget callback.
    """
    for group in DenominationGroup:
        for index, entry in enumerate(state.entries(group)):
            st.session_state[_count_widget_key(group, index)] = _count_text(
                entry
            )
    st.session_state[TARGET_WIDGET_KEY] = float(state.target_amount)


def _on_count_change(group: DenominationGroup, index: int) -> None:
    session = _get_session()
    raw = st.session_state.get(_count_widget_key(group, index), "")
    state = session.update_count(group, index, raw)
    st.session_state[_count_widget_key(group, index)] = _count_text(
        state.entries(group)[index]
    )


def _on_target_change() -> None:
    session = _get_session()
    state = session.update_target(st.session_state.get(TARGET_WIDGET_KEY))
    st.session_state[TARGET_WIDGET_KEY] = float(state.target_amount)


def _on_toggle_rolls() -> None:
    _get_session().toggle_rolls()


def _on_reset() -> None:
    session = _get_session()
    _sync_widgets(session.reset_all())


def _render_group(
    state: DrawerState,
    group: DenominationGroup,
    total: Decimal,
) -> None:
    """Render the count inputs and subtotal of one denomination group."""
    st.subheader(GROUP_TITLES[group])
    entries = state.entries(group)
    columns = st.columns(GROUP_COLUMNS[group])
    for index, entry in enumerate(entries):
        column = columns[index % len(columns)]
        column.text_input(
            entry.name,
            key=_count_widget_key(group, index),
            placeholder="0",
            on_change=_on_count_change,
            args=(group, index),
        )
        column.caption(_format_currency(line_total(entry)))
    st.markdown(
        f"**{GROUP_TOTAL_LABELS[group]}: {_format_currency(total)}**"
    )


def _render_summary(totals: DrawerTotals) -> None:
    """Render grand total, target, and signed difference."""
    st.divider()
    total_col, target_col, difference_col = st.columns(3)
    total_col.metric("Grand Total", _format_currency(totals.grand_total))
    target_col.metric("Target", _format_currency(totals.target))
    difference_col.metric(
        "Difference",
        _format_difference(totals.difference),
        _difference_status(totals.difference),
        delta_color=_difference_delta_color(totals.difference),
    )


def _prepare_group_chart_data(
    totals: DrawerTotals,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the non-empty group totals.

    Args:
        totals: Totals snapshot of the drawer.

    Returns:
        list[dict[str, str | float]]: One row per group with a share label.
    """
    amounts = [
        ("Bills", totals.bills_total),
        ("Coins", totals.coins_total),
        ("Rolls", totals.rolls_total),
    ]
    data: list[dict[str, str | float]] = []
    for group, amount in amounts:
        if amount == 0:
            continue
        share = (
            (amount / totals.grand_total) * Decimal("100")
            if totals.grand_total
            else Decimal("0")
        )
        data.append(
            {
                "group": group,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_group_chart(
    totals: DrawerTotals,
    chart_size: int = 260,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of the drawer split by group.

    Args:
        totals: Totals snapshot of the drawer.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.
    """
    data = _prepare_group_chart_data(totals)
    if not data:
        st.info("Enter counts to see the drawer breakdown.")
        return
    palette_scale = list(palette or ["#2e7d32", "#f4a261", "#457b9d"])
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "group:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("group:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Drawer Breakdown")
    st.altair_chart(chart)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Shift Close Toolkit", layout="centered")
    st.title("Shift Close Toolkit")

    session = _get_session()

    st.number_input(
        "Target Drawer Amount",
        min_value=0.0,
        step=0.01,
        format="%.2f",
        key=TARGET_WIDGET_KEY,
        on_change=_on_target_change,
    )

    state = session.state
    totals = session.totals()
    _render_group(state, DenominationGroup.BILLS, totals.bills_total)
    _render_group(state, DenominationGroup.COINS, totals.coins_total)

    toggle_label = (
        "− Hide Coin Rolls" if state.rolls_visible else "+ Show Coin Rolls"
    )
    st.button(toggle_label, on_click=_on_toggle_rolls)
    if state.rolls_visible:
        _render_group(state, DenominationGroup.ROLLS, totals.rolls_total)

    _render_summary(totals)
    _render_group_chart(totals)

    st.button("Reset All", on_click=_on_reset, type="primary")


if __name__ == "__main__":  # pragma: no cover
    main()
