"""Borrow Balance page — a user's Aave debt and its value in other reserves."""

import streamlit as st

from refi.client import ReFi
from refi.dashboard.components.charts import equivalents_chart
from refi.dashboard.components.metrics_cards import format_amount, kpi_row
from refi.data.constants import DEFAULT_DECIMALS, TOKEN_DECIMALS
from refi.position.borrow_position import BorrowPosition, equivalents_frame


def render_borrow(refi: ReFi, user: str, reserve: str, targets: list[str]) -> None:
    """Render the borrow balance page."""
    st.header("Borrow Balance")

    if not user:
        st.info("Enter a user address in the sidebar to look up a position.")
        return

    try:
        position = BorrowPosition.from_refi(refi, reserve, user)
    except (ValueError, RuntimeError) as exc:
        st.error(f"Could not read position: {exc}")
        return

    decimals = TOKEN_DECIMALS.get(reserve, DEFAULT_DECIMALS)
    kpi_row(
        [
            ("Reserve", reserve),
            ("Borrow Balance", format_amount(position.borrow_balance, decimals)),
            ("Oracle Price (ETH)", format_amount(refi.get_asset_price(reserve), places=6)),
        ]
    )

    if not position.has_debt:
        st.info(f"No outstanding {reserve} debt for this user.")
        return

    st.divider()
    st.subheader("Equivalent Balances")

    df = equivalents_frame(position, refi, targets, decimals=TOKEN_DECIMALS)
    st.dataframe(df[["asset", "balance"]], use_container_width=True, hide_index=True)
    st.plotly_chart(equivalents_chart(df), use_container_width=True)
