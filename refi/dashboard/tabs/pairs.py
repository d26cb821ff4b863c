"""Uniswap Pairs page — derived pair address and current reserves."""

import streamlit as st

from refi.client import ReFi
from refi.dashboard.components.charts import reserves_chart
from refi.dashboard.components.metrics_cards import format_amount, kpi_row
from refi.data.constants import DEFAULT_DECIMALS, TOKEN_DECIMALS
from refi.data.interfaces import PairReserves
from refi.protocol.pricing import from_wei


def reserve_amounts(reserves: PairReserves, token_a: str, token_b: str) -> tuple[float, float]:
    """Whole-token reserves, each side scaled by its own decimals."""
    return (
        from_wei(reserves.reserve_a, TOKEN_DECIMALS.get(token_a, DEFAULT_DECIMALS)),
        from_wei(reserves.reserve_b, TOKEN_DECIMALS.get(token_b, DEFAULT_DECIMALS)),
    )


def reserve_metrics(reserves: PairReserves, token_a: str, token_b: str) -> list[tuple[str, str]]:
    return [
        (
            f"{token_a} Reserve",
            format_amount(reserves.reserve_a, TOKEN_DECIMALS.get(token_a, DEFAULT_DECIMALS), places=2),
        ),
        (
            f"{token_b} Reserve",
            format_amount(reserves.reserve_b, TOKEN_DECIMALS.get(token_b, DEFAULT_DECIMALS), places=2),
        ),
        ("Last Update", str(reserves.block_timestamp_last)),
    ]


def render_pairs(refi: ReFi, token_a: str, token_b: str) -> None:
    """Render the pair lookup page."""
    st.header("Uniswap Pairs")

    if token_a == token_b:
        st.warning("Pick two different tokens.")
        return

    given_order = refi.get_uniswap_pair(token_a, token_b)
    canonical = refi.get_uniswap_pair(token_a, token_b, canonical=True)

    st.code(canonical, language=None)
    if given_order != canonical:
        st.caption(
            f"{token_a}/{token_b} is not in canonical order; hashing it as given "
            f"yields {given_order}, which is not the deployed pair."
        )

    try:
        reserves = refi.get_pair_reserves(token_a, token_b)
    except Exception as exc:
        st.error(f"Could not read reserves: {exc}")
        return

    kpi_row(reserve_metrics(reserves, token_a, token_b))
    st.plotly_chart(
        reserves_chart((token_a, token_b), reserve_amounts(reserves, token_a, token_b)),
        use_container_width=True,
    )
