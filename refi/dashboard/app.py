"""ReFi Dashboard — Main Streamlit entry point."""

import streamlit as st

from refi.client import ReFi
from refi.dashboard.components.sidebar import render_network_selector, render_sidebar
from refi.dashboard.tabs.borrow import render_borrow
from refi.dashboard.tabs.pairs import render_pairs
from refi.data.constants import AAVE
from refi.data.onchain_provider import OnChainAaveProvider
from refi.data.provider_factory import create_refi


def _render_connection(refi: ReFi, use_onchain: bool) -> None:
    if not use_onchain:
        st.sidebar.caption("Using static mainnet snapshot")
        return

    aave = refi.lending_providers.get(AAVE)
    if not isinstance(aave, OnChainAaveProvider):
        st.sidebar.error("Fell back to static data")
        return

    if aave.is_connected:
        st.sidebar.success("On-chain: connected")
    else:
        st.sidebar.error("On-chain: cannot reach RPC endpoint")

    if st.sidebar.button("Refresh On-Chain Data"):
        aave.refresh()
        st.rerun()


def main() -> None:
    st.set_page_config(
        page_title="ReFi Dashboard",
        page_icon="📊",
        layout="wide",
    )

    st.title("ReFi Dashboard")
    st.caption("Aave borrow balances and Uniswap v2 pairs")

    use_onchain, network = render_network_selector()
    refi = create_refi(use_onchain=use_onchain, network=network)
    _render_connection(refi, use_onchain)

    params = render_sidebar(default_user=refi.default_user)

    tab1, tab2 = st.tabs(["Borrow Balance", "Uniswap Pairs"])

    with tab1:
        render_borrow(refi, params.user, params.borrow_reserve, params.target_reserves)

    with tab2:
        render_pairs(refi, params.token_a, params.token_b)


if __name__ == "__main__":
    main()
