"""Sidebar parameter controls."""

from dataclasses import dataclass

import streamlit as st

from refi.data.constants import DAI, ETH, KOVAN, MAINNET, USDC, WETH

_RESERVES = [DAI, WETH, ETH, USDC]


@dataclass
class SidebarParams:
    """User-controlled parameters from the sidebar."""

    user: str
    borrow_reserve: str
    target_reserves: list[str]
    token_a: str
    token_b: str


def render_sidebar(default_user: str | None = None) -> SidebarParams:
    """Render sidebar controls and return selected parameters.

    Parameters
    ----------
    default_user : str | None
        Pre-filled account, e.g. derived from the configured mnemonic.
    """
    st.sidebar.header("Aave Position")

    user = st.sidebar.text_input("User Address", value=default_user or "")
    borrow_reserve = st.sidebar.selectbox("Borrowed Reserve", _RESERVES, index=0)
    targets = st.sidebar.multiselect(
        "Express Debt In",
        _RESERVES,
        default=[r for r in _RESERVES if r != borrow_reserve],
    )

    st.sidebar.header("Uniswap Pair")
    token_a = st.sidebar.selectbox("Token A", [DAI, WETH, USDC], index=0)
    token_b = st.sidebar.selectbox("Token B", [DAI, WETH, USDC], index=1)

    return SidebarParams(
        user=user.strip(),
        borrow_reserve=borrow_reserve,
        target_reserves=targets,
        token_a=token_a,
        token_b=token_b,
    )


def render_network_selector() -> tuple[bool, str]:
    """Data-source toggle and network choice, shown above the other controls."""
    st.sidebar.header("Data Source")
    use_onchain = st.sidebar.checkbox("Use On-Chain Data", value=False, key="use_onchain")
    network = st.sidebar.selectbox("Network", [KOVAN, MAINNET], index=0, disabled=not use_onchain)
    return use_onchain, network
