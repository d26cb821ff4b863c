"""Metric cards for on-chain amounts."""

import streamlit as st

from refi.data.constants import DEFAULT_DECIMALS
from refi.protocol.pricing import from_wei


def format_amount(amount: int, decimals: int = DEFAULT_DECIMALS, places: int = 4) -> str:
    """Raw token units as a grouped whole-token string."""
    return f"{from_wei(amount, decimals):,.{places}f}"


def kpi_row(metrics: list[tuple[str, str]]) -> None:
    """Display (label, value) pairs as one row of metrics."""
    for col, (label, value) in zip(st.columns(len(metrics)), metrics):
        col.metric(label=label, value=value)
