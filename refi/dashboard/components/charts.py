"""Plotly chart components."""

import pandas as pd
import plotly.graph_objects as go


def equivalents_chart(df: pd.DataFrame, title: str = "Debt in Other Reserves") -> go.Figure:
    """Bar chart of a borrow balance expressed in several reserves.

    Args:
        df: DataFrame with columns: asset, balance.
        title: Chart title.
    """
    fig = go.Figure(
        go.Bar(
            x=df["asset"],
            y=df["balance"],
            marker_color="#3b82f6",
            hovertemplate="%{x}: %{y:,.4f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Reserve",
        yaxis_title="Equivalent Balance",
        template="plotly_dark",
        height=400,
    )
    return fig


def reserves_chart(labels: tuple[str, str], reserves: tuple[float, float]) -> go.Figure:
    """Donut of the two sides of a pair, in whole tokens."""
    fig = go.Figure(
        go.Pie(
            labels=list(labels),
            values=list(reserves),
            hole=0.5,
        )
    )
    fig.update_layout(template="plotly_dark", height=350)
    return fig
