# ui/plotly_charts.py

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from leadscale_engine.config import CURRENCY_SYMBOL
from ui.theme import COLORS, TYPE

# ---------- Minimal Plotly config ----------
PLOTLY_CONFIG_MINIMAL = {
    "displayModeBar": False,
    "scrollZoom": False,
    "doubleClick": "reset",
    "responsive": True,
}

# ---------- Theme ----------
def apply_leadscale_plotly_theme(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        font=dict(family=TYPE.font_family, size=11, color="#FFFFFF"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=35, b=120),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="left",
            x=0.0,
            font=dict(size=11, color=COLORS.text_muted),
        ),
        hoverlabel=dict(
            bgcolor="#000000",
            bordercolor=COLORS.accent,
            font=dict(size=11, color="#FFFFFF"),
        ),
    )

    fig.update_xaxes(
        showgrid=False,
        zeroline=False,
        tickangle=-45,
        tickfont=dict(color="#FFFFFF", size=10),
        linecolor="#333333",
    )
    fig.update_yaxes(
        showgrid=True,
        gridcolor="#333333",
        griddash="dash",
        zeroline=False,
        showticklabels=False,
    )
    return fig


def _hover_text(df: pd.DataFrame, currency_symbol: str) -> list[str]:
    lines = []
    for _, r in df.iterrows():
        lines.append(
            f"<b>{r['name']}</b><br>"
            f"Leads: {r['leads']:g}<br>"
            f"CPL: {currency_symbol} {r['cpl']:.2f}<br>"
            f"Reuniões Agendadas: {r['scheduled']:g} ({r['scheduled_rate']:.2f}%)<br>"
            f"Reuniões Realizadas: {r['held']:g} ({r['held_rate']:.2f}%)<br>"
            f"Investimento: {currency_symbol} {r['spend']:.2f}"
        )
    return lines


# ---------- Top clients: leads + CPL bars, spend line ----------
def fig_top_clients(
    chart_df: pd.DataFrame,
    currency_symbol: str = CURRENCY_SYMBOL,
) -> go.Figure:
    if chart_df is None or chart_df.empty:
        return go.Figure()

    df = chart_df.copy()
    x = df["name"]
    hover = _hover_text(df, currency_symbol)
    cpl_colors = [COLORS.alert if flag else COLORS.accent for flag in df["cpl_alert"]]

    fig = go.Figure()

    fig.add_trace(go.Bar(
        name="Leads",
        x=x,
        y=df["leads"],
        marker=dict(color=COLORS.accent_soft),
        text=[f"{v:g}" for v in df["leads"]],
        textposition="outside",
        textfont=dict(color=COLORS.accent_soft, size=10),
        hovertext=hover,
        hoverinfo="text",
    ))
    fig.add_trace(go.Bar(
        name="CPL",
        x=x,
        y=df["cpl"],
        marker=dict(color=cpl_colors),
        text=[f"{currency_symbol}{v:.2f}" for v in df["cpl"]],
        textposition="outside",
        textfont=dict(color="#FFFFFF", size=9),
        hovertext=hover,
        hoverinfo="text",
    ))

    # Spend line (secondary axis)
    fig.add_trace(go.Scatter(
        name="Investimento",
        x=x,
        y=df["spend"],
        mode="lines+markers",
        yaxis="y2",
        line=dict(color="#FFFFFF", width=3, shape="spline"),
        marker=dict(size=10, color="#FFFFFF", line=dict(width=2, color=COLORS.accent)),
        hovertext=hover,
        hoverinfo="text",
    ))

    fig.update_layout(
        barmode="group",
        yaxis=dict(title=None),
        yaxis2=dict(
            overlaying="y",
            side="right",
            showgrid=False,
            showticklabels=False,
        ),
    )

    return apply_leadscale_plotly_theme(fig)
