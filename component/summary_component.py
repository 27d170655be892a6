# component/summary_component.py

from __future__ import annotations
from html import escape
from typing import Any, Dict, List

import streamlit as st

from ui.formatters import format_brl, format_count


def build_summary_items(totals) -> List[Dict[str, Any]]:
    """
    Seven headline cards, in display order.
    kind: plain | accent | alert
    """
    alerts = int(totals.alerts)
    return [
        {"label": "Investimento", "value": format_brl(totals.spend), "kind": "plain"},
        {"label": "Leads", "value": format_count(totals.leads), "kind": "plain"},
        {"label": "Reuniões Agendadas", "value": format_count(totals.scheduled), "kind": "accent"},
        {"label": "Reuniões Realizadas", "value": format_count(totals.held), "kind": "accent"},
        {"label": "Custo médio por RA", "value": format_brl(totals.cost_per_scheduled), "kind": "plain"},
        {"label": "Custo médio por RR", "value": format_brl(totals.cost_per_held), "kind": "plain"},
        {"label": "Alertas", "value": str(alerts), "kind": "alert" if alerts > 0 else "plain"},
    ]


def _kpi_cell(item: Dict[str, Any]) -> str:
    label = escape(str(item.get("label", "—")))
    value = escape(str(item.get("value", "—")))
    kind = item.get("kind", "plain")

    card_cls = "ls-kpi ls-kpi-alert" if kind == "alert" else "ls-kpi"
    value_cls = {
        "accent": "ls-kpi-value ls-kpi-value-accent",
        "alert": "ls-kpi-value ls-kpi-value-alert",
    }.get(kind, "ls-kpi-value")

    return (
        f'<div class="{card_cls}">'
        f'<p class="ls-kpi-label">{label}</p>'
        f'<p class="{value_cls}">{value}</p>'
        f"</div>"
    )


def build_summary_html(totals) -> str:
    cells = "".join(_kpi_cell(i) for i in build_summary_items(totals))
    return f'<div class="ls-kpi-grid">{cells}</div>'


def render_summary_cards(totals) -> None:
    st.markdown(build_summary_html(totals), unsafe_allow_html=True)
