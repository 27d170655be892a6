# component/client_ranking_component.py

from __future__ import annotations
from html import escape
from typing import Sequence

import streamlit as st

from ui.formatters import format_brl, format_count, format_pct
from ui.styles import empty_placeholder, section_title


def client_card_html(rank: int, client) -> str:
    """One ranked client card. rank is 1-based."""
    card_cls = "ls-client ls-client-alert" if client.at_risk else "ls-client"
    warn = "<span>⚠️</span>" if client.at_risk else ""
    cpl_cls = ' class="ls-red"' if client.cpl_alert else ""
    ra_cls = "ls-client-rr ls-red" if client.scheduled_rate_alert else "ls-client-rr"

    # No indentation or blank lines: st.markdown would turn them into code blocks
    return "".join([
        f'<div class="{card_cls}">',
        f'<div class="ls-client-title"><span>{rank}. {escape(client.name)}</span>{warn}</div>',
        '<div class="ls-client-row">',
        f"<span>{format_count(client.leads)} Leads</span>",
        f"<span{cpl_cls}>CPL: {format_brl(client.cpl)}</span>",
        "</div>",
        '<div class="ls-client-row ls-client-rr">',
        f"<span>RA: {format_count(client.scheduled)}</span>",
        f'<span class="{ra_cls}">{format_pct(client.scheduled_rate)}</span>',
        "</div>",
        '<div class="ls-client-row ls-client-rr">',
        f"<span>RR: {format_count(client.held)}</span>",
        f"<span>{format_pct(client.held_rate)}</span>",
        "</div>",
        '<div class="ls-client-foot">',
        f"Custo RA: {format_brl(client.cost_per_scheduled)} | RR: {format_brl(client.cost_per_held)}",
        "</div>",
        "</div>",
    ])


def build_ranking_html(ranked: Sequence) -> str:
    cards = "".join(client_card_html(i, c) for i, c in enumerate(ranked, start=1))
    return f'<div class="ls-ranking ls-scroll">{cards}</div>'


def render_client_ranking(ranked: Sequence) -> None:
    section_title(f"Todos os clientes ({len(ranked)})")

    if not ranked:
        empty_placeholder("Nenhum cliente encontrado")
        return

    st.markdown(build_ranking_html(ranked), unsafe_allow_html=True)
