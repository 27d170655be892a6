from __future__ import annotations
import streamlit as st

from leadscale_engine.config import TOP_N_CHART, get_supabase_client
from leadscale_engine.data_layer import fetch_snapshot_event
from leadscale_engine.logic.filters import ALL_CLIENTS, ALL_WEEKS, FilterSelection, client_options, week_options
from leadscale_engine.logic.load_state import (
    Error,
    FetchStarted,
    Loading,
    Ready,
    RetryRequested,
    initial_state,
    reduce_load_state,
)
from leadscale_engine.logic.metrics import DashboardView, build_dashboard, clients_to_frame
from ui.plotly_charts import PLOTLY_CONFIG_MINIMAL, fig_top_clients
from ui.streamlit_cards import inject_card_css
from ui.styles import empty_placeholder, inject_global_styles, render_page_header, section_title
from component.client_ranking_component import render_client_ranking
from component.status_component import render_error, render_loading
from component.summary_component import render_summary_cards

st.set_page_config(page_title="LeadScale – Meta Ads", layout="wide")


# ---------- Supabase ----------

@st.cache_resource
def get_cached_supabase_client():
    return get_supabase_client()


# ---------- Load state (one snapshot per session) ----------

def dispatch(event):
    state = reduce_load_state(st.session_state.load_state, event)
    st.session_state.load_state = state
    return state


def load_snapshot():
    """Run the single fetch for this session and move Loading -> Ready / Error."""
    dispatch(FetchStarted())
    return dispatch(fetch_snapshot_event(get_client=get_cached_supabase_client))


# ---------- Sidebar: global controls ----------

def render_filters(snapshot) -> FilterSelection:
    st.sidebar.title("LeadScale")

    selected_week = st.sidebar.selectbox(
        "Semana",
        week_options(snapshot),
        format_func=lambda w: "Todas as semanas" if w == ALL_WEEKS else w,
        key="selected_week",
    )
    selected_client = st.sidebar.selectbox(
        "Cliente",
        client_options(snapshot),
        format_func=lambda c: "Todos os clientes" if c == ALL_CLIENTS else c,
        key="selected_client",
    )
    return FilterSelection(week=selected_week, client=selected_client)


# ---------- Page ----------

def render_top_clients_chart(view: DashboardView) -> None:
    section_title(f"📊 Top {TOP_N_CHART} clientes por investimento")

    if not view.chart:
        empty_placeholder("Nenhum dado disponível")
        return

    fig = fig_top_clients(clients_to_frame(view.chart))
    fig.update_layout(height=500)
    st.plotly_chart(fig, use_container_width=True, config=PLOTLY_CONFIG_MINIMAL)


def page_dashboard(snapshot) -> None:
    selection = render_filters(snapshot)
    view = build_dashboard(snapshot, selection)

    render_page_header()

    main_col, list_col = st.columns([3, 1], gap="large")

    with main_col:
        render_summary_cards(view.totals)
        render_top_clients_chart(view)

    with list_col:
        render_client_ranking(view.ranked)


# --------------------------------------------------
# MAIN ENTRY POINT
# --------------------------------------------------

def run_app():
    inject_global_styles()
    inject_card_css()

    if "load_state" not in st.session_state:
        st.session_state.load_state = initial_state()

    state = st.session_state.load_state

    if isinstance(state, Loading):
        render_loading()
        with st.spinner("Carregando dados..."):
            load_snapshot()
        st.rerun()

    if isinstance(state, Error):
        if render_error(state.message):
            dispatch(RetryRequested())
            st.rerun()
        return

    if isinstance(state, Ready):
        page_dashboard(state.snapshot)


if __name__ == "__main__":
    run_app()
