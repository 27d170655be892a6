from leadscale_engine.logic.metrics import Totals, build_client, clients_to_frame
from ui.formatters import format_brl, format_count, format_pct
from ui.plotly_charts import fig_top_clients
from component.client_ranking_component import build_ranking_html, client_card_html
from component.summary_component import build_summary_html, build_summary_items


# ---------- Formatters ----------

def test_format_brl_uses_pt_br_separators():
    assert format_brl(1234.56) == "R$ 1.234,56"
    assert format_brl(1500) == "R$ 1.500,00"
    assert format_brl(0) == "R$ 0,00"
    assert format_brl(1234567.891) == "R$ 1.234.567,89"


def test_format_brl_placeholder_for_missing_values():
    assert format_brl(None) == "—"
    assert format_brl("abc") == "—"


def test_format_pct_one_decimal():
    assert format_pct(40) == "40.0%"
    assert format_pct(29.99) == "30.0%"
    assert format_pct(None) == "—"


def test_format_count():
    assert format_count(15.0) == "15"
    assert format_count(12000) == "12.000"
    assert format_count(2.5) == "2,50"


# ---------- Chart ----------

def test_top_clients_chart_has_two_bars_and_spend_line():
    clients = [
        build_client("Acme", spend=1200, leads=10, scheduled=2, held=1),
        build_client("Beta", spend=750.25, leads=21, scheduled=9, held=3),
    ]
    fig = fig_top_clients(clients_to_frame(clients))

    names = [t.name for t in fig.data]
    assert names == ["Leads", "CPL", "Investimento"]
    assert [t.type for t in fig.data] == ["bar", "bar", "scatter"]
    assert fig.data[2].yaxis == "y2"
    assert list(fig.data[2].y) == [1200.0, 750.25]


def test_cpl_bar_is_red_only_for_alerted_clients():
    clients = [
        build_client("Acme", spend=1200, leads=10, scheduled=2, held=1),
        build_client("Beta", spend=750.25, leads=21, scheduled=9, held=3),
    ]
    fig = fig_top_clients(clients_to_frame(clients))
    colors = list(fig.data[1].marker.color)
    assert colors[0] != colors[1]
    assert colors[0].upper() == "#EF4444"


def test_chart_for_empty_frame_is_blank():
    fig = fig_top_clients(clients_to_frame([]))
    assert len(fig.data) == 0


# ---------- Summary cards ----------

def test_summary_has_seven_cards_and_alert_highlight():
    totals = Totals(spend=1500, leads=15, scheduled=6, held=3,
                    cost_per_scheduled=250, cost_per_held=500, alerts=2)
    items = build_summary_items(totals)

    assert len(items) == 7
    assert items[0] == {"label": "Investimento", "value": "R$ 1.500,00", "kind": "plain"}
    assert items[-1]["kind"] == "alert"
    assert "ls-kpi-alert" in build_summary_html(totals)


def test_summary_without_alerts_is_not_highlighted():
    html = build_summary_html(Totals())
    assert "ls-kpi-alert" not in html
    assert "R$ 0,00" in html


# ---------- Ranked list ----------

def test_client_card_flags_and_rank():
    acme = build_client("Acme", spend=1200, leads=10, scheduled=2, held=1)
    html = client_card_html(1, acme)

    assert "1. Acme" in html
    assert "ls-client-alert" in html
    assert "⚠️" in html
    assert "CPL: R$ 120,00" in html
    assert "20.0%" in html
    assert "\n" not in html


def test_client_card_without_alerts():
    beta = build_client("Beta", spend=750.25, leads=21, scheduled=9, held=3)
    html = client_card_html(2, beta)
    assert "ls-client-alert" not in html
    assert "⚠️" not in html
    assert "Custo RA: R$ 83,36 | RR: R$ 250,08" in html


def test_client_names_are_escaped():
    c = build_client("<b>X&Y</b>", spend=1, leads=1, scheduled=1, held=1)
    assert "&lt;b&gt;X&amp;Y&lt;/b&gt;" in client_card_html(1, c)


def test_ranking_html_numbers_cards_in_order():
    ranked = [
        build_client("A", spend=10, leads=1, scheduled=1, held=1),
        build_client("B", spend=5, leads=1, scheduled=1, held=1),
    ]
    html = build_ranking_html(ranked)
    assert html.index("1. A") < html.index("2. B")
    assert html.startswith('<div class="ls-ranking ls-scroll">')
