# leadscale_engine/logic/metrics.py
"""
Per-client metrics, ranking and headline totals for the campaign dashboard.

All derived numbers are rounded to 2 decimals when they are built, and the
alert flags compare those rounded values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

import pandas as pd

from ..config import CPL_ALERT_THRESHOLD, SCHEDULED_RATE_ALERT_THRESHOLD, TOP_N_CHART
from .filters import FilterSelection, filter_records
from .records import METRIC_COLUMNS


@dataclass(frozen=True)
class AggregatedClient:
    name: str
    spend: float
    leads: float
    cpl: float
    scheduled: float
    held: float
    scheduled_rate: float
    held_rate: float
    cost_per_scheduled: float
    cost_per_held: float
    cpl_alert: bool
    scheduled_rate_alert: bool

    @property
    def at_risk(self) -> bool:
        return self.cpl_alert or self.scheduled_rate_alert


@dataclass(frozen=True)
class Totals:
    spend: float = 0.0
    leads: float = 0.0
    scheduled: float = 0.0
    held: float = 0.0
    cost_per_scheduled: float = 0.0
    cost_per_held: float = 0.0
    alerts: int = 0


@dataclass(frozen=True, eq=False)
class DashboardView:
    selection: FilterSelection
    filtered: pd.DataFrame
    ranked: List[AggregatedClient] = field(default_factory=list)
    chart: List[AggregatedClient] = field(default_factory=list)
    totals: Totals = field(default_factory=Totals)


def _r2(x) -> float:
    # half-up on the exact binary value: 0.125 -> 0.13
    return float(Decimal(float(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _safe_div(numerator: float, denominator: float) -> float:
    if denominator > 0:
        return numerator / denominator
    return 0.0


def _cost_per_lead(spend: float, leads: float) -> float:
    # no leads: CPL falls back to the spend itself
    if leads > 0:
        return spend / leads
    return spend if spend > 0 else 0.0


def _named_records(df: pd.DataFrame) -> pd.DataFrame:
    if df is None or df.empty:
        return pd.DataFrame(columns=["client", *METRIC_COLUMNS])
    names = df["client"].astype(str).str.strip()
    named = df.loc[names != "", METRIC_COLUMNS].copy()
    named.insert(0, "client", names[names != ""])
    return named


def build_client(name: str, spend: float, leads: float, scheduled: float, held: float) -> AggregatedClient:
    cpl = _r2(_cost_per_lead(spend, leads))
    scheduled_rate = _r2(_safe_div(scheduled, leads) * 100)
    held_rate = _r2(_safe_div(held, leads) * 100)

    return AggregatedClient(
        name=name,
        spend=_r2(spend),
        leads=_r2(leads),
        cpl=cpl,
        scheduled=_r2(scheduled),
        held=_r2(held),
        scheduled_rate=scheduled_rate,
        held_rate=held_rate,
        cost_per_scheduled=_r2(_safe_div(spend, scheduled)),
        cost_per_held=_r2(_safe_div(spend, held)),
        cpl_alert=cpl > CPL_ALERT_THRESHOLD,
        scheduled_rate_alert=scheduled_rate < SCHEDULED_RATE_ALERT_THRESHOLD,
    )


def aggregate_clients(df: pd.DataFrame) -> List[AggregatedClient]:
    """
    One AggregatedClient per distinct non-blank client name, in order of
    first appearance. Rows with a blank client are skipped.
    """
    named = _named_records(df)
    if named.empty:
        return []

    sums = named.groupby("client", sort=False)[METRIC_COLUMNS].sum()

    return [
        build_client(
            name=str(name),
            spend=float(row["spend"]),
            leads=float(row["leads"]),
            scheduled=float(row["scheduled"]),
            held=float(row["held"]),
        )
        for name, row in sums.iterrows()
    ]


def rank_clients(clients: Sequence[AggregatedClient]) -> List[AggregatedClient]:
    """CPL-alerted clients first, then by spend, highest first. Stable."""
    return sorted(clients, key=lambda c: (not c.cpl_alert, -c.spend))


def top_clients(ranked: Sequence[AggregatedClient], n: int = TOP_N_CHART) -> List[AggregatedClient]:
    return list(ranked[:n])


def count_alerts(clients: Sequence[AggregatedClient]) -> int:
    # A client with both flags counts once
    return sum(1 for c in clients if c.at_risk)


def compute_totals(df: pd.DataFrame, clients: Sequence[AggregatedClient]) -> Totals:
    """
    Headline numbers summed straight from the filtered rows.
    The alert count comes from the aggregated clients.
    """
    named = _named_records(df)
    spend = float(named["spend"].sum()) if not named.empty else 0.0
    leads = float(named["leads"].sum()) if not named.empty else 0.0
    scheduled = float(named["scheduled"].sum()) if not named.empty else 0.0
    held = float(named["held"].sum()) if not named.empty else 0.0

    return Totals(
        spend=_r2(spend),
        leads=_r2(leads),
        scheduled=_r2(scheduled),
        held=_r2(held),
        cost_per_scheduled=_r2(_safe_div(spend, scheduled)),
        cost_per_held=_r2(_safe_div(spend, held)),
        alerts=count_alerts(clients),
    )


def clients_to_frame(clients: Sequence[AggregatedClient]) -> pd.DataFrame:
    """Flat table for charts; at_risk is added as a column."""
    columns = list(AggregatedClient.__dataclass_fields__) + ["at_risk"]
    rows = [{**asdict(c), "at_risk": c.at_risk} for c in clients]
    return pd.DataFrame(rows, columns=columns)


def build_dashboard(df: pd.DataFrame, selection: FilterSelection | None = None) -> DashboardView:
    """
    Filter -> aggregate -> rank -> chart subset, plus totals, in one pass.
    Called again from scratch on every selection change.
    """
    selection = selection or FilterSelection()
    filtered = filter_records(df, selection)
    ranked = rank_clients(aggregate_clients(filtered))

    return DashboardView(
        selection=selection,
        filtered=filtered,
        ranked=ranked,
        chart=top_clients(ranked),
        totals=compute_totals(filtered, ranked),
    )
