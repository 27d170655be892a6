# leadscale_engine/logic/filters.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

from .records import CANONICAL_COLUMNS


ALL_WEEKS = "Todas"
ALL_CLIENTS = "Todos"


@dataclass(frozen=True)
class FilterSelection:
    week: str = ALL_WEEKS
    client: str = ALL_CLIENTS


def filter_records(df: pd.DataFrame, selection: FilterSelection | None = None) -> pd.DataFrame:
    """
    Keep the rows matching the selected week and client.
    The "all" sentinels match everything; row order is preserved.
    """
    if df is None:
        return pd.DataFrame(columns=CANONICAL_COLUMNS)
    if df.empty:
        return df

    selection = selection or FilterSelection()
    mask = pd.Series(True, index=df.index)

    if selection.week != ALL_WEEKS:
        mask &= df["week"].astype(str).str.strip() == selection.week
    if selection.client != ALL_CLIENTS:
        mask &= df["client"].astype(str).str.strip() == selection.client

    return df[mask]


def _distinct_labels(series: pd.Series) -> List[str]:
    labels = series.astype(str).str.strip()
    return list(dict.fromkeys(label for label in labels if label))


def week_options(df: pd.DataFrame) -> List[str]:
    """Distinct week labels, newest first, behind the "all" sentinel."""
    if df is None or df.empty:
        return [ALL_WEEKS]
    return [ALL_WEEKS] + sorted(_distinct_labels(df["week"]), reverse=True)


def client_options(df: pd.DataFrame) -> List[str]:
    """Distinct client names, A-Z, behind the "all" sentinel."""
    if df is None or df.empty:
        return [ALL_CLIENTS]
    return [ALL_CLIENTS] + sorted(_distinct_labels(df["client"]))
