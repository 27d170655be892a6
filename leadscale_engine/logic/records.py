# leadscale_engine/logic/records.py
"""
Ingestion boundary for campaign rows.

Supabase returns one loosely-typed dict per client per week, with column
names such as "gastoTotal" or "reuniao agendada" and money either as
numbers or as pt-BR text ("R$ 1.234,56"). Everything downstream works on
a DataFrame with these canonical columns only:

    client, week, spend, leads, scheduled, held
"""
from __future__ import annotations

import math
import numbers
import re
import unicodedata
from typing import Any, Dict, Iterable, List, Set

import pandas as pd


TEXT_COLUMNS = ["client", "week"]
METRIC_COLUMNS = ["spend", "leads", "scheduled", "held"]
CANONICAL_COLUMNS = TEXT_COLUMNS + METRIC_COLUMNS

# Source column names (after _key()) -> canonical column.
# Only the table's own columns; anything else is dropped.
FIELD_ALIASES: Dict[str, str] = {
    "cliente": "client",
    "semana": "week",
    "gastototal": "spend",
    "leadstotal": "leads",
    "reuniao agendada": "scheduled",
    "reuniao realizada": "held",
}

# Known upstream columns we recompute instead of trusting
DERIVED_SOURCE_FIELDS: Set[str] = {
    "cpltotal",
    "%ra",
    "%rr",
    "custo por reuniao agendada",
    "custo por reuniao realizada",
    "id",
    "created_at",
}

_CURRENCY_RE = re.compile(r"R\$|[$€£]|\s")


def _key(name: Any) -> str:
    """Lowercase, accent-free, single-spaced version of a column name."""
    text = unicodedata.normalize("NFKD", str(name))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return " ".join(text.lower().split())


def parse_value(raw: Any) -> float:
    """
    Turn a money/count field into a number. Never raises.

    - numbers are returned unchanged (NaN/inf become 0)
    - None -> 0
    - text: drop currency symbol and whitespace, drop "." thousands
      separators, "," becomes the decimal point; unparseable -> 0
    - anything else -> 0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, numbers.Real):
        if not math.isfinite(raw):
            return 0.0
        return raw

    if isinstance(raw, str):
        text = _CURRENCY_RE.sub("", raw)
        text = text.replace(".", "").replace(",", ".")
        if not text:
            return 0.0
        try:
            num = float(text)
        except ValueError:
            return 0.0
        return num if math.isfinite(num) else 0.0

    return 0.0


def _clean_text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def normalize_record(row: Dict[str, Any], dropped: Set[str] | None = None) -> Dict[str, Any]:
    """
    Map one raw row onto the canonical fields.

    Unknown columns are left out; their names are added to `dropped`
    when a set is passed in.
    """
    out: Dict[str, Any] = {"client": "", "week": "", "spend": 0.0, "leads": 0.0, "scheduled": 0.0, "held": 0.0}
    mapped: Set[str] = set()

    for name, value in (row or {}).items():
        key = _key(name)
        field = FIELD_ALIASES.get(key)
        if field is None:
            if dropped is not None and key not in DERIVED_SOURCE_FIELDS:
                dropped.add(str(name))
            continue
        if field in mapped:
            # same column spelled twice (case/accents): first one wins
            if dropped is not None:
                dropped.add(str(name))
            continue
        mapped.add(field)

        if field in TEXT_COLUMNS:
            out[field] = _clean_text(value)
        else:
            out[field] = float(parse_value(value))

    return out


def records_to_frame(rows: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """
    Build the read-only snapshot used by every view. Row order is kept.
    """
    dropped: Set[str] = set()
    records: List[Dict[str, Any]] = [normalize_record(r, dropped) for r in (rows or [])]

    if dropped:
        print(f"[DEBUG] records_to_frame -> ignored columns: {sorted(dropped)}")

    df = pd.DataFrame(records, columns=CANONICAL_COLUMNS)
    for c in METRIC_COLUMNS:
        df[c] = pd.to_numeric(df[c], errors="coerce").fillna(0.0).astype(float)
    for c in TEXT_COLUMNS:
        df[c] = df[c].fillna("").astype(str)
    return df
