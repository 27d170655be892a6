import os
from dataclasses import dataclass
from typing import Optional

from supabase import create_client, Client

# Try to import streamlit if available (for st.secrets on Cloud)
try:
    import streamlit as st
except ImportError:
    st = None  # when running plain Python scripts


# ---------- Business thresholds ----------
CPL_ALERT_THRESHOLD = 100.0            # R$ per lead
SCHEDULED_RATE_ALERT_THRESHOLD = 30.0  # % of leads turned into scheduled meetings
TOP_N_CHART = 15
CURRENCY_SYMBOL = "R$"

DEFAULT_TABLE = "meta_ads"
DEFAULT_WEEK_COLUMN = "Semana"


@dataclass(frozen=True)
class DashboardSettings:
    table: str = DEFAULT_TABLE
    week_column: str = DEFAULT_WEEK_COLUMN


_supabase_client: Optional[Client] = None


def _read_setting(name: str) -> Optional[str]:
    """
    Look a setting up in st.secrets first (Streamlit Cloud),
    then in the environment (local .env).
    """
    if st is not None:
        try:
            if name in st.secrets:
                return st.secrets[name]
        except FileNotFoundError:
            # no secrets.toml locally
            pass
    return os.getenv(name)


def get_settings() -> DashboardSettings:
    return DashboardSettings(
        table=_read_setting("LEADSCALE_TABLE") or DEFAULT_TABLE,
        week_column=_read_setting("LEADSCALE_WEEK_COLUMN") or DEFAULT_WEEK_COLUMN,
    )


def get_supabase_client() -> Client:
    """
    Returns a singleton Supabase client.
    Works both:
    - locally (reads from .env)
    - on Streamlit Cloud (reads from st.secrets)
    """
    global _supabase_client
    if _supabase_client is not None:
        return _supabase_client

    url = _read_setting("SUPABASE_URL")
    key = _read_setting("SUPABASE_KEY")

    if not url or not key:
        raise RuntimeError("Supabase URL/KEY not found. Check .env or Streamlit secrets.")

    _supabase_client = create_client(url, key)
    return _supabase_client
