from typing import List, Dict, Any

from postgrest.exceptions import APIError

from .config import get_settings, get_supabase_client
from .logic.load_state import FetchFailed, FetchSucceeded
from .logic.records import records_to_frame


def fetch_campaign_rows(client=None, settings=None) -> List[Dict[str, Any]]:
    """
    Return every row of the campaign table, newest week first.

    No filtering is pushed to Supabase: the dashboard filters after the
    full read. Errors from the client are raised to the caller.
    """
    sb = client if client is not None else get_supabase_client()
    settings = settings or get_settings()

    response = (
        sb.table(settings.table)
        .select("*")
        .order(settings.week_column, desc=True)
        .execute()
    )
    # response.data is a list of dicts
    rows = response.data or []

    print(f"[DEBUG] fetch_campaign_rows -> {len(rows)} rows from {settings.table}")
    if rows:
        print(f"[DEBUG] fetch_campaign_rows -> sample keys: {sorted(rows[0].keys())}")
    return rows


def fetch_snapshot_event(get_client=get_supabase_client, settings=None):
    """
    Run the session fetch and turn the outcome into a load-state event:
    FetchSucceeded(snapshot) or FetchFailed(message).

    This is the only place fetch errors are caught.
    """
    try:
        rows = fetch_campaign_rows(client=get_client(), settings=settings)
    except APIError as e:
        print(f"[ERROR] fetch_snapshot_event -> Supabase API error: {e}")
        return FetchFailed(f"Erro: {e.message or e}")
    except RuntimeError as e:
        # missing credentials
        print(f"[ERROR] fetch_snapshot_event -> {e}")
        return FetchFailed(str(e))
    except Exception as e:
        print(f"[ERROR] fetch_snapshot_event -> request failed: {e}")
        return FetchFailed(str(e) or "Erro ao carregar dados")

    return FetchSucceeded(records_to_frame(rows))
