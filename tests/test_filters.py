from leadscale_engine.logic.filters import (
    ALL_CLIENTS,
    ALL_WEEKS,
    FilterSelection,
    client_options,
    filter_records,
    week_options,
)
from leadscale_engine.logic.records import records_to_frame


def test_all_sentinels_return_full_snapshot_in_order(mixed_df):
    out = filter_records(mixed_df, FilterSelection(week=ALL_WEEKS, client=ALL_CLIENTS))
    assert out.equals(mixed_df)


def test_default_selection_is_all(mixed_df):
    assert filter_records(mixed_df).equals(mixed_df)


def test_filter_by_week_matches_trimmed_labels(mixed_df):
    out = filter_records(mixed_df, FilterSelection(week="2024-W02"))
    assert list(out["client"]) == ["Acme", "Beta"]


def test_filter_by_week_and_client(mixed_df):
    out = filter_records(mixed_df, FilterSelection(week="2024-W01", client="Beta"))
    assert len(out) == 1
    assert out["spend"].iloc[0] == 450.25


def test_filter_trims_untrimmed_source_labels():
    # frames built by hand may still carry padding
    df = records_to_frame([{"cliente": "Acme", "Semana": "W1"}])
    df.loc[0, "week"] = "  W1  "
    df.loc[0, "client"] = " Acme"
    out = filter_records(df, FilterSelection(week="W1", client="Acme"))
    assert len(out) == 1


def test_filter_unknown_week_is_empty(mixed_df):
    assert filter_records(mixed_df, FilterSelection(week="1999-W01")).empty


def test_filter_none_snapshot():
    assert filter_records(None).empty


def test_week_options_newest_first(mixed_df):
    assert week_options(mixed_df) == [ALL_WEEKS, "2024-W02", "2024-W01"]


def test_client_options_sorted_without_blanks(mixed_df):
    assert client_options(mixed_df) == [ALL_CLIENTS, "Acme", "Beta", "Gamma"]


def test_options_on_empty_snapshot():
    empty = records_to_frame([])
    assert week_options(empty) == [ALL_WEEKS]
    assert client_options(empty) == [ALL_CLIENTS]
