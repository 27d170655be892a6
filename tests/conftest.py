import pytest

from leadscale_engine.logic.records import records_to_frame


@pytest.fixture
def acme_rows():
    return [
        {"cliente": "Acme", "gastoTotal": "1.000,00", "leadsTotal": 10,
         "reuniao agendada": 5, "reuniao realizada": 2, "Semana": "W1"},
        {"cliente": "Acme", "gastoTotal": "500,00", "leadsTotal": 5,
         "reuniao agendada": 1, "reuniao realizada": 1, "Semana": "W2"},
    ]


@pytest.fixture
def mixed_rows():
    return [
        {"cliente": " Acme ", "gastoTotal": "R$ 1.200,00", "leadsTotal": 10,
         "reuniao agendada": 2, "reuniao realizada": 1, "Semana": "2024-W02 "},
        {"cliente": "Beta", "gastoTotal": 300, "leadsTotal": "12",
         "reuniao agendada": 6, "reuniao realizada": 3, "Semana": "2024-W02"},
        {"cliente": "Gamma", "gastoTotal": "80,50", "leadsTotal": 0,
         "reuniao agendada": 0, "reuniao realizada": 0, "Semana": "2024-W01"},
        {"cliente": "Beta", "gastoTotal": "450,25", "leadsTotal": 9,
         "reuniao agendada": 3, "reuniao realizada": None, "Semana": "2024-W01"},
        {"cliente": "   ", "gastoTotal": 999, "leadsTotal": 1,
         "reuniao agendada": 1, "reuniao realizada": 1, "Semana": "2024-W01"},
    ]


@pytest.fixture
def mixed_df(mixed_rows):
    return records_to_frame(mixed_rows)
