# ui/formatters.py
from leadscale_engine.config import CURRENCY_SYMBOL


def _to_float(value):
    if value is None or value == "—":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def format_brl(value, currency_symbol: str = CURRENCY_SYMBOL, none_placeholder: str = "—") -> str:
    """
    pt-BR money: 1234.5 -> "R$ 1.234,50".
    Returns the placeholder for None / non-numeric input.
    """
    num = _to_float(value)
    if num is None:
        return none_placeholder

    # "1,234.50" -> "1.234,50"
    us = f"{num:,.2f}"
    br = us.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{currency_symbol} {br}"


def format_pct(value, decimals: int = 1, none_placeholder: str = "—") -> str:
    num = _to_float(value)
    if num is None:
        return none_placeholder
    return f"{num:.{decimals}f}%"


def format_count(value, none_placeholder: str = "—") -> str:
    """Whole counts without decimals, fractional counts with pt-BR decimals."""
    num = _to_float(value)
    if num is None:
        return none_placeholder
    if float(num).is_integer():
        return f"{int(num):,}".replace(",", ".")
    return f"{num:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
