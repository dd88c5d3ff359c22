# institute_admin/dashboard/formatters.py
"""Display formatting for currency and dates."""

from datetime import date, datetime
from typing import Optional

import pandas as pd

from ..config import config
from .constants import CURRENCY_SYMBOL, DISPLAY_DATE_FORMAT


def currency_symbol() -> str:
    """Configured CURRENCY_SYMBOL (.env or Streamlit secrets), '₹' by default."""
    return config.get_app_setting("CURRENCY_SYMBOL") or CURRENCY_SYMBOL


def format_currency(value, symbol: Optional[str] = None) -> str:
    """'₹12,500' / '₹1,234.5'. Up to 3 decimals, trailing zeros dropped."""
    if symbol is None:
        symbol = currency_symbol()
    if value is None or pd.isna(value):
        return f"{symbol}0"
    text = f"{value:,.3f}".rstrip('0').rstrip('.')
    return f"{symbol}{text}"


def format_date_for_display(value) -> str:
    """dd/mm/yyyy, or 'N/A' when no date is recorded."""
    if value is None or value == '':
        return 'N/A'
    if isinstance(value, (date, datetime)):
        return value.strftime(DISPLAY_DATE_FORMAT)
    text = str(value)
    parts = text.split('T')[0].split('-')
    if len(parts) != 3:
        return text
    year, month, day = parts
    return f"{day}/{month}/{year}"


def format_count(value) -> str:
    return f"{value:,}"
