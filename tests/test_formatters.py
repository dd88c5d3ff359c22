from datetime import date, datetime

from institute_admin.config import config
from institute_admin.dashboard.formatters import (
    format_count,
    format_currency,
    format_date_for_display,
)


def test_format_currency():
    assert format_currency(5000) == '₹5,000'
    assert format_currency(1234.5) == '₹1,234.5'
    assert format_currency(0) == '₹0'
    assert format_currency(None) == '₹0'
    assert format_currency(float('nan')) == '₹0'
    assert format_currency(-250) == '₹-250'
    assert format_currency(10, symbol='$') == '$10'


def test_format_date_for_display():
    assert format_date_for_display('2024-03-15') == '15/03/2024'
    assert format_date_for_display('2024-03-15T10:30:00') == '15/03/2024'
    assert format_date_for_display(date(2024, 3, 15)) == '15/03/2024'
    assert format_date_for_display(datetime(2024, 3, 15, 8)) == '15/03/2024'
    assert format_date_for_display(None) == 'N/A'
    assert format_date_for_display('') == 'N/A'
    assert format_date_for_display('soon') == 'soon'


def test_format_count():
    assert format_count(12500) == '12,500'


def test_currency_symbol_comes_from_config(monkeypatch):
    monkeypatch.setitem(config._app_config, 'CURRENCY_SYMBOL', '$')
    assert format_currency(1500) == '$1,500'
    assert format_currency(None) == '$0'
    assert format_currency(1500, symbol='€') == '€1,500'
