from datetime import date, datetime, timezone, timedelta

import pandas as pd
import pytest

from institute_admin.dashboard.constants import (
    PERIOD_CUSTOM,
    PERIOD_LAST_30_DAYS,
    PERIOD_THIS_MONTH,
    PERIOD_THIS_YEAR,
)
from institute_admin.dashboard.period import (
    current_date,
    in_period,
    last_30_days,
    make_period,
    period_for_type,
    this_month,
    this_year,
    to_datetime,
)

NOW = datetime(2024, 6, 10, 15, 45)


def test_make_period_clamps_to_full_days():
    period = make_period(date(2024, 1, 1), date(2024, 12, 31))
    assert period.start == datetime(2024, 1, 1, 0, 0, 0, 0)
    assert period.end == datetime(2024, 12, 31, 23, 59, 59, 999000)


def test_make_period_accepts_datetimes_and_strings():
    period = make_period(datetime(2024, 3, 5, 18, 30), "2024-03-07T08:00:00")
    assert period.start == datetime(2024, 3, 5)
    assert period.end == datetime(2024, 3, 7, 23, 59, 59, 999000)


def test_inverted_period_is_empty_and_matches_nothing():
    period = make_period(date(2024, 5, 1), date(2024, 4, 1))
    assert period.is_empty
    assert not in_period(date(2024, 4, 15), period)
    assert not in_period(date(2024, 5, 1), period)


def test_make_period_rejects_unreadable_boundary():
    with pytest.raises(ValueError):
        make_period("not a date", date(2024, 1, 1))


def test_in_period_boundaries_are_inclusive():
    period = make_period(date(2024, 1, 1), date(2024, 1, 31))
    assert in_period(date(2024, 1, 1), period)
    assert in_period(datetime(2024, 1, 31, 23, 59, 59), period)
    assert not in_period(date(2024, 2, 1), period)
    assert not in_period(datetime(2023, 12, 31, 23, 59, 59), period)
    assert not in_period(None, period)


def test_aware_datetime_keeps_its_own_wall_clock():
    aware = datetime(2024, 1, 31, 23, 30, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert to_datetime(aware) == datetime(2024, 1, 31, 23, 30)
    assert in_period(aware, make_period(date(2024, 1, 1), date(2024, 1, 31)))


def test_to_datetime_handles_unparseable_values():
    assert to_datetime("") is None
    assert to_datetime("31/01/2024") is None
    assert to_datetime(12345) is None
    assert to_datetime("2024-01-31") == datetime(2024, 1, 31)


def test_last_30_days():
    period = last_30_days(NOW)
    assert period.start == datetime(2024, 5, 11)
    assert period.end_date == date(2024, 6, 10)


def test_this_month():
    period = this_month(NOW)
    assert period.start == datetime(2024, 6, 1)
    assert period.end_date == date(2024, 6, 10)


def test_this_year():
    period = this_year(date(2024, 6, 10))
    assert period.start == datetime(2024, 1, 1)
    assert period.end_date == date(2024, 6, 10)


def test_quick_ranges_are_deterministic_for_same_now():
    assert last_30_days(NOW) == last_30_days(NOW)
    assert this_month(NOW) == this_month(NOW.date())


def test_period_for_type():
    assert period_for_type(PERIOD_THIS_YEAR, NOW) == this_year(NOW)
    assert period_for_type(PERIOD_THIS_MONTH, NOW) == this_month(NOW)
    assert period_for_type(PERIOD_LAST_30_DAYS, NOW) == last_30_days(NOW)

    custom = period_for_type(PERIOD_CUSTOM, NOW, start=date(2023, 2, 1), end=date(2023, 2, 28))
    assert custom == make_period(date(2023, 2, 1), date(2023, 2, 28))


def test_period_for_unknown_type_falls_back_to_this_year():
    assert period_for_type('Fortnight', NOW) == this_year(NOW)


def test_period_label():
    period = make_period(date(2024, 1, 1), date(2024, 12, 31))
    assert period.label == "01 Jan 2024 → 31 Dec 2024"


def test_current_date_with_unknown_timezone_uses_local_clock():
    assert current_date('Not/AZone') == date.today()
    assert current_date(None) == date.today()


def test_in_period_uses_today_for_missing_dates():
    period = make_period(date(2024, 6, 1), date(2024, 6, 30))
    assert in_period(None, period, today=date(2024, 6, 10))
    assert in_period('garbage', period, today=NOW)
    assert not in_period(None, period, today=date(2024, 7, 1))
    assert period.contains(None, today=date(2024, 6, 10))


def test_to_datetime_treats_nat_as_missing():
    assert to_datetime(pd.NaT) is None
