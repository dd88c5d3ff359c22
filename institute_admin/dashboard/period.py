# institute_admin/dashboard/period.py
"""
Reporting Period for the Management Dashboard

A Period is an inclusive calendar-date interval. Both boundaries are widened
to full days: start at 00:00:00.000, end at 23:59:59.999.

A Period whose start falls after its end is valid and simply matches nothing.

Every constructor that depends on the current date takes it as `now`, so
results are deterministic for a given clock reading.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd

from .constants import (
    PERIOD_THIS_YEAR,
    PERIOD_THIS_MONTH,
    PERIOD_LAST_30_DAYS,
    PERIOD_CUSTOM,
    LAST_N_DAYS,
)

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


# =============================================================================
# DATE COERCION
# =============================================================================

def to_datetime(value) -> Optional[datetime]:
    """
    Coerce a date-like value to a naive datetime.

    Accepts date, datetime or ISO-8601 string. Aware datetimes keep their own
    wall-clock components (tzinfo is dropped, never converted).
    Returns None for None, empty or unparseable values.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) if value.tzinfo else value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            return to_datetime(datetime.fromisoformat(text))
        except ValueError:
            logger.debug(f"Unparseable date value: {value!r}")
            return None
    return None


def start_of_day(value) -> Optional[datetime]:
    dt = to_datetime(value)
    if dt is None:
        return None
    return datetime.combine(dt.date(), time.min)


def end_of_day(value) -> Optional[datetime]:
    dt = to_datetime(value)
    if dt is None:
        return None
    return datetime.combine(dt.date(), END_OF_DAY)


def _as_date(value) -> date:
    dt = to_datetime(value)
    if dt is None:
        raise ValueError(f"Invalid date value: {value!r}")
    return dt.date()


# =============================================================================
# PERIOD
# =============================================================================

@dataclass(frozen=True)
class Period:
    start: datetime
    end: datetime

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def label(self) -> str:
        return f"{self.start.strftime('%d %b %Y')} → {self.end.strftime('%d %b %Y')}"

    def contains(self, value, today=None) -> bool:
        return in_period(value, self, today)


def make_period(start_date, end_date) -> Period:
    """
    Build a Period from two date-like boundaries.

    No validation of ordering: start after end yields an empty Period.

    Raises:
        ValueError: if a boundary cannot be read as a date.
    """
    return Period(
        start=datetime.combine(_as_date(start_date), time.min),
        end=datetime.combine(_as_date(end_date), END_OF_DAY),
    )


def in_period(value, period: Period, today=None) -> bool:
    """
    True when the date-like value falls inside the inclusive Period.

    A missing or unreadable date counts as the start of `today` when given,
    otherwise it matches nothing.
    """
    dt = to_datetime(value)
    if dt is None and today is not None:
        dt = start_of_day(today)
    if dt is None:
        return False
    return period.start <= dt <= period.end


# =============================================================================
# QUICK-SELECT RANGES
# =============================================================================

def last_30_days(now) -> Period:
    today = _as_date(now)
    return make_period(today - timedelta(days=LAST_N_DAYS), today)


def this_month(now) -> Period:
    today = _as_date(now)
    return make_period(date(today.year, today.month, 1), today)


def this_year(now) -> Period:
    today = _as_date(now)
    return make_period(date(today.year, 1, 1), today)


def default_period(now) -> Period:
    return this_year(now)


def period_for_type(period_type: str, now, start=None, end=None) -> Period:
    """
    Resolve a sidebar period type to a Period.

    Custom uses the given start/end, falling back to the This Year bounds for
    whichever boundary is missing.
    """
    if period_type == PERIOD_THIS_MONTH:
        return this_month(now)
    if period_type == PERIOD_LAST_30_DAYS:
        return last_30_days(now)
    if period_type == PERIOD_CUSTOM:
        year_period = this_year(now)
        return make_period(
            start if start is not None else year_period.start,
            end if end is not None else year_period.end,
        )
    if period_type != PERIOD_THIS_YEAR:
        logger.warning(f"Unknown period type {period_type!r}, using {PERIOD_THIS_YEAR}")
    return this_year(now)


def current_date(timezone_name: Optional[str] = None) -> date:
    """Today's date in the given IANA timezone (local clock when unset or unknown)."""
    if timezone_name:
        try:
            return datetime.now(ZoneInfo(timezone_name)).date()
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {timezone_name!r}, using local clock")
    return date.today()
