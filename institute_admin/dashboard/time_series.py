# institute_admin/dashboard/time_series.py
"""
Monthly revenue / expense series.

Buckets are keyed by (year, month) of each record's own date and emitted in
chronological order of that pair. Labels such as "Jan 2025" are display-only
and never used for ordering.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from .constants import MONTH_ORDER
from .entity_filters import resolve_record_date
from .models import Expense, FeePayment

logger = logging.getLogger(__name__)

MONTHLY_COLUMNS = ['month', 'year', 'month_num', 'revenue', 'expenses']


@dataclass(frozen=True)
class MonthlyBucket:
    year: int
    month: int
    revenue: float = 0
    expenses: float = 0

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)


def month_label(year: int, month: int) -> str:
    return f"{MONTH_ORDER[month - 1]} {year}"


def total(values: pd.Series) -> float:
    """Column sum that keeps NaN (amounts are not validated)."""
    return values.sum(skipna=False)


def build_monthly_series(
    paid_payments: Iterable[FeePayment],
    expenses: Iterable[Expense],
    today,
) -> List[MonthlyBucket]:
    """
    Bucket payments (revenue) and expenses by calendar month.

    Callers pass already-filtered collections: only paid payments inside the
    selected period and the period's expenses. Dates resolve the same way the
    entity filters resolve them, so an undated record lands in today's month.
    """
    rows = (
        [(resolve_record_date(p.date, today), p.amount, 0.0) for p in paid_payments]
        + [(resolve_record_date(e.date, today), 0.0, e.amount) for e in expenses]
    )
    df = pd.DataFrame(rows, columns=['date', 'revenue', 'expenses'])
    if df.empty:
        return []

    df['date'] = pd.to_datetime(df['date'])
    monthly = df.groupby(
        [df['date'].dt.year.rename('year'), df['date'].dt.month.rename('month')],
        sort=True,
    ).agg(
        revenue=('revenue', total),
        expenses=('expenses', total),
    )
    logger.debug(f"Monthly series: {len(df)} records in {len(monthly)} months")

    return [
        MonthlyBucket(
            year=int(year), month=int(month),
            revenue=float(row.revenue), expenses=float(row.expenses),
        )
        for (year, month), row in monthly.iterrows()
    ]


def monthly_series_frame(buckets: List[MonthlyBucket]) -> pd.DataFrame:
    """Chart-ready DataFrame, one row per bucket in series order."""
    if not buckets:
        return pd.DataFrame(columns=MONTHLY_COLUMNS)

    return pd.DataFrame([
        {
            'month': b.label,
            'year': b.year,
            'month_num': b.month,
            'revenue': b.revenue,
            'expenses': b.expenses,
        }
        for b in buckets
    ], columns=MONTHLY_COLUMNS)
