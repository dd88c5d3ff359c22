# institute_admin/dashboard/payment_risk.py
"""
Payment Risk Classification

Splits Pending fee payments into overdue and upcoming lists relative to the
current date. Runs over the full payment collection and ignores the period
selected on the dashboard.

Boundaries (start_of_today = today at 00:00):
  - overdue:   date <  start_of_today
  - upcoming:  start_of_today <= date <= start_of_today + horizon_days
  - anything later belongs to neither list

Both lists are sorted ascending by date; equal dates keep input order.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Dict, Iterable, List

import pandas as pd

from .constants import STATUS_PENDING, UNKNOWN_STUDENT, UPCOMING_HORIZON_DAYS
from .entity_filters import resolve_record_date
from .metrics import sum_amounts
from .models import FeePayment, Student
from .period import start_of_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentRiskLists:
    overdue: List[FeePayment] = field(default_factory=list)
    upcoming: List[FeePayment] = field(default_factory=list)

    @property
    def overdue_total(self) -> float:
        return sum_amounts(self.overdue)

    @property
    def upcoming_total(self) -> float:
        return sum_amounts(self.upcoming)

    @property
    def has_risk(self) -> bool:
        return bool(self.overdue)


def classify_pending(
    fee_payments: Iterable[FeePayment],
    today,
    horizon_days: int = UPCOMING_HORIZON_DAYS,
) -> PaymentRiskLists:
    """
    Classify Pending payments into overdue and upcoming.

    Args:
        fee_payments: Full payment collection (any status)
        today: Current date or datetime
        horizon_days: Upcoming window length in days, inclusive

    Returns:
        PaymentRiskLists
    """
    today_start = start_of_day(today)
    if today_start is None:
        raise ValueError(f"Invalid current date: {today!r}")
    horizon_end = today_start + timedelta(days=horizon_days)

    # Undated pending payments are treated as due today
    df = pd.DataFrame(
        [(p, p.status, resolve_record_date(p.date, today_start)) for p in fee_payments],
        columns=['payment', 'status', 'due'],
    )
    df['due'] = pd.to_datetime(df['due'])

    pending = df[df['status'] == STATUS_PENDING].sort_values('due', kind='stable')
    overdue_mask = pending['due'] < today_start
    upcoming_mask = (pending['due'] >= today_start) & (pending['due'] <= horizon_end)

    result = PaymentRiskLists(
        overdue=pending.loc[overdue_mask, 'payment'].tolist(),
        upcoming=pending.loc[upcoming_mask, 'payment'].tolist(),
    )
    logger.debug(
        f"Payment risk as of {today_start.date()}: "
        f"{len(result.overdue)} overdue, {len(result.upcoming)} upcoming"
    )
    return result


def student_name_lookup(students: Iterable[Student]) -> Callable[[str], str]:
    """Resolver from student id to display name ('Unknown' when missing)."""
    names: Dict[str, str] = {s.id: s.name for s in students}

    def _lookup(student_id: str) -> str:
        return names.get(student_id) or UNKNOWN_STUDENT

    return _lookup
