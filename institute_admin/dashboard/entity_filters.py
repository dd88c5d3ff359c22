# institute_admin/dashboard/entity_filters.py
"""
Per-entity period filters.

Each filter keeps the records whose relevant date falls inside the Period,
preserving input order. A record with no recorded date is treated as dated
today (start of day), so it is counted whenever the Period covers today.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, TypeVar

from .models import Batch, Expense, FeePayment, Lead, StaffMember, Student
from .period import Period, in_period, start_of_day, to_datetime

logger = logging.getLogger(__name__)

T = TypeVar('T')


def resolve_record_date(value, today) -> Optional[datetime]:
    """Record date as datetime, or start of `today` when the date is absent."""
    dt = to_datetime(value)
    if dt is None:
        return start_of_day(today)
    return dt


def record_in_period(value, period: Period, today) -> bool:
    return in_period(value, period, today)


def _filter_by_date(
    records: Iterable[T],
    date_of: Callable[[T], object],
    period: Period,
    today,
) -> List[T]:
    return [r for r in records if record_in_period(date_of(r), period, today)]


def filter_students(students: Iterable[Student], period: Period, today) -> List[Student]:
    return _filter_by_date(students, lambda s: s.admission_date, period, today)


def filter_staff(staff: Iterable[StaffMember], period: Period, today) -> List[StaffMember]:
    return _filter_by_date(staff, lambda s: s.joining_date, period, today)


def filter_batches(batches: Iterable[Batch], period: Period, today) -> List[Batch]:
    return _filter_by_date(batches, lambda b: b.start_date, period, today)


def filter_leads(leads: Iterable[Lead], period: Period, today) -> List[Lead]:
    return _filter_by_date(leads, lambda l: l.enquiry_date, period, today)


def filter_paid_payments(
    fee_payments: Iterable[FeePayment], period: Period, today
) -> List[FeePayment]:
    """Paid fee payments dated inside the Period. Pending ones never count."""
    paid = (p for p in fee_payments if p.is_paid)
    return _filter_by_date(paid, lambda p: p.date, period, today)


def filter_expenses(expenses: Iterable[Expense], period: Period, today) -> List[Expense]:
    return _filter_by_date(expenses, lambda e: e.date, period, today)
