# institute_admin/dashboard/metrics.py
"""
Metrics Aggregator for the Management Dashboard

Combines the period-filtered entity sets into the scalar counts and sums shown
on the KPI cards.

Amounts are summed as given: negative or NaN values are not validated here and
flow straight into the totals. Validation belongs to the data source.

VERSION: 1.0.0
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List

import pandas as pd

from .entity_filters import (
    filter_batches,
    filter_expenses,
    filter_leads,
    filter_paid_payments,
    filter_staff,
    filter_students,
)
from .models import Batch, Expense, FeePayment, Lead, StaffMember, Student
from .period import Period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricsSnapshot:
    new_admissions_count: int = 0
    new_hires_count: int = 0
    active_courses_count: int = 0
    new_batches_count: int = 0
    new_leads_count: int = 0
    revenue: float = 0
    expenses: float = 0

    @property
    def net(self) -> float:
        return self.revenue - self.expenses

    def to_dict(self) -> Dict:
        result = asdict(self)
        result['net'] = self.net
        return result


def active_course_ids(students: Iterable[Student]) -> set:
    """Distinct course ids referenced by the given students."""
    course_ids = pd.Series([s.course_ids for s in students], dtype=object).explode()
    return set(course_ids.dropna())


def sum_amounts(records) -> float:
    amounts = pd.Series([r.amount for r in records], dtype=float)
    return float(amounts.sum(skipna=False))


def aggregate(
    period: Period,
    students: Iterable[Student],
    staff: Iterable[StaffMember],
    batches: Iterable[Batch],
    leads: Iterable[Lead],
    fee_payments: Iterable[FeePayment],
    expenses: Iterable[Expense],
    today,
) -> MetricsSnapshot:
    """
    Calculate the dashboard metrics for a Period.

    Args:
        period: Inclusive reporting period
        students, staff, batches, leads, fee_payments, expenses: Full collections
        today: Current date, used for records with no recorded date

    Returns:
        MetricsSnapshot (all zeros for empty collections or an empty Period)
    """
    new_admissions = filter_students(students, period, today)
    paid_payments = filter_paid_payments(fee_payments, period, today)
    period_expenses = filter_expenses(expenses, period, today)

    return snapshot_from_filtered(
        new_admissions=new_admissions,
        new_hires=filter_staff(staff, period, today),
        new_batches=filter_batches(batches, period, today),
        new_leads=filter_leads(leads, period, today),
        paid_payments=paid_payments,
        period_expenses=period_expenses,
    )


def snapshot_from_filtered(
    new_admissions: List[Student],
    new_hires: List[StaffMember],
    new_batches: List[Batch],
    new_leads: List[Lead],
    paid_payments: List[FeePayment],
    period_expenses: List[Expense],
) -> MetricsSnapshot:
    """Build the snapshot from collections that are already period-filtered."""
    return MetricsSnapshot(
        new_admissions_count=len(new_admissions),
        new_hires_count=len(new_hires),
        active_courses_count=len(active_course_ids(new_admissions)),
        new_batches_count=len(new_batches),
        new_leads_count=len(new_leads),
        revenue=sum_amounts(paid_payments),
        expenses=sum_amounts(period_expenses),
    )
