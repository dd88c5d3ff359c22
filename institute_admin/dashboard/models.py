# institute_admin/dashboard/models.py
"""
Entity records consumed by the dashboard.

All records are read-only inputs owned by the data source. Date fields may be
a date, a datetime, an ISO-8601 string or None (not recorded).
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple, Union

from .constants import STATUS_PAID, STATUS_PENDING

DateLike = Union[date, datetime, str, None]


@dataclass(frozen=True)
class Student:
    id: str
    admission_date: DateLike = None
    course_ids: Tuple[str, ...] = ()
    name: str = ''
    email: str = ''
    phone: str = ''


@dataclass(frozen=True)
class StaffMember:
    id: str
    joining_date: DateLike = None
    name: str = ''
    role: str = ''


@dataclass(frozen=True)
class Batch:
    id: str
    start_date: DateLike = None
    name: str = ''
    course_id: str = ''


@dataclass(frozen=True)
class Lead:
    id: str
    enquiry_date: DateLike = None
    name: str = ''
    phone: str = ''
    source: str = ''
    status: str = ''


@dataclass(frozen=True)
class FeePayment:
    id: str
    student_id: str
    amount: float
    date: DateLike = None
    status: str = STATUS_PENDING

    @property
    def is_paid(self) -> bool:
        return self.status == STATUS_PAID

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING


@dataclass(frozen=True)
class Expense:
    id: str
    amount: float
    date: DateLike = None
    category: str = ''
    description: str = ''


@dataclass(frozen=True)
class InstituteData:
    """All entity collections supplied to the dashboard in one bundle."""
    students: Tuple[Student, ...] = ()
    staff: Tuple[StaffMember, ...] = ()
    batches: Tuple[Batch, ...] = ()
    leads: Tuple[Lead, ...] = ()
    fee_payments: Tuple[FeePayment, ...] = ()
    expenses: Tuple[Expense, ...] = ()
    loaded_at: Optional[datetime] = None

    def is_empty(self) -> bool:
        return not any([
            self.students, self.staff, self.batches,
            self.leads, self.fee_payments, self.expenses,
        ])

    def counts(self) -> dict:
        return {
            'students': len(self.students),
            'staff': len(self.staff),
            'batches': len(self.batches),
            'leads': len(self.leads),
            'fee_payments': len(self.fee_payments),
            'expenses': len(self.expenses),
        }
