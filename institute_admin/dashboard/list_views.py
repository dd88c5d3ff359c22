# institute_admin/dashboard/list_views.py
"""
List screen definitions for the generic table.

Each ListView only supplies what is specific to its entity: headers, search
fields, sort accessors and a display row. Sorting and searching themselves
live in table.SortableTable.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from .formatters import format_currency, format_date_for_display
from .models import InstituteData
from .payment_risk import student_name_lookup
from .period import to_datetime
from .table import (
    ComparatorFactory,
    SearchPredicate,
    SortableTable,
    TableHeader,
    TableState,
    key_comparator_factory,
    text_search_predicate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListView:
    key: str
    title: str
    item_name: str
    item_name_plural: str
    headers: Sequence[TableHeader]
    search_predicate: SearchPredicate
    comparator_factory: ComparatorFactory
    row_formatter: Callable[[object], Dict]
    items: Sequence

    def make_table(self, state: TableState = None) -> SortableTable:
        return SortableTable(
            headers=self.headers,
            search_predicate=self.search_predicate,
            comparator_factory=self.comparator_factory,
            item_name=self.item_name,
            item_name_plural=self.item_name_plural,
            state=state,
        )

    def rows(self, items) -> List[Dict]:
        return [self.row_formatter(item) for item in items]


def _lower(value):
    return value.lower() if isinstance(value, str) else value


# =============================================================================
# PER-ENTITY VIEWS
# =============================================================================

def _students_view(data: InstituteData) -> ListView:
    return ListView(
        key='students',
        title='👨‍🎓 Students',
        item_name='student',
        item_name_plural='students',
        headers=[
            TableHeader('name', 'Name', sortable=True),
            TableHeader('email', 'Email', sortable=True),
            TableHeader('phone', 'Phone'),
            TableHeader('courses', 'Courses'),
            TableHeader('admission_date', 'Admission Date', sortable=True),
        ],
        search_predicate=text_search_predicate(
            lambda s: s.name, lambda s: s.email, lambda s: s.phone,
        ),
        comparator_factory=key_comparator_factory({
            'name': lambda s: _lower(s.name),
            'email': lambda s: _lower(s.email),
            'admission_date': lambda s: to_datetime(s.admission_date),
        }),
        row_formatter=lambda s: {
            'Name': s.name,
            'Email': s.email,
            'Phone': s.phone,
            'Courses': ', '.join(s.course_ids),
            'Admission Date': format_date_for_display(s.admission_date),
        },
        items=data.students,
    )


def _staff_view(data: InstituteData) -> ListView:
    return ListView(
        key='staff',
        title='👩‍🏫 Staff',
        item_name='staff member',
        item_name_plural='staff members',
        headers=[
            TableHeader('name', 'Name', sortable=True),
            TableHeader('role', 'Role', sortable=True),
            TableHeader('joining_date', 'Joining Date', sortable=True),
        ],
        search_predicate=text_search_predicate(lambda s: s.name, lambda s: s.role),
        comparator_factory=key_comparator_factory({
            'name': lambda s: _lower(s.name),
            'role': lambda s: _lower(s.role),
            'joining_date': lambda s: to_datetime(s.joining_date),
        }),
        row_formatter=lambda s: {
            'Name': s.name,
            'Role': s.role,
            'Joining Date': format_date_for_display(s.joining_date),
        },
        items=data.staff,
    )


def _batches_view(data: InstituteData) -> ListView:
    return ListView(
        key='batches',
        title='🗓️ Batches',
        item_name='batch',
        item_name_plural='batches',
        headers=[
            TableHeader('name', 'Batch', sortable=True),
            TableHeader('course_id', 'Course', sortable=True),
            TableHeader('start_date', 'Start Date', sortable=True),
        ],
        search_predicate=text_search_predicate(lambda b: b.name, lambda b: b.course_id),
        comparator_factory=key_comparator_factory({
            'name': lambda b: _lower(b.name),
            'course_id': lambda b: _lower(b.course_id),
            'start_date': lambda b: to_datetime(b.start_date),
        }),
        row_formatter=lambda b: {
            'Batch': b.name,
            'Course': b.course_id,
            'Start Date': format_date_for_display(b.start_date),
        },
        items=data.batches,
    )


def _leads_view(data: InstituteData) -> ListView:
    return ListView(
        key='leads',
        title='📥 Leads',
        item_name='lead',
        item_name_plural='leads',
        headers=[
            TableHeader('name', 'Name', sortable=True),
            TableHeader('phone', 'Phone'),
            TableHeader('source', 'Source', sortable=True),
            TableHeader('status', 'Status', sortable=True),
            TableHeader('enquiry_date', 'Enquiry Date', sortable=True),
        ],
        search_predicate=text_search_predicate(
            lambda l: l.name, lambda l: l.phone, lambda l: l.source,
        ),
        comparator_factory=key_comparator_factory({
            'name': lambda l: _lower(l.name),
            'source': lambda l: _lower(l.source),
            'status': lambda l: _lower(l.status),
            'enquiry_date': lambda l: to_datetime(l.enquiry_date),
        }),
        row_formatter=lambda l: {
            'Name': l.name,
            'Phone': l.phone,
            'Source': l.source,
            'Status': l.status,
            'Enquiry Date': format_date_for_display(l.enquiry_date),
        },
        items=data.leads,
    )


def _fee_payments_view(data: InstituteData) -> ListView:
    student_name = student_name_lookup(data.students)
    return ListView(
        key='fee_payments',
        title='💰 Fee Payments',
        item_name='payment',
        item_name_plural='payments',
        headers=[
            TableHeader('student', 'Student', sortable=True),
            TableHeader('amount', 'Amount', sortable=True),
            TableHeader('date', 'Date', sortable=True),
            TableHeader('status', 'Status', sortable=True),
        ],
        search_predicate=text_search_predicate(
            lambda p: student_name(p.student_id), lambda p: p.status,
        ),
        comparator_factory=key_comparator_factory({
            'student': lambda p: student_name(p.student_id).lower(),
            'amount': lambda p: p.amount,
            'date': lambda p: to_datetime(p.date),
            'status': lambda p: p.status,
        }),
        row_formatter=lambda p: {
            'Student': student_name(p.student_id),
            'Amount': format_currency(p.amount),
            'Date': format_date_for_display(p.date),
            'Status': p.status,
        },
        items=data.fee_payments,
    )


def _expenses_view(data: InstituteData) -> ListView:
    return ListView(
        key='expenses',
        title='🧾 Expenses',
        item_name='expense',
        item_name_plural='expenses',
        headers=[
            TableHeader('category', 'Category', sortable=True),
            TableHeader('description', 'Description'),
            TableHeader('amount', 'Amount', sortable=True),
            TableHeader('date', 'Date', sortable=True),
        ],
        search_predicate=text_search_predicate(
            lambda e: e.category, lambda e: e.description,
        ),
        comparator_factory=key_comparator_factory({
            'category': lambda e: _lower(e.category),
            'amount': lambda e: e.amount,
            'date': lambda e: to_datetime(e.date),
        }),
        row_formatter=lambda e: {
            'Category': e.category,
            'Description': e.description,
            'Amount': format_currency(e.amount),
            'Date': format_date_for_display(e.date),
        },
        items=data.expenses,
    )


def build_list_views(data: InstituteData) -> Dict[str, ListView]:
    """All list screens keyed by ListView.key, in tab order."""
    views = [
        _students_view(data),
        _staff_view(data),
        _batches_view(data),
        _leads_view(data),
        _fee_payments_view(data),
        _expenses_view(data),
    ]
    return {v.key: v for v in views}
