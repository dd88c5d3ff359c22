# institute_admin/dashboard/__init__.py
"""
Management Dashboard Module

Pure core (no Streamlit):
- period, entity_filters, metrics, time_series, payment_risk, table, list_views

Streamlit layer:
- filters (sidebar), charts, fragments, data_loader (session cache)

VERSION: 1.0.0
"""

# Core
from .models import (
    Student,
    StaffMember,
    Batch,
    Lead,
    FeePayment,
    Expense,
    InstituteData,
)
from .period import (
    Period,
    make_period,
    in_period,
    last_30_days,
    this_month,
    this_year,
    default_period,
    current_date,
    period_for_type,
)
from .metrics import MetricsSnapshot, aggregate
from .time_series import MonthlyBucket, build_monthly_series, monthly_series_frame
from .payment_risk import PaymentRiskLists, classify_pending, student_name_lookup
from .table import (
    ASCENDING,
    DESCENDING,
    TableHeader,
    SortConfig,
    TableState,
    TableView,
    SortableTable,
    next_sort_config,
    key_comparator_factory,
    text_search_predicate,
)
from .list_views import ListView, build_list_views
from .data_processor import DashboardProcessor, timing_frame
from .data_loader import (
    DashboardDataLoader,
    DataSourceError,
    load_institute_data,
    parse_institute_document,
)

# Streamlit layer
from .filters import DashboardFilters
from .charts import render_kpi_cards, build_monthly_finance_chart, empty_chart
from .fragments import overview_fragment, payment_risk_fragment, data_table_fragment

# Constants
from .constants import (
    PERIOD_TYPES,
    DEFAULT_PERIOD_TYPE,
    UPCOMING_HORIZON_DAYS,
    CACHE_KEY_FILTERS,
    CACHE_KEY_TIMING,
    DEBUG_TIMING,
)

__all__ = [
    # Models
    'Student', 'StaffMember', 'Batch', 'Lead', 'FeePayment', 'Expense', 'InstituteData',

    # Period
    'Period', 'make_period', 'in_period',
    'last_30_days', 'this_month', 'this_year', 'default_period', 'period_for_type', 'current_date',

    # Aggregation & classification
    'MetricsSnapshot', 'aggregate',
    'MonthlyBucket', 'build_monthly_series', 'monthly_series_frame',
    'PaymentRiskLists', 'classify_pending', 'student_name_lookup',
    'DashboardProcessor', 'timing_frame',

    # Table
    'ASCENDING', 'DESCENDING',
    'TableHeader', 'SortConfig', 'TableState', 'TableView', 'SortableTable',
    'next_sort_config', 'key_comparator_factory', 'text_search_predicate',
    'ListView', 'build_list_views',

    # Data
    'DashboardDataLoader', 'DataSourceError', 'load_institute_data', 'parse_institute_document',

    # Streamlit layer
    'DashboardFilters',
    'render_kpi_cards', 'build_monthly_finance_chart', 'empty_chart',
    'overview_fragment', 'payment_risk_fragment', 'data_table_fragment',

    # Constants
    'PERIOD_TYPES', 'DEFAULT_PERIOD_TYPE', 'UPCOMING_HORIZON_DAYS',
    'CACHE_KEY_FILTERS', 'CACHE_KEY_TIMING', 'DEBUG_TIMING',
]

__version__ = '1.0.0'
