# institute_admin/dashboard/constants.py
"""
Constants for the Management Dashboard Module

VERSION: 1.0.0
"""

# =============================================================================
# PERIOD DEFINITIONS
# =============================================================================
PERIOD_THIS_YEAR = 'This Year'
PERIOD_THIS_MONTH = 'This Month'
PERIOD_LAST_30_DAYS = 'Last 30 Days'
PERIOD_CUSTOM = 'Custom'

PERIOD_TYPES = [PERIOD_THIS_YEAR, PERIOD_THIS_MONTH, PERIOD_LAST_30_DAYS, PERIOD_CUSTOM]
DEFAULT_PERIOD_TYPE = PERIOD_THIS_YEAR

LAST_N_DAYS = 30

# =============================================================================
# PAYMENT RISK
# =============================================================================
STATUS_PAID = 'Paid'
STATUS_PENDING = 'Pending'

UPCOMING_HORIZON_DAYS = 30
UNKNOWN_STUDENT = 'Unknown'

# =============================================================================
# CACHE SETTINGS
# =============================================================================
CACHE_TTL_SECONDS = 300

# =============================================================================
# SESSION STATE KEYS (prefixed _dash_ to avoid collision with list pages)
# =============================================================================
CACHE_KEY_DATA = '_dash_data_cache'
CACHE_KEY_FILTERS = '_dash_applied_filters'
CACHE_KEY_TIMING = '_dash_timing_data'
TABLE_STATE_PREFIX = '_table_state_'

# =============================================================================
# COLOR SCHEME
# =============================================================================
COLORS = {
    "revenue": "#0000FF",
    "expenses": "#dc3545",
    "overdue": "#dc3545",
    "upcoming": "#ffc107",
    "text_dark": "#333333",
    "text_light": "#666666",
    "grid": "#e0e0e0",
}

MONTH_ORDER = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]

# =============================================================================
# CHART DIMENSIONS
# =============================================================================
CHART_WIDTH = 'container'
CHART_HEIGHT = 300

# =============================================================================
# DEBUG SETTINGS
# Use environment variable to enable: DASHBOARD_DEBUG_TIMING=true
# =============================================================================
import os as _os
DEBUG_TIMING = _os.getenv('DASHBOARD_DEBUG_TIMING', 'false').lower() == 'true'

# =============================================================================
# METRIC DISPLAY
# =============================================================================
CURRENCY_SYMBOL = "₹"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
