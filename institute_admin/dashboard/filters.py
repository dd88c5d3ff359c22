# institute_admin/dashboard/filters.py
"""
Sidebar Period Filter for the Management Dashboard

VERSION: 1.0.0
- @st.fragment for sidebar: widget changes don't trigger full page rerun
- "Apply Filters" commits values to session state and reruns the page
- Custom range with start after end is allowed (dashboard shows empty period)
"""

import logging
from datetime import date
from typing import Dict, Optional, Tuple

import streamlit as st

from .constants import (
    CACHE_KEY_FILTERS,
    DEFAULT_PERIOD_TYPE,
    PERIOD_CUSTOM,
    PERIOD_TYPES,
)
from .period import Period, make_period, period_for_type, this_year

logger = logging.getLogger(__name__)


# =============================================================================
# SIDEBAR FRAGMENT
# =============================================================================

@st.fragment
def _sidebar_filter_fragment(today: date, default_period_type: str):
    """
    Fragment for sidebar filters.

    NOTE: Must be called inside `with st.sidebar:` context manager.
    """
    st.header("🎓 Dashboard")
    st.subheader("📅 Period")

    default_index = (
        PERIOD_TYPES.index(default_period_type)
        if default_period_type in PERIOD_TYPES else 0
    )
    period_type = st.selectbox(
        "Period Type",
        options=PERIOD_TYPES,
        index=default_index,
        key='dash_period_type'
    )

    if period_type == PERIOD_CUSTOM:
        year_period = this_year(today)
        col1, col2 = st.columns(2)
        with col1:
            start_date = st.date_input(
                "From", value=year_period.start_date, key='dash_custom_start'
            )
        with col2:
            end_date = st.date_input(
                "To", value=today, key='dash_custom_end'
            )
        period = period_for_type(period_type, today, start=start_date, end=end_date)
    else:
        period = period_for_type(period_type, today)

    st.caption(f"📅 {period.label}")
    if period.is_empty:
        st.warning("⚠️ Start date is after end date. No records will match.")

    submitted = st.button(
        "🔄 Apply Filters", type="primary",
        use_container_width=True, key='dash_apply_btn'
    )

    filter_values = {
        'period_type': period_type,
        'start_date': period.start_date,
        'end_date': period.end_date,
        'submitted': submitted,
    }

    # Auto-apply on first load (no applied filters exist yet)
    if CACHE_KEY_FILTERS not in st.session_state:
        st.session_state[CACHE_KEY_FILTERS] = filter_values

    if submitted:
        logger.info(f"Applying dashboard period: {period_type} {period.label}")
        st.session_state[CACHE_KEY_FILTERS] = filter_values
        st.rerun(scope="app")


# =============================================================================
# MAIN FILTER CLASS
# =============================================================================

class DashboardFilters:
    """Render and manage the sidebar period filter."""

    def __init__(self, default_period_type: str = DEFAULT_PERIOD_TYPE):
        self.default_period_type = default_period_type

    def render_sidebar_filters(self, today: date) -> Optional[Dict]:
        """
        Render sidebar filters as a fragment.

        Returns:
            Applied filter values from session state (or None if not yet applied).
        """
        with st.sidebar:
            _sidebar_filter_fragment(today, self.default_period_type)
        return st.session_state.get(CACHE_KEY_FILTERS)

    @staticmethod
    def to_period(filter_values: Dict) -> Period:
        return make_period(filter_values['start_date'], filter_values['end_date'])

    @staticmethod
    def validate_filters(filter_values: Dict) -> Tuple[bool, Optional[str]]:
        """
        Validate filter selections.

        An inverted range is valid (empty period) but reported as a warning.
        """
        if not filter_values:
            return False, "No filters applied"
        start = filter_values.get('start_date')
        end = filter_values.get('end_date')
        if start is None or end is None:
            return False, "Missing start or end date"
        if start > end:
            return True, "Start date is after end date, showing an empty period"
        return True, None

    @staticmethod
    def get_filter_summary(filters: Dict) -> str:
        """Generate human-readable filter summary."""
        period_type = filters.get('period_type', DEFAULT_PERIOD_TYPE)
        start = filters['start_date'].strftime('%d %b %Y')
        end = filters['end_date'].strftime('%d %b %Y')
        return f"{period_type} | {start} → {end}"
