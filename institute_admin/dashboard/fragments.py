# institute_admin/dashboard/fragments.py
"""
Streamlit Fragments for the Management Dashboard.

Contains:
- overview_fragment: KPI cards + monthly finance chart
- payment_risk_fragment: Overdue / Upcoming payment cards
- data_table_fragment: generic searchable / sortable list (any ListView)

VERSION: 1.0.0
"""

import logging
from typing import Callable, Dict, List

import pandas as pd
import streamlit as st

from .charts import build_monthly_finance_chart, render_kpi_cards
from .constants import TABLE_STATE_PREFIX, UPCOMING_HORIZON_DAYS
from .formatters import format_currency, format_date_for_display
from .list_views import ListView
from .models import FeePayment
from .payment_risk import PaymentRiskLists
from .table import SortableTable, TableState
from .time_series import monthly_series_frame

logger = logging.getLogger(__name__)


# =============================================================================
# OVERVIEW
# =============================================================================

def overview_fragment(result: Dict):
    """KPI cards and the Financial Overview chart for the applied period."""
    render_kpi_cards(result['metrics'])

    with st.container(border=True):
        st.subheader("📊 Financial Overview for Period")
        monthly_df = monthly_series_frame(result['monthly_series'])
        st.altair_chart(build_monthly_finance_chart(monthly_df), use_container_width=True)


# =============================================================================
# PAYMENT RISK
# =============================================================================

def _render_payment_list(
    payments: List[FeePayment],
    student_name: Callable[[str], str],
    color: str,
):
    for payment in payments:
        col_name, col_amount = st.columns([3, 1])
        with col_name:
            st.markdown(f"**{student_name(payment.student_id)}**")
            st.caption(f"Due: {format_date_for_display(payment.date)}")
        with col_amount:
            st.markdown(f":{color}[**{format_currency(payment.amount)}**]")


def payment_risk_fragment(
    payment_risk: PaymentRiskLists,
    student_name: Callable[[str], str],
    horizon_days: int = UPCOMING_HORIZON_DAYS,
):
    """Overdue and Upcoming payment cards (independent of selected period)."""
    col_overdue, col_upcoming = st.columns(2)

    with col_overdue:
        with st.container(border=True):
            overdue = payment_risk.overdue
            badge = f" :red-background[{len(overdue)}]" if overdue else ""
            st.markdown(f"#### 🔴 Overdue Payments{badge}")
            if overdue:
                st.caption(f"Total overdue: {format_currency(payment_risk.overdue_total)}")
                _render_payment_list(overdue, student_name, 'red')
            else:
                st.info("No overdue payments. Well done!")

    with col_upcoming:
        with st.container(border=True):
            upcoming = payment_risk.upcoming
            badge = f" :orange-background[{len(upcoming)}]" if upcoming else ""
            st.markdown(f"#### 🟡 Upcoming Payments (Next {horizon_days} Days){badge}")
            if upcoming:
                st.caption(f"Total due: {format_currency(payment_risk.upcoming_total)}")
                _render_payment_list(upcoming, student_name, 'blue')
            else:
                st.info(f"No payments due in the next {horizon_days} days.")


# =============================================================================
# GENERIC DATA TABLE
# =============================================================================

def _get_table_state(state_key: str) -> TableState:
    if state_key not in st.session_state:
        st.session_state[state_key] = TableState()
    return st.session_state[state_key]


@st.fragment
def data_table_fragment(list_view: ListView, key_prefix: str = "records"):
    """
    Searchable, sortable table for any ListView.

    Sort/search state lives in session_state per table, so it survives reruns.
    Clicking a sortable header toggles ascending / descending.
    """
    fragment_key = f"{key_prefix}_{list_view.key}"
    state = _get_table_state(f"{TABLE_STATE_PREFIX}{fragment_key}")
    table: SortableTable = list_view.make_table(state)

    # =========================================================================
    # SEARCH
    # =========================================================================
    search_key = f"{fragment_key}_search"
    search_value = st.text_input(
        "Search",
        value=state.search_query,
        key=search_key,
        placeholder=f"Search {list_view.item_name_plural}...",
        label_visibility="collapsed",
    )
    table.set_search(search_value)

    view = table.project(list_view.items)
    st.caption(f"**{view.summary}**")

    # =========================================================================
    # HEADERS (click to sort)
    # =========================================================================
    handlers = table.header_handlers()
    header_cols = st.columns(len(table.headers))
    for col, header in zip(header_cols, table.headers):
        with col:
            if header.sortable:
                st.button(
                    f"{header.label} {table.sort_icon(header)}",
                    key=f"{fragment_key}_sort_{header.key}",
                    on_click=handlers[header.key],
                    use_container_width=True,
                )
            else:
                st.markdown(f"**{header.label}**")

    # =========================================================================
    # ROWS
    # =========================================================================
    if view.is_empty:
        st.info(view.empty_message)
        return

    rows_df = pd.DataFrame(list_view.rows(view.items))
    st.dataframe(
        rows_df,
        width="stretch",
        hide_index=True,
    )
