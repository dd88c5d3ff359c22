# institute_admin/dashboard/charts.py
"""
Charts and KPI cards for the Management Dashboard.

Charts:
- render_kpi_cards: 7 metric tiles (counts + revenue / expenses)
- build_monthly_finance_chart: Revenue vs Expenses grouped bars per month
"""

import logging

import altair as alt
import pandas as pd
import streamlit as st

from .constants import CHART_HEIGHT, CHART_WIDTH, COLORS
from .formatters import format_count, format_currency
from .metrics import MetricsSnapshot

logger = logging.getLogger(__name__)


def empty_chart(message: str = "No data available") -> alt.Chart:
    """Return an empty chart with a message."""
    return alt.Chart(pd.DataFrame({'text': [message]})).mark_text(
        fontSize=14, color='#999999'
    ).encode(
        text='text:N'
    ).properties(width='container', height=100)


# =============================================================================
# KPI CARDS
# =============================================================================

def render_kpi_cards(metrics: MetricsSnapshot):
    """Render the period KPI tiles using Streamlit metrics."""
    with st.container(border=True):
        st.markdown("**👥 PEOPLE & COURSES**")

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric(
                label="New Admissions",
                value=format_count(metrics.new_admissions_count),
                help="Students admitted in the period"
            )
        with col2:
            st.metric(
                label="New Hires",
                value=format_count(metrics.new_hires_count),
                help="Staff who joined in the period"
            )
        with col3:
            st.metric(
                label="Active Courses",
                value=format_count(metrics.active_courses_count),
                help="Distinct courses taken by students admitted in the period"
            )
        with col4:
            st.metric(
                label="New Batches",
                value=format_count(metrics.new_batches_count),
                help="Batches starting in the period"
            )

    with st.container(border=True):
        st.markdown("**💰 FINANCE & ENQUIRIES**")

        col5, col6, col7 = st.columns(3)
        with col5:
            st.metric(
                label="New Leads",
                value=format_count(metrics.new_leads_count),
                help="Enquiries received in the period"
            )
        with col6:
            st.metric(
                label="Total Revenue",
                value=format_currency(metrics.revenue),
                help="Σ amount of Paid fee payments dated in the period"
            )
        with col7:
            st.metric(
                label="Total Expenses",
                value=format_currency(metrics.expenses),
                help="Σ amount of expenses dated in the period"
            )


# =============================================================================
# MONTHLY FINANCE CHART
# =============================================================================

def build_monthly_finance_chart(monthly_df: pd.DataFrame) -> alt.Chart:
    """
    Grouped Revenue / Expenses bars per month.

    monthly_df rows must already be in chronological order
    (time_series.monthly_series_frame); the x axis keeps that order.
    """
    if monthly_df.empty:
        return empty_chart("No revenue or expenses in this period")

    month_order = monthly_df['month'].tolist()

    bar_df = monthly_df.melt(
        id_vars=['month'],
        value_vars=['revenue', 'expenses'],
        var_name='metric',
        value_name='value',
    )
    bar_df['metric'] = bar_df['metric'].map({'revenue': 'Revenue', 'expenses': 'Expenses'})

    color_scale = alt.Scale(
        domain=['Revenue', 'Expenses'],
        range=[COLORS['revenue'], COLORS['expenses']]
    )

    bars = alt.Chart(bar_df).mark_bar(
        cornerRadiusTopLeft=4, cornerRadiusTopRight=4
    ).encode(
        x=alt.X('month:N', sort=month_order, title='Month', axis=alt.Axis(labelAngle=0)),
        y=alt.Y('value:Q', title='Amount', axis=alt.Axis(format='~s')),
        color=alt.Color('metric:N', scale=color_scale, legend=alt.Legend(title=None, orient='bottom')),
        xOffset='metric:N',
        tooltip=[
            alt.Tooltip('month:N', title='Month'),
            alt.Tooltip('metric:N', title='Metric'),
            alt.Tooltip('value:Q', title='Amount', format=',.0f'),
        ]
    )

    return bars.properties(width=CHART_WIDTH, height=CHART_HEIGHT)
