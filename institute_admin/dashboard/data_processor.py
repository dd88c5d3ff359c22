# institute_admin/dashboard/data_processor.py
"""
Data Processor for the Management Dashboard

VERSION: 1.0.0
- "Load Once, Filter Many": data is loaded once, every period change only
  re-runs the in-memory filters below
- Payment risk uses the full payment collection, never the period subset
"""

import logging
import time
from typing import Dict

import pandas as pd

from .constants import DEBUG_TIMING, UPCOMING_HORIZON_DAYS
from .entity_filters import (
    filter_batches,
    filter_expenses,
    filter_leads,
    filter_paid_payments,
    filter_staff,
    filter_students,
)
from .metrics import snapshot_from_filtered
from .models import InstituteData
from .payment_risk import classify_pending
from .period import Period
from .time_series import build_monthly_series

logger = logging.getLogger(__name__)


class DashboardProcessor:
    """
    Build the dashboard view-model for a Period.

    Usage:
        processor = DashboardProcessor(data)
        result = processor.process(period, today)
    """

    def __init__(self, data: InstituteData, horizon_days: int = UPCOMING_HORIZON_DAYS):
        self.data = data
        self.horizon_days = horizon_days

    def process(self, period: Period, today) -> Dict:
        """
        Returns:
            Dict containing:
            - metrics: MetricsSnapshot
            - monthly_series: List[MonthlyBucket]
            - payment_risk: PaymentRiskLists
            - new_admissions, new_hires, new_batches, new_leads,
              paid_payments, period_expenses: filtered collections
        """
        start_time = time.perf_counter()
        data = self.data

        if period.is_empty:
            logger.info(f"Empty period {period.label}: all period metrics will be zero")

        # =====================================================================
        # 1. PERIOD FILTERS
        # =====================================================================
        step = time.perf_counter()
        result = {
            'new_admissions': filter_students(data.students, period, today),
            'new_hires': filter_staff(data.staff, period, today),
            'new_batches': filter_batches(data.batches, period, today),
            'new_leads': filter_leads(data.leads, period, today),
            'paid_payments': filter_paid_payments(data.fee_payments, period, today),
            'period_expenses': filter_expenses(data.expenses, period, today),
        }
        self._log_step('filter_entities', step)

        # =====================================================================
        # 2. METRICS + MONTHLY SERIES
        # =====================================================================
        step = time.perf_counter()
        result['metrics'] = snapshot_from_filtered(
            new_admissions=result['new_admissions'],
            new_hires=result['new_hires'],
            new_batches=result['new_batches'],
            new_leads=result['new_leads'],
            paid_payments=result['paid_payments'],
            period_expenses=result['period_expenses'],
        )
        result['monthly_series'] = build_monthly_series(
            result['paid_payments'], result['period_expenses'], today
        )
        self._log_step('metrics', step)

        # =====================================================================
        # 3. PAYMENT RISK (independent of period)
        # =====================================================================
        step = time.perf_counter()
        result['payment_risk'] = classify_pending(
            data.fee_payments, today, horizon_days=self.horizon_days
        )
        self._log_step('payment_risk', step)

        elapsed = time.perf_counter() - start_time
        logger.debug(f"Dashboard processed for {period.label} in {elapsed:.3f}s")
        if DEBUG_TIMING:
            print(f"✅ PROCESSING COMPLETE: {elapsed:.3f}s")

        return result

    @staticmethod
    def _log_step(name: str, started: float):
        elapsed = time.perf_counter() - started
        logger.debug(f"[{name}] {elapsed:.3f}s")
        if DEBUG_TIMING:
            print(f"   📊 [{name}] {elapsed:.3f}s")


def timing_frame(timing_data) -> pd.DataFrame:
    """Step timings ({'name', 'time'} dicts) as a frame, slowest first, with share of total."""
    df = pd.DataFrame(list(timing_data), columns=['name', 'time'])
    total_time = df['time'].sum()
    df['share'] = df['time'] / total_time if total_time > 0 else 0.0
    return df.sort_values('time', ascending=False, kind='stable').reset_index(drop=True)
