# institute_admin/dashboard/data_loader.py
"""
Data Loader for the Management Dashboard

Reads every entity collection from one JSON document and converts the rows to
the typed records in models.py.

Document layout:
    {
      "students":     [{"id": ..., "admission_date": "2024-03-15", "course_ids": [...], ...}],
      "staff":        [{"id": ..., "joining_date": ...}],
      "batches":      [{"id": ..., "start_date": ...}],
      "leads":        [{"id": ..., "enquiry_date": ...}],
      "fee_payments": [{"id": ..., "student_id": ..., "amount": ..., "date": ..., "status": "Paid"}],
      "expenses":     [{"id": ..., "amount": ..., "date": ...}]
    }

Principles:
1. Load the whole document in one go
2. Cache in session_state for duration of session (TTL-based)
3. All period filtering happens later, in memory

VERSION: 1.0.0
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from .constants import CACHE_KEY_DATA, CACHE_TTL_SECONDS, DEBUG_TIMING, STATUS_PENDING
from .models import Batch, Expense, FeePayment, InstituteData, Lead, StaffMember, Student
from .period import to_datetime

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """Raised when the institute data file cannot be read or is malformed."""


# Per collection: required columns, date columns
COLLECTION_SCHEMAS = {
    'students': (['id'], ['admission_date']),
    'staff': (['id'], ['joining_date']),
    'batches': (['id'], ['start_date']),
    'leads': (['id'], ['enquiry_date']),
    'fee_payments': (['id', 'student_id', 'amount'], ['date']),
    'expenses': (['id', 'amount'], ['date']),
}


# =============================================================================
# PARSING
# =============================================================================

def _prepare_frame(name: str, records: List[Dict]) -> pd.DataFrame:
    """Validate columns and coerce dates / amounts for one collection."""
    if not isinstance(records, list):
        raise DataSourceError(f"'{name}' must be a list of records")

    df = pd.DataFrame(records)
    if df.empty:
        return df

    required, date_cols = COLLECTION_SCHEMAS[name]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataSourceError(f"'{name}' records missing columns: {missing}")

    df['id'] = df['id'].astype(str)

    for col in date_cols:
        if col in df.columns:
            # Unparseable dates become NaT (treated as not recorded)
            df[col] = df[col].map(to_datetime)

    if 'amount' in df.columns:
        df['amount'] = pd.to_numeric(df['amount'], errors='coerce')

    return df


def _date(row, col: str) -> Optional[datetime]:
    value = row.get(col)
    if value is None or pd.isna(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    return value


def _text(row, col: str) -> str:
    value = row.get(col)
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ''
    return str(value)


def _course_ids(value) -> tuple:
    if isinstance(value, (list, tuple)):
        return tuple(str(c) for c in value)
    if isinstance(value, str) and value:
        return tuple(c.strip() for c in value.split(',') if c.strip())
    return ()


def _records(df: pd.DataFrame) -> List[Dict]:
    return [] if df.empty else df.to_dict(orient='records')


def parse_institute_document(document: Dict, loaded_at: Optional[datetime] = None) -> InstituteData:
    """
    Convert a parsed JSON document into InstituteData.

    Missing collections are treated as empty.

    Raises:
        DataSourceError: document is not an object, or a collection is malformed
    """
    if not isinstance(document, dict):
        raise DataSourceError("Institute data must be a JSON object")

    frames = {
        name: _prepare_frame(name, document.get(name) or [])
        for name in COLLECTION_SCHEMAS
    }

    students = tuple(
        Student(
            id=r['id'],
            admission_date=_date(r, 'admission_date'),
            course_ids=_course_ids(r.get('course_ids')),
            name=_text(r, 'name'),
            email=_text(r, 'email'),
            phone=_text(r, 'phone'),
        )
        for r in _records(frames['students'])
    )
    staff = tuple(
        StaffMember(
            id=r['id'],
            joining_date=_date(r, 'joining_date'),
            name=_text(r, 'name'),
            role=_text(r, 'role'),
        )
        for r in _records(frames['staff'])
    )
    batches = tuple(
        Batch(
            id=r['id'],
            start_date=_date(r, 'start_date'),
            name=_text(r, 'name'),
            course_id=_text(r, 'course_id'),
        )
        for r in _records(frames['batches'])
    )
    leads = tuple(
        Lead(
            id=r['id'],
            enquiry_date=_date(r, 'enquiry_date'),
            name=_text(r, 'name'),
            phone=_text(r, 'phone'),
            source=_text(r, 'source'),
            status=_text(r, 'status'),
        )
        for r in _records(frames['leads'])
    )
    fee_payments = tuple(
        FeePayment(
            id=r['id'],
            student_id=_text(r, 'student_id'),
            amount=r['amount'],
            date=_date(r, 'date'),
            status=_text(r, 'status') or STATUS_PENDING,
        )
        for r in _records(frames['fee_payments'])
    )
    expenses = tuple(
        Expense(
            id=r['id'],
            amount=r['amount'],
            date=_date(r, 'date'),
            category=_text(r, 'category'),
            description=_text(r, 'description'),
        )
        for r in _records(frames['expenses'])
    )

    return InstituteData(
        students=students,
        staff=staff,
        batches=batches,
        leads=leads,
        fee_payments=fee_payments,
        expenses=expenses,
        loaded_at=loaded_at,
    )


def load_institute_data(path: Path) -> InstituteData:
    """
    Read and parse the institute data file.

    Raises:
        DataSourceError: file missing, unreadable or not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"Data file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise DataSourceError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise DataSourceError(f"Could not read {path}: {e}") from e

    data = parse_institute_document(document, loaded_at=datetime.now())
    logger.info(f"Loaded institute data from {path}: {data.counts()}")
    return data


# =============================================================================
# SESSION-CACHED LOADER
# =============================================================================

class DashboardDataLoader:
    """
    Load and cache institute data in session_state.

    Usage:
        loader = DashboardDataLoader(config.data_file)
        data = loader.get_data()
    """

    def __init__(self, data_file: Path, ttl_seconds: int = CACHE_TTL_SECONDS):
        self.data_file = Path(data_file)
        self.ttl_seconds = ttl_seconds

    def get_data(self, force_reload: bool = False) -> InstituteData:
        needs_reload, reason = self._needs_reload()

        if not force_reload and not needs_reload:
            if DEBUG_TIMING:
                print("♻️ Using cached institute data")
            return st.session_state[CACHE_KEY_DATA]['data']

        if reason:
            logger.info(f"Reloading institute data: {reason}")

        data = load_institute_data(self.data_file)
        st.session_state[CACHE_KEY_DATA] = {
            'data': data,
            '_loaded_at': datetime.now(),
            '_source': str(self.data_file),
        }
        return data

    def _needs_reload(self) -> tuple:
        cache = st.session_state.get(CACHE_KEY_DATA)

        if cache is None:
            return True, "No cached data"

        if cache.get('_source') != str(self.data_file):
            return True, "Data file changed"

        loaded_at = cache.get('_loaded_at')
        if loaded_at:
            elapsed = (datetime.now() - loaded_at).total_seconds()
            if elapsed > self.ttl_seconds:
                return True, f"TTL expired ({elapsed:.0f}s)"

        return False, None

    @staticmethod
    def clear_cache():
        st.session_state.pop(CACHE_KEY_DATA, None)
