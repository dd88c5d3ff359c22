import json
import math
from datetime import datetime
from pathlib import Path

import pytest

from institute_admin.dashboard import data_loader
from institute_admin.dashboard.constants import CACHE_KEY_DATA
from institute_admin.dashboard.data_loader import (
    DashboardDataLoader,
    DataSourceError,
    load_institute_data,
    parse_institute_document,
)

SAMPLE_FILE = Path(__file__).parent.parent / 'data' / 'sample_institute.json'

DOCUMENT = {
    'students': [
        {'id': 1, 'name': 'Meera', 'admission_date': '2024-03-15', 'course_ids': ['C1', 'C2']},
        {'id': 2, 'name': 'Arjun', 'admission_date': None, 'course_ids': 'C2, C3'},
        {'id': 3, 'name': 'Kiran', 'admission_date': 'next week'},
    ],
    'fee_payments': [
        {'id': 'P1', 'student_id': 1, 'amount': 5000, 'date': '2024-03-15', 'status': 'Paid'},
        {'id': 'P2', 'student_id': 2, 'amount': 'n/a', 'date': '2024-04-01'},
    ],
    'expenses': [
        {'id': 'E1', 'amount': 2000, 'date': '2024-03-20T09:15:00', 'category': 'Rent'},
    ],
}


def test_parse_document_builds_typed_records():
    data = parse_institute_document(DOCUMENT)

    meera, arjun, kiran = data.students
    assert meera.id == '1'
    assert meera.admission_date == datetime(2024, 3, 15)
    assert meera.course_ids == ('C1', 'C2')
    assert arjun.admission_date is None
    assert arjun.course_ids == ('C2', 'C3')
    assert kiran.admission_date is None
    assert kiran.course_ids == ()

    assert data.expenses[0].date == datetime(2024, 3, 20, 9, 15)
    assert data.expenses[0].category == 'Rent'
    assert data.staff == ()


def test_parse_document_coerces_amounts_and_default_status():
    data = parse_institute_document(DOCUMENT)
    paid, pending = data.fee_payments
    assert paid.amount == 5000
    assert paid.is_paid
    assert paid.student_id == '1'
    assert math.isnan(pending.amount)
    assert pending.is_pending


def test_missing_required_column_raises():
    with pytest.raises(DataSourceError):
        parse_institute_document({'expenses': [{'id': 'E1', 'date': '2024-01-01'}]})


def test_non_object_document_raises():
    with pytest.raises(DataSourceError):
        parse_institute_document([1, 2, 3])
    with pytest.raises(DataSourceError):
        parse_institute_document({'students': {'id': 1}})


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(DataSourceError):
        load_institute_data(tmp_path / 'absent.json')


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"students": [', encoding='utf-8')
    with pytest.raises(DataSourceError):
        load_institute_data(path)


def test_load_file_sets_loaded_at(tmp_path):
    path = tmp_path / 'institute.json'
    path.write_text(json.dumps(DOCUMENT), encoding='utf-8')
    data = load_institute_data(path)
    assert data.loaded_at is not None
    assert data.counts()['students'] == 3


def test_sample_file_loads():
    data = load_institute_data(SAMPLE_FILE)
    assert data.counts() == {
        'students': 7,
        'staff': 3,
        'batches': 4,
        'leads': 4,
        'fee_payments': 10,
        'expenses': 5,
    }
    assert not data.is_empty()


def test_loader_caches_in_session_state(tmp_path, monkeypatch):
    session_state = {}
    monkeypatch.setattr(data_loader.st, 'session_state', session_state)

    path = tmp_path / 'institute.json'
    path.write_text(json.dumps(DOCUMENT), encoding='utf-8')
    loader = DashboardDataLoader(path, ttl_seconds=300)

    first = loader.get_data()
    assert session_state[CACHE_KEY_DATA]['data'] is first

    path.write_text(json.dumps({'students': []}), encoding='utf-8')
    assert loader.get_data() is first
    assert loader.get_data(force_reload=True).students == ()

    DashboardDataLoader.clear_cache()
    assert CACHE_KEY_DATA not in session_state
