from datetime import date, datetime

from institute_admin.dashboard.models import FeePayment, Student
from institute_admin.dashboard.payment_risk import classify_pending, student_name_lookup

TODAY = date(2024, 6, 10)


def _pending(pid, when, amount=1000):
    return FeePayment(pid, 's1', amount, date=when, status='Pending')


def test_example_scenario():
    payments = [
        _pending('past', '2024-06-01'),
        _pending('today', '2024-06-10'),
        _pending('soon', '2024-06-25'),
        _pending('far', '2024-08-01'),
    ]
    risk = classify_pending(payments, TODAY)
    assert [p.id for p in risk.overdue] == ['past']
    assert [p.id for p in risk.upcoming] == ['today', 'soon']


def test_thirty_day_boundary():
    risk = classify_pending([
        _pending('d30', '2024-07-10'),
        _pending('d31', '2024-07-11'),
    ], TODAY)
    assert [p.id for p in risk.upcoming] == ['d30']
    assert risk.overdue == []


def test_due_today_with_time_is_upcoming_even_if_now_is_later():
    now = datetime(2024, 6, 10, 18, 0)
    risk = classify_pending([_pending('p1', datetime(2024, 6, 10, 9, 0))], now)
    assert [p.id for p in risk.upcoming] == ['p1']
    assert risk.overdue == []


def test_paid_payments_are_ignored():
    paid = FeePayment('paid', 's1', 500, date='2024-06-01', status='Paid')
    risk = classify_pending([paid], TODAY)
    assert risk.overdue == [] and risk.upcoming == []


def test_lists_sorted_ascending_with_stable_ties():
    payments = [
        _pending('b', '2024-05-20'),
        _pending('a', '2024-04-01'),
        _pending('c1', '2024-06-20'),
        _pending('c0', '2024-06-12'),
        _pending('c2', '2024-06-20'),
    ]
    risk = classify_pending(payments, TODAY)
    assert [p.id for p in risk.overdue] == ['a', 'b']
    assert [p.id for p in risk.upcoming] == ['c0', 'c1', 'c2']


def test_no_payment_in_both_lists():
    payments = [_pending(f'p{i}', f'2024-06-{i:02d}') for i in range(1, 31)]
    risk = classify_pending(payments, TODAY)
    overdue_ids = {p.id for p in risk.overdue}
    upcoming_ids = {p.id for p in risk.upcoming}
    assert not overdue_ids & upcoming_ids
    assert len(overdue_ids) + len(upcoming_ids) == 30


def test_totals_and_custom_horizon():
    payments = [_pending('p1', '2024-06-01', 300), _pending('p2', '2024-06-15', 200)]
    risk = classify_pending(payments, TODAY, horizon_days=3)
    assert risk.overdue_total == 300
    assert risk.upcoming == []
    assert risk.upcoming_total == 0
    assert risk.has_risk


def test_student_name_lookup_falls_back_to_unknown():
    lookup = student_name_lookup([Student('s1', name='Diya')])
    assert lookup('s1') == 'Diya'
    assert lookup('missing') == 'Unknown'


def test_undated_pending_payment_is_due_today():
    risk = classify_pending([_pending('nodate', None), _pending('past', '2024-06-01')], TODAY)
    assert [p.id for p in risk.upcoming] == ['nodate']
    assert [p.id for p in risk.overdue] == ['past']


def test_empty_collection_gives_empty_lists():
    risk = classify_pending([], TODAY)
    assert risk.overdue == [] and risk.upcoming == []
    assert not risk.has_risk
