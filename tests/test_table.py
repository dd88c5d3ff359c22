from dataclasses import dataclass
from typing import Optional

from institute_admin.dashboard.table import (
    ASCENDING,
    DESCENDING,
    SortableTable,
    SortConfig,
    TableHeader,
    key_comparator_factory,
    next_sort_config,
    text_search_predicate,
)


@dataclass(frozen=True)
class Row:
    name: str
    city: str
    score: Optional[int] = None


ROWS = [
    Row('Priya', 'Pune', 70),
    Row('aditya', 'Delhi', 90),
    Row('Zoya', 'Pune', None),
    Row('Manav', 'Chennai', 55),
]

HEADERS = [
    TableHeader('name', 'Name', sortable=True),
    TableHeader('city', 'City'),
    TableHeader('score', 'Score', sortable=True),
]


def _table():
    return SortableTable(
        headers=HEADERS,
        search_predicate=text_search_predicate(lambda r: r.name, lambda r: r.city),
        comparator_factory=key_comparator_factory({
            'name': lambda r: r.name.lower(),
            'score': lambda r: r.score,
        }),
        item_name='student',
        item_name_plural='students',
    )


def _names(view):
    return [r.name for r in view.items]


def test_sort_state_machine():
    assert next_sort_config(None, 'name') == SortConfig('name', ASCENDING)
    assert next_sort_config(SortConfig('name', ASCENDING), 'name') == SortConfig('name', DESCENDING)
    assert next_sort_config(SortConfig('name', DESCENDING), 'name') == SortConfig('name', ASCENDING)
    assert next_sort_config(SortConfig('name', DESCENDING), 'score') == SortConfig('score', ASCENDING)


def test_repeated_activation_toggles_direction():
    table = _table()
    table.request_sort('name')
    assert _names(table.project(ROWS)) == ['aditya', 'Manav', 'Priya', 'Zoya']
    table.request_sort('name')
    assert _names(table.project(ROWS)) == ['Zoya', 'Priya', 'Manav', 'aditya']
    table.request_sort('name')
    assert table.sort_config == SortConfig('name', ASCENDING)


def test_switching_column_resets_to_ascending():
    table = _table()
    table.request_sort('name')
    table.request_sort('name')
    table.request_sort('score')
    assert table.sort_config == SortConfig('score', ASCENDING)


def test_non_sortable_column_is_ignored():
    table = _table()
    table.request_sort('name')
    assert table.request_sort('city') is False
    assert table.request_sort('unknown') is False
    assert table.sort_config == SortConfig('name', ASCENDING)


def test_unsorted_table_keeps_input_order():
    assert _names(_table().project(ROWS)) == ['Priya', 'aditya', 'Zoya', 'Manav']


def test_none_values_sort_last_in_both_directions():
    table = _table()
    table.request_sort('score')
    assert [r.score for r in table.project(ROWS).items] == [55, 70, 90, None]
    table.request_sort('score')
    assert [r.score for r in table.project(ROWS).items] == [90, 70, 55, None]


def test_search_is_case_insensitive_and_covers_all_fields():
    table = _table()
    table.set_search('PUNE')
    assert _names(table.project(ROWS)) == ['Priya', 'Zoya']
    table.set_search('adi')
    assert _names(table.project(ROWS)) == ['aditya']


def test_blank_query_matches_everything():
    table = _table()
    table.set_search('   ')
    assert len(table.project(ROWS).items) == len(ROWS)
    table.set_search(None)
    assert table.search_query == ''


def test_search_and_sort_compose():
    table = _table()
    table.set_search('pune')
    table.request_sort('name')
    table.request_sort('name')
    view = table.project(ROWS)
    assert _names(view) == ['Zoya', 'Priya']
    assert view.total_item_count == 4


def test_summary_and_empty_message():
    table = _table()
    table.set_search('zoya')
    view = table.project(ROWS)
    assert view.summary == 'Showing 1 of 4 student'

    table.set_search('nobody')
    view = table.project(ROWS)
    assert view.is_empty
    assert view.summary == 'Showing 0 of 4 students'
    assert view.empty_message == 'No students found.'


def test_sort_icons():
    table = _table()
    name, city, score = HEADERS
    assert table.sort_icon(name) == '↕'
    assert table.sort_icon(city) == ''
    table.request_sort('name')
    assert table.sort_icon(name) == '↑'
    assert table.sort_icon(score) == '↕'
    table.request_sort('name')
    assert table.sort_icon(name) == '↓'


def test_header_handlers_only_for_sortable_columns():
    table = _table()
    handlers = table.header_handlers()
    assert set(handlers) == {'name', 'score'}
    handlers['score']()
    assert table.sort_config == SortConfig('score', ASCENDING)


def test_unknown_comparator_leaves_order_unchanged():
    table = SortableTable(
        headers=[TableHeader('city', 'City', sortable=True)],
        search_predicate=text_search_predicate(lambda r: r.city),
        comparator_factory=key_comparator_factory({}),
    )
    table.request_sort('city')
    assert _names(table.project(ROWS)) == ['Priya', 'aditya', 'Zoya', 'Manav']
