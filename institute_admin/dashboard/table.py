# institute_admin/dashboard/table.py
"""
Generic sortable / searchable table.

One implementation shared by every list screen. A screen supplies:
  - headers (key, label, sortable flag)
  - a search predicate: (item, query) -> bool
  - a comparator factory: (column key, direction) -> comparator(a, b) -> int

Sort state machine (per table):
  Unsorted / sorted by another column --activate C--> ascending by C
  ascending by C                     --activate C--> descending by C
  descending by C                    --activate C--> ascending by C
Once a column is activated the table never returns to Unsorted.
Non-sortable and unknown columns are ignored.

Search filters first, sorting only reorders the filtered subset.

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

import pandas as pd

logger = logging.getLogger(__name__)

T = TypeVar('T')

ASCENDING = 'ascending'
DESCENDING = 'descending'

SORT_ICONS = {
    None: '↕',
    ASCENDING: '↑',
    DESCENDING: '↓',
}

Comparator = Callable[[Any, Any], int]
ComparatorFactory = Callable[[str, str], Optional[Comparator]]
SearchPredicate = Callable[[Any, str], bool]


# =============================================================================
# STATE
# =============================================================================

@dataclass(frozen=True)
class TableHeader:
    key: str
    label: str
    sortable: bool = False


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: str = ASCENDING


def next_sort_config(current: Optional[SortConfig], key: str) -> SortConfig:
    """Sort state after activating column `key`."""
    if current is not None and current.key == key and current.direction == ASCENDING:
        return SortConfig(key, DESCENDING)
    return SortConfig(key, ASCENDING)


@dataclass
class TableState:
    search_query: str = ''
    sort_config: Optional[SortConfig] = None


# =============================================================================
# PROJECTION RESULT
# =============================================================================

@dataclass
class TableView(Generic[T]):
    items: List[T]
    total_item_count: int
    item_name: str
    item_name_plural: str
    sort_config: Optional[SortConfig] = None
    search_query: str = ''

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def summary(self) -> str:
        noun = self.item_name if self.item_count == 1 else self.item_name_plural
        return f"Showing {self.item_count} of {self.total_item_count} {noun}"

    @property
    def empty_message(self) -> str:
        return f"No {self.item_name_plural} found."


# =============================================================================
# TABLE
# =============================================================================

class SortableTable(Generic[T]):
    """
    Sort/search view-model over caller-supplied items.

    Holds only interaction state (search text, sort config); the items are
    passed to `project()` on every render.

    Usage:
        table = SortableTable(headers, predicate, comparator_factory,
                              item_name='student', item_name_plural='students')
        table.set_search('ali')
        table.request_sort('name')
        view = table.project(students)
    """

    def __init__(
        self,
        headers: Sequence[TableHeader],
        search_predicate: SearchPredicate,
        comparator_factory: ComparatorFactory,
        item_name: str = 'item',
        item_name_plural: str = 'items',
        state: Optional[TableState] = None,
    ):
        self.headers = list(headers)
        self.search_predicate = search_predicate
        self.comparator_factory = comparator_factory
        self.item_name = item_name
        self.item_name_plural = item_name_plural
        self.state = state if state is not None else TableState()
        self._sortable_keys = {h.key for h in self.headers if h.sortable}

    # ---------------------------------------------------------------------
    # Events
    # ---------------------------------------------------------------------

    @property
    def sort_config(self) -> Optional[SortConfig]:
        return self.state.sort_config

    @property
    def search_query(self) -> str:
        return self.state.search_query

    def is_sortable(self, key: str) -> bool:
        return key in self._sortable_keys

    def request_sort(self, key: str) -> bool:
        """Activate a column. Returns False when the column cannot sort."""
        if not self.is_sortable(key):
            return False
        self.state.sort_config = next_sort_config(self.state.sort_config, key)
        return True

    def set_search(self, value: str) -> None:
        self.state.search_query = value or ''

    def header_handlers(self) -> Dict[str, Callable[[], bool]]:
        """Click handler per sortable header."""
        return {
            h.key: (lambda key=h.key: self.request_sort(key))
            for h in self.headers if h.sortable
        }

    def sort_icon(self, header: TableHeader) -> str:
        if not header.sortable:
            return ''
        config = self.state.sort_config
        if config is None or config.key != header.key:
            return SORT_ICONS[None]
        return SORT_ICONS[config.direction]

    # ---------------------------------------------------------------------
    # Projection
    # ---------------------------------------------------------------------

    def filter_items(self, items: Iterable[T]) -> List[T]:
        query = self.state.search_query.strip()
        if not query:
            return list(items)
        return [item for item in items if self.search_predicate(item, query)]

    def sort_items(self, items: List[T]) -> List[T]:
        config = self.state.sort_config
        if config is None:
            return items
        comparator = self.comparator_factory(config.key, config.direction)
        if comparator is None:
            logger.debug(f"No comparator for column {config.key!r}, leaving order unchanged")
            return items
        return sorted(items, key=cmp_to_key(comparator))

    def project(self, items: Iterable[T]) -> TableView:
        all_items = list(items)
        visible = self.sort_items(self.filter_items(all_items))
        return TableView(
            items=visible,
            total_item_count=len(all_items),
            item_name=self.item_name,
            item_name_plural=self.item_name_plural,
            sort_config=self.state.sort_config,
            search_query=self.state.search_query,
        )


# =============================================================================
# BUILDERS FOR CALLERS
# =============================================================================

def is_missing(value) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


def key_comparator_factory(accessors: Dict[str, Callable[[Any], Any]]) -> ComparatorFactory:
    """
    Comparator factory from per-column value accessors.

    Values compare with < / >; None and NaN always sort last in either direction.
    Unknown columns yield None (no sort).
    """
    def _factory(key: str, direction: str) -> Optional[Comparator]:
        accessor = accessors.get(key)
        if accessor is None:
            return None
        sign = -1 if direction == DESCENDING else 1

        def _compare(a, b) -> int:
            va, vb = accessor(a), accessor(b)
            a_missing, b_missing = is_missing(va), is_missing(vb)
            if a_missing and b_missing:
                return 0
            if a_missing:
                return 1
            if b_missing:
                return -1
            if va < vb:
                return -sign
            if va > vb:
                return sign
            return 0

        return _compare

    return _factory


def text_search_predicate(*accessors: Callable[[Any], Any]) -> SearchPredicate:
    """Case-insensitive substring match against any of the accessed fields."""
    def _predicate(item, query: str) -> bool:
        needle = query.strip().lower()
        if not needle:
            return True
        for accessor in accessors:
            value = accessor(item)
            if value is not None and needle in str(value).lower():
                return True
        return False

    return _predicate
