"""Tabular view engine for the task table.

``TaskTableView`` keeps one :class:`TableState`, mirrors the externally owned
task list into it and exposes the derived page, selection and pagination
data the Streamlit page renders. Derived stages are memoized on their inputs
so a rerun that changes nothing recomputes nothing.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

from supportdesk.models import TaskRecord
from supportdesk.table import reducers
from supportdesk.table.overlay import MOUSEDOWN, DocumentEvents, DropdownMenu, Element
from supportdesk.table.pipeline import (
    DisplayRange,
    display_range,
    filter_records,
    page_count,
    paginate,
    sort_records,
)
from supportdesk.table.state import DEFAULT_PAGE_SIZE, TableState, initial_state

logger = logging.getLogger(__name__)


def _same_inputs(a: Tuple[Any, ...], b: Tuple[Any, ...]) -> bool:
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if x is y:
            continue
        if isinstance(x, (list, tuple)) or isinstance(y, (list, tuple)):
            return False
        if x != y:
            return False
    return True


class _Memo:
    """Remembers the last result per stage, like a ``useMemo`` slot."""

    def __init__(self) -> None:
        self._slots: Dict[str, Tuple[Tuple[Any, ...], Any]] = {}
        self.misses: Dict[str, int] = {}

    def get(self, slot: str, inputs: Tuple[Any, ...], compute: Callable[[], Any]) -> Any:
        cached = self._slots.get(slot)
        if cached is not None and _same_inputs(cached[0], inputs):
            return cached[1]
        value = compute()
        self._slots[slot] = (inputs, value)
        self.misses[slot] = self.misses.get(slot, 0) + 1
        return value


@dataclass
class RowActions:
    """Optional row action collaborators. A missing callback is a no-op."""

    on_edit: Optional[Callable[[TaskRecord], None]] = None
    on_delete: Optional[Callable[[Any], None]] = None
    on_cancel: Optional[Callable[[TaskRecord], None]] = None


@dataclass(frozen=True)
class TableSnapshot:
    rows: Tuple[TaskRecord, ...]
    loading: bool
    selected_ids: FrozenSet[Any]
    all_visible_selected: bool
    query: str
    status_filter: str
    sort_key: Optional[str]
    sort_direction: str
    current_page: int
    total_pages: int
    total: int
    range: DisplayRange
    show_pagination: bool

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def past_last_page(self) -> bool:
        """Records match, but the current page lies beyond them."""
        return not self.rows and self.total > 0


class TaskTableView:
    def __init__(
        self,
        source: Optional[Sequence[TaskRecord]] = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        actions: Optional[RowActions] = None,
        events: Optional[DocumentEvents] = None,
    ):
        self.state: TableState = initial_state(page_size)
        self.loading = False
        self.actions = actions or RowActions()
        self.events = events or DocumentEvents()
        self._source: Any = None
        self._memo = _Memo()
        self._root = Element("task-table")
        self._menus: Dict[Any, DropdownMenu] = {}
        if source is not None:
            self.sync(source)

    # -------------------- sync --------------------
    def sync(self, source: Optional[Sequence[TaskRecord]]) -> bool:
        """Mirror ``source`` when its identity changed. Returns True on replace."""
        if source is self._source:
            return False
        self._source = source
        self.state = reducers.sync_source(self.state, source or ())
        logger.debug("Task table synced %d records", len(self.state.working_set))
        return True

    def append(self, record: TaskRecord) -> None:
        self.state = reducers.append_record(self.state, record)

    def remove(self, record_id: Any) -> None:
        self.state = reducers.remove_record(self.state, record_id)
        menu = self._menus.pop(record_id, None)
        if menu is not None:
            menu.unmount()

    @contextmanager
    def fetching(self) -> Iterator["TaskTableView"]:
        """Mark the table as loading while the source is being refetched."""
        self.loading = True
        try:
            yield self
        finally:
            self.loading = False

    # -------------------- derived stages --------------------
    def filtered(self) -> List[TaskRecord]:
        s = self.state
        return self._memo.get(
            "filtered",
            (s.working_set, s.query, s.status_filter),
            lambda: filter_records(s.working_set, s.query, s.status_filter),
        )

    def sorted(self) -> List[TaskRecord]:
        s = self.state
        rows = self.filtered()
        return self._memo.get(
            "sorted",
            (rows, s.sort_key, s.sort_direction),
            lambda: sort_records(rows, s.sort_key, s.sort_direction),
        )

    def visible(self) -> List[TaskRecord]:
        s = self.state
        rows = self.sorted()
        return self._memo.get(
            "visible",
            (rows, s.current_page, s.page_size),
            lambda: paginate(rows, s.current_page, s.page_size),
        )

    @property
    def total_pages(self) -> int:
        return page_count(len(self.sorted()), self.state.page_size)

    # -------------------- controls --------------------
    def set_query(self, query: str) -> None:
        self.state = reducers.set_query(self.state, query)

    def set_status_filter(self, status_filter: str) -> None:
        self.state = reducers.set_status_filter(self.state, status_filter)

    def request_sort(self, key: str) -> None:
        self.state = reducers.request_sort(self.state, key)

    def go_to_page(self, page: int) -> None:
        self.state = reducers.go_to_page(self.state, page)

    def next_page(self) -> None:
        self.state = reducers.next_page(self.state)

    def previous_page(self) -> None:
        self.state = reducers.previous_page(self.state)

    # -------------------- selection --------------------
    def toggle(self, record_id: Any) -> None:
        self.state = reducers.toggle_selection(self.state, record_id)

    def select_all_visible(self, enabled: bool) -> None:
        self.state = reducers.bulk_select(self.state, enabled)

    def is_selected(self, record_id: Any) -> bool:
        return reducers.is_selected(self.state, record_id)

    @property
    def selected_ids(self) -> FrozenSet[Any]:
        return self.state.selected_ids

    def all_visible_selected(self) -> bool:
        return reducers.rows_all_selected(self.visible(), self.state.selected_ids)

    # -------------------- row actions --------------------
    def edit(self, record: TaskRecord) -> None:
        if self.actions.on_edit is not None:
            self.actions.on_edit(record)

    def delete(self, record_id: Any) -> None:
        if self.actions.on_delete is not None:
            self.actions.on_delete(record_id)

    def cancel(self, record: TaskRecord) -> None:
        if self.actions.on_cancel is not None:
            self.actions.on_cancel(record)

    # -------------------- overlays --------------------
    def menu(self, key: Any) -> DropdownMenu:
        menu = self._menus.get(key)
        if menu is None:
            menu = DropdownMenu(Element(f"menu-{key}", parent=self._root), self.events)
            self._menus[key] = menu
        return menu

    def open_menu(self, key: Any) -> DropdownMenu:
        """Click on a menu trigger: other open menus see an outside click."""
        menu = self.menu(key)
        self.events.dispatch(MOUSEDOWN, menu.root)
        menu.toggle()
        return menu

    def click_outside(self) -> None:
        self.events.dispatch(MOUSEDOWN, None)

    def open_menu_key(self) -> Any:
        for key, menu in self._menus.items():
            if menu.is_open:
                return key
        return None

    def unmount(self) -> None:
        for menu in self._menus.values():
            menu.unmount()
        self._menus.clear()

    # -------------------- output --------------------
    def snapshot(self) -> TableSnapshot:
        s = self.state
        rows = self.visible()
        total = len(self.sorted())
        pages = page_count(total, s.page_size)
        return TableSnapshot(
            rows=tuple(rows),
            loading=self.loading,
            selected_ids=s.selected_ids,
            all_visible_selected=self.all_visible_selected(),
            query=s.query,
            status_filter=s.status_filter,
            sort_key=s.sort_key,
            sort_direction=s.sort_direction,
            current_page=s.current_page,
            total_pages=pages,
            total=total,
            range=display_range(total, s.current_page, s.page_size),
            show_pagination=pages > 1,
        )
