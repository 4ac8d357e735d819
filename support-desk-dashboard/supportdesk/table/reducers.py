"""State transitions for the task table.

Pure function: (state, input) -> new state. The input state is never
modified; ``dataclasses.replace`` builds the successor.
"""

from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet, Any, Iterable, List, Sequence

from supportdesk.models import TaskRecord
from supportdesk.table.pipeline import clamp_page, filter_records, paginate, sort_records
from supportdesk.table.state import ASC, DESC, TableState

# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------


def filtered(state: TableState) -> List[TaskRecord]:
    return filter_records(state.working_set, state.query, state.status_filter)


def ordered(state: TableState) -> List[TaskRecord]:
    return sort_records(filtered(state), state.sort_key, state.sort_direction)


def visible(state: TableState) -> List[TaskRecord]:
    return paginate(ordered(state), state.current_page, state.page_size)


# ---------------------------------------------------------------------------
# Working set
# ---------------------------------------------------------------------------


def sync_source(state: TableState, source: Iterable[TaskRecord]) -> TableState:
    """Replace the working set with a shallow copy of ``source``. Last write wins."""
    return replace(state, working_set=tuple(source or ()))


def append_record(state: TableState, record: TaskRecord) -> TableState:
    return replace(state, working_set=state.working_set + (record,))


def remove_record(state: TableState, record_id: Any) -> TableState:
    return replace(
        state,
        working_set=tuple(r for r in state.working_set if r.id != record_id),
    )


# ---------------------------------------------------------------------------
# Filter / sort
# ---------------------------------------------------------------------------


def set_query(state: TableState, query: str) -> TableState:
    return replace(state, query=query or "")


def set_status_filter(state: TableState, status_filter: str) -> TableState:
    return replace(state, status_filter=status_filter)


def request_sort(state: TableState, key: str) -> TableState:
    """Same key flips direction, a new key starts ascending."""
    if state.sort_key == key and state.sort_direction == ASC:
        direction = DESC
    else:
        direction = ASC
    return replace(state, sort_key=key, sort_direction=direction)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def go_to_page(state: TableState, page: int) -> TableState:
    total = len(filtered(state))
    return replace(state, current_page=clamp_page(page, total, state.page_size))


def next_page(state: TableState) -> TableState:
    return go_to_page(state, state.current_page + 1)


def previous_page(state: TableState) -> TableState:
    return go_to_page(state, state.current_page - 1)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def toggle_selection(state: TableState, record_id: Any) -> TableState:
    if record_id in state.selected_ids:
        selected = state.selected_ids - {record_id}
    else:
        selected = state.selected_ids | {record_id}
    return replace(state, selected_ids=frozenset(selected))


def bulk_select(state: TableState, enabled: bool) -> TableState:
    """Select exactly the visible page, or clear everything. Never a union."""
    if not enabled:
        return replace(state, selected_ids=frozenset())
    return replace(state, selected_ids=frozenset(r.id for r in visible(state)))


def is_selected(state: TableState, record_id: Any) -> bool:
    return record_id in state.selected_ids


def rows_all_selected(rows: Sequence[TaskRecord], selected_ids: AbstractSet[Any]) -> bool:
    """Header checkbox state: a non-empty page whose every id is selected."""
    return bool(rows) and all(r.id in selected_ids for r in rows)


def all_visible_selected(state: TableState) -> bool:
    return rows_all_selected(visible(state), state.selected_ids)
