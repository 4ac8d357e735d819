"""Streamlit rendering for :class:`supportdesk.table.TaskTableView`.

Widgets only raise events; every change goes through the view so the table
state stays the single source of truth across reruns. Checkbox values are
written into ``st.session_state`` before the widgets are created so a bulk
selection is reflected on the next run.
"""

from __future__ import annotations

from typing import Any, Iterable, List

import pandas as pd
import streamlit as st

from supportdesk.models import TaskRecord
from supportdesk.table import ALL, ASC, SORT_COLUMNS, STATUS_FILTERS, TableSnapshot, TaskTableView
from supportdesk.table.badges import (
    initial,
    keyword_summary,
    member_summary,
    safe_text,
    status_badge_html,
    status_label,
)

TABLE_COLUMNS = ["Project Title", "Description", "Status", "Team Members"]
_WIDTHS = [0.4, 2.2, 2.6, 1.2, 2.0, 0.5]


def tasks_to_df(tasks: Iterable[TaskRecord]) -> pd.DataFrame:
    rows = [
        {
            "id": t.id,
            "projectTitle": t.projectTitle,
            "description": t.description,
            "customerName": t.customerName,
            "status": t.status,
            "keywords": ", ".join(t.keywords),
            "assignedMembers": ", ".join(t.member_names),
        }
        for t in tasks
    ]
    if not rows:
        return pd.DataFrame(columns=["id", "projectTitle", "description", "customerName", "status", "keywords", "assignedMembers"])
    return pd.DataFrame(rows)


def _sort_arrow(snap: TableSnapshot, field: str) -> str:
    if snap.sort_key != field:
        return "⇅"
    return "▲" if snap.sort_direction == ASC else "▼"


def _on_search(view: TaskTableView, key: str) -> None:
    view.set_query(st.session_state.get(key, ""))
    view.click_outside()


def _on_status(view: TaskTableView, status: str) -> None:
    view.set_status_filter(status)
    view.click_outside()


def _on_sort(view: TaskTableView, field: str) -> None:
    view.request_sort(field)
    view.click_outside()


def _on_select_all(view: TaskTableView, key: str) -> None:
    view.select_all_visible(bool(st.session_state.get(key)))


def _on_row_action(view: TaskTableView, action: str, task: TaskRecord) -> None:
    view.click_outside()
    if action == "edit":
        view.edit(task)
    elif action == "delete":
        view.delete(task.id)
    elif action == "cancel":
        view.cancel(task)


def render_controls(view: TaskTableView, key: str) -> None:
    snap = view.snapshot()
    search_key = f"{key}-search"
    if search_key not in st.session_state:
        st.session_state[search_key] = snap.query

    c1, c2 = st.columns([4, 1])
    with c1:
        st.text_input(
            "Search tasks",
            key=search_key,
            placeholder="Search tasks...",
            label_visibility="collapsed",
            on_change=_on_search,
            args=(view, search_key),
        )
    with c2:
        label = "Filter" if snap.status_filter == ALL else f"Filter: {status_label(snap.status_filter)}"
        with st.popover(label, use_container_width=True):
            for status in STATUS_FILTERS:
                st.button(
                    status_label(status) if status != ALL else "All",
                    key=f"{key}-filter-{status}",
                    type="primary" if status == snap.status_filter else "secondary",
                    use_container_width=True,
                    on_click=_on_status,
                    args=(view, status),
                )


def _render_header(view: TaskTableView, snap: TableSnapshot, key: str) -> None:
    cols = st.columns(_WIDTHS)
    all_key = f"{key}-select-all"
    st.session_state[all_key] = snap.all_visible_selected
    cols[0].checkbox(
        "Select all on this page",
        key=all_key,
        label_visibility="collapsed",
        on_change=_on_select_all,
        args=(view, all_key),
    )
    for col, header in zip(cols[1:5], TABLE_COLUMNS):
        field = SORT_COLUMNS[header]
        col.button(
            f"{header} {_sort_arrow(snap, field)}",
            key=f"{key}-sort-{field}",
            on_click=_on_sort,
            args=(view, field),
        )


def _render_row(view: TaskTableView, task: TaskRecord, key: str) -> None:
    cols = st.columns(_WIDTHS)
    sel_key = f"{key}-sel-{task.id}"
    st.session_state[sel_key] = view.is_selected(task.id)
    cols[0].checkbox(
        f"Select {task.projectTitle}",
        key=sel_key,
        label_visibility="collapsed",
        on_change=view.toggle,
        args=(task.id,),
    )
    keywords = keyword_summary(task.keywords)
    cols[1].markdown(
        f"**{initial(task.projectTitle) or '·'}** &nbsp; {safe_text(task.projectTitle)}"
        + (f"  \n<span style='color:#6b7280;font-size:.8rem'>{keywords}</span>" if keywords else ""),
        unsafe_allow_html=True,
    )
    cols[2].markdown(safe_text(task.description))
    cols[3].markdown(status_badge_html(task.status), unsafe_allow_html=True)
    cols[4].markdown(member_summary(task.assignedMembers))
    cols[5].button("⋮", key=f"{key}-menu-{task.id}", on_click=view.open_menu, args=(task.id,))

    if view.open_menu_key() == task.id:
        a1, a2, a3, _ = st.columns([1, 1, 1, 5])
        a1.button("✏️ Edit", key=f"{key}-edit-{task.id}", on_click=_on_row_action, args=(view, "edit", task))
        a2.button("🗑️ Delete", key=f"{key}-delete-{task.id}", on_click=_on_row_action, args=(view, "delete", task))
        a3.button("⛔ Cancel", key=f"{key}-cancel-{task.id}", on_click=_on_row_action, args=(view, "cancel", task))


def render_pagination(view: TaskTableView, snap: TableSnapshot, key: str) -> None:
    if not snap.show_pagination:
        return
    c1, c2, c3 = st.columns([4, 1, 1])
    c1.markdown(f"<div class='sd-range'>{snap.range.label()}</div>", unsafe_allow_html=True)
    c2.button("Previous", key=f"{key}-prev", disabled=not snap.has_previous, on_click=view.previous_page,
              use_container_width=True)
    c3.button("Next", key=f"{key}-next", disabled=not snap.has_next, on_click=view.next_page,
              use_container_width=True)


def render_task_table(view: TaskTableView, key: str = "tasks") -> TableSnapshot:
    """Draw controls, rows and pagination; returns the snapshot that was drawn.

    A loading view draws only a placeholder box and no widgets, so a page can
    draw the table into an ``st.empty`` slot before a fetch and again after it.
    """
    snap = view.snapshot()
    if snap.loading:
        with st.container(border=True):
            st.info("Loading tasks...", icon="⏳")
        return snap

    render_controls(view, key)
    snap = view.snapshot()

    with st.container(border=True):
        _render_header(view, snap, key)
        if snap.past_last_page:
            st.caption(f"No tasks on page {snap.current_page}.")
            st.button("Back to page 1", key=f"{key}-first-page", on_click=view.go_to_page, args=(1,))
        elif not snap.rows:
            st.caption("No tasks match the current filters.")
        for task in snap.rows:
            _render_row(view, task, key)

    render_pagination(view, snap, key)
    return snap


def selected_tasks(view: TaskTableView) -> List[TaskRecord]:
    chosen: Any = view.selected_ids
    return [t for t in view.state.working_set if t.id in chosen]
