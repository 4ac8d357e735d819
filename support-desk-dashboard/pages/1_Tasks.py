import streamlit as st

from supportdesk import services
from supportdesk.admin_client import AdminAPIError
from supportdesk.config import get_config
from supportdesk.models import CANCELLED
from supportdesk.services import ToastNotifier
from supportdesk.table import RowActions, TaskTableView
from supportdesk.table.badges import safe_text
from supportdesk.ui.common import bootstrap, page_header
from supportdesk.ui.forms import task_form
from supportdesk.ui.task_table import render_task_table, selected_tasks, tasks_to_df

backend = bootstrap()
notifier = ToastNotifier()


# ----- Row action collaborators -----

def _on_edit(task):
    st.session_state.editing_task = task


def _on_delete(task_id):
    try:
        services.delete_task(backend, task_id, notifier)
    except AdminAPIError as exc:
        st.session_state.tasks_error = exc.message
        return
    st.session_state.task_table.remove(task_id)


def _on_cancel(task):
    try:
        services.update_task(backend, {"id": task.id, "status": CANCELLED}, notifier)
    except AdminAPIError as exc:
        st.session_state.tasks_error = exc.message
        return
    st.session_state.tasks_stale = True


# ----- Initialize session state -----
if "task_table" not in st.session_state:
    st.session_state.task_table = TaskTableView(
        page_size=get_config().page_size,
        actions=RowActions(on_edit=_on_edit, on_delete=_on_delete, on_cancel=_on_cancel),
    )
view: TaskTableView = st.session_state.task_table

if "representatives" not in st.session_state:
    try:
        st.session_state.representatives = services.fetch_representatives(backend)
    except AdminAPIError:
        st.session_state.representatives = []
member_options = [r.name for r in st.session_state.representatives if r.name]


def load_tasks(slot):
    """Fetch into ``tasks_source``, showing the table as loading in ``slot`` meanwhile."""
    with view.fetching():
        with slot.container():
            render_task_table(view, key="tasks")
        try:
            st.session_state.tasks_source = services.fetch_tasks(backend, notifier)
            st.session_state.pop("tasks_error", None)
        except AdminAPIError as exc:
            st.session_state.tasks_error = exc.message
            st.session_state.setdefault("tasks_source", [])
        finally:
            st.session_state.tasks_stale = False


# ----- Layout -----
h1, h2 = st.columns([5, 1])
with h1:
    page_header("Tasks", "Manage and track support tasks")
with h2:
    if st.button("↻ Refresh", help="Reload tasks from the admin service", use_container_width=True):
        view.click_outside()
        st.session_state.tasks_stale = True

with st.expander("➕ New Task"):
    payload = task_form("create-task", member_options=member_options)
    if payload:
        try:
            created = services.create_task(backend, payload, notifier)
        except AdminAPIError as exc:
            st.error(exc.message)
        else:
            # Shown immediately; the next refresh replaces the working set.
            view.append(created)

editing = st.session_state.get("editing_task")
if editing is not None:
    with st.container(border=True):
        st.markdown(f"**Edit task:** {safe_text(editing.projectTitle)}")
        payload = task_form(f"edit-{editing.id}", task=editing, member_options=member_options, submit_label="Save")
        if st.button("Close editor", key="close-editor"):
            st.session_state.editing_task = None
            st.rerun()
        if payload:
            try:
                services.update_task(backend, payload, notifier)
            except AdminAPIError as exc:
                st.error(exc.message)
            else:
                st.session_state.editing_task = None
                st.session_state.tasks_stale = True
                st.rerun()

error_slot = st.empty()
table_slot = st.empty()
if "tasks_source" not in st.session_state or st.session_state.get("tasks_stale"):
    load_tasks(table_slot)
if st.session_state.get("tasks_error"):
    error_slot.error(st.session_state.tasks_error)

view.sync(st.session_state.tasks_source)
with table_slot.container():
    render_task_table(view, key="tasks")

# ----- Selection actions -----
chosen = selected_tasks(view)
if chosen:
    st.markdown(f"**{len(chosen)} selected**")
    s1, s2, s3 = st.columns([3, 1, 1])
    with s1:
        assignees = st.multiselect("Assign selected to", options=member_options, key="bulk-assignees")
    with s2:
        if st.button("Assign", disabled=not assignees, use_container_width=True):
            try:
                for task in chosen:
                    services.assign_task(backend, task.id, assignees, notifier)
            except AdminAPIError as exc:
                st.error(exc.message)
            else:
                st.session_state.tasks_stale = True
                st.rerun()
    with s3:
        st.download_button(
            "Export CSV",
            data=tasks_to_df(chosen).to_csv(index=False).encode("utf-8"),
            file_name="selected_tasks.csv",
            mime="text/csv",
            use_container_width=True,
        )
