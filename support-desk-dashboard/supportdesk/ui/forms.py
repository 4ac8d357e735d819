from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import streamlit as st

from supportdesk.models import STATUSES, TaskRecord
from supportdesk.table.badges import status_label

SKILLSETS = ["Customer Support", "Technical Support", "Sales", "Billing"]
REP_STATUSES = ["Active", "Inactive"]


def _split(text: str) -> list:
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def task_form(
    key: str,
    *,
    task: Optional[TaskRecord] = None,
    member_options: Sequence[str] = (),
    submit_label: str = "Create Task",
) -> Optional[Dict[str, Any]]:
    """Create/edit form. Returns the wire payload on submit, else None."""
    task = task or TaskRecord(id=None)
    members = list(dict.fromkeys(list(member_options) + list(task.member_names)))
    with st.form(key, clear_on_submit=task.id is None):
        title = st.text_input("Project title", value=task.projectTitle)
        customer = st.text_input("Customer name", value=task.customerName)
        description = st.text_area("Description", value=task.description)
        keywords = st.text_input("Keywords (comma separated)", value=", ".join(task.keywords))
        status_options = list(STATUSES)
        if task.status and task.status not in status_options:
            status_options.append(task.status)
        status = st.selectbox(
            "Status",
            options=status_options,
            index=status_options.index(task.status) if task.status in status_options else 0,
            format_func=status_label,
        )
        assigned = st.multiselect("Assigned members", options=members, default=list(task.member_names))
        submitted = st.form_submit_button(submit_label, type="primary")

    if not submitted:
        return None
    if not title.strip():
        st.warning("Project title is required.")
        return None
    payload: Dict[str, Any] = {
        "projectTitle": title.strip(),
        "customerName": customer.strip(),
        "description": description.strip(),
        "keywords": _split(keywords),
        "status": status,
        "assignedMembers": [{"name": n} for n in assigned],
    }
    if task.id is not None:
        payload["id"] = task.id
    return payload


def representative_form(key: str) -> Optional[Dict[str, Any]]:
    with st.form(key, clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        skillset = st.selectbox("Skillset", options=SKILLSETS, index=0)
        status = st.selectbox("Status", options=REP_STATUSES, index=0)
        submitted = st.form_submit_button("Add Representative", type="primary")
    if not submitted:
        return None
    if not name.strip() or not email.strip():
        st.warning("Name and email are required.")
        return None
    return {"name": name.strip(), "email": email.strip(), "skillset": skillset, "status": status}
