import pandas as pd
import streamlit as st

from supportdesk import services
from supportdesk.admin_client import AdminAPIError
from supportdesk.services import ToastNotifier
from supportdesk.stats import filter_representatives, representative_stats
from supportdesk.ui.common import bootstrap, page_header, stat_cards
from supportdesk.ui.forms import representative_form

backend = bootstrap()
notifier = ToastNotifier()

page_header("Representatives", "Manage your support team members")

if "representatives" not in st.session_state:
    try:
        st.session_state.representatives = services.fetch_representatives(backend, notifier)
        st.session_state.pop("representatives_error", None)
    except AdminAPIError:
        st.session_state.representatives = []
        st.session_state.representatives_error = "Failed to fetch representatives"

if st.session_state.get("representatives_error"):
    st.error(st.session_state.representatives_error)

reps = st.session_state.representatives
stats = representative_stats(reps)
stat_cards([
    ("Representatives", stats.total),
    ("Active", stats.active),
    ("Inactive", stats.inactive),
    ("Skillsets", len(stats.by_skillset)),
])

with st.expander("➕ Representative Credentials"):
    payload = representative_form("add-representative")
    if payload:
        try:
            rep = services.add_representative(backend, payload, notifier)
        except AdminAPIError as exc:
            st.error(exc.message)
        else:
            st.session_state.representatives = list(reps) + [rep]
            st.rerun()

query = st.text_input("Search representatives", placeholder="Search by name, email or skillset...")
shown = filter_representatives(reps, query)

if shown:
    df = pd.DataFrame([r.to_dict() for r in shown]).drop(columns=["id"])
    st.dataframe(df, use_container_width=True, hide_index=True)
else:
    st.caption("No representatives found.")
