import pandas as pd
import streamlit as st

from supportdesk import customers_store as store
from supportdesk import services
from supportdesk.admin_client import AdminAPIError
from supportdesk.services import ToastNotifier
from supportdesk.ui.common import bootstrap, page_header

CUSTOMERS_FILE = "customers.csv"

backend = bootstrap()
notifier = ToastNotifier()

page_header("Customers", "Customer records imported from CSV")


def render_customers(slot, state):
    with slot.container():
        if state.error:
            st.error(state.error)
        if state.loading:
            st.info("Loading customers...", icon="⏳")
        elif state.customers:
            st.dataframe(pd.DataFrame([c.to_dict() for c in state.customers]), use_container_width=True, hide_index=True)
        else:
            st.caption("No customers uploaded yet.")


def load_customers(slot):
    st.session_state.customers = store.set_loading(st.session_state.customers)
    render_customers(slot, st.session_state.customers)
    try:
        customers = services.fetch_customers(backend, CUSTOMERS_FILE, notifier)
    except AdminAPIError as exc:
        st.session_state.customers = store.set_error(st.session_state.customers, exc.message)
    else:
        st.session_state.customers = store.set_customers(store.CustomerState(), customers)
    finally:
        st.session_state.customers_stale = False


if "customers" not in st.session_state:
    st.session_state.customers = store.CustomerState()
    st.session_state.customers_stale = True

with st.expander("⬆️ Upload CSV"):
    upload = st.file_uploader("Customers CSV", type=["csv"])
    if upload is not None and st.button("Upload", type="primary"):
        try:
            services.upload_csv(backend, upload.getvalue(), CUSTOMERS_FILE, notifier)
        except AdminAPIError as exc:
            st.error(exc.message)
        else:
            st.session_state.customers_stale = True

_, c2 = st.columns([5, 1])
with c2:
    if st.button("↻ Refresh", use_container_width=True):
        st.session_state.customers_stale = True

table_slot = st.empty()
if st.session_state.get("customers_stale"):
    load_customers(table_slot)
render_customers(table_slot, st.session_state.customers)
