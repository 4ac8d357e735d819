import streamlit as st

from supportdesk.page_catalog import catalog_by_group
from supportdesk.theme import set_theme

set_theme()

navigation = {
    group: [
        st.Page(spec.path, title=spec.title, icon=spec.icon, default=spec.default)
        for spec in specs
    ]
    for group, specs in catalog_by_group().items()
}

st.navigation(navigation).run()
