import os

import streamlit as st
from streamlit.errors import StreamlitAPIException


def set_theme(
    page_title: str = "Support Desk",
    page_icon: str = "🛠️",
    layout: str = "wide",
    initial_sidebar_state: str = "expanded",
):
    """Configure the Streamlit page and inject the dashboard CSS.

    Parameters allow per-page title/icon overrides. Streamlit only honours
    the first ``set_page_config`` call of a run; later calls are ignored but
    the CSS is still injected.
    """
    try:
        st.set_page_config(
            page_title=page_title,
            page_icon=page_icon,
            layout=layout,
            initial_sidebar_state=initial_sidebar_state,
        )
    except StreamlitAPIException:
        pass

    theme_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "assets", "custom_theme.css")
    try:
        with open(theme_file, "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        st.error(f"Theme file not found at {theme_file}. Please check the file path.")
