from __future__ import annotations

import html
from typing import Sequence, Tuple

import streamlit as st

from supportdesk.config import get_config
from supportdesk.logging_utils import configure_logging
from supportdesk.services import Backend, get_backend


@st.cache_resource(show_spinner=False)
def _backend() -> Backend:
    return get_backend(get_config())


def bootstrap() -> Backend:
    """Per-run setup for a page: logging plus the shared admin backend."""
    configure_logging(get_config().log_level)
    return _backend()


def page_header(title: str, subtitle: str) -> None:
    st.markdown(
        f"<div class='sd-header'><h1>{html.escape(title)}</h1><p>{html.escape(subtitle)}</p></div>",
        unsafe_allow_html=True,
    )


def stat_cards(items: Sequence[Tuple[str, object]]) -> None:
    cols = st.columns(len(items))
    for col, (label, value) in zip(cols, items):
        col.markdown(
            f"<div class='sd-stat'><div class='sd-stat-label'>{html.escape(str(label))}</div>"
            f"<div class='sd-stat-value'>{html.escape(str(value))}</div></div>",
            unsafe_allow_html=True,
        )
