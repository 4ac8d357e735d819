"""Status badges and short summaries for task table cells.

Everything returned here is safe to hand to ``st.markdown`` with
``unsafe_allow_html=True``: record text is markdown-escaped, then
HTML-escaped.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple


@dataclass(frozen=True)
class BadgeStyle:
    background: str
    color: str
    icon: str


STATUS_STYLES = {
    "completed": BadgeStyle("#dcfce7", "#166534", "🟢"),
    "in-progress": BadgeStyle("#dbeafe", "#1e40af", "🔵"),
    "pending": BadgeStyle("#fef9c3", "#854d0e", "🟡"),
    "cancelled": BadgeStyle("#fee2e2", "#991b1b", "🔴"),
}
NEUTRAL_STYLE = BadgeStyle("#f3f4f6", "#1f2937", "⚪")

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_\[\]#|~])")


def safe_text(value: Any) -> str:
    text = "" if value is None else str(value)
    return html.escape(_MARKDOWN_SPECIALS.sub(r"\\\1", text))


def initial(text: Any) -> str:
    text = "" if text is None else str(text)
    return safe_text(text[:1].upper())


def status_label(status: Any) -> str:
    text = "" if status is None else str(status)
    if not text:
        return "Unknown"
    return (text[:1].upper() + text[1:]).replace("-", " ", 1)


def status_badge(status: Any) -> Tuple[str, BadgeStyle]:
    """Label and colours for a status; unknown values get the neutral style."""
    style = STATUS_STYLES.get(status, NEUTRAL_STYLE) if isinstance(status, str) else NEUTRAL_STYLE
    return status_label(status), style


def status_badge_html(status: Any) -> str:
    label, style = status_badge(status)
    return (
        f"<span class='sd-badge' style='background:{style.background};"
        f"color:{style.color};'>{safe_text(label)}</span>"
    )


def keyword_summary(keywords: Sequence[str], limit: int = 3) -> str:
    keywords = list(keywords or [])
    text = ", ".join(safe_text(k) for k in keywords[:limit])
    if len(keywords) > limit:
        text += ", ..."
    return text


def member_summary(members: Iterable[Any], limit: int = 3) -> str:
    """Initials of the first members plus a ``+N`` overflow marker."""
    members = list(members or [])
    names = [getattr(m, "name", m) for m in members[:limit]]
    parts = [f"{initial(n)} {safe_text(n)}".strip() for n in names]
    if len(members) > limit:
        parts.append(f"+{len(members) - limit}")
    return " · ".join(parts)
