"""Navigation for the dashboard.

Single source of truth for the pages ``app.py`` registers with
``st.navigation``; grouped into sidebar sections.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

GROUP_ORDER = ["Overview", "Support"]


@dataclass(frozen=True)
class PageSpec:
    path: str
    title: str
    icon: str
    group: str
    description: str = ""
    default: bool = False


def get_page_catalog() -> List[PageSpec]:
    return [
        PageSpec("pages/0_Overview.py", "Overview", "📊", "Overview", "Task and team figures", default=True),
        PageSpec("pages/1_Tasks.py", "Tasks", "📋", "Support", "Search, sort and manage tasks"),
        PageSpec("pages/2_Representatives.py", "Representatives", "🧑‍💼", "Support", "Support team members"),
        PageSpec("pages/3_Customers.py", "Customers", "👥", "Support", "Customer records from CSV"),
    ]


def catalog_by_group() -> Dict[str, List[PageSpec]]:
    grouped: Dict[str, List[PageSpec]] = {}
    for spec in get_page_catalog():
        grouped.setdefault(spec.group, []).append(spec)
    ordered = {g: grouped[g] for g in GROUP_ORDER if g in grouped}
    for g, specs in grouped.items():
        ordered.setdefault(g, specs)
    return ordered
