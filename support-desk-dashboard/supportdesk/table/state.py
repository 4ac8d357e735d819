from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional, Tuple

from supportdesk.models import STATUSES, TaskRecord

ALL = "all"
ASC = "asc"
DESC = "desc"
DEFAULT_PAGE_SIZE = 10

STATUS_FILTERS: Tuple[str, ...] = (ALL,) + STATUSES

# Header label -> record field used by the sort stage.
SORT_COLUMNS = {
    "Project Title": "projectTitle",
    "Description": "description",
    "Customer": "customerName",
    "Status": "status",
    "Team Members": "assignedMembers",
}
SORTABLE_FIELDS: Tuple[str, ...] = tuple(SORT_COLUMNS.values())


@dataclass(frozen=True)
class TableState:
    """Everything the task table remembers between interactions.

    The working set is replaced wholesale (sync or local append); every other
    field is a plain value. Transitions live in :mod:`supportdesk.table.reducers`.
    """

    working_set: Tuple[TaskRecord, ...] = ()
    query: str = ""
    status_filter: str = ALL
    sort_key: Optional[str] = None
    sort_direction: str = ASC
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    selected_ids: FrozenSet[Any] = field(default_factory=frozenset)


def initial_state(page_size: int = DEFAULT_PAGE_SIZE) -> TableState:
    return TableState(page_size=max(1, int(page_size)))
