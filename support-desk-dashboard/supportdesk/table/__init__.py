"""Task table pipeline: sync -> filter -> sort -> page, plus a selection overlay."""

from .state import ALL, ASC, DESC, SORT_COLUMNS, SORTABLE_FIELDS, STATUS_FILTERS, TableState, initial_state
from .view import RowActions, TableSnapshot, TaskTableView

__all__ = [
    "ALL",
    "ASC",
    "DESC",
    "SORT_COLUMNS",
    "SORTABLE_FIELDS",
    "STATUS_FILTERS",
    "TableState",
    "initial_state",
    "RowActions",
    "TableSnapshot",
    "TaskTableView",
]
