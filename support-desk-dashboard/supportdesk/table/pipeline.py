"""Pure stages of the task table: filter -> sort -> page.

Each function takes a sequence and returns a new list; inputs are never
mutated. None of them raise for empty inputs, missing fields or page numbers
outside the valid range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Number
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar

from supportdesk.table.state import ALL, DESC

T = TypeVar("T")

SEARCH_FIELDS: Tuple[str, ...] = ("projectTitle", "description", "customerName")


def _field(record: Any, name: str) -> Any:
    getter = getattr(record, "get", None)
    if callable(getter):
        return getter(name)
    return getattr(record, name, None)


def text_matches(record: Any, query: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match of ``query`` against any of ``fields``.

    An empty query matches everything; missing fields count as "".
    """
    needle = (query or "").casefold()
    if not needle:
        return True
    for name in fields:
        value = _field(record, name)
        if needle in ("" if value is None else str(value)).casefold():
            return True
    return False


def filter_records(records: Sequence[T], query: str = "", status_filter: str = ALL) -> List[T]:
    out = []
    for record in records:
        if status_filter != ALL and _field(record, "status") != status_filter:
            continue
        if not text_matches(record, query, SEARCH_FIELDS):
            continue
        out.append(record)
    return out


def _sort_value(value: Any) -> Tuple[int, Any]:
    # Numbers order before strings so mixed columns still compare.
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, Number):
        return (0, value)
    if value is None:
        return (1, "")
    if isinstance(value, (list, tuple)):
        names = [str(_field(v, "name") or "") if not isinstance(v, str) else v for v in value]
        return (1, ", ".join(names))
    return (1, str(value))


def sort_records(records: Sequence[T], sort_key: Optional[str], direction: str) -> List[T]:
    """Stable sort on ``record[sort_key]``; ``None`` leaves the order alone.

    ``reverse=True`` keeps ties in input order, so descending is stable too.
    """
    if not sort_key:
        return list(records)
    return sorted(
        records,
        key=lambda r: _sort_value(_field(r, sort_key)),
        reverse=direction == DESC,
    )


def page_count(total: int, page_size: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / max(1, page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    last = max(1, page_count(total, page_size))
    return min(max(1, int(page)), last)


def paginate(records: Sequence[T], current_page: int, page_size: int) -> List[T]:
    size = max(1, page_size)
    start = (current_page - 1) * size
    if start < 0:
        return []
    return list(records[start:start + size])


@dataclass(frozen=True)
class DisplayRange:
    start: int
    end: int
    total: int

    def label(self) -> str:
        return f"Showing {self.start} to {self.end} of {self.total} results"


def display_range(total: int, current_page: int, page_size: int) -> DisplayRange:
    """1-based inclusive bounds of the rows on ``current_page``.

    A page past the end shows nothing, reported as ``start == end == 0``.
    """
    size = max(1, page_size)
    offset = (current_page - 1) * size
    end = min(current_page * size, total)
    if offset < 0 or offset >= total:
        return DisplayRange(0, 0, total)
    return DisplayRange(offset + 1, end, total)
