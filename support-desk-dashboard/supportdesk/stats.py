from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from supportdesk.models import COMPLETED, PENDING, STATUSES, Representative, TaskRecord
from supportdesk.table.pipeline import text_matches

REPRESENTATIVE_SEARCH_FIELDS = ("name", "email", "skillset")


@dataclass(frozen=True)
class TaskStats:
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    team_members: int
    by_status: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class RepresentativeStats:
    total: int
    active: int
    inactive: int
    by_skillset: Dict[str, int] = field(default_factory=dict)


def task_stats(tasks: Sequence[TaskRecord], representatives: Sequence[Representative] = ()) -> TaskStats:
    counts = Counter(t.status for t in tasks)
    by_status = {s: counts.get(s, 0) for s in STATUSES}
    # Unknown statuses still show up in the chart.
    for status, n in counts.items():
        if status not in by_status:
            by_status[status or "unknown"] = by_status.get(status or "unknown", 0) + n
    return TaskStats(
        total_tasks=len(tasks),
        completed_tasks=counts.get(COMPLETED, 0),
        pending_tasks=counts.get(PENDING, 0),
        team_members=len(representatives),
        by_status=by_status,
    )


def representative_stats(reps: Sequence[Representative]) -> RepresentativeStats:
    active = sum(1 for r in reps if (r.status or "").lower() == "active")
    return RepresentativeStats(
        total=len(reps),
        active=active,
        inactive=len(reps) - active,
        by_skillset=dict(Counter(r.skillset for r in reps)),
    )


def filter_representatives(reps: Sequence[Representative], query: str) -> List[Representative]:
    return [r for r in reps if text_matches(r, query, REPRESENTATIVE_SEARCH_FIELDS)]
