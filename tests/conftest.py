import pytest

from supportdesk.models import Member, TaskRecord


def _make_task(task_id, title="Task", status="pending", description="", customer="", members=(), keywords=()):
    return TaskRecord(
        id=task_id,
        projectTitle=title,
        description=description,
        customerName=customer,
        status=status,
        keywords=tuple(keywords),
        assignedMembers=tuple(Member(name=m) for m in members),
    )


@pytest.fixture
def make_task():
    """Factory for task records with sensible defaults."""
    return _make_task


@pytest.fixture
def twelve_tasks():
    """12 tasks, ids 0..11; ids 1, 4, 7 and 10 are pending."""
    statuses = ["completed", "pending", "in-progress"]
    return [
        _make_task(i, title=f"Project {i:02d}", status=statuses[i % 3], customer=f"Customer {i}")
        for i in range(12)
    ]
