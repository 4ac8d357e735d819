from supportdesk.models import Representative, TaskRecord
from supportdesk.stats import filter_representatives, representative_stats, task_stats


def test_task_stats():
    tasks = [
        TaskRecord(id=1, status="completed"),
        TaskRecord(id=2, status="pending"),
        TaskRecord(id=3, status="pending"),
        TaskRecord(id=4, status="on-hold"),
    ]
    stats = task_stats(tasks, [Representative(name="a"), Representative(name="b")])
    assert stats.total_tasks == 4
    assert stats.completed_tasks == 1
    assert stats.pending_tasks == 2
    assert stats.team_members == 2
    assert stats.by_status["in-progress"] == 0
    assert stats.by_status["on-hold"] == 1


def test_task_stats_empty():
    stats = task_stats([])
    assert stats.total_tasks == 0
    assert sum(stats.by_status.values()) == 0


def test_representative_stats_and_search():
    reps = [
        Representative(name="Alice", email="alice@acme.io", skillset="Sales", status="Active"),
        Representative(name="Bob", email="bob@acme.io", status="Inactive"),
        Representative(name="Carol", email="carol@globex.io", status="active"),
    ]
    stats = representative_stats(reps)
    assert (stats.total, stats.active, stats.inactive) == (3, 2, 1)
    assert stats.by_skillset == {"Sales": 1, "Customer Support": 2}

    assert [r.name for r in filter_representatives(reps, "GLOBEX")] == ["Carol"]
    assert [r.name for r in filter_representatives(reps, "sales")] == ["Alice"]
    assert len(filter_representatives(reps, "")) == 3
