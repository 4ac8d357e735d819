import pytest

from supportdesk.local_repo import SAMPLE_REPRESENTATIVES, SAMPLE_TASKS, LocalRepository


@pytest.fixture
def repo(tmp_path):
    return LocalRepository(f"sqlite:///{(tmp_path / 'test.db').as_posix()}", seed=False)


def test_seed_if_empty(tmp_path):
    repo = LocalRepository(f"sqlite:///{(tmp_path / 'seeded.db').as_posix()}")
    assert len(repo.list_tasks()) == len(SAMPLE_TASKS)
    repo.seed_if_empty()
    assert len(repo.list_tasks()) == len(SAMPLE_TASKS)
    assert len(repo.list_representatives()) == len(SAMPLE_REPRESENTATIVES)


def test_task_crud(repo):
    created = repo.create_task({
        "projectTitle": "Router swap",
        "customerName": "ACME",
        "keywords": ["network"],
        "assignedMembers": [{"name": "alice"}, "bob"],
    })
    assert created.status == "pending"
    assert created.member_names == ("alice", "bob")
    assert repo.list_tasks() == [created]

    updated = repo.update_task({"id": created.id, "status": "completed"})
    assert updated.status == "completed"
    assert updated.projectTitle == "Router swap"

    assigned = repo.assign_task(created.id, ["carol"])
    assert assigned.member_names == ("carol",)

    assert repo.delete_task(created.id) is True
    assert repo.delete_task(created.id) is False
    assert repo.list_tasks() == []


def test_update_missing_task_returns_none(repo):
    assert repo.update_task({"id": "nope", "status": "completed"}) is None


def test_representatives_sorted_by_name(repo):
    repo.add_representative({"name": "Zed", "email": "z@x.io"})
    repo.add_representative({"name": "Amy", "email": "a@x.io", "skillset": "Sales"})
    reps = repo.list_representatives()
    assert [r.name for r in reps] == ["Amy", "Zed"]
    assert reps[1].skillset == "Customer Support"


def test_upload_csv_replaces_rows_per_file(repo):
    result = repo.upload_csv(b"id,name,city\n1,ACME,Oslo\n2,Globex,\n", "customers.csv")
    assert result == {"message": "CSV uploaded", "rows": 2}
    customers = repo.list_customers("customers.csv")
    assert [c.fields["name"] for c in customers] == ["ACME", "Globex"]
    assert customers[1].fields["city"] is None

    repo.upload_csv(b"id,name\n3,Initech\n", "customers.csv")
    repo.upload_csv(b"id,name\n4,Umbrella\n", "other.csv")
    assert [c.id for c in repo.list_customers("customers.csv")] == [3]
    assert [c.id for c in repo.list_customers("other.csv")] == [4]
