from supportdesk.models import Customer, Member, Representative, TaskRecord, tasks_from_payload


def test_task_from_dict_full():
    task = TaskRecord.from_dict(
        {
            "id": 7,
            "projectTitle": "Router",
            "description": "Replace router",
            "customerName": "ACME",
            "keywords": ["network", "hw"],
            "status": "in-progress",
            "assignedMembers": [{"name": "alice"}, {"name": "bob"}],
        }
    )
    assert task.id == 7
    assert task.keywords == ("network", "hw")
    assert task.member_names == ("alice", "bob")
    assert task.get("customerName") == "ACME"
    assert task.get("missing", "x") == "x"


def test_task_from_dict_tolerates_gaps():
    task = TaskRecord.from_dict(
        {"_id": "abc", "projectTitle": None, "keywords": "a, b,,", "assignedMembers": ["carol", None]}
    )
    assert task.id == "abc"
    assert task.projectTitle == ""
    assert task.description == ""
    assert task.status == ""
    assert task.keywords == ("a", "b")
    assert task.assignedMembers == (Member("carol"),)


def test_task_id_falls_back_to_task_id():
    assert TaskRecord.from_dict({"taskId": 3}).id == 3


def test_unknown_status_is_kept():
    assert TaskRecord.from_dict({"id": 1, "status": "on-hold"}).status == "on-hold"


def test_task_to_dict():
    task = TaskRecord(id=1, projectTitle="P", assignedMembers=(Member("a"),), keywords=("k",))
    data = task.to_dict()
    assert data["assignedMembers"] == [{"name": "a"}]
    assert data["keywords"] == ["k"]
    assert TaskRecord.from_dict(data) == task


def test_tasks_from_payload_skips_non_mappings():
    tasks = tasks_from_payload([{"id": 1}, "junk", None, {"id": 2}])
    assert [t.id for t in tasks] == [1, 2]
    assert tasks_from_payload(None) == []


def test_representative_defaults():
    rep = Representative.from_dict({"_id": 4, "name": "Dana", "email": "d@x.io"})
    assert rep.id == 4
    assert rep.skillset == "Customer Support"
    assert rep.status == "Active"


def test_customer_keeps_all_columns():
    cust = Customer.from_dict({"id": 1, "name": "ACME", "city": "Oslo"})
    assert cust.id == 1
    assert cust.to_dict() == {"id": 1, "name": "ACME", "city": "Oslo"}
