from supportdesk.table.pipeline import filter_records, text_matches
from supportdesk.table.state import ALL


def test_empty_query_and_all_status_returns_set_unchanged(twelve_tasks):
    out = filter_records(twelve_tasks, "", ALL)
    assert out == twelve_tasks
    assert out is not twelve_tasks


def test_status_filter_keeps_only_matching_in_order(twelve_tasks):
    out = filter_records(twelve_tasks, "", "pending")
    assert [t.id for t in out] == [1, 4, 7, 10]


def test_query_is_case_insensitive_substring(make_task):
    tasks = [make_task(1, title="Website Redesign"), make_task(2, title="Mobile App")]
    assert [t.id for t in filter_records(tasks, "site")] == [1]
    assert [t.id for t in filter_records(tasks, "SITE")] == [1]


def test_query_searches_description_and_customer_name(make_task):
    tasks = [
        make_task(1, title="A", description="Fix billing webhook"),
        make_task(2, title="B", customer="Acme Billing Ltd"),
        make_task(3, title="C"),
    ]
    assert [t.id for t in filter_records(tasks, "billing")] == [1, 2]


def test_query_ignores_other_fields(make_task):
    tasks = [make_task(1, title="A", keywords=["billing"], members=["billing"])]
    assert filter_records(tasks, "billing") == []


def test_query_and_status_are_combined(make_task):
    tasks = [
        make_task(1, title="Website", status="pending"),
        make_task(2, title="Website", status="completed"),
    ]
    assert [t.id for t in filter_records(tasks, "web", "completed")] == [2]


def test_missing_fields_match_as_empty_string():
    records = [{"id": 1, "projectTitle": None}, {"id": 2}]
    assert filter_records(records, "", ALL) == records
    assert filter_records(records, "x", ALL) == []


def test_text_matches_with_explicit_fields():
    rep = {"name": "Alice", "email": "alice@example.com"}
    assert text_matches(rep, "EXAMPLE", ["name", "email"])
    assert not text_matches(rep, "example", ["name"])
