from supportdesk.table import reducers
from supportdesk.table.state import ALL, ASC, initial_state


def test_initial_state():
    state = initial_state()
    assert state.working_set == ()
    assert state.query == ""
    assert state.status_filter == ALL
    assert state.sort_key is None
    assert state.sort_direction == ASC
    assert state.current_page == 1
    assert state.page_size == 10
    assert state.selected_ids == frozenset()


def test_page_size_has_a_floor():
    assert initial_state(page_size=0).page_size == 1


def test_sync_replaces_working_set_with_copy(make_task):
    source = [make_task(1), make_task(2)]
    state = reducers.sync_source(initial_state(), source)
    source.append(make_task(3))
    assert [t.id for t in state.working_set] == [1, 2]


def test_sync_discards_local_appends(make_task):
    state = reducers.append_record(initial_state(), make_task("local"))
    state = reducers.sync_source(state, [make_task(1)])
    assert [t.id for t in state.working_set] == [1]


def test_sync_with_empty_source(make_task):
    state = reducers.sync_source(reducers.sync_source(initial_state(), [make_task(1)]), [])
    assert state.working_set == ()


def test_transitions_do_not_mutate_input(make_task):
    before = reducers.sync_source(initial_state(), [make_task(1)])
    after = reducers.remove_record(reducers.set_query(before, "x"), 1)
    assert before.query == ""
    assert len(before.working_set) == 1
    assert after.working_set == ()
