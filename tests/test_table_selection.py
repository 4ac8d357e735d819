from supportdesk.table import reducers
from supportdesk.table.state import initial_state


def _state(make_task, n=6, page_size=3):
    tasks = [make_task(i, title=f"T{i}") for i in range(n)]
    return reducers.sync_source(initial_state(page_size=page_size), tasks)


def test_toggle_twice_restores_selection(make_task):
    state = reducers.toggle_selection(_state(make_task), 2)
    again = reducers.toggle_selection(reducers.toggle_selection(state, 4), 4)
    assert again.selected_ids == state.selected_ids == frozenset({2})


def test_bulk_select_then_clear_is_empty(make_task):
    state = reducers.bulk_select(_state(make_task), True)
    assert state.selected_ids == frozenset({0, 1, 2})
    assert reducers.bulk_select(state, False).selected_ids == frozenset()


def test_bulk_select_replaces_instead_of_union(make_task):
    state = _state(make_task)
    state = reducers.toggle_selection(state, 1)
    state = reducers.toggle_selection(state, 3)
    state = reducers.go_to_page(state, 2)
    state = reducers.bulk_select(state, True)
    assert state.selected_ids == frozenset({3, 4, 5})


def test_selection_survives_paging_and_filtering(make_task):
    state = reducers.toggle_selection(_state(make_task), 0)
    state = reducers.go_to_page(state, 2)
    state = reducers.set_query(state, "T5")
    assert reducers.is_selected(state, 0)


def test_all_visible_selected_requires_every_visible_id(make_task):
    state = _state(make_task)
    state = reducers.toggle_selection(state, 0)
    state = reducers.toggle_selection(state, 1)
    state = reducers.toggle_selection(state, 4)
    # Three ids selected and three rows visible, but 2 is not one of them.
    assert not reducers.all_visible_selected(state)
    state = reducers.toggle_selection(state, 2)
    assert reducers.all_visible_selected(state)


def test_all_visible_selected_is_false_for_an_empty_page(make_task):
    state = reducers.set_query(_state(make_task), "nothing matches")
    assert not reducers.all_visible_selected(state)
