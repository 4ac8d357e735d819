from supportdesk.table import reducers
from supportdesk.table.pipeline import clamp_page, display_range, page_count, paginate
from supportdesk.table.state import initial_state


def test_two_pages_of_ten(twelve_tasks):
    assert paginate(twelve_tasks, 1, 10) == twelve_tasks[0:10]
    assert paginate(twelve_tasks, 2, 10) == twelve_tasks[10:12]
    assert page_count(len(twelve_tasks), 10) == 2


def test_pages_reconstruct_the_sorted_set(twelve_tasks):
    for size in (1, 3, 5, 7, 12, 20):
        pages = page_count(len(twelve_tasks), size)
        joined = []
        for page in range(1, pages + 1):
            chunk = paginate(twelve_tasks, page, size)
            assert len(chunk) <= size
            joined.extend(chunk)
        assert joined == twelve_tasks


def test_out_of_range_page_is_empty_not_an_error(twelve_tasks):
    assert paginate(twelve_tasks, 5, 10) == []
    assert paginate([], 1, 10) == []


def test_navigation_clamps_to_page_count(twelve_tasks):
    state = reducers.sync_source(initial_state(page_size=10), twelve_tasks)
    state = reducers.go_to_page(state, 3)
    assert state.current_page == 2
    assert reducers.visible(state) == twelve_tasks[10:12]
    state = reducers.go_to_page(state, 0)
    assert state.current_page == 1


def test_next_and_previous_stop_at_the_edges(twelve_tasks):
    state = reducers.sync_source(initial_state(page_size=10), twelve_tasks)
    state = reducers.previous_page(state)
    assert state.current_page == 1
    state = reducers.next_page(reducers.next_page(state))
    assert state.current_page == 2


def test_filter_can_leave_current_page_past_the_end(twelve_tasks):
    state = reducers.sync_source(initial_state(page_size=10), twelve_tasks)
    state = reducers.go_to_page(state, 2)
    state = reducers.set_status_filter(state, "pending")
    assert state.current_page == 2
    assert reducers.visible(state) == []


def test_clamp_page_on_empty_set():
    assert clamp_page(4, 0, 10) == 1
    assert page_count(0, 10) == 0


def test_display_range():
    r = display_range(12, 2, 10)
    assert (r.start, r.end, r.total) == (11, 12, 12)
    assert r.label() == "Showing 11 to 12 of 12 results"
    assert display_range(12, 1, 10).end == 10
    empty = display_range(4, 2, 10)
    assert (empty.start, empty.end, empty.total) == (0, 0, 4)
