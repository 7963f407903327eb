"""Host state reducer tests: navigation, clicks and reset."""

from calendar_logic import CalendarDate, month_grid
import picker_state as ps
from selection import DateRange, SelectionMode

TODAY = CalendarDate(2024, 3, 18)


def test_initial_state_opens_on_today():
    state = ps.initial_state(SelectionMode.RANGE, TODAY)
    assert (state.year, state.month) == (2024, 3)
    assert state.selection is None


def test_initial_state_opens_on_seed():
    seed = DateRange(CalendarDate(2023, 11, 2), CalendarDate(2023, 11, 9))
    state = ps.initial_state(SelectionMode.RANGE, TODAY, seed)
    assert (state.year, state.month) == (2023, 11)
    assert state.selection == seed

    state = ps.initial_state(SelectionMode.SINGLE, TODAY, CalendarDate(2025, 7, 4))
    assert (state.year, state.month) == (2025, 7)


def test_navigation_replaces_month_only():
    start = ps.initial_state(SelectionMode.SINGLE, TODAY, CalendarDate(2024, 1, 5))
    prev = ps.show_previous_month(start)
    assert (prev.year, prev.month) == (2023, 12)
    assert prev.selection == start.selection
    # Original value untouched
    assert (start.year, start.month) == (2024, 1)

    state = ps.initial_state(SelectionMode.SINGLE, CalendarDate(2024, 12, 31))
    assert (ps.show_next_month(state).year, ps.show_next_month(state).month) == (2025, 1)
    assert ps.show_previous_year(state).year == 2023
    assert ps.show_next_year(state).year == 2025
    assert ps.go_to_month(state, TODAY).month == 3


def test_grid_follows_displayed_month():
    state = ps.show_next_month(ps.initial_state(SelectionMode.RANGE, TODAY))
    assert ps.grid(state) == month_grid(2024, 4)


def test_range_clicks_and_reset():
    state = ps.initial_state(SelectionMode.RANGE, TODAY)
    state = ps.click(state, CalendarDate(2024, 3, 10))
    assert state.selection == DateRange(CalendarDate(2024, 3, 10), CalendarDate(2024, 3, 10))

    state = ps.click(state, CalendarDate(2024, 3, 15))
    assert state.selection == DateRange(CalendarDate(2024, 3, 15), CalendarDate(2024, 3, 15))

    state = ps.reset_selection(state)
    assert state.selection is None
    assert state.mode is SelectionMode.RANGE


def test_open_range_spans_months():
    state = ps.initial_state(SelectionMode.RANGE, TODAY,
                             DateRange(CalendarDate(2024, 3, 10)))
    state = ps.show_previous_month(state)
    state = ps.click(state, CalendarDate(2024, 2, 20))
    assert state.selection == DateRange(CalendarDate(2024, 2, 20), CalendarDate(2024, 3, 10))


def test_single_click_replaces():
    state = ps.initial_state(SelectionMode.SINGLE, TODAY, CalendarDate(2024, 3, 1))
    state = ps.click(state, CalendarDate(2024, 3, 20))
    assert state.selection == CalendarDate(2024, 3, 20)
    assert ps.reset_selection(state).selection is None
