"""Immutable picker state (displayed month + selection) and its reducers.

The window never mutates state in place: every user action maps to one of
the functions below, which return a new ``PickerState``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from calendar_logic import (
    CalendarDate,
    MonthGrid,
    month_grid,
    next_month,
    prev_month,
    shift_year,
)
from selection import DateRange, SelectionMode, SelectionState, reset, select

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerState:
    mode: SelectionMode
    year: int
    month: int
    selection: SelectionState = None


def initial_state(mode: SelectionMode, today: CalendarDate,
                  seed: SelectionState = None) -> PickerState:
    """Open on the seeded selection's month, else on today's."""
    anchor = today
    if isinstance(seed, DateRange):
        anchor = seed.start
    elif isinstance(seed, CalendarDate):
        anchor = seed
    return PickerState(mode, anchor.year, anchor.month, seed)


def grid(state: PickerState) -> MonthGrid:
    return month_grid(state.year, state.month)


def show_previous_month(state: PickerState) -> PickerState:
    y, m = prev_month(state.year, state.month)
    return replace(state, year=y, month=m)


def show_next_month(state: PickerState) -> PickerState:
    y, m = next_month(state.year, state.month)
    return replace(state, year=y, month=m)


def show_previous_year(state: PickerState) -> PickerState:
    y, m = shift_year(state.year, state.month, -1)
    return replace(state, year=y, month=m)


def show_next_year(state: PickerState) -> PickerState:
    y, m = shift_year(state.year, state.month, 1)
    return replace(state, year=y, month=m)


def go_to_month(state: PickerState, d: CalendarDate) -> PickerState:
    return replace(state, year=d.year, month=d.month)


def click(state: PickerState, d: CalendarDate) -> PickerState:
    new = replace(state, selection=select(state.mode, state.selection, d))
    logger.debug("click %s: %s -> %s", d, state.selection, new.selection)
    return new


def reset_selection(state: PickerState) -> PickerState:
    return replace(state, selection=reset())
