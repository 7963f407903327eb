"""Single-date and date-range selection logic, free of UI code."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from calendar_logic import CalendarDate, days_between

logger = logging.getLogger(__name__)


class SelectionMode(Enum):
    SINGLE = "single"
    RANGE = "range"


MODE_LABELS = {
    SelectionMode.SINGLE: "Single date",
    SelectionMode.RANGE: "Date range",
}


class Highlight(Enum):
    NONE = "none"
    SELECTED = "selected"
    IN_RANGE = "in_range"


class InvalidRangeInvariant(AssertionError):
    """A range ended before it started; only a selection bug can cause this."""


@dataclass(frozen=True)
class DateRange:
    """A range selection. ``end`` is None while the range is still open."""

    start: CalendarDate
    end: CalendarDate | None = None

    def __post_init__(self) -> None:
        if self.end is not None and self.end < self.start:
            raise InvalidRangeInvariant(f"range end {self.end} precedes start {self.start}")

    @property
    def is_open(self) -> bool:
        return self.end is None


# SINGLE mode holds a CalendarDate, RANGE mode a DateRange; None when empty.
SelectionState = CalendarDate | DateRange | None


def select(mode: SelectionMode | str, prior: SelectionState,
           clicked: CalendarDate) -> SelectionState:
    """Return the selection that results from clicking *clicked*.

    Range mode: with nothing selected, or with a complete range, a click
    starts a fresh one-day range. With an open range, the click closes it and
    the two endpoints are put in ascending order.

    *mode* may be a ``SelectionMode`` or its value (``"single"``/``"range"``);
    anything else raises ``ValueError``.
    """
    mode = SelectionMode(mode)
    if mode is SelectionMode.SINGLE:
        return clicked

    if prior is None or prior.end is not None:
        new = DateRange(clicked, clicked)
    elif clicked < prior.start:
        new = DateRange(clicked, prior.start)
    else:
        new = DateRange(prior.start, clicked)
    logger.debug("range selection %s -> %s", prior, new)
    return new


def reset() -> SelectionState:
    """The empty selection, valid for either mode."""
    return None


def selection_bounds(mode: SelectionMode | str,
                     state: SelectionState) -> tuple[CalendarDate | None, CalendarDate | None]:
    """Return (lo, hi) of what is selected, or (None, None)."""
    mode = SelectionMode(mode)
    if state is None:
        return None, None
    if mode is SelectionMode.SINGLE:
        return state, state
    return state.start, state.end if state.end is not None else state.start


def highlight(mode: SelectionMode | str, state: SelectionState,
              d: CalendarDate) -> Highlight:
    """How a renderer should mark the cell for *d*."""
    mode = SelectionMode(mode)
    if state is None:
        return Highlight.NONE
    if mode is SelectionMode.SINGLE:
        return Highlight.SELECTED if d == state else Highlight.NONE
    if d == state.start or d == state.end:
        return Highlight.SELECTED
    if state.end is not None and state.start < d < state.end:
        return Highlight.IN_RANGE
    return Highlight.NONE


def range_length(state: DateRange | None) -> int:
    """Inclusive day count of a closed range; 0 when empty or open."""
    if state is None or state.end is None:
        return 0
    return days_between(state.start, state.end) + 1


# ------------------------------------------------------------------
# JSON shapes
# ------------------------------------------------------------------
def state_to_json(mode: SelectionMode | str, state: SelectionState) -> dict | None:
    mode = SelectionMode(mode)
    if state is None:
        return None
    if mode is SelectionMode.SINGLE:
        return state.to_dict()
    return {
        "start": state.start.to_dict(),
        "end": state.end.to_dict() if state.end is not None else None,
    }


def state_from_json(mode: SelectionMode | str, data: dict | str | None) -> SelectionState:
    mode = SelectionMode(mode)
    if data is None:
        return None
    if mode is SelectionMode.SINGLE:
        return CalendarDate.from_dict(data)
    if not isinstance(data, dict) or "start" not in data:
        raise ValueError(f"not a range selection: {data!r}")
    end = data.get("end")
    return DateRange(
        CalendarDate.from_dict(data["start"]),
        CalendarDate.from_dict(end) if end is not None else None,
    )
