"""Pure calendar calculations, free of UI code and date libraries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class InvalidMonthError(ValueError):
    """Raised when a month outside 1–12 reaches the calendar functions."""

    def __init__(self, month: int) -> None:
        super().__init__(f"month must be in 1..12, got {month!r}")
        self.month = month


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule (1900 no, 2000 yes, 2100 no)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A plain (year, month, day) value, ordered chronologically."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(
                f"day {self.day!r} out of range for {self.year}-{self.month:02d}"
            )

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def fromisoformat(cls, text: str) -> "CalendarDate":
        """Parse ``YYYY-MM-DD``."""
        parts = text.strip().split("-")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"not an ISO calendar date: {text!r}")
        return cls(int(parts[0]), int(parts[1]), int(parts[2]))

    @classmethod
    def from_dict(cls, data: dict | str) -> "CalendarDate":
        """Accept either ``{"year", "month", "day"}`` or an ISO string."""
        if isinstance(data, str):
            return cls.fromisoformat(data)
        try:
            return cls(int(data["year"]), int(data["month"]), int(data["day"]))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"not a calendar date: {data!r}") from exc

    def to_dict(self) -> dict[str, int]:
        return {"year": self.year, "month": self.month, "day": self.day}

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def month_start(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def __str__(self) -> str:
        return self.isoformat()


# A grid cell is either a real date or None for padding.
DayCell = CalendarDate | None
MonthGrid = list[list[DayCell]]


def iso_weekday(d: CalendarDate) -> int:
    """Return the ISO weekday of *d* (Mon=1 … Sun=7), via Zeller's congruence."""
    y, m = d.year, d.month
    if m < 3:
        # Jan/Feb count as months 13/14 of the previous year
        m += 12
        y -= 1
    k, j = y % 100, y // 100
    h = (d.day + 13 * (m + 1) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    # h: 0 = Saturday, 1 = Sunday, 2 = Monday, ...
    return (h + 5) % 7 + 1


def first_weekday_index(year: int, month: int) -> int:
    """Column (0 = Monday … 6 = Sunday) of the 1st of the month."""
    return iso_weekday(CalendarDate(year, month, 1)) - 1


def month_grid(year: int, month: int) -> MonthGrid:
    """Return the week rows for the given month.

    Each row holds exactly 7 cells, Monday first. Cells before the 1st and
    after the last day are None; only as many rows as the month needs.
    """
    _check_month(month)
    cells: list[DayCell] = [None] * first_weekday_index(year, month)
    cells.extend(
        CalendarDate(year, month, day) for day in range(1, days_in_month(year, month) + 1)
    )

    grid: MonthGrid = []
    for i in range(0, len(cells), 7):
        row = cells[i:i + 7]
        row.extend([None] * (7 - len(row)))
        grid.append(row)
    return grid


def month_grid_for(d: CalendarDate) -> MonthGrid:
    """Grid of the month containing *d*; the day itself is ignored."""
    return month_grid(d.year, d.month)


def grid_days(grid: MonthGrid) -> list[list[int | None]]:
    """Plain JSON form of a grid: day numbers, None for padding."""
    return [[cell.day if cell is not None else None for cell in row] for row in grid]


def month_title(year: int, month: int) -> str:
    _check_month(month)
    return f"{MONTH_NAMES[month - 1]} {year}"


def day_ordinal(d: CalendarDate) -> int:
    """Days since 0001-01-01 (which is ordinal 1)."""
    y = d.year - 1
    days = y * 365 + y // 4 - y // 100 + y // 400
    days += sum(days_in_month(d.year, m) for m in range(1, d.month))
    return days + d.day


def days_between(start: CalendarDate, end: CalendarDate) -> int:
    """Signed day difference ``end - start``."""
    return day_ordinal(end) - day_ordinal(start)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    _check_month(month)
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    _check_month(month)
    if month == 12:
        return year + 1, 1
    return year, month + 1


def shift_year(year: int, month: int, delta: int) -> tuple[int, int]:
    _check_month(month)
    return year + delta, month
