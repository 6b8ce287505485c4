"""Pure calendar calculations — no UI dependencies."""

import calendar as _cal
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator

# Weeks start on Sunday
DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_MONTH_DAYS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class InvalidArgument(ValueError):
    """An argument is outside its natural range (e.g. month 13)."""


@dataclass(frozen=True)
class CalendarCell:
    """One grid slot: a blank placeholder or a day of the month."""

    day: int | None = None
    is_today: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day is None


@dataclass(frozen=True)
class MonthGrid:
    """Leading blanks followed by every day of one month, Sunday first."""

    year: int
    month: int
    cells: tuple[CalendarCell, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[CalendarCell]:
        return iter(self.cells)

    @property
    def leading_blanks(self) -> int:
        return sum(1 for c in self.cells if c.is_blank)

    def rows(self) -> list[tuple[CalendarCell, ...]]:
        """Split the cells into weeks of 7; the last week may be short."""
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]

    def today_cell(self) -> CalendarCell | None:
        return next((c for c in self.cells if c.is_today), None)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidArgument(f"month must be in 1..12, got {month!r}")


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month (28–31)."""
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def weekday_of_first(year: int, month: int) -> int:
    """Return the weekday of the 1st of the month, 0=Sunday .. 6=Saturday."""
    _check_month(month)
    # calendar.weekday() is Monday=0
    return (_cal.weekday(year, month, 1) + 1) % 7


def build_month_grid(year: int, month: int, today: date) -> MonthGrid:
    """Return the cells needed to draw a 7-column month grid.

    ``today`` only decides which cell (if any) is highlighted; it never
    clamps the requested month.
    """
    _check_month(month)
    if isinstance(today, datetime):
        today = today.date()

    blanks = weekday_of_first(year, month)
    cells = [CalendarCell() for _ in range(blanks)]
    today_in_month = today.year == year and today.month == month
    for day in range(1, days_in_month(year, month) + 1):
        cells.append(CalendarCell(day, is_today=today_in_month and today.day == day))
    return MonthGrid(year, month, tuple(cells))


def month_title(year: int, month: int) -> str:
    """Return the header text, e.g. ``"January 2006"``."""
    _check_month(month)
    return f"{_cal.month_name[month]} {year}"


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
