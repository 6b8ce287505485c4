"""Selected date/time value and the picker window's state struct."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime

from calendar_logic import (
    InvalidArgument,
    MonthGrid,
    build_month_grid,
    days_in_month,
    next_month,
    prev_month,
)

logger = logging.getLogger(__name__)

_TIME_LIMITS = {"hour": 23, "minute": 59, "second": 59}


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidArgument(f"{name} must be in {low}..{high}, got {value!r}")


@dataclass(frozen=True)
class SelectedDateTime:
    """A local date and time with each field in its natural range."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        _check_range("month", self.month, 1, 12)
        _check_range("day", self.day, 1, days_in_month(self.year, self.month))
        for name, high in _TIME_LIMITS.items():
            _check_range(name, getattr(self, name), 0, high)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "SelectedDateTime":
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def date_text(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def preview(self) -> str:
        """Return ``YYYY-MM-DD HH:MM:SS``, every field zero-padded."""
        return f"{self.date_text()} {self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __str__(self) -> str:
        return self.preview()


def parse_time_field(text: str, name: str) -> int:
    """Parse one typed hour/minute/second field.

    Raises ``ValueError`` (or its subclass ``InvalidArgument``) when the
    text is not a decimal integer in range.
    """
    text = text.strip()
    # int() would also take "1_5" and non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{name} is not a decimal number: {text!r}")
    value = int(text)
    _check_range(name, value, 0, _TIME_LIMITS[name])
    return value


class PickerState:
    """Selection and displayed month for one picker window.

    Only mutated through the setters below; every setter leaves the state
    untouched when it raises.
    """

    def __init__(self, initial: datetime) -> None:
        self.selected = SelectedDateTime.from_datetime(initial)
        self.view_year = initial.year
        self.view_month = initial.month

    @property
    def preview(self) -> str:
        return self.selected.preview()

    # ------------------------------------------------------------------
    # Date
    # ------------------------------------------------------------------
    def select_date(self, d: date) -> None:
        self.selected = replace(self.selected, year=d.year, month=d.month, day=d.day)
        logger.debug("Selected date %s", self.selected.date_text())

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------
    def set_hour(self, hour: int) -> None:
        self.selected = replace(self.selected, hour=hour)

    def set_minute(self, minute: int) -> None:
        self.selected = replace(self.selected, minute=minute)

    def set_second(self, second: int) -> None:
        self.selected = replace(self.selected, second=second)

    def apply_time_text(self, hour: str, minute: str, second: str) -> bool:
        """Apply three typed time fields at once.

        Returns False and keeps the previous time if any field is invalid.
        """
        try:
            values = {
                "hour": parse_time_field(hour, "hour"),
                "minute": parse_time_field(minute, "minute"),
                "second": parse_time_field(second, "second"),
            }
        except ValueError as exc:
            # No user-facing hint for now; the stale time stays displayed.
            logger.warning("Ignoring typed time %r:%r:%r (%s)", hour, minute, second, exc)
            return False
        self.selected = replace(self.selected, **values)
        return True

    def set_now(self, now: datetime) -> None:
        """Jump the selection and the displayed month to ``now``."""
        self.selected = SelectedDateTime.from_datetime(now)
        self.show_month(now.year, now.month)

    # ------------------------------------------------------------------
    # Month navigation
    # ------------------------------------------------------------------
    def show_month(self, year: int, month: int) -> None:
        """Display another month; years outside ``date`` range are refused."""
        _check_range("month", month, 1, 12)
        _check_range("year", year, date.min.year, date.max.year)
        self.view_year, self.view_month = year, month
        logger.debug("Showing %04d-%02d", year, month)

    def show_previous_month(self) -> None:
        self.show_month(*prev_month(self.view_year, self.view_month))

    def show_next_month(self) -> None:
        self.show_month(*next_month(self.view_year, self.view_month))

    def month_grid(self, today: date) -> MonthGrid:
        return build_month_grid(self.view_year, self.view_month, today)
