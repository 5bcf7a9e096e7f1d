"""Working-day calendar: weekends only, no public-holiday lookups."""

from __future__ import annotations

from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date, timedelta

from leave_accrual.exceptions import InvalidArgumentError

# date.weekday(): Monday == 0 ... Sunday == 6
_SATURDAY = 5
_SUNDAY = 6


def validate_year_month(year: int, month: int) -> None:
    """Raise InvalidArgumentError unless (year, month) names a real calendar month."""
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgumentError(f"Year must be between {MINYEAR} and {MAXYEAR}, got {year}")
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"Month must be between 1 and 12, got {month}")


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) of the month before, wrapping January to December."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def last_working_day(year: int, month: int) -> date:
    """Return the last Monday-Friday date of the given month."""
    validate_year_month(year, month)
    _, days_in_month = monthrange(year, month)
    last_day = date(year, month, days_in_month)

    weekday = last_day.weekday()
    if weekday == _SUNDAY:
        return last_day - timedelta(days=2)
    if weekday == _SATURDAY:
        return last_day - timedelta(days=1)
    return last_day


def is_last_working_day_of_month(day: date | None = None) -> bool:
    """Check whether ``day`` (default: today) is the last working day of its month."""
    if day is None:
        day = date.today()
    return day == last_working_day(day.year, day.month)
