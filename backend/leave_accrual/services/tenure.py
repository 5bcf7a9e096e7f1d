"""Service-length helpers keyed off an employee's original join date."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from leave_accrual.schemas.policy import DEFAULT_POLICY

if TYPE_CHECKING:
    from leave_accrual.schemas.policy import AccrualPolicy


def anniversary_date(join_date: date, years: int) -> date:
    """Return the date ``years`` after ``join_date`` on the same month/day.

    A Feb 29 join rolls over to Mar 1 in non-leap anniversary years.
    """
    target_year = join_date.year + years
    try:
        return join_date.replace(year=target_year)
    except ValueError:
        return date(target_year, 2, 28) + timedelta(days=1)


def completed_years(join_date: date, as_of: date) -> int:
    """Full years of service on ``as_of``; negative before the join date."""
    years = as_of.year - join_date.year
    if (as_of.month, as_of.day) < (join_date.month, join_date.day):
        years -= 1
    return years


def has_completed_anniversary(join_date: date, as_of: date | None = None, years: int = 3) -> bool:
    """True only on the exact day the employee completes ``years`` of service."""
    if as_of is None:
        as_of = date.today()
    if completed_years(join_date, as_of) != years:
        return False
    return (as_of.month, as_of.day) == (join_date.month, join_date.day)


def has_completed_at_least(join_date: date, as_of: date | None = None, years: int = 3) -> bool:
    """True once the employee has ``years`` or more full years of service."""
    if as_of is None:
        as_of = date.today()
    return completed_years(join_date, as_of) >= years


def anniversary_bonus_due(
    join_date: date,
    on_date: date,
    policy: AccrualPolicy = DEFAULT_POLICY,
) -> float:
    """Casual bonus that becomes due on ``on_date`` (0 unless it is a bonus anniversary)."""
    return sum(
        (
            amount
            for years, amount in policy.anniversary_bonuses.items()
            if has_completed_anniversary(join_date, on_date, years)
        ),
        0.0,
    )
