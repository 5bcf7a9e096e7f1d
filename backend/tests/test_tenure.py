"""Tests for service-length helpers and anniversary predicates."""

from __future__ import annotations

from datetime import date

import pytest

from leave_accrual.schemas.policy import AccrualPolicy
from leave_accrual.services.tenure import (
    anniversary_bonus_due,
    anniversary_date,
    completed_years,
    has_completed_anniversary,
    has_completed_at_least,
)

JOIN = date(2021, 5, 10)


# ---------------------------------------------------------------------------
# anniversary_date / completed_years
# ---------------------------------------------------------------------------


def test_anniversary_date_same_month_and_day() -> None:
    assert anniversary_date(JOIN, 3) == date(2024, 5, 10)
    assert anniversary_date(JOIN, 5) == date(2026, 5, 10)


def test_anniversary_date_leap_day_rolls_to_march_first() -> None:
    assert anniversary_date(date(2020, 2, 29), 3) == date(2023, 3, 1)
    assert anniversary_date(date(2020, 2, 29), 4) == date(2024, 2, 29)


@pytest.mark.parametrize(
    ("as_of", "expected"),
    [
        (date(2021, 1, 1), -1),
        (date(2021, 5, 10), 0),
        (date(2024, 5, 9), 2),
        (date(2024, 5, 10), 3),
        (date(2024, 12, 31), 3),
        (date(2026, 5, 10), 5),
    ],
)
def test_completed_years(as_of: date, expected: int) -> None:
    assert completed_years(JOIN, as_of) == expected


# ---------------------------------------------------------------------------
# has_completed_anniversary (exact day)
# ---------------------------------------------------------------------------


def test_has_completed_anniversary_on_the_day() -> None:
    assert has_completed_anniversary(JOIN, date(2024, 5, 10), 3) is True
    assert has_completed_anniversary(JOIN, date(2026, 5, 10), 5) is True


def test_has_completed_anniversary_false_day_before_and_after() -> None:
    assert has_completed_anniversary(JOIN, date(2024, 5, 9), 3) is False
    assert has_completed_anniversary(JOIN, date(2024, 5, 11), 3) is False


def test_has_completed_anniversary_false_for_other_milestones() -> None:
    # Same month/day, but four full years rather than three.
    assert has_completed_anniversary(JOIN, date(2025, 5, 10), 3) is False
    assert has_completed_anniversary(JOIN, date(2024, 5, 10), 5) is False


# ---------------------------------------------------------------------------
# has_completed_at_least
# ---------------------------------------------------------------------------


def test_has_completed_at_least_before_anniversary() -> None:
    assert has_completed_at_least(JOIN, date(2024, 5, 9), 3) is False


def test_has_completed_at_least_from_anniversary_onward() -> None:
    assert has_completed_at_least(JOIN, date(2024, 5, 10), 3) is True
    assert has_completed_at_least(JOIN, date(2030, 1, 1), 3) is True
    assert has_completed_at_least(JOIN, date(2030, 1, 1), 5) is True


def test_has_completed_at_least_zero_years_from_join_day() -> None:
    assert has_completed_at_least(JOIN, JOIN, 0) is True
    assert has_completed_at_least(JOIN, date(2021, 5, 9), 0) is False


# ---------------------------------------------------------------------------
# anniversary_bonus_due
# ---------------------------------------------------------------------------


def test_anniversary_bonus_due_on_bonus_days() -> None:
    assert anniversary_bonus_due(JOIN, date(2024, 5, 10)) == 3
    assert anniversary_bonus_due(JOIN, date(2026, 5, 10)) == 5


def test_anniversary_bonus_due_zero_otherwise() -> None:
    assert anniversary_bonus_due(JOIN, date(2024, 5, 11)) == 0
    assert anniversary_bonus_due(JOIN, date(2025, 5, 10)) == 0


def test_anniversary_bonus_due_uses_policy_milestones() -> None:
    policy = AccrualPolicy(anniversary_bonuses={1: 2.0})
    assert anniversary_bonus_due(JOIN, date(2022, 5, 10), policy) == 2
    assert anniversary_bonus_due(JOIN, date(2024, 5, 10), policy) == 0
