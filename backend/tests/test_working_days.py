"""Tests for the working-day calendar (last Mon-Fri of a month)."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from leave_accrual.exceptions import InvalidArgumentError
from leave_accrual.services.working_days import (
    is_last_working_day_of_month,
    last_working_day,
    previous_month,
    validate_year_month,
)

if TYPE_CHECKING:
    from httpx import AsyncClient

# ---------------------------------------------------------------------------
# last_working_day
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [
        (2023, 1, date(2023, 1, 31)),  # Tuesday, kept
        (2024, 2, date(2024, 2, 29)),  # leap-day Thursday, kept
        (2023, 4, date(2023, 4, 28)),  # 30th is a Sunday
        (2023, 9, date(2023, 9, 29)),  # 30th is a Saturday
        (2023, 12, date(2023, 12, 29)),  # 31st is a Sunday
        (2026, 1, date(2026, 1, 30)),  # 31st is a Saturday
        (2026, 2, date(2026, 2, 27)),  # 28th is a Saturday
        (2025, 12, date(2025, 12, 31)),  # Wednesday, kept
    ],
)
def test_last_working_day(year: int, month: int, expected: date) -> None:
    assert last_working_day(year, month) == expected


def test_last_working_day_is_always_a_weekday() -> None:
    for year in range(2020, 2031):
        for month in range(1, 13):
            day = last_working_day(year, month)
            assert day.weekday() < 5
            assert (day.year, day.month) == (year, month)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_last_working_day_rejects_invalid_month(month: int) -> None:
    with pytest.raises(InvalidArgumentError, match="Month must be between 1 and 12"):
        last_working_day(2024, month)


def test_invalid_argument_error_is_422() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_year_month(10000, 1)
    assert exc_info.value.status_code == 422


# ---------------------------------------------------------------------------
# is_last_working_day_of_month
# ---------------------------------------------------------------------------


def test_is_last_working_day_true_on_closing_day() -> None:
    assert is_last_working_day_of_month(date(2023, 4, 28)) is True


def test_is_last_working_day_false_on_weekend_month_end() -> None:
    # 2023-04-30 is a Sunday; the working month closed on the 28th.
    assert is_last_working_day_of_month(date(2023, 4, 30)) is False


def test_is_last_working_day_false_day_before() -> None:
    assert is_last_working_day_of_month(date(2023, 1, 30)) is False


def test_is_last_working_day_defaults_to_today() -> None:
    today = date.today()
    assert is_last_working_day_of_month() is (today == last_working_day(today.year, today.month))


# ---------------------------------------------------------------------------
# previous_month
# ---------------------------------------------------------------------------


def test_previous_month_wraps_january() -> None:
    assert previous_month(2024, 1) == (2023, 12)


def test_previous_month_same_year() -> None:
    assert previous_month(2024, 7) == (2024, 6)


# ---------------------------------------------------------------------------
# API: /calendar
# ---------------------------------------------------------------------------


async def test_api_last_working_day(async_client: AsyncClient) -> None:
    resp = await async_client.get("/calendar/last-working-day/2023/4")
    assert resp.status_code == 200
    assert resp.json() == {"year": 2023, "month": 4, "last_working_day": "2023-04-28"}


async def test_api_last_working_day_invalid_month(async_client: AsyncClient) -> None:
    resp = await async_client.get("/calendar/last-working-day/2023/13")
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "InvalidArgumentError"
    assert "Month must be between 1 and 12" in data["detail"]


async def test_api_is_last_working_day(async_client: AsyncClient) -> None:
    resp = await async_client.get("/calendar/is-last-working-day", params={"on": "2023-01-31"})
    assert resp.status_code == 200
    assert resp.json() == {"on": "2023-01-31", "is_last_working_day": True, "last_working_day": "2023-01-31"}


async def test_api_is_not_last_working_day(async_client: AsyncClient) -> None:
    resp = await async_client.get("/calendar/is-last-working-day", params={"on": "2023-04-30"})
    data = resp.json()
    assert data["is_last_working_day"] is False
    assert data["last_working_day"] == "2023-04-28"
