# ruff: noqa: B008, TC003
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Query

from leave_accrual.schemas.calendar import IsLastWorkingDayResponse, LastWorkingDayResponse
from leave_accrual.services.working_days import is_last_working_day_of_month, last_working_day

calendar_router = APIRouter(
    prefix="/calendar",
    tags=["calendar"],
)


@calendar_router.get("/last-working-day/{year}/{month}", response_model=LastWorkingDayResponse)
async def get_last_working_day(year: int, month: int) -> LastWorkingDayResponse:
    """Last Monday-Friday date of the month. Public holidays are not considered."""
    return LastWorkingDayResponse(year=year, month=month, last_working_day=last_working_day(year, month))


@calendar_router.get("/is-last-working-day", response_model=IsLastWorkingDayResponse)
async def get_is_last_working_day(on: date | None = Query(default=None)) -> IsLastWorkingDayResponse:
    """Whether ``on`` (default: today) is the day monthly leave is credited."""
    if on is None:
        on = date.today()
    return IsLastWorkingDayResponse(
        on=on,
        is_last_working_day=is_last_working_day_of_month(on),
        last_working_day=last_working_day(on.year, on.month),
    )
