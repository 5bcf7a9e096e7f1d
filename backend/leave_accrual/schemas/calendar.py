from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class LastWorkingDayResponse(BaseModel):
    """Last working day (Mon-Fri) of a month."""

    year: int
    month: int
    last_working_day: date


class IsLastWorkingDayResponse(BaseModel):
    """Whether a date is its month's last working day."""

    on: date
    is_last_working_day: bool
    last_working_day: date
