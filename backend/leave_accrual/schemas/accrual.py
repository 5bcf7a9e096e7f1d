# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, Field

from leave_accrual.services.accrual import AccrualResult, YearAccrual


class LeaveBalance(BaseModel):
    """Casual and sick leave days."""

    casual: float
    sick: float

    @classmethod
    def from_result(cls, result: AccrualResult) -> LeaveBalance:
        return cls(casual=result.casual, sick=result.sick)


class AccrualBalanceResponse(BaseModel):
    """Accrued balance for a join date as of a given day."""

    join_date: date
    effective_join_date: date
    as_of: date
    casual: float
    sick: float


class YearAccrualResponse(BaseModel):
    """One year of the accrual replay."""

    year: int
    opening: LeaveBalance
    initial_grant: LeaveBalance
    months_credited: list[int]
    anniversaries: list[int]
    bonus_casual: float
    closing: LeaveBalance
    closed: bool
    forfeited_casual: float
    forfeited_sick: float

    @classmethod
    def from_step(cls, step: YearAccrual) -> YearAccrualResponse:
        return cls(
            year=step.year,
            opening=LeaveBalance.from_result(step.opening),
            initial_grant=LeaveBalance.from_result(step.initial_grant),
            months_credited=list(step.months_credited),
            anniversaries=list(step.anniversaries),
            bonus_casual=step.bonus_casual,
            closing=LeaveBalance.from_result(step.closing),
            closed=step.closed,
            forfeited_casual=step.forfeited_casual,
            forfeited_sick=step.forfeited_sick,
        )


class AccrualBreakdownResponse(BaseModel):
    """Year-by-year replay plus the final (clamped) balance."""

    join_date: date
    effective_join_date: date
    as_of: date
    years: list[YearAccrualResponse]
    balance: LeaveBalance


class TenureResponse(BaseModel):
    """Service length and anniversary status on a given day."""

    join_date: date
    as_of: date
    completed_years: int
    anniversary_today: int | None = Field(
        default=None,
        description="Years of service completed exactly today, if it is a bonus anniversary",
    )
    bonus_due: float
    completed_at_least: dict[int, bool]


class EmployeeAccrualResponse(AccrualBalanceResponse):
    """Accrued balance for a directory employee."""

    employee_id: uuid.UUID
    company_id: uuid.UUID


class RecordedBalance(BaseModel):
    """A balance as currently recorded by the leave-balance store."""

    employee_id: uuid.UUID
    casual: float = Field(ge=0)
    sick: float = Field(ge=0)


class BalanceAuditRequest(BaseModel):
    """Request body for POST /companies/{company_id}/accruals/audit."""

    as_of: date | None = None
    balances: list[RecordedBalance] = Field(default_factory=list)


class BalanceAuditLineResponse(BaseModel):
    """Audit outcome for one employee."""

    employee_id: uuid.UUID
    name: str
    join_date: date
    years_of_service: int
    expected: LeaveBalance
    recorded: LeaveBalance | None
    casual_delta: float | None
    sick_delta: float | None
    matches: bool


class BalanceAuditResponse(BaseModel):
    """Response from the balance audit endpoint."""

    as_of: date
    processed: int
    matched: int
    mismatched: int
    unrecorded: int
    skipped: int
    lines: list[BalanceAuditLineResponse]
    skipped_employee_ids: list[uuid.UUID]
