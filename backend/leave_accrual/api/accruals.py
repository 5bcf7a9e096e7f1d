# ruff: noqa: B008, TC003
"""API endpoints for accrued leave balances and balance audits."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query, status

from leave_accrual.api.deps import AdminDep, EmployeeServiceDep, PolicyDep, resolve_as_of, validate_company_scope
from leave_accrual.exceptions import AppError, NotFoundError
from leave_accrual.schemas.accrual import (
    AccrualBalanceResponse,
    AccrualBreakdownResponse,
    BalanceAuditLineResponse,
    BalanceAuditRequest,
    BalanceAuditResponse,
    EmployeeAccrualResponse,
    LeaveBalance,
    TenureResponse,
    YearAccrualResponse,
)
from leave_accrual.services.accrual import (
    AccrualResult,
    accrual_breakdown,
    compute_accrual,
    effective_join_date,
)
from leave_accrual.services.audit import audit_company_balances
from leave_accrual.services.tenure import (
    anniversary_bonus_due,
    completed_years,
    has_completed_anniversary,
    has_completed_at_least,
)

# ---------------------------------------------------------------------------
# Stateless calculators: /accruals/...
# ---------------------------------------------------------------------------

accruals_router = APIRouter(
    prefix="/accruals",
    tags=["accruals"],
)


@accruals_router.get("/balance", response_model=AccrualBalanceResponse)
async def get_accrued_balance(
    policy: PolicyDep,
    join_date: date = Query(),
    as_of: date | None = Query(default=None),
) -> AccrualBalanceResponse:
    """Casual and sick leave accrued from ``join_date`` through ``as_of`` (default: today)."""
    as_of = resolve_as_of(as_of)
    result = compute_accrual(join_date, as_of, policy)
    return AccrualBalanceResponse(
        join_date=join_date,
        effective_join_date=effective_join_date(join_date, policy),
        as_of=as_of,
        casual=result.casual,
        sick=result.sick,
    )


@accruals_router.get("/breakdown", response_model=AccrualBreakdownResponse)
async def get_accrual_breakdown(
    policy: PolicyDep,
    join_date: date = Query(),
    as_of: date | None = Query(default=None),
) -> AccrualBreakdownResponse:
    """Year-by-year replay behind the accrued balance."""
    as_of = resolve_as_of(as_of)
    steps = accrual_breakdown(join_date, as_of, policy)
    result = compute_accrual(join_date, as_of, policy)
    return AccrualBreakdownResponse(
        join_date=join_date,
        effective_join_date=effective_join_date(join_date, policy),
        as_of=as_of,
        years=[YearAccrualResponse.from_step(step) for step in steps],
        balance=LeaveBalance.from_result(result),
    )


@accruals_router.get("/tenure", response_model=TenureResponse)
async def get_tenure(
    policy: PolicyDep,
    join_date: date = Query(),
    as_of: date | None = Query(default=None),
) -> TenureResponse:
    """Completed years of service and anniversary bonus status on ``as_of``."""
    as_of = resolve_as_of(as_of)
    milestones = sorted(policy.anniversary_bonuses)
    anniversary_today = next(
        (years for years in milestones if has_completed_anniversary(join_date, as_of, years)),
        None,
    )
    return TenureResponse(
        join_date=join_date,
        as_of=as_of,
        completed_years=completed_years(join_date, as_of),
        anniversary_today=anniversary_today,
        bonus_due=anniversary_bonus_due(join_date, as_of, policy),
        completed_at_least={years: has_completed_at_least(join_date, as_of, years) for years in milestones},
    )


# ---------------------------------------------------------------------------
# Company-scoped: /companies/{company_id}/...
# ---------------------------------------------------------------------------

employee_accrual_router = APIRouter(
    prefix="/companies/{company_id}/employees/{employee_id}",
    tags=["accruals"],
    dependencies=[Depends(validate_company_scope)],
)


@employee_accrual_router.get("/accrual", response_model=EmployeeAccrualResponse)
async def get_employee_accrual(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    policy: PolicyDep,
    employee_service: EmployeeServiceDep,
    as_of: date | None = Query(default=None),
) -> EmployeeAccrualResponse:
    """Accrued balance for an employee, using their join date from the directory."""
    employee = await employee_service.get_employee(company_id, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    if employee.join_date is None:
        raise AppError("Employee has no join date", status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    as_of = resolve_as_of(as_of)
    result = compute_accrual(employee.join_date, as_of, policy)
    return EmployeeAccrualResponse(
        employee_id=employee.id,
        company_id=employee.company_id,
        join_date=employee.join_date,
        effective_join_date=effective_join_date(employee.join_date, policy),
        as_of=as_of,
        casual=result.casual,
        sick=result.sick,
    )


audit_router = APIRouter(
    prefix="/companies/{company_id}/accruals",
    tags=["accruals"],
    dependencies=[Depends(validate_company_scope)],
)


@audit_router.post("/audit", response_model=BalanceAuditResponse)
async def audit_balances(
    payload: BalanceAuditRequest,
    auth: AdminDep,
    policy: PolicyDep,
    employee_service: EmployeeServiceDep,
) -> BalanceAuditResponse:
    """Compare recorded balances with engine output for every accruing employee (admin only)."""
    recorded = {b.employee_id: AccrualResult(casual=b.casual, sick=b.sick) for b in payload.balances}
    result = await audit_company_balances(
        employee_service,
        auth.company_id,
        recorded,
        resolve_as_of(payload.as_of),
        policy=policy,
    )
    return BalanceAuditResponse(
        as_of=result.as_of,
        processed=result.processed,
        matched=result.matched,
        mismatched=result.mismatched,
        unrecorded=result.unrecorded,
        skipped=result.skipped,
        lines=[
            BalanceAuditLineResponse(
                employee_id=line.employee_id,
                name=line.name,
                join_date=line.join_date,
                years_of_service=line.years_of_service,
                expected=LeaveBalance.from_result(line.expected),
                recorded=LeaveBalance.from_result(line.recorded) if line.recorded is not None else None,
                casual_delta=line.casual_delta,
                sick_delta=line.sick_delta,
                matches=line.matches,
            )
            for line in result.lines
        ],
        skipped_employee_ids=result.skipped_employee_ids,
    )
