"""Balance audit: compare recorded leave balances against the accrual engine.

Recorded balances live outside this service (manual top-ups and conversions
are applied there), so the caller passes them in. Employees without a join
date cannot be replayed and are reported as skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from leave_accrual.schemas.policy import DEFAULT_POLICY
from leave_accrual.services.accrual import AccrualResult, compute_accrual
from leave_accrual.services.tenure import completed_years

if TYPE_CHECKING:
    import uuid
    from collections.abc import Mapping

    from leave_accrual.schemas.policy import AccrualPolicy
    from leave_accrual.services.employee import EmployeeService

logger = logging.getLogger(__name__)


@dataclass
class EmployeeAuditLine:
    """Expected vs recorded balance for one employee."""

    employee_id: uuid.UUID
    name: str
    join_date: date
    years_of_service: int
    expected: AccrualResult
    recorded: AccrualResult | None = None

    @property
    def casual_delta(self) -> float | None:
        if self.recorded is None:
            return None
        return self.recorded.casual - self.expected.casual

    @property
    def sick_delta(self) -> float | None:
        if self.recorded is None:
            return None
        return self.recorded.sick - self.expected.sick

    @property
    def matches(self) -> bool:
        return self.recorded is not None and self.recorded == self.expected


@dataclass
class BalanceAuditResult:
    """Summary of a balance audit run."""

    as_of: date
    processed: int = 0
    matched: int = 0
    mismatched: int = 0
    unrecorded: int = 0
    skipped: int = 0
    lines: list[EmployeeAuditLine] = field(default_factory=list)
    skipped_employee_ids: list[uuid.UUID] = field(default_factory=list)


async def audit_company_balances(
    employee_service: EmployeeService,
    company_id: uuid.UUID,
    recorded: Mapping[uuid.UUID, AccrualResult],
    as_of: date | None = None,
    *,
    policy: AccrualPolicy = DEFAULT_POLICY,
) -> BalanceAuditResult:
    """Audit every accruing employee of a company as of ``as_of`` (default: today)."""
    if as_of is None:
        as_of = date.today()

    result = BalanceAuditResult(as_of=as_of)
    employees = await employee_service.list_employees(company_id)

    for employee in sorted(employees, key=lambda e: (e.last_name, e.first_name)):
        if not employee.is_accruing:
            continue

        result.processed += 1
        if employee.join_date is None:
            logger.warning("Employee %s has no join date; skipping balance audit", employee.id)
            result.skipped += 1
            result.skipped_employee_ids.append(employee.id)
            continue

        line = EmployeeAuditLine(
            employee_id=employee.id,
            name=employee.full_name,
            join_date=employee.join_date,
            years_of_service=max(completed_years(employee.join_date, as_of), 0),
            expected=compute_accrual(employee.join_date, as_of, policy),
            recorded=recorded.get(employee.id),
        )
        result.lines.append(line)

        if line.recorded is None:
            result.unrecorded += 1
        elif line.matches:
            result.matched += 1
        else:
            result.mismatched += 1
            logger.info(
                "Balance mismatch for employee=%s: casual delta=%s sick delta=%s",
                employee.id,
                line.casual_delta,
                line.sick_delta,
            )

    logger.info(
        "Balance audit for company=%s as of %s: processed=%d matched=%d mismatched=%d unrecorded=%d skipped=%d",
        company_id,
        as_of,
        result.processed,
        result.matched,
        result.mismatched,
        result.unrecorded,
        result.skipped,
    )
    return result
