# ruff: noqa: TC003
"""Employee directory: who works where, since when, and whether they still accrue leave.

The directory is owned by another service in production; this module holds
the protocol the accrual API depends on plus an in-memory implementation
used in development and tests.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel

EmployeeStatus = Literal["active", "on_notice", "inactive"]

# Employees serving notice keep accruing until their last day.
ACCRUING_STATUSES: frozenset[str] = frozenset({"active", "on_notice"})


class EmployeeInfo(BaseModel):
    """Directory record for one employee."""

    id: uuid.UUID
    company_id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    status: EmployeeStatus = "active"
    join_date: date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_accruing(self) -> bool:
        return self.status in ACCRUING_STATUSES


@runtime_checkable
class EmployeeService(Protocol):
    """Read access to the employee directory, scoped by company."""

    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> EmployeeInfo | None: ...

    async def list_employees(self, company_id: uuid.UUID) -> list[EmployeeInfo]: ...


class InMemoryEmployeeService:
    """Directory kept in a dict keyed by ``(company_id, employee_id)``."""

    def __init__(self) -> None:
        self._employees: dict[tuple[uuid.UUID, uuid.UUID], EmployeeInfo] = {}

    def seed(self, employee: EmployeeInfo) -> None:
        """Insert or replace an employee record."""
        self._employees[(employee.company_id, employee.id)] = employee

    async def get_employee(self, company_id: uuid.UUID, employee_id: uuid.UUID) -> EmployeeInfo | None:
        return self._employees.get((company_id, employee_id))

    async def list_employees(self, company_id: uuid.UUID) -> list[EmployeeInfo]:
        """Employees of ``company_id``, ordered by last then first name."""
        employees = [e for (cid, _), e in self._employees.items() if cid == company_id]
        return sorted(employees, key=lambda e: (e.last_name, e.first_name))


_employee_service: EmployeeService = InMemoryEmployeeService()


def get_employee_service() -> EmployeeService:
    """FastAPI dependency returning the configured directory."""
    return _employee_service


def set_employee_service(service: EmployeeService) -> None:
    """Swap the directory implementation (production wiring or tests)."""
    global _employee_service
    _employee_service = service
