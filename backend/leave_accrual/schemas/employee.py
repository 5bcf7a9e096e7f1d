# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, Field

from leave_accrual.services.employee import EmployeeInfo, EmployeeStatus


class UpsertEmployeeRequest(BaseModel):
    """Request body for upserting an employee in the stub service."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    status: EmployeeStatus = "active"
    join_date: date | None = None


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    id: uuid.UUID
    company_id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    status: EmployeeStatus
    join_date: date | None

    @classmethod
    def from_info(cls, employee: EmployeeInfo) -> EmployeeResponse:
        return cls(**employee.model_dump())


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int
