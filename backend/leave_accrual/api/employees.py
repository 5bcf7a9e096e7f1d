# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from leave_accrual.api.deps import AdminDep, AuthDep, EmployeeServiceDep, validate_company_scope
from leave_accrual.exceptions import AppError, NotFoundError
from leave_accrual.schemas.employee import EmployeeListResponse, EmployeeResponse, UpsertEmployeeRequest
from leave_accrual.services.employee import EmployeeInfo, InMemoryEmployeeService

employees_router = APIRouter(
    prefix="/companies/{company_id}/employees",
    tags=["employees"],
    dependencies=[Depends(validate_company_scope)],
)


@employees_router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def upsert_employee(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    payload: UpsertEmployeeRequest,
    auth: AdminDep,
    employee_service: EmployeeServiceDep,
) -> EmployeeResponse:
    """Create or update an employee in the stub directory (admin only)."""
    if not isinstance(employee_service, InMemoryEmployeeService):
        raise AppError("Employee directory is read-only", status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

    employee = EmployeeInfo(id=employee_id, company_id=company_id, **payload.model_dump())
    employee_service.seed(employee)
    return EmployeeResponse.from_info(employee)


@employees_router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
)
async def get_employee(
    company_id: uuid.UUID,
    employee_id: uuid.UUID,
    auth: AuthDep,
    employee_service: EmployeeServiceDep,
) -> EmployeeResponse:
    """Fetch an employee from the directory."""
    employee = await employee_service.get_employee(company_id, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return EmployeeResponse.from_info(employee)


@employees_router.get(
    "",
    response_model=EmployeeListResponse,
)
async def list_employees(
    company_id: uuid.UUID,
    auth: AuthDep,
    employee_service: EmployeeServiceDep,
) -> EmployeeListResponse:
    """List all employees of a company."""
    employees = await employee_service.list_employees(company_id)
    return EmployeeListResponse(
        items=[EmployeeResponse.from_info(e) for e in employees],
        total=len(employees),
    )
