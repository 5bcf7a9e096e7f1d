# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import Depends, Header, Path

from leave_accrual.config import get_settings
from leave_accrual.exceptions import ForbiddenError
from leave_accrual.schemas.auth import AuthContext, Role
from leave_accrual.schemas.policy import AccrualPolicy
from leave_accrual.services.employee import EmployeeService, get_employee_service


async def get_auth_context(
    x_company_id: uuid.UUID = Header(),
    x_user_id: uuid.UUID = Header(),
    x_role: Role = Header(default="employee"),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(company_id=x_company_id, user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_admin(
    auth: AuthDep,
) -> AuthContext:
    """Require admin role for the request."""
    if not auth.is_admin:
        raise ForbiddenError("Admin access required")
    return auth


AdminDep = Annotated[AuthContext, Depends(require_admin)]


async def validate_company_scope(
    company_id: uuid.UUID = Path(),
    auth: AuthContext = Depends(get_auth_context),
) -> AuthContext:
    """Ensure the path company_id matches the auth header company_id."""
    if company_id != auth.company_id:
        raise ForbiddenError("Company ID mismatch")
    return auth


def get_accrual_policy() -> AccrualPolicy:
    """Accrual policy for this deployment, built from settings."""
    settings = get_settings()
    return AccrualPolicy(
        epoch=settings.accrual_epoch,
        unlock_on_closing_day=settings.accrual_unlock_on_closing_day,
    )


PolicyDep = Annotated[AccrualPolicy, Depends(get_accrual_policy)]
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]


def resolve_as_of(as_of: date | None) -> date:
    """Pin "today" once per request so a whole response uses one as-of date."""
    return as_of if as_of is not None else date.today()
