from fastapi import APIRouter

from leave_accrual.api.accruals import accruals_router, audit_router, employee_accrual_router
from leave_accrual.api.calendar import calendar_router
from leave_accrual.api.employees import employees_router

api_router = APIRouter()
api_router.include_router(accruals_router)
api_router.include_router(calendar_router)
api_router.include_router(employees_router)
api_router.include_router(employee_accrual_router)
api_router.include_router(audit_router)
