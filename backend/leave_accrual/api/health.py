import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leave_accrual.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str
    accrual_epoch: date


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    # Nobody accrues anything before the epoch.
    if settings.accrual_epoch > date.today():
        logger.warning("Health check: accrual epoch %s is in the future", settings.accrual_epoch)
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
        accrual_epoch=settings.accrual_epoch,
    )
