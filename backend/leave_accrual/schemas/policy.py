from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AccrualPolicy(BaseModel):
    """Numeric rules of the casual/sick leave accrual engine.

    The defaults are the rules the leave system went live with. Amounts are
    in days and move in half-day steps, so float arithmetic stays exact.
    """

    model_config = ConfigDict(frozen=True)

    epoch: date = Field(
        default=date(2020, 1, 1),
        description="Go-live date; nothing accrues for service before it",
    )
    initial_grant_cutoff_day: int = Field(default=15, ge=1, le=31)
    initial_casual: float = Field(default=1.0, ge=0)
    initial_sick: float = Field(default=0.5, ge=0)
    monthly_casual: float = Field(default=1.0, ge=0)
    monthly_sick: float = Field(default=0.5, ge=0)
    carry_forward_casual_cap: float = Field(default=8.0, ge=0)
    balance_ceiling: float = Field(default=99.0, gt=0)
    anniversary_bonuses: dict[int, float] = Field(
        default_factory=lambda: {3: 3.0, 5: 5.0},
        description="Completed years of service -> one-time casual bonus",
    )
    unlock_on_closing_day: bool = Field(
        default=False,
        description="Credit next month's leave on the closing working day itself rather than after it",
    )

    @model_validator(mode="after")
    def _validate_policy(self) -> Self:
        if any(years <= 0 for years in self.anniversary_bonuses):
            msg = "anniversary_bonuses keys must be positive years of service"
            raise ValueError(msg)
        if any(amount < 0 for amount in self.anniversary_bonuses.values()):
            msg = "anniversary_bonuses amounts must be >= 0"
            raise ValueError(msg)
        if self.carry_forward_casual_cap > self.balance_ceiling:
            msg = "carry_forward_casual_cap must be <= balance_ceiling"
            raise ValueError(msg)
        return self


DEFAULT_POLICY = AccrualPolicy()
