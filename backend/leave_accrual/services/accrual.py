"""Accrual engine: casual/sick leave earned from a join date up to an as-of date.

The balance is never stored. Every call replays calendar years from the
effective join date, one year per step:

    opening balance
      + initial grant           (join year only)
      + monthly credits         (month M posts on the last working day of M-1)
      + anniversary bonuses     (3rd/5th anniversary of the original join date)
      = running balance
      -> year-end adjustment    (closed years only: casual capped, sick reset)

The last step's balance, clamped to the policy ceiling, is the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from leave_accrual.schemas.policy import DEFAULT_POLICY
from leave_accrual.services.tenure import anniversary_date
from leave_accrual.services.working_days import last_working_day, previous_month

if TYPE_CHECKING:
    from leave_accrual.schemas.policy import AccrualPolicy

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AccrualResult:
    """Casual and sick leave balance, in days."""

    casual: float = 0.0
    sick: float = 0.0


@dataclass(frozen=True)
class YearEndAdjustment:
    """Outcome of closing a leave year."""

    carried: AccrualResult
    forfeited_casual: float
    forfeited_sick: float


@dataclass(frozen=True)
class YearAccrual:
    """One calendar year of the replay."""

    year: int
    opening: AccrualResult
    initial_grant: AccrualResult
    months_credited: tuple[int, ...]
    anniversaries: tuple[int, ...]
    bonus_casual: float
    closing: AccrualResult
    closed: bool
    forfeited_casual: float = 0.0
    forfeited_sick: float = 0.0


ZERO_BALANCE = AccrualResult()

# ---------------------------------------------------------------------------
# Pure rule helpers
# ---------------------------------------------------------------------------


def effective_join_date(join_date: date, policy: AccrualPolicy = DEFAULT_POLICY) -> date:
    """Return the later of ``join_date`` and the policy epoch."""
    return max(join_date, policy.epoch)


def initial_grant(effective_join: date, policy: AccrualPolicy = DEFAULT_POLICY) -> AccrualResult:
    """Grant posted on joining: casual only for joins in the first half of the month."""
    if effective_join.day <= policy.initial_grant_cutoff_day:
        return AccrualResult(casual=policy.initial_casual, sick=policy.initial_sick)
    return AccrualResult(casual=0.0, sick=policy.initial_sick)


def year_end_adjustment(balance: AccrualResult, policy: AccrualPolicy = DEFAULT_POLICY) -> YearEndAdjustment:
    """Close a leave year: casual carries forward up to the cap, sick is forfeited."""
    carried_casual = min(balance.casual, policy.carry_forward_casual_cap)
    return YearEndAdjustment(
        carried=AccrualResult(casual=carried_casual, sick=0.0),
        forfeited_casual=balance.casual - carried_casual,
        forfeited_sick=balance.sick,
    )


def _month_window(year: int, effective_join: date, as_of: date) -> range:
    """Months of ``year`` whose credit may have posted by ``as_of``.

    In the as-of year the window reaches one month past the as-of month once
    that month's last working day has arrived; for December that is month 13,
    i.e. next January's credit posted in December.
    """
    start = effective_join.month + 1 if year == effective_join.year else 1
    if year != as_of.year:
        end = 12
    elif last_working_day(year, as_of.month) <= as_of:
        end = as_of.month + 1
    else:
        end = as_of.month
    return range(start, end + 1)


def _is_month_credited(year: int, month: int, as_of: date, policy: AccrualPolicy) -> bool:
    """Whether the credit for ``month`` of ``year`` has posted by ``as_of``."""
    if year != as_of.year or month < as_of.month:
        return True

    if month == as_of.month:
        posting_day = last_working_day(*previous_month(year, month))
        return posting_day <= as_of

    # Month after the as-of month: posts on the as-of month's closing day,
    # counted only once that day has passed unless the policy says otherwise.
    closing_day = last_working_day(year, as_of.month)
    if policy.unlock_on_closing_day:
        return closing_day <= as_of
    return closing_day < as_of


def _anniversaries_in_year(
    join_date: date,
    year: int,
    as_of: date,
    policy: AccrualPolicy,
) -> tuple[int, ...]:
    """Bonus milestones (years of service) whose anniversary lands in ``year`` by ``as_of``."""
    milestones = []
    for years in sorted(policy.anniversary_bonuses):
        anniversary = anniversary_date(join_date, years)
        if anniversary.year == year and policy.epoch <= anniversary <= as_of:
            milestones.append(years)
    return tuple(milestones)


def _replay_year(
    opening: AccrualResult,
    year: int,
    *,
    join_date: date,
    effective_join: date,
    as_of: date,
    policy: AccrualPolicy,
) -> YearAccrual:
    """Advance the running balance through one calendar year."""
    grant = initial_grant(effective_join, policy) if year == effective_join.year else ZERO_BALANCE
    months = tuple(m for m in _month_window(year, effective_join, as_of) if _is_month_credited(year, m, as_of, policy))
    anniversaries = _anniversaries_in_year(join_date, year, as_of, policy)
    bonus = sum((policy.anniversary_bonuses[years] for years in anniversaries), 0.0)

    running = AccrualResult(
        casual=opening.casual + grant.casual + len(months) * policy.monthly_casual + bonus,
        sick=opening.sick + grant.sick + len(months) * policy.monthly_sick,
    )

    if year == as_of.year:
        return YearAccrual(
            year=year,
            opening=opening,
            initial_grant=grant,
            months_credited=months,
            anniversaries=anniversaries,
            bonus_casual=bonus,
            closing=running,
            closed=False,
        )

    adjustment = year_end_adjustment(running, policy)
    return YearAccrual(
        year=year,
        opening=opening,
        initial_grant=grant,
        months_credited=months,
        anniversaries=anniversaries,
        bonus_casual=bonus,
        closing=adjustment.carried,
        closed=True,
        forfeited_casual=adjustment.forfeited_casual,
        forfeited_sick=adjustment.forfeited_sick,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def accrual_breakdown(
    join_date: date,
    as_of: date | None = None,
    policy: AccrualPolicy = DEFAULT_POLICY,
) -> list[YearAccrual]:
    """Replay every year from the effective join date through ``as_of``.

    Returns one entry per year, oldest first. The list is empty when
    ``as_of`` precedes the effective join date.
    """
    if as_of is None:
        as_of = date.today()

    effective_join = effective_join_date(join_date, policy)
    if as_of < effective_join:
        logger.debug("as_of %s precedes effective join date %s; nothing accrued", as_of, effective_join)
        return []

    steps: list[YearAccrual] = []
    balance = ZERO_BALANCE
    for year in range(effective_join.year, as_of.year + 1):
        step = _replay_year(
            balance,
            year,
            join_date=join_date,
            effective_join=effective_join,
            as_of=as_of,
            policy=policy,
        )
        steps.append(step)
        balance = step.closing
    return steps


def compute_accrual(
    join_date: date,
    as_of: date | None = None,
    policy: AccrualPolicy = DEFAULT_POLICY,
) -> AccrualResult:
    """Casual and sick leave accrued by ``as_of`` (default: today).

    Returns zero balances when ``as_of`` is before the join date (or before
    the epoch). Both balances are clamped to the policy ceiling.
    """
    steps = accrual_breakdown(join_date, as_of, policy)
    if not steps:
        return ZERO_BALANCE

    final = steps[-1].closing
    return AccrualResult(
        casual=min(final.casual, policy.balance_ceiling),
        sick=min(final.sick, policy.balance_ceiling),
    )
