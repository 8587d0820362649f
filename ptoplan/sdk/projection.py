"""PTO balance projection.

Projects the balance on a future date from the current balance, the
accrual schedule and planned vacations. Past and present dates are never
recomputed: the stored current balance is trusted as accurate for today.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from .accrual import accrued_hours_between
from .dates import DateLike, normalize_date, round_hours
from .schemas import UserSettings, VacationEntry
from .vacations import vacation_hours_consumed_between

logger = logging.getLogger(__name__)


@dataclass
class ProjectionBreakdown:
    """Projection figures named for display."""

    starting_balance: float
    total_accrued: float
    total_vacation_hours: float
    final_balance: float


@dataclass
class BalanceProjection:
    """Projected PTO balance on a target date."""

    projected_balance: float
    accrued_hours: float
    vacation_hours_used: float
    breakdown: ProjectionBreakdown = field(repr=False)

    def to_dict(self) -> dict:
        return {
            "projected_balance": self.projected_balance,
            "accrued_hours": self.accrued_hours,
            "vacation_hours_used": self.vacation_hours_used,
            "breakdown": {
                "starting_balance": self.breakdown.starting_balance,
                "total_accrued": self.breakdown.total_accrued,
                "total_vacation_hours": self.breakdown.total_vacation_hours,
                "final_balance": self.breakdown.final_balance,
            },
        }


def project_balance(
    current_pto: float,
    accrual_rate: float,
    pay_period: str,
    vacations: Iterable[VacationEntry],
    target_date: DateLike,
    as_of: Optional[DateLike] = None,
    payday_of_week: Optional[int] = None,
) -> BalanceProjection:
    """Project the PTO balance on target_date.

    Args:
        current_pto: Balance on as_of
        accrual_rate: Hours earned per pay period
        pay_period: weekly, biweekly, semimonthly or monthly
        vacations: Planned vacations; those overlapping (as_of, target]
                   are deducted in full
        target_date: Date to project to
        as_of: Date current_pto applies to (default: today)
        payday_of_week: 0=Sunday..6=Saturday for weekly/biweekly

    Returns:
        BalanceProjection. When target_date <= as_of the current balance
        is returned unchanged with zero accrual and usage. The projected
        balance is clamped at 0.
    """
    target = normalize_date(target_date)
    today = normalize_date(as_of) if as_of is not None else date.today()

    if target <= today:
        return BalanceProjection(
            projected_balance=current_pto,
            accrued_hours=0,
            vacation_hours_used=0,
            breakdown=ProjectionBreakdown(
                starting_balance=current_pto,
                total_accrued=0,
                total_vacation_hours=0,
                final_balance=current_pto,
            ),
        )

    accrued = accrued_hours_between(today, target, accrual_rate, pay_period, payday_of_week)
    used = round_hours(vacation_hours_consumed_between(today, target, vacations))
    projected = max(0, round_hours(current_pto + accrued - used))

    logger.debug(
        f"Projection {today} -> {target}: {current_pto} + {accrued} - {used} = {projected}"
    )

    return BalanceProjection(
        projected_balance=projected,
        accrued_hours=accrued,
        vacation_hours_used=used,
        breakdown=ProjectionBreakdown(
            starting_balance=round_hours(current_pto),
            total_accrued=accrued,
            total_vacation_hours=used,
            final_balance=projected,
        ),
    )


def project_settings_balance(
    settings: UserSettings,
    target_date: DateLike,
    as_of: Optional[DateLike] = None,
    exclude_vacation_id: Optional[str] = None,
) -> BalanceProjection:
    """project_balance driven by a settings snapshot.

    exclude_vacation_id leaves one vacation out, e.g. the one being edited.
    """
    vacations = [v for v in settings.vacations if v.id != exclude_vacation_id]
    return project_balance(
        settings.current_pto,
        settings.accrual_rate,
        settings.pay_period,
        vacations,
        target_date,
        as_of=as_of,
        payday_of_week=settings.payday_of_week,
    )


def available_pto_on_date(
    target_date_str: str,
    settings: UserSettings,
    exclude_vacation_id: Optional[str] = None,
    today: Optional[date] = None,
) -> float:
    """Projected balance available on a date, ignoring one vacation."""
    projection = project_settings_balance(
        settings, target_date_str, as_of=today, exclude_vacation_id=exclude_vacation_id
    )
    return projection.projected_balance
