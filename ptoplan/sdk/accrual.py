"""PTO accrual.

Converts elapsed pay periods into accrued hours and rolls a stored
balance forward to today.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Optional

from .dates import DateLike, normalize_date, parse_local_date, round_hours
from .pay_periods import count_pay_periods_between
from .schemas import UserSettings, VacationEntry
from .vacations import vacation_hours_consumed_between

logger = logging.getLogger(__name__)

# Balance changes at or below this are not worth persisting
BALANCE_CHANGE_THRESHOLD = 0.01


@dataclass
class BalanceUpdate:
    """Result of rolling a balance forward over elapsed time."""

    new_balance: float
    accrued_hours: float
    vacation_hours_used: float


def accrued_hours_between(
    start: DateLike,
    end: DateLike,
    accrual_rate: float,
    pay_period: str,
    payday_of_week: Optional[int] = None,
) -> float:
    """Hours accrued on paydays in (start, end]."""
    periods = count_pay_periods_between(start, end, pay_period, payday_of_week)
    return round_hours(periods * accrual_rate)


def update_balance_for_elapsed_time(
    last_balance: float,
    last_update_date: DateLike,
    today: DateLike,
    accrual_rate: float,
    pay_period: str,
    vacations: Iterable[VacationEntry],
    payday_of_week: Optional[int] = None,
) -> BalanceUpdate:
    """Roll last_balance forward from last_update_date to today.

    Accrual is taken over (last_update_date, today]. A vacation is deducted
    once, on the first roll after it starts; vacations starting on or before
    last_update_date were already deducted from last_balance.
    If no time has passed the balance is returned unchanged.
    """
    last_update = normalize_date(last_update_date)
    today = normalize_date(today)

    if today <= last_update:
        return BalanceUpdate(
            new_balance=last_balance,
            accrued_hours=0,
            vacation_hours_used=0,
        )

    accrued = accrued_hours_between(last_update, today, accrual_rate, pay_period, payday_of_week)
    not_yet_deducted = [v for v in vacations if parse_local_date(v.start_date) > last_update]
    used = vacation_hours_consumed_between(last_update, today, not_yet_deducted)
    new_balance = max(0, round_hours(last_balance + accrued - used))

    return BalanceUpdate(
        new_balance=new_balance,
        accrued_hours=accrued,
        vacation_hours_used=round_hours(used),
    )


def apply_automatic_accrual(
    settings: UserSettings,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Compute the settings update for time passed since the last visit.

    Runs only when the bookkeeping fields are set and the last update was
    not today.

    Returns:
        Partial settings dict to persist. Empty when nothing is due;
        only last_accrual_update_date when the balance did not move by
        more than 0.01 hours.
    """
    if today is None:
        today = date.today()
    today_str = today.isoformat()

    if (
        not settings.last_accrual_update_date
        or settings.last_known_pto_balance is None
        or settings.last_accrual_update_date == today_str
    ):
        return {}

    result = update_balance_for_elapsed_time(
        settings.last_known_pto_balance,
        settings.last_accrual_update_date,
        today,
        settings.accrual_rate,
        settings.pay_period,
        settings.vacations,
        settings.payday_of_week,
    )

    if abs(result.new_balance - settings.current_pto) > BALANCE_CHANGE_THRESHOLD:
        logger.info(
            f"Automatic PTO update: {settings.last_known_pto_balance:.2f} "
            f"+ {result.accrued_hours:.2f} accrued "
            f"- {result.vacation_hours_used:.2f} used "
            f"= {result.new_balance:.2f} "
            f"({settings.last_accrual_update_date} -> {today_str})"
        )
        return {
            "current_pto": result.new_balance,
            "last_known_pto_balance": result.new_balance,
            "last_accrual_update_date": today_str,
        }

    logger.debug(f"No significant PTO change since {settings.last_accrual_update_date}")
    return {"last_accrual_update_date": today_str}
