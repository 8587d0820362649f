"""Pay period schedules and payday enumeration.

Paydays per schedule:

- weekly: every 7 days on payday_of_week (default Friday)
- biweekly: every 14 days on payday_of_week, starting from the first
  qualifying weekday after the window start
- semimonthly: the 15th and the last calendar day of each month
- monthly: the last calendar day of each month

All windows are half-open: a payday on the start date is excluded, a
payday on the end date is included.
"""

import logging
from datetime import date, timedelta
from typing import Iterator, List, Optional

from .dates import DateLike, last_day_of_month, next_occurrence_of_weekday, normalize_date

logger = logging.getLogger(__name__)


PAY_PERIODS = ("weekly", "biweekly", "semimonthly", "monthly")

DEFAULT_PAYDAY_OF_WEEK = 5  # Friday

# Interval used when a schedule is not one of PAY_PERIODS
FALLBACK_INTERVAL_DAYS = 30


def get_period_days(pay_period: str) -> Optional[int]:
    """Days between paydays, or None for calendar-based schedules."""
    if pay_period == "weekly":
        return 7
    elif pay_period == "biweekly":
        return 14
    elif pay_period in ("semimonthly", "monthly"):
        return None
    return FALLBACK_INTERVAL_DAYS


def get_pay_periods_per_year(pay_period: str) -> int:
    return {
        "weekly": 52,
        "biweekly": 26,
        "semimonthly": 24,
        "monthly": 12,
    }.get(pay_period, 12)


def _month_starts(start: date, end: date) -> Iterator[date]:
    current = start.replace(day=1)
    while current <= end:
        yield current
        if current.month == 12:
            current = date(current.year + 1, 1, 1)
        else:
            current = date(current.year, current.month + 1, 1)


def _iter_calendar_paydays(start: date, end: date, days_of_month) -> Iterator[date]:
    """Paydays on fixed days of the month; None means the last day."""
    for month_start in _month_starts(start, end):
        month_end = last_day_of_month(month_start.year, month_start.month)
        for day in days_of_month:
            payday = month_end if day is None else month_start.replace(day=day)
            if start < payday <= end:
                yield payday


def _iter_interval_paydays(start: date, end: date, first: date, interval_days: int) -> Iterator[date]:
    step = timedelta(days=interval_days)
    payday = first
    # The window excludes its start date
    if payday == start:
        payday += step
    while payday <= end:
        yield payday
        payday += step


def iter_paydays_between(
    start: DateLike,
    end: DateLike,
    pay_period: str,
    payday_of_week: Optional[int] = None,
) -> Iterator[date]:
    """Yield paydays in (start, end] in chronological order.

    An unrecognized pay_period falls back to a 30-day interval from start
    instead of failing.
    """
    start = normalize_date(start)
    end = normalize_date(end)

    if end <= start:
        return

    if pay_period == "semimonthly":
        yield from _iter_calendar_paydays(start, end, (15, None))
    elif pay_period == "monthly":
        yield from _iter_calendar_paydays(start, end, (None,))
    elif pay_period in ("weekly", "biweekly"):
        if payday_of_week is None:
            payday_of_week = DEFAULT_PAYDAY_OF_WEEK
        first = next_occurrence_of_weekday(start, payday_of_week)
        yield from _iter_interval_paydays(start, end, first, get_period_days(pay_period))
    else:
        logger.warning(
            f"Unknown pay period '{pay_period}', using {FALLBACK_INTERVAL_DAYS}-day interval"
        )
        yield from _iter_interval_paydays(start, end, start, FALLBACK_INTERVAL_DAYS)


def list_paydays_between(
    start: DateLike,
    end: DateLike,
    pay_period: str,
    payday_of_week: Optional[int] = None,
) -> List[date]:
    return list(iter_paydays_between(start, end, pay_period, payday_of_week))


def count_pay_periods_between(
    start: DateLike,
    end: DateLike,
    pay_period: str,
    payday_of_week: Optional[int] = None,
) -> int:
    """Count paydays strictly after start and on or before end.

    Args:
        start: Window start (excluded)
        end: Window end (included)
        pay_period: weekly, biweekly, semimonthly or monthly
        payday_of_week: 0=Sunday..6=Saturday, weekly/biweekly only

    Returns:
        Number of paydays, 0 when end <= start
    """
    count = sum(1 for _ in iter_paydays_between(start, end, pay_period, payday_of_week))
    logger.debug(f"{count} {pay_period} payday(s) in ({start}, {end}]")
    return count
