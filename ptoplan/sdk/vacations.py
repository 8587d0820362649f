"""Vacation hour calculations and vacation entry helpers."""

import secrets
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional

from .dates import DateLike, is_weekend, iter_days, normalize_date, parse_local_date, round_hours
from .schemas import VacationEntry


HOURS_PER_DAY = 8


@dataclass
class DayBreakdown:
    """Weekday/weekend split of a vacation range."""

    total_days: int = 0
    weekday_days: int = 0
    weekend_days: int = 0
    hours_from_weekdays: float = 0
    hours_from_weekends: float = 0

    @property
    def required_hours(self) -> float:
        return self.hours_from_weekdays + self.hours_from_weekends


def hours_to_days(hours: float) -> str:
    """Format hours as work days, e.g. 20 -> '2.50'."""
    return f"{hours / HOURS_PER_DAY:.2f}"


def vacation_day_breakdown(
    start_date_str: str,
    end_date_str: str,
    include_weekends: bool,
) -> DayBreakdown:
    """Count weekday and weekend days in [start, end] and the hours they cost.

    Weekend days cost hours only when include_weekends is set.
    """
    start = parse_local_date(start_date_str)
    end = parse_local_date(end_date_str)

    breakdown = DayBreakdown()
    for day in iter_days(start, end):
        breakdown.total_days += 1
        if is_weekend(day):
            breakdown.weekend_days += 1
        else:
            breakdown.weekday_days += 1

    breakdown.hours_from_weekdays = breakdown.weekday_days * HOURS_PER_DAY
    breakdown.hours_from_weekends = (
        breakdown.weekend_days * HOURS_PER_DAY if include_weekends else 0
    )
    return breakdown


def vacation_hours(start_date_str: str, end_date_str: str, include_weekends: bool) -> float:
    """PTO hours for a vacation: 8 per counted day, rounded to cents."""
    breakdown = vacation_day_breakdown(start_date_str, end_date_str, include_weekends)
    return round_hours(breakdown.required_hours)


def vacation_hours_consumed_between(
    start: DateLike,
    end: DateLike,
    vacations: Iterable[VacationEntry],
) -> float:
    """Sum total_hours of vacations overlapping the window (start, end].

    A vacation overlaps when it ends after start and begins on or before
    end. The window matches the accrual window so boundary days are
    neither skipped nor counted twice.
    """
    start = normalize_date(start)
    end = normalize_date(end)

    total = 0.0
    for vacation in vacations:
        vacation_start = parse_local_date(vacation.start_date)
        vacation_end = parse_local_date(vacation.end_date)
        if vacation_end > start and vacation_start <= end:
            total += vacation.total_hours
    return total


def generate_vacation_id() -> str:
    """Unique id in the form vacation_<millis>_<random>."""
    return f"vacation_{int(time.time() * 1000)}_{secrets.token_hex(5)[:9]}"


def create_vacation_entry(
    start_date: str,
    end_date: str,
    include_weekends: bool,
    description: Optional[str] = None,
    vacation_id: Optional[str] = None,
    created_at: Optional[str] = None,
    now: Optional[datetime] = None,
) -> VacationEntry:
    """Build a VacationEntry with total_hours computed from its range.

    Pass vacation_id and created_at when replacing an existing entry so
    its identity and creation time carry over.
    """
    timestamp = (now or datetime.now()).isoformat(timespec="seconds")
    return VacationEntry(
        id=vacation_id or generate_vacation_id(),
        start_date=start_date,
        end_date=end_date,
        total_hours=vacation_hours(start_date, end_date, include_weekends),
        include_weekends=include_weekends,
        description=description,
        created_at=created_at or timestamp,
        updated_at=timestamp,
    )


def is_date_in_vacation(day: DateLike, vacation: VacationEntry) -> bool:
    check = normalize_date(day)
    return parse_local_date(vacation.start_date) <= check <= parse_local_date(vacation.end_date)


def vacations_for_date(day: DateLike, vacations: Iterable[VacationEntry]) -> List[VacationEntry]:
    return [v for v in vacations if is_date_in_vacation(day, v)]


def upcoming_vacations(
    vacations: Iterable[VacationEntry],
    today: Optional[date] = None,
) -> List[VacationEntry]:
    """Vacations starting today or later, soonest first."""
    if today is None:
        today = date.today()
    upcoming = [v for v in vacations if parse_local_date(v.start_date) >= today]
    return sorted(upcoming, key=lambda v: parse_local_date(v.start_date))


def past_vacations(
    vacations: Iterable[VacationEntry],
    today: Optional[date] = None,
) -> List[VacationEntry]:
    """Vacations that started before today, most recent first."""
    if today is None:
        today = date.today()
    past = [v for v in vacations if parse_local_date(v.start_date) < today]
    return sorted(past, key=lambda v: parse_local_date(v.start_date), reverse=True)


def total_planned_hours(vacations: Iterable[VacationEntry]) -> float:
    return round_hours(sum(v.total_hours for v in vacations))
