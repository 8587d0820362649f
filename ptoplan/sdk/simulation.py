"""Chronological vacation simulation.

Walks future vacations in start-date order, accruing PTO between them,
to find any vacation that would exceed the balance available when it
begins. Unlike a single projection, a later vacation cannot borrow hours
an earlier one already used.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from .accrual import accrued_hours_between
from .dates import format_date_range, parse_local_date, round_hours
from .schemas import UserSettings, VacationEntry, VacationRequest
from .vacations import vacation_hours

logger = logging.getLogger(__name__)

DEFAULT_NEW_DESCRIPTION = "New Vacation"
DEFAULT_DESCRIPTION = "Vacation"


@dataclass
class SimulationWarning:
    """A vacation that would drive the running balance negative."""

    vacation_id: str
    description: str
    dates: str
    shortfall_hours: float
    projected_balance: float
    required_hours: float
    message: str


@dataclass
class SimulationStep:
    """Balance before and after one vacation in the walk."""

    date: date
    vacation_id: str
    description: str
    balance_before: float
    vacation_hours: float
    balance_after: float
    is_shortfall: bool


@dataclass
class SimulationResult:
    warnings: List[SimulationWarning] = field(default_factory=list)
    steps: List[SimulationStep] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def total_shortfall(self) -> float:
        return round_hours(sum(w.shortfall_hours for w in self.warnings))


def _temporary_vacation(
    request: VacationRequest,
    editing_id: Optional[str] = None,
) -> VacationEntry:
    timestamp = datetime.now().isoformat(timespec="seconds")
    return VacationEntry(
        id=editing_id or f"temp_{int(time.time() * 1000)}",
        start_date=request.start_date,
        end_date=request.end_date,
        total_hours=vacation_hours(request.start_date, request.end_date, request.include_weekends),
        include_weekends=request.include_weekends,
        description=request.description or DEFAULT_NEW_DESCRIPTION,
        created_at=timestamp,
        updated_at=timestamp,
    )


def simulate_across_vacations(
    settings: UserSettings,
    candidate: VacationRequest,
    editing_id: Optional[str] = None,
    today: Optional[date] = None,
) -> SimulationResult:
    """Simulate the balance across all future vacations including candidate.

    Args:
        settings: Current settings snapshot
        candidate: New or edited vacation
        editing_id: Id of the vacation candidate replaces; None to add it
        today: Simulation start (default: today)

    Returns:
        SimulationResult with one warning per underfunded vacation and one
        step per simulated vacation. A candidate with malformed or reversed
        dates yields an empty result.
    """
    if today is None:
        today = date.today()

    result = SimulationResult()

    try:
        candidate_start = parse_local_date(candidate.start_date)
        candidate_end = parse_local_date(candidate.end_date)
    except ValueError:
        logger.debug(f"Malformed candidate dates: {candidate.start_date}, {candidate.end_date}")
        return result
    if candidate_start > candidate_end:
        return result

    temp = _temporary_vacation(candidate, editing_id)

    if editing_id:
        vacations = [temp if v.id == editing_id else v for v in settings.vacations]
    else:
        vacations = list(settings.vacations) + [temp]

    future = sorted(
        (v for v in vacations if parse_local_date(v.start_date) >= today),
        key=lambda v: parse_local_date(v.start_date),
    )

    if not future:
        return result

    running_balance = settings.current_pto
    cursor = today

    for vacation in future:
        start = parse_local_date(vacation.start_date)
        accrued = accrued_hours_between(
            cursor, start,
            settings.accrual_rate,
            settings.pay_period,
            settings.payday_of_week,
        )
        balance_before = running_balance + accrued
        balance_after = balance_before - vacation.total_hours
        is_shortfall = balance_after < 0
        description = vacation.description or DEFAULT_DESCRIPTION

        result.steps.append(SimulationStep(
            date=start,
            vacation_id=vacation.id,
            description=description,
            balance_before=round_hours(balance_before),
            vacation_hours=vacation.total_hours,
            balance_after=round_hours(balance_after),
            is_shortfall=is_shortfall,
        ))

        if is_shortfall:
            shortfall = abs(balance_after)
            dates = format_date_range(vacation.start_date, vacation.end_date, today=today)
            kind = "new" if vacation.id == temp.id else "existing"
            result.warnings.append(SimulationWarning(
                vacation_id=vacation.id,
                description=description,
                dates=dates,
                shortfall_hours=round_hours(shortfall),
                projected_balance=round_hours(balance_before),
                required_hours=vacation.total_hours,
                message=(
                    f'Your {kind} vacation "{description}" ({dates}) would cause a '
                    f"shortfall of {shortfall:.2f} hours. You'll have "
                    f"{balance_before:.2f} hours available but need "
                    f"{vacation.total_hours:.2f} hours."
                ),
            ))
            logger.debug(f"Shortfall of {shortfall:.2f}h at {vacation.id} ({dates})")

        running_balance = max(0, balance_after)
        cursor = start

    return result


def would_cause_future_shortfalls(
    settings: UserSettings,
    candidate: VacationRequest,
    editing_id: Optional[str] = None,
    today: Optional[date] = None,
) -> bool:
    return simulate_across_vacations(settings, candidate, editing_id, today).has_warnings


def conflict_summary(
    settings: UserSettings,
    candidate: VacationRequest,
    editing_id: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """One-line summary of the conflicts a vacation would cause."""
    result = simulate_across_vacations(settings, candidate, editing_id, today)

    if not result.has_warnings:
        return "No conflicts detected with future vacations."

    count = len(result.warnings)
    plural = "s" if count > 1 else ""
    return (
        f"This vacation would cause {count} future conflict{plural} "
        f"with a total shortfall of {result.total_shortfall:.2f} hours."
    )
