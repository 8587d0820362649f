"""Month calendar data: daily balances, paydays and vacations.

Paydays shown on the calendar are the ones the projection counts. For
interval schedules (weekly, biweekly) the series is anchored on the
projection date and extended backwards into earlier months.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from .dates import DateLike, iter_days, last_day_of_month, normalize_date, round_hours
from .pay_periods import get_period_days, iter_paydays_between
from .projection import project_settings_balance
from .schemas import UserSettings, VacationEntry
from .vacations import past_vacations, total_planned_hours, upcoming_vacations, vacations_for_date


@dataclass
class PaydayEvent:
    date: date
    pto_accrued: float
    total_pto: float
    is_pay_day: bool = True


@dataclass
class CalendarDay:
    """One day cell of the month calendar."""

    date: date
    pto_balance: float
    is_pay_day: bool = False
    vacations: List[VacationEntry] = field(default_factory=list)
    pto_accrued: Optional[float] = None
    total_pto_on_pay_day: Optional[float] = None

    @property
    def date_key(self) -> str:
        return self.date.isoformat()


@dataclass
class PlanSummary:
    current_pto: float
    planned_hours: float
    remaining_after_planned: float
    upcoming_count: int
    past_count: int


def _paydays_in_month(settings: UserSettings, year: int, month: int, as_of: date) -> List[date]:
    month_start = date(year, month, 1)
    month_end = last_day_of_month(year, month)
    interval = get_period_days(settings.pay_period)

    if interval is None:
        # The 15th and month ends never fall on the 1st
        return list(iter_paydays_between(
            month_start, month_end,
            settings.pay_period, settings.payday_of_week,
        ))

    # First payday the projection from as_of would count
    first = next(iter_paydays_between(
        as_of, as_of + timedelta(days=interval),
        settings.pay_period, settings.payday_of_week,
    ))

    # Offset of the series' first payday within the month
    offset = (first - month_start).days % interval
    month_length = (month_end - month_start).days + 1
    return [month_start + timedelta(days=d) for d in range(offset, month_length, interval)]


def payday_events_for_month(
    settings: UserSettings,
    year: int,
    month: int,
    as_of: Optional[DateLike] = None,
) -> List[PaydayEvent]:
    """Paydays falling in a calendar month with the balance projected for each."""
    as_of = normalize_date(as_of) if as_of is not None else date.today()

    events = []
    for payday in _paydays_in_month(settings, year, month, as_of):
        projection = project_settings_balance(settings, payday, as_of=as_of)
        events.append(PaydayEvent(
            date=payday,
            pto_accrued=settings.accrual_rate,
            total_pto=round_hours(projection.projected_balance),
        ))
    return events


def build_month_calendar(
    settings: UserSettings,
    year: int,
    month: int,
    as_of: Optional[DateLike] = None,
) -> List[CalendarDay]:
    """Build one CalendarDay per day of the month."""
    as_of = normalize_date(as_of) if as_of is not None else date.today()

    events: Dict[date, PaydayEvent] = {
        event.date: event for event in payday_events_for_month(settings, year, month, as_of)
    }

    days = []
    for day in iter_days(date(year, month, 1), last_day_of_month(year, month)):
        event = events.get(day)
        days.append(CalendarDay(
            date=day,
            pto_balance=project_settings_balance(settings, day, as_of=as_of).projected_balance,
            is_pay_day=event is not None,
            vacations=vacations_for_date(day, settings.vacations),
            pto_accrued=event.pto_accrued if event else None,
            total_pto_on_pay_day=event.total_pto if event else None,
        ))
    return days


def summary(settings: UserSettings, today: Optional[date] = None) -> PlanSummary:
    """Totals for the plan overview: planned hours and what remains."""
    planned = total_planned_hours(settings.vacations)
    return PlanSummary(
        current_pto=settings.current_pto,
        planned_hours=planned,
        remaining_after_planned=max(0, round_hours(settings.current_pto - planned)),
        upcoming_count=len(upcoming_vacations(settings.vacations, today)),
        past_count=len(past_vacations(settings.vacations, today)),
    )
