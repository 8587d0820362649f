"""Calendar date primitives.

Every date handled by the engine is a plain calendar date with no
time-of-day. Strings are always YYYY-MM-DD and parsed as local dates.

Day-of-week numbering follows the settings file convention:
0=Sunday, 1=Monday, ... 6=Saturday.
"""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union


DateLike = Union[date, datetime, str]

SATURDAY = 6
SUNDAY = 0


def parse_local_date(date_str: str) -> date:
    """Parse a YYYY-MM-DD string as a local calendar date.

    Raises:
        ValueError: If the string is not three dash-separated integers
                    forming a valid date.
    """
    parts = date_str.strip().split("-")
    if len(parts) != 3:
        raise ValueError(f"Invalid date '{date_str}'. Expected YYYY-MM-DD.")
    year, month, day = (int(p) for p in parts)
    return date(year, month, day)


def normalize_date(value: DateLike) -> date:
    """Return the calendar date of value, dropping any time component."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_local_date(value)


def day_of_week(d: date) -> int:
    """Day of week with Sunday as 0."""
    return d.isoweekday() % 7


def is_weekend(d: date) -> bool:
    return day_of_week(d) in (SATURDAY, SUNDAY)


def next_occurrence_of_weekday(from_date: DateLike, weekday: int) -> date:
    """Smallest date on or after from_date falling on weekday.

    Returns from_date itself when it already falls on weekday.
    """
    start = normalize_date(from_date)
    days_until = (weekday - day_of_week(start)) % 7
    return start + timedelta(days=days_until)


def previous_occurrence_of_weekday(until: DateLike, weekday: int) -> date:
    """Largest date on or before until falling on weekday."""
    end = normalize_date(until)
    days_since = (day_of_week(end) - weekday) % 7
    return end - timedelta(days=days_since)


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day from start through end inclusive."""
    current = normalize_date(start)
    end_date = normalize_date(end)
    while current <= end_date:
        yield current
        current += timedelta(days=1)


def days_between_dates(
    start: DateLike,
    end: DateLike,
    include_weekends: bool = True,
) -> int:
    """Count days in [start, end], optionally skipping Saturdays and Sundays.

    Returns 0 when start is after end.
    """
    return sum(
        1 for d in iter_days(start, end)
        if include_weekends or not is_weekend(d)
    )


def _format_month_day(d: date, with_year: bool) -> str:
    text = f"{d.strftime('%b')} {d.day}"
    if with_year:
        text += f", {d.year}"
    return text


def format_date_range(
    start_str: str,
    end_str: str,
    today: Optional[date] = None,
) -> str:
    """Format a vacation range for display, e.g. 'Mar 9 - Mar 10'.

    The year is shown only for dates outside the current year.
    """
    if today is None:
        today = date.today()

    start = parse_local_date(start_str)
    end = parse_local_date(end_str)

    start_text = _format_month_day(start, start.year != today.year)
    if start_str == end_str:
        return start_text

    end_text = _format_month_day(end, end.year != today.year)
    return f"{start_text} - {end_text}"


def round_hours(value: float) -> float:
    """Round hours to 2 decimal places, halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100
