"""Vacation request validation.

Checks a prospective vacation against the PTO balance projected for its
first day. Problems are reported in the returned result, never raised.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Optional

from .dates import parse_local_date, round_hours
from .projection import available_pto_on_date
from .schemas import UserSettings
from .vacations import DayBreakdown, vacation_day_breakdown


MessageType = Literal["success", "warning", "error"]


@dataclass
class ValidationResult:
    is_valid: bool
    required_hours: float
    available_hours: float
    shortfall_hours: float
    message: str
    message_type: MessageType
    breakdown: DayBreakdown = field(default_factory=DayBreakdown)


def _input_error(message: str) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        required_hours=0,
        available_hours=0,
        shortfall_hours=0,
        message=message,
        message_type="error",
    )


def should_skip_weekend_balance_check(breakdown: DayBreakdown, include_weekends: bool) -> bool:
    """True for a weekends-only request when weekends cost no PTO."""
    return (
        not include_weekends
        and breakdown.weekday_days == 0
        and breakdown.weekend_days > 0
    )


def validate_vacation_request(
    start_date_str: Optional[str],
    end_date_str: Optional[str],
    include_weekends: bool,
    settings: UserSettings,
    editing_id: Optional[str] = None,
    today: Optional[date] = None,
) -> ValidationResult:
    """Validate a vacation request against the balance on its start date.

    Args:
        start_date_str: First day (YYYY-MM-DD)
        end_date_str: Last day (YYYY-MM-DD)
        include_weekends: Whether weekend days cost PTO
        settings: Current settings snapshot
        editing_id: Vacation being edited; it is left out of the balance
                    projection so its hours are not counted twice
        today: Projection start (default: today)

    Returns:
        ValidationResult; is_valid is False for input errors and shortfalls.
    """
    if not start_date_str or not end_date_str:
        return _input_error("Please select both start and end dates")

    try:
        start = parse_local_date(start_date_str)
        end = parse_local_date(end_date_str)
    except ValueError:
        return _input_error("Invalid date format (expected YYYY-MM-DD)")

    if start > end:
        return _input_error("End date must be after start date")

    breakdown = vacation_day_breakdown(start_date_str, end_date_str, include_weekends)

    if should_skip_weekend_balance_check(breakdown, include_weekends):
        return ValidationResult(
            is_valid=True,
            required_hours=0,
            available_hours=round_hours(
                available_pto_on_date(start_date_str, settings, editing_id, today)
            ),
            shortfall_hours=0,
            message="Weekend vacation request (no PTO hours required)",
            message_type="success",
            breakdown=breakdown,
        )

    required = breakdown.required_hours
    available = available_pto_on_date(start_date_str, settings, editing_id, today)
    shortfall = max(0, required - available)
    is_valid = shortfall == 0

    if is_valid:
        if required == 0:
            message = "No PTO hours required for this vacation"
        else:
            message = "Vacation request is valid! You have sufficient PTO balance."
        message_type = "success"
    else:
        if breakdown.weekend_days > 0 and not include_weekends:
            message = f"You need {shortfall:.2f} more hours (weekends excluded from calculation)"
        else:
            message = f"You need {shortfall:.2f} more hours for this vacation"
        message_type = "error"

    return ValidationResult(
        is_valid=is_valid,
        required_hours=round_hours(required),
        available_hours=round_hours(available),
        shortfall_hours=round_hours(shortfall),
        message=message,
        message_type=message_type,
        breakdown=breakdown,
    )


def format_validation_message(result: ValidationResult, include_breakdown: bool = False) -> str:
    """Validation message, optionally followed by the weekday/weekend split."""
    message = result.message
    breakdown = result.breakdown

    if include_breakdown and breakdown.total_days > 0 and breakdown.weekend_days > 0:
        weekday_plural = "s" if breakdown.weekday_days != 1 else ""
        weekend_plural = "s" if breakdown.weekend_days != 1 else ""
        message += (
            f"\n\nBreakdown: {breakdown.weekday_days} weekday{weekday_plural}, "
            f"{breakdown.weekend_days} weekend day{weekend_plural}"
        )
        if breakdown.hours_from_weekends == 0:
            message += " (weekends excluded from PTO calculation)"

    return message


def have_vacation_dates_changed(current: dict, original: Optional[dict]) -> bool:
    """True when start or end differ from the original (or there is none)."""
    if not original:
        return True
    return (
        current.get("start_date") != original.get("start_date")
        or current.get("end_date") != original.get("end_date")
    )
