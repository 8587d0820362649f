"""Helpers shared by CLI command modules."""

from datetime import date
from typing import Optional

import click

from ptoplan.sdk import (
    ProfileNotFoundError,
    ProfileValidationError,
    UserSettings,
    load_user_settings,
    parse_local_date,
)

WEEKDAY_NAMES = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]


def require_settings() -> UserSettings:
    """Load settings, converting store errors into CLI errors."""
    try:
        return load_user_settings(require_exists=True)
    except (ProfileNotFoundError, ProfileValidationError) as e:
        raise click.ClickException(str(e))


def parse_date_option(value: Optional[str], param_name: str = "date") -> Optional[date]:
    if value is None:
        return None
    try:
        return parse_local_date(value)
    except ValueError:
        raise click.BadParameter(f"Invalid date '{value}'. Use YYYY-MM-DD.", param_hint=param_name)


def parse_weekday(value: Optional[str]) -> Optional[int]:
    """Accept 0-6 (Sunday=0) or a weekday name such as 'fri'."""
    if value is None:
        return None
    if value.isdigit() and 0 <= int(value) <= 6:
        return int(value)
    lowered = value.lower()
    for index, name in enumerate(WEEKDAY_NAMES):
        if len(lowered) >= 3 and name.startswith(lowered):
            return index
    raise click.BadParameter(f"Invalid weekday '{value}'. Use 0-6 (Sunday=0) or a day name.")
