"""Profile CLI commands for PTO Plan.

Manages the user's PTO settings (profile.yaml): balance, accrual rate,
pay schedule.
"""

from datetime import date
from pathlib import Path

import click
import yaml

from ptoplan.sdk import (
    DEFAULT_PAYDAY_OF_WEEK,
    PAY_PERIODS,
    ProfileValidationError,
    UserSettings,
    get_profile_path,
    get_settings_path,
    load_user_settings,
    save_user_settings,
    set_setting,
    update_user_settings,
)
from .common import WEEKDAY_NAMES, parse_weekday, require_settings

# Fields users may change with 'profile set'; vacations have their own commands
SETTABLE_FIELDS = (
    "current_pto",
    "accrual_rate",
    "pay_period",
    "payday_of_week",
    "annual_allowance",
    "start_date",
    "company_name",
    "employee_id",
)


@click.group()
def profile():
    """Manage PTO settings (profile.yaml)."""
    pass


@profile.command("init")
@click.option("--balance", type=float, default=96, show_default=True, help="Current PTO balance in hours")
@click.option("--accrual-rate", type=float, default=13.36, show_default=True, help="Hours earned per pay period")
@click.option("--pay-period", type=click.Choice(PAY_PERIODS), default="monthly", show_default=True)
@click.option("--payday", help="Payday for weekly/biweekly schedules: 0-6 (Sunday=0) or day name [default: friday]")
@click.option("--annual-allowance", type=float, default=200, show_default=True, help="Yearly allowance in hours")
@click.option("--company", default="", help="Company name")
@click.option("--force", is_flag=True, help="Overwrite an existing profile")
def profile_init(balance, accrual_rate, pay_period, payday, annual_allowance, company, force):
    """Create a new profile with the given balance and schedule."""
    path = get_profile_path(require_exists=False)
    if path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {path}\nUse --force to overwrite.")

    today = date.today().isoformat()
    try:
        settings = UserSettings(
            current_pto=balance,
            accrual_rate=accrual_rate,
            pay_period=pay_period,
            payday_of_week=parse_weekday(payday),
            annual_allowance=annual_allowance,
            company_name=company,
            start_date=today,
            last_accrual_update_date=today,
            last_known_pto_balance=balance,
        )
    except ValueError as e:
        raise click.ClickException(f"Invalid profile: {e}")

    saved = save_user_settings(settings)
    click.echo(f"Created profile: {saved}")


@profile.command("show")
def profile_show():
    """Show the active profile and its settings."""
    click.echo(f"Profile: {get_profile_path()}")
    click.echo(f"Settings file: {get_settings_path()}")
    click.echo()

    settings = require_settings()
    click.echo(f"  Current balance:  {settings.current_pto:.2f} hrs")
    click.echo(f"  Accrual rate:     {settings.accrual_rate:.2f} hrs / {settings.pay_period} period")
    if settings.pay_period in ("weekly", "biweekly"):
        payday = settings.payday_of_week
        if payday is None:
            payday = DEFAULT_PAYDAY_OF_WEEK
        click.echo(f"  Payday:           {WEEKDAY_NAMES[payday].title()}")
    click.echo(f"  Annual allowance: {settings.annual_allowance:.2f} hrs")
    if settings.company_name:
        click.echo(f"  Company:          {settings.company_name}")
    click.echo(f"  Vacations:        {len(settings.vacations)}")
    if settings.last_accrual_update_date:
        click.echo(f"  Last accrual:     {settings.last_accrual_update_date}")


@profile.command("set")
@click.argument("key", type=click.Choice(SETTABLE_FIELDS))
@click.argument("value")
def profile_set(key, value):
    """Set a profile field.

    VALUE is parsed as YAML, so numbers stay numbers.
    Setting current_pto also resets the accrual bookkeeping to today.

    Examples:
        pto-plan profile set current_pto 104.5
        pto-plan profile set pay_period biweekly
    """
    require_settings()

    if key == "payday_of_week":
        parsed = parse_weekday(value)
    elif key in ("start_date", "company_name", "employee_id", "pay_period"):
        parsed = value
    else:
        parsed = yaml.safe_load(value)

    updates = {key: parsed}
    if key == "current_pto":
        updates["last_known_pto_balance"] = parsed
        updates["last_accrual_update_date"] = date.today().isoformat()

    try:
        update_user_settings(updates)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {parsed}")


@profile.command("use")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def profile_use(path):
    """Use the profile at PATH instead of the default location."""
    profile_path = Path(path).expanduser().resolve()
    set_setting("profile", str(profile_path))

    try:
        load_user_settings()
    except ProfileValidationError as e:
        click.echo(click.style(f"Warning: {e}", fg="yellow"))

    click.echo(f"Using profile: {profile_path}")
