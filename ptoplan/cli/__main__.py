"""PTO Plan CLI - Command-line interface for PTO tracking and projection."""

import json
import logging
from datetime import date

import click
from rich.console import Console

from ptoplan import __version__
from ptoplan.sdk import (
    ProfileNotFoundError,
    ProfileValidationError,
    apply_automatic_accrual,
    build_month_calendar,
    load_user_settings,
    project_settings_balance,
    summary,
    update_user_settings,
)

from .common import parse_date_option, require_settings
from .profile_commands import profile as profile_group
from .renderers.calendar_renderer import render_month_calendar, render_projection, render_summary
from .vacation_commands import vacation as vacation_group


def run_automatic_accrual(today=None):
    """Roll the stored balance forward to today and persist the change.

    Does nothing when no profile exists yet.
    """
    try:
        settings = load_user_settings(require_exists=True)
    except ProfileNotFoundError:
        return {}
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    updates = apply_automatic_accrual(settings, today=today)
    if updates:
        update_user_settings(updates)
    return updates


@click.group()
@click.version_option(version=__version__, prog_name="pto-plan")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, verbose):
    """PTO Plan - Personal time-off tracking and projection.

    Tracks your PTO balance, projects it forward across paydays and
    planned vacations, and warns when a vacation would leave you short.

    Configuration is loaded from (in order):

    \b
    1. PTO_PLAN_CONFIG_PATH environment variable
    2. settings.json 'profile' key (if set via 'profile use')
    3. ~/.config/pto-plan/profile.yaml (XDG default)

    Run 'pto-plan profile init' to get started.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Profile commands manage the store directly; everything else sees an up-to-date balance
    if ctx.invoked_subcommand != "profile":
        updates = run_automatic_accrual()
        if "current_pto" in updates:
            click.echo(
                click.style(f"PTO balance updated to {updates['current_pto']:.2f} hrs", fg="cyan"),
                err=True,
            )


cli.add_command(profile_group)
cli.add_command(vacation_group)


@cli.command("balance")
@click.argument("target", required=False)
@click.option("--as-of", help="Date the current balance applies to (default: today)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def balance(target, as_of, output_format):
    """Project the PTO balance on TARGET date (YYYY-MM-DD).

    Without TARGET, shows the current balance and a plan summary.
    """
    settings = require_settings()
    as_of_date = parse_date_option(as_of, "--as-of") or date.today()
    target_date = parse_date_option(target, "target") or as_of_date

    projection = project_settings_balance(settings, target_date, as_of=as_of_date)

    if output_format == "json":
        data = {"target_date": target_date.isoformat(), "as_of": as_of_date.isoformat()}
        data.update(projection.to_dict())
        click.echo(json.dumps(data, indent=2))
        return

    console = Console()
    render_projection(console, target_date, projection)
    if target is None:
        render_summary(console, summary(settings, today=as_of_date))


@cli.command("calendar")
@click.argument("month", required=False)
@click.option("--as-of", help="Date the current balance applies to (default: today)")
def calendar_cmd(month, as_of):
    """Show a month calendar with projected balances, paydays and vacations.

    MONTH is YYYY-MM (default: current month).
    """
    settings = require_settings()
    as_of_date = parse_date_option(as_of, "--as-of") or date.today()

    if month:
        try:
            year_str, month_str = month.split("-")
            year, month_num = int(year_str), int(month_str)
            date(year, month_num, 1)
        except ValueError:
            raise click.BadParameter(f"Invalid month '{month}'. Use YYYY-MM.", param_hint="month")
    else:
        year, month_num = as_of_date.year, as_of_date.month

    days = build_month_calendar(settings, year, month_num, as_of=as_of_date)
    render_month_calendar(Console(), days, today=as_of_date)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
