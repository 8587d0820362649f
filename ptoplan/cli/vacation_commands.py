"""Vacation CLI commands: list, add, edit, remove, check."""

from datetime import date

import click
from rich.console import Console

from ptoplan.sdk import (
    ProfileValidationError,
    VacationRequest,
    conflict_summary,
    create_vacation_entry,
    past_vacations,
    simulate_across_vacations,
    upcoming_vacations,
    update_user_settings,
    validate_vacation_request,
)
from .common import parse_date_option, require_settings
from .renderers.calendar_renderer import render_simulation, render_validation, render_vacations


@click.group("vacation")
def vacation():
    """Plan vacations and check them against your PTO balance."""
    pass


def _check_request(console, settings, request, editing_id=None):
    """Validate and simulate a request; returns True when it is safe to save."""
    result = validate_vacation_request(
        request.start_date,
        request.end_date,
        request.include_weekends,
        settings,
        editing_id=editing_id,
    )
    render_validation(console, result)

    simulation = simulate_across_vacations(settings, request, editing_id=editing_id)
    render_simulation(console, simulation)
    return result.is_valid and not simulation.has_warnings


def _require_range(start, end):
    if parse_date_option(start, "start") > parse_date_option(end, "end"):
        raise click.ClickException("End date must be after start date")


def _find_vacation(settings, vacation_id):
    existing = next((v for v in settings.vacations if v.id == vacation_id), None)
    if existing is None:
        raise click.ClickException(f"No vacation with id '{vacation_id}'")
    return existing


def _save_vacations(vacations):
    try:
        update_user_settings({"vacations": [v.model_dump() for v in vacations]})
    except ProfileValidationError as e:
        raise click.ClickException(str(e))


@vacation.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include past vacations")
def vacation_list(show_all):
    """List upcoming (and optionally past) vacations."""
    settings = require_settings()
    console = Console()
    today = date.today()

    render_vacations(console, "Upcoming vacations", upcoming_vacations(settings.vacations, today), today)
    if show_all:
        render_vacations(console, "Past vacations", past_vacations(settings.vacations, today), today)


@vacation.command("check")
@click.argument("start")
@click.argument("end")
@click.option("--weekends", is_flag=True, help="Count Saturdays and Sundays as PTO days")
@click.option("--edit", "editing_id", help="Check as a change to this existing vacation id")
def vacation_check(start, end, weekends, editing_id):
    """Check a vacation from START to END (YYYY-MM-DD) without saving it."""
    _require_range(start, end)

    settings = require_settings()
    if editing_id is not None:
        _find_vacation(settings, editing_id)

    console = Console()
    request = VacationRequest(start_date=start, end_date=end, include_weekends=weekends)

    _check_request(console, settings, request, editing_id)
    click.echo(conflict_summary(settings, request, editing_id=editing_id))


@vacation.command("add")
@click.argument("start")
@click.argument("end")
@click.option("--weekends", is_flag=True, help="Count Saturdays and Sundays as PTO days")
@click.option("--description", "-d", help="Title for the vacation")
@click.option("--force", is_flag=True, help="Save even if the balance would fall short")
def vacation_add(start, end, weekends, description, force):
    """Add a vacation from START to END (YYYY-MM-DD)."""
    _require_range(start, end)

    settings = require_settings()
    console = Console()
    request = VacationRequest(
        start_date=start, end_date=end, include_weekends=weekends, description=description,
    )

    if not _check_request(console, settings, request) and not force:
        raise click.ClickException("Vacation not saved. Use --force to save anyway.")

    entry = create_vacation_entry(start, end, weekends, description)
    _save_vacations(list(settings.vacations) + [entry])
    click.echo(f"Added vacation {entry.id} ({entry.total_hours:.2f} hrs)")


@vacation.command("edit")
@click.argument("vacation_id")
@click.option("--start", help="New first day (YYYY-MM-DD)")
@click.option("--end", help="New last day (YYYY-MM-DD)")
@click.option("--weekends/--no-weekends", default=None, help="Count weekends as PTO days")
@click.option("--description", "-d", help="New title")
@click.option("--force", is_flag=True, help="Save even if the balance would fall short")
def vacation_edit(vacation_id, start, end, weekends, description, force):
    """Change an existing vacation."""
    parse_date_option(start, "start")
    parse_date_option(end, "end")

    settings = require_settings()
    existing = _find_vacation(settings, vacation_id)

    request = VacationRequest(
        start_date=start or existing.start_date,
        end_date=end or existing.end_date,
        include_weekends=existing.include_weekends if weekends is None else weekends,
        description=description if description is not None else existing.description,
    )
    _require_range(request.start_date, request.end_date)

    console = Console()
    if not _check_request(console, settings, request, editing_id=vacation_id) and not force:
        raise click.ClickException("Vacation not saved. Use --force to save anyway.")

    entry = create_vacation_entry(
        request.start_date,
        request.end_date,
        request.include_weekends,
        request.description,
        vacation_id=existing.id,
        created_at=existing.created_at or None,
    )
    _save_vacations([entry if v.id == vacation_id else v for v in settings.vacations])
    click.echo(f"Updated vacation {entry.id} ({entry.total_hours:.2f} hrs)")


@vacation.command("remove")
@click.argument("vacation_id")
def vacation_remove(vacation_id):
    """Delete a vacation by id."""
    settings = require_settings()
    remaining = [v for v in settings.vacations if v.id != vacation_id]
    if len(remaining) == len(settings.vacations):
        raise click.ClickException(f"No vacation with id '{vacation_id}'")

    _save_vacations(remaining)
    click.echo(f"Removed vacation {vacation_id}")
