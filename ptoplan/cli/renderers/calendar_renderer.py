"""Rich renderers for calendar, projection and vacation output.

Transforms SDK result objects into formatted Rich tables and panels.
"""

from datetime import date
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ptoplan.sdk import (
    BalanceProjection,
    CalendarDay,
    PlanSummary,
    SimulationResult,
    ValidationResult,
    VacationEntry,
    day_of_week,
    format_date_range,
    format_validation_message,
    hours_to_days,
)

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MESSAGE_STYLES = {
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def _format_day_cell(day: CalendarDay, today: date) -> str:
    number = f"[bold reverse]{day.date.day}[/bold reverse]" if day.date == today else f"[bold]{day.date.day}[/bold]"
    lines = [number, f"[dim]{day.pto_balance:.2f}h[/dim]"]

    if day.is_pay_day and day.total_pto_on_pay_day is not None:
        lines.append(f"[green]+{day.pto_accrued:.2f}[/green]")
        lines.append(f"[green]{day.total_pto_on_pay_day:.2f} total[/green]")

    for vacation in day.vacations:
        lines.append(f"[magenta]{vacation.description or 'Vacation'}[/magenta]")

    return "\n".join(lines)


def render_month_calendar(
    console: Console,
    days: List[CalendarDay],
    today: Optional[date] = None,
) -> None:
    """Render a month of CalendarDay cells as a week grid."""
    if not days:
        return
    if today is None:
        today = date.today()

    first = days[0].date
    table = Table(
        title=first.strftime("%B %Y"),
        box=box.SQUARE,
        show_lines=True,
        expand=True,
    )
    for name in DAY_NAMES:
        table.add_column(name, justify="left", vertical="top")

    week = [""] * day_of_week(first)
    for day in days:
        week.append(_format_day_cell(day, today))
        if len(week) == 7:
            table.add_row(*week)
            week = []
    if week:
        week.extend([""] * (7 - len(week)))
        table.add_row(*week)

    console.print(table)
    console.print("[dim]Balances are projected hours; [green]green[/green] marks paydays, "
                  "[magenta]magenta[/magenta] marks vacations.[/dim]")


def render_projection(console: Console, target: date, projection: BalanceProjection) -> None:
    """Render a balance projection breakdown."""
    breakdown = projection.breakdown
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("item", style="dim")
    table.add_column("hours", justify="right")
    table.add_column("days", justify="right", style="dim")

    table.add_row("Starting balance", f"{breakdown.starting_balance:.2f}",
                  f"({hours_to_days(breakdown.starting_balance)}d)")
    table.add_row("Accrued", f"+{breakdown.total_accrued:.2f}",
                  f"({hours_to_days(breakdown.total_accrued)}d)")
    table.add_row("Vacations", f"-{breakdown.total_vacation_hours:.2f}",
                  f"({hours_to_days(breakdown.total_vacation_hours)}d)")
    table.add_row("[bold]Projected balance[/bold]", f"[bold]{breakdown.final_balance:.2f}[/bold]",
                  f"({hours_to_days(breakdown.final_balance)}d)")

    console.print(Panel(table, title=f"PTO on {target.isoformat()}", border_style="cyan"))


def render_summary(console: Console, plan: PlanSummary) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("item", style="dim")
    table.add_column("value", justify="right")

    table.add_row("Current balance", f"{plan.current_pto:.2f} hrs ({hours_to_days(plan.current_pto)} days)")
    table.add_row("Planned vacation", f"{plan.planned_hours:.2f} hrs ({hours_to_days(plan.planned_hours)} days)")
    table.add_row("Remaining after planned",
                  f"{plan.remaining_after_planned:.2f} hrs ({hours_to_days(plan.remaining_after_planned)} days)")
    table.add_row("Upcoming / past vacations", f"{plan.upcoming_count} / {plan.past_count}")

    console.print(Panel(table, title="Summary", border_style="dim"))


def render_vacations(
    console: Console,
    title: str,
    vacations: List[VacationEntry],
    today: Optional[date] = None,
) -> None:
    if not vacations:
        console.print(f"[dim]No {title.lower()}.[/dim]")
        return

    table = Table(title=title, box=box.SIMPLE)
    table.add_column("ID", style="dim")
    table.add_column("Dates")
    table.add_column("Description")
    table.add_column("Hours", justify="right")
    table.add_column("Weekends", justify="center")

    for vacation in vacations:
        table.add_row(
            vacation.id,
            format_date_range(vacation.start_date, vacation.end_date, today=today),
            vacation.description or "",
            f"{vacation.total_hours:.2f}",
            "yes" if vacation.include_weekends else "no",
        )
    console.print(table)


def render_validation(console: Console, result: ValidationResult) -> None:
    """Render a validation result with its hours and day split."""
    style = MESSAGE_STYLES.get(result.message_type, "white")
    body = format_validation_message(result, include_breakdown=True)
    if result.message_type != "error" or result.breakdown.total_days:
        body += (
            f"\n\nRequired: {result.required_hours:.2f} hrs   "
            f"Available: {result.available_hours:.2f} hrs"
        )
        if result.shortfall_hours:
            body += f"   Shortfall: {result.shortfall_hours:.2f} hrs"

    console.print(Panel(f"[{style}]{body}[/{style}]", title="Validation", border_style=style))


def render_simulation(console: Console, result: SimulationResult) -> None:
    """Render shortfall warnings from a chronological simulation."""
    if not result.has_warnings:
        console.print("[green]No conflicts detected with future vacations.[/green]")
        return

    for warning in result.warnings:
        console.print(Panel(
            f"[yellow]{warning.message}[/yellow]",
            title=f"Shortfall: {warning.description}",
            border_style="yellow",
        ))
