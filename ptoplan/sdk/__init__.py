"""PTO Plan SDK - PTO accrual, projection and vacation planning."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    load_user_settings,
    save_user_settings,
    update_user_settings,
    ProfileNotFoundError,
    ProfileValidationError,
)

from .schemas import (
    PayPeriod,
    UserSettings,
    VacationEntry,
    VacationRequest,
)

from .dates import (
    normalize_date,
    parse_local_date,
    day_of_week,
    is_weekend,
    next_occurrence_of_weekday,
    previous_occurrence_of_weekday,
    days_between_dates,
    format_date_range,
    round_hours,
)

from .pay_periods import (
    PAY_PERIODS,
    DEFAULT_PAYDAY_OF_WEEK,
    get_period_days,
    get_pay_periods_per_year,
    count_pay_periods_between,
    iter_paydays_between,
    list_paydays_between,
)

from .accrual import (
    BalanceUpdate,
    accrued_hours_between,
    update_balance_for_elapsed_time,
    apply_automatic_accrual,
)

from .vacations import (
    HOURS_PER_DAY,
    DayBreakdown,
    hours_to_days,
    vacation_hours,
    vacation_day_breakdown,
    vacation_hours_consumed_between,
    create_vacation_entry,
    generate_vacation_id,
    is_date_in_vacation,
    vacations_for_date,
    upcoming_vacations,
    past_vacations,
)

from .projection import (
    BalanceProjection,
    ProjectionBreakdown,
    project_balance,
    project_settings_balance,
    available_pto_on_date,
)

from .simulation import (
    SimulationResult,
    SimulationStep,
    SimulationWarning,
    simulate_across_vacations,
    would_cause_future_shortfalls,
    conflict_summary,
)

from .validation import (
    ValidationResult,
    validate_vacation_request,
    format_validation_message,
    have_vacation_dates_changed,
)

from .month_calendar import (
    CalendarDay,
    PaydayEvent,
    PlanSummary,
    build_month_calendar,
    payday_events_for_month,
    summary,
)

__all__ = [
    # Config / settings store
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "load_user_settings",
    "save_user_settings",
    "update_user_settings",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # Schemas
    "PayPeriod",
    "UserSettings",
    "VacationEntry",
    "VacationRequest",
    # Dates
    "normalize_date",
    "parse_local_date",
    "day_of_week",
    "is_weekend",
    "next_occurrence_of_weekday",
    "previous_occurrence_of_weekday",
    "days_between_dates",
    "format_date_range",
    "round_hours",
    # Pay periods
    "PAY_PERIODS",
    "DEFAULT_PAYDAY_OF_WEEK",
    "get_period_days",
    "get_pay_periods_per_year",
    "count_pay_periods_between",
    "iter_paydays_between",
    "list_paydays_between",
    # Accrual
    "BalanceUpdate",
    "accrued_hours_between",
    "update_balance_for_elapsed_time",
    "apply_automatic_accrual",
    # Vacations
    "HOURS_PER_DAY",
    "DayBreakdown",
    "hours_to_days",
    "vacation_hours",
    "vacation_day_breakdown",
    "vacation_hours_consumed_between",
    "create_vacation_entry",
    "generate_vacation_id",
    "is_date_in_vacation",
    "vacations_for_date",
    "upcoming_vacations",
    "past_vacations",
    # Projection
    "BalanceProjection",
    "ProjectionBreakdown",
    "project_balance",
    "project_settings_balance",
    "available_pto_on_date",
    # Simulation
    "SimulationResult",
    "SimulationStep",
    "SimulationWarning",
    "simulate_across_vacations",
    "would_cause_future_shortfalls",
    "conflict_summary",
    # Validation
    "ValidationResult",
    "validate_vacation_request",
    "format_validation_message",
    "have_vacation_dates_changed",
    # Calendar
    "CalendarDay",
    "PaydayEvent",
    "PlanSummary",
    "build_month_calendar",
    "payday_events_for_month",
    "summary",
]
