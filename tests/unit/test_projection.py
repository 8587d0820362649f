"""Tests for balance projection.

Covers worked scenarios plus the general
properties: projection to as_of is the identity, results never go
negative, and the (as_of, target] window boundaries.
"""

from datetime import date, timedelta

import pytest

from ptoplan.sdk.pay_periods import PAY_PERIODS
from ptoplan.sdk.projection import (
    available_pto_on_date,
    project_balance,
    project_settings_balance,
)
from ptoplan.sdk.schemas import UserSettings, VacationEntry

AS_OF = date(2024, 1, 1)


def vacation(vacation_id, start, end, hours):
    return VacationEntry(id=vacation_id, start_date=start, end_date=end, total_hours=hours)


class TestScenarios:

    def test_two_weekly_fridays(self):
        projection = project_balance(96, 13.36, "weekly", [], date(2024, 1, 15), AS_OF, 5)
        assert projection.accrued_hours == 26.72
        assert projection.projected_balance == 122.72

    def test_biweekly_two_weeks_counts_one_payday(self):
        projection = project_balance(96, 13.36, "biweekly", [], date(2024, 1, 15), AS_OF, 5)
        assert projection.accrued_hours == 13.36
        assert projection.projected_balance == 109.36

    def test_accrual_and_vacation(self):
        vacations = [vacation("a", "2024-02-05", "2024-02-09", 40)]
        projection = project_balance(40, 10, "monthly", vacations, date(2024, 2, 29), AS_OF)
        assert projection.accrued_hours == 20
        assert projection.vacation_hours_used == 40
        assert projection.projected_balance == 20

        breakdown = projection.breakdown
        assert breakdown.starting_balance == 40
        assert breakdown.total_accrued == 20
        assert breakdown.total_vacation_hours == 40
        assert breakdown.final_balance == 20


class TestProperties:

    @pytest.mark.parametrize("pay_period", PAY_PERIODS)
    @pytest.mark.parametrize("balance", [0, 12.345, 96, 500])
    def test_target_equal_to_as_of_is_identity(self, pay_period, balance):
        vacations = [vacation("a", "2023-12-29", "2024-01-05", 48)]
        projection = project_balance(balance, 13.36, pay_period, vacations, AS_OF, AS_OF, 5)
        assert projection.projected_balance == balance
        assert projection.accrued_hours == 0
        assert projection.vacation_hours_used == 0
        assert projection.breakdown.final_balance == balance

    def test_past_target_returns_current(self):
        projection = project_balance(96, 13.36, "weekly", [], date(2023, 6, 1), AS_OF)
        assert projection.projected_balance == 96

    @pytest.mark.parametrize("pay_period", PAY_PERIODS)
    def test_never_negative(self, pay_period):
        vacations = [vacation("a", "2024-01-02", "2024-01-31", 200)]
        for days in (1, 10, 30, 60):
            projection = project_balance(
                10, 1, pay_period, vacations, AS_OF + timedelta(days=days), AS_OF,
            )
            assert projection.projected_balance >= 0

    def test_vacation_on_as_of_excluded_next_day_included(self):
        on_as_of = [vacation("a", "2024-01-01", "2024-01-01", 8)]
        day_after = [vacation("b", "2024-01-02", "2024-01-02", 8)]
        target = date(2024, 1, 10)

        assert project_balance(40, 0, "monthly", on_as_of, target, AS_OF).projected_balance == 40
        assert project_balance(40, 0, "monthly", day_after, target, AS_OF).projected_balance == 32

    def test_accepts_date_strings(self):
        projection = project_balance(96, 13.36, "weekly", [], "2024-01-15", "2024-01-01", 5)
        assert projection.projected_balance == 122.72

    def test_to_dict(self):
        data = project_balance(96, 13.36, "weekly", [], date(2024, 1, 15), AS_OF, 5).to_dict()
        assert data["projected_balance"] == 122.72
        assert data["breakdown"]["total_accrued"] == 26.72


class TestSettingsProjection:

    def test_excludes_vacation_being_edited(self):
        settings = UserSettings(
            current_pto=40,
            accrual_rate=0,
            pay_period="monthly",
            vacations=[vacation("a", "2024-01-08", "2024-01-12", 40)],
        )
        target = date(2024, 1, 15)
        assert project_settings_balance(settings, target, as_of=AS_OF).projected_balance == 0
        assert project_settings_balance(
            settings, target, as_of=AS_OF, exclude_vacation_id="a"
        ).projected_balance == 40

    def test_available_pto_on_date_uses_payday_of_week(self):
        settings = UserSettings(
            current_pto=96, accrual_rate=13.36, pay_period="weekly", payday_of_week=1,
        )
        # Monday paydays in (Jan 1, Jan 15]: Jan 8 and Jan 15
        assert available_pto_on_date("2024-01-15", settings, today=AS_OF) == 122.72
