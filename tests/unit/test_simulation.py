"""Tests for the chronological vacation simulation."""

from datetime import date

import pytest

from ptoplan.sdk.schemas import UserSettings, VacationEntry, VacationRequest
from ptoplan.sdk.simulation import (
    conflict_summary,
    simulate_across_vacations,
    would_cause_future_shortfalls,
)

# Wednesday
TODAY = date(2024, 1, 3)


def vacation(vacation_id, start, end, hours, description=None):
    return VacationEntry(
        id=vacation_id, start_date=start, end_date=end, total_hours=hours, description=description,
    )


def accrual_between_vacations_settings():
    """40h balance, 20h per Wednesday payday, vacation A Jan 8-12 (40h).

    No Wednesday falls in (Jan 3, Jan 8]; Jan 10 falls before Jan 13.
    """
    return UserSettings(
        current_pto=40,
        accrual_rate=20,
        pay_period="weekly",
        payday_of_week=3,
        vacations=[vacation("vac_a", "2024-01-08", "2024-01-12", 40, "Trip A")],
    )


class TestSimulateAcrossVacations:

    def test_later_vacation_cannot_borrow_earlier_hours(self):
        settings = accrual_between_vacations_settings()
        # Sat Jan 13 - Wed Jan 17 with weekends: 5 days, 40h
        candidate = VacationRequest(
            start_date="2024-01-13", end_date="2024-01-17", include_weekends=True,
            description="Trip B",
        )

        result = simulate_across_vacations(settings, candidate, today=TODAY)

        assert result.has_warnings
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.description == "Trip B"
        assert warning.shortfall_hours == 20
        assert warning.projected_balance == 20
        assert warning.required_hours == 40
        assert warning.message == (
            'Your new vacation "Trip B" (Jan 13 - Jan 17) would cause a shortfall of '
            "20.00 hours. You'll have 20.00 hours available but need 40.00 hours."
        )

        first, second = result.steps
        assert first.vacation_id == "vac_a"
        assert first.balance_before == 40
        assert first.balance_after == 0
        assert not first.is_shortfall
        assert second.balance_before == 20
        assert second.balance_after == -20
        assert second.is_shortfall

    def test_editing_replaces_existing_entry(self):
        settings = accrual_between_vacations_settings()
        # Extend Trip A to two working weeks: 80h against a 40h balance
        candidate = VacationRequest(
            start_date="2024-01-08", end_date="2024-01-19", description="Trip A",
        )

        result = simulate_across_vacations(settings, candidate, editing_id="vac_a", today=TODAY)

        assert len(result.steps) == 1
        assert result.steps[0].vacation_hours == 80
        assert result.warnings[0].vacation_id == "vac_a"
        assert result.warnings[0].shortfall_hours == 40

    def test_one_edit_can_flag_several_downstream_vacations(self):
        settings = UserSettings(
            current_pto=40,
            accrual_rate=0,
            pay_period="monthly",
            vacations=[
                vacation("vac_d", "2024-03-04", "2024-03-08", 40, "Spring"),
                vacation("vac_c", "2024-02-05", "2024-02-09", 40, "Ski"),
            ],
        )
        candidate = VacationRequest(start_date="2024-01-15", end_date="2024-01-19")

        result = simulate_across_vacations(settings, candidate, today=TODAY)

        assert [s.vacation_id for s in result.steps][1:] == ["vac_c", "vac_d"]
        assert [w.vacation_id for w in result.warnings] == ["vac_c", "vac_d"]
        assert all(w.shortfall_hours == 40 for w in result.warnings)
        assert "existing vacation \"Ski\"" in result.warnings[0].message
        assert result.total_shortfall == 80

        summary = conflict_summary(settings, candidate, today=TODAY)
        assert summary == (
            "This vacation would cause 2 future conflicts with a total shortfall of 80.00 hours."
        )

    def test_past_vacations_are_ignored(self):
        settings = UserSettings(
            current_pto=0,
            accrual_rate=0,
            vacations=[vacation("old", "2023-12-01", "2023-12-05", 40)],
        )
        candidate = VacationRequest(start_date="2023-12-20", end_date="2023-12-22")

        result = simulate_across_vacations(settings, candidate, today=TODAY)

        assert not result.has_warnings
        assert result.steps == []

    def test_vacation_starting_today_is_simulated(self):
        settings = UserSettings(current_pto=8, accrual_rate=0)
        candidate = VacationRequest(start_date="2024-01-03", end_date="2024-01-04")

        result = simulate_across_vacations(settings, candidate, today=TODAY)

        assert result.warnings[0].shortfall_hours == 8
        assert result.warnings[0].description == "New Vacation"

    def test_sufficient_balance(self):
        settings = accrual_between_vacations_settings()
        candidate = VacationRequest(start_date="2024-02-05", end_date="2024-02-05")

        assert not would_cause_future_shortfalls(settings, candidate, today=TODAY)
        assert conflict_summary(settings, candidate, today=TODAY) == (
            "No conflicts detected with future vacations."
        )

    @pytest.mark.parametrize("start,end", [
        ("2030-01-10", "2030-01-05"),
        ("2030-13-01", "2030-13-02"),
        ("soon", "later"),
    ])
    def test_bad_candidate_dates_return_empty_result(self, start, end):
        settings = UserSettings(current_pto=40)
        candidate = VacationRequest(start_date=start, end_date=end)

        result = simulate_across_vacations(settings, candidate, today=TODAY)

        assert not result.has_warnings
        assert result.steps == []
        assert not would_cause_future_shortfalls(settings, candidate, today=TODAY)
        assert conflict_summary(settings, candidate, today=TODAY) == (
            "No conflicts detected with future vacations."
        )

    def test_settings_not_mutated(self):
        settings = accrual_between_vacations_settings()
        candidate = VacationRequest(start_date="2024-01-15", end_date="2024-01-16")

        simulate_across_vacations(settings, candidate, today=TODAY)

        assert [v.id for v in settings.vacations] == ["vac_a"]
