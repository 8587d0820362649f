"""Tests for payday enumeration across pay schedules.

All windows are half-open: (start, end].
"""

import logging
from datetime import date, timedelta

import pytest

from ptoplan.sdk.pay_periods import (
    PAY_PERIODS,
    count_pay_periods_between,
    get_pay_periods_per_year,
    get_period_days,
    list_paydays_between,
)


class TestWeekly:

    def test_two_fridays_in_two_weeks(self):
        # Mon Jan 1 -> Mon Jan 15: Fridays Jan 5 and Jan 12
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 15), "weekly", 5) == 2

    def test_payday_on_start_is_excluded(self):
        paydays = list_paydays_between(date(2024, 1, 5), date(2024, 1, 19), "weekly", 5)
        assert paydays == [date(2024, 1, 12), date(2024, 1, 19)]

    def test_payday_on_end_is_included(self):
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 5), "weekly", 5) == 1

    def test_defaults_to_friday(self):
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 7), "weekly") == 1
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 7), "weekly", None) == 1

    def test_other_payday(self):
        # Monday payday: Jan 1 is the start (excluded), Jan 8 is after the end
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 7), "weekly", 1) == 0


class TestBiweekly:

    def test_fourteen_day_step_from_first_payday(self):
        paydays = list_paydays_between(date(2024, 1, 1), date(2024, 2, 29), "biweekly", 5)
        assert paydays == [date(2024, 1, 5), date(2024, 1, 19), date(2024, 2, 2), date(2024, 2, 16)]

    def test_two_week_window(self):
        # Only Jan 5 falls in (Jan 1, Jan 15]; the next payday is Jan 19
        assert count_pay_periods_between(date(2024, 1, 1), date(2024, 1, 15), "biweekly", 5) == 1

    def test_start_on_payday_advances_full_interval(self):
        paydays = list_paydays_between(date(2024, 1, 5), date(2024, 2, 2), "biweekly", 5)
        assert paydays == [date(2024, 1, 19), date(2024, 2, 2)]


class TestSemimonthly:

    def test_leap_february_only_fifteenth_before_target(self):
        assert count_pay_periods_between(date(2024, 2, 1), date(2024, 2, 20), "semimonthly") == 1

    def test_leap_february_last_day_is_29th(self):
        paydays = list_paydays_between(date(2024, 2, 1), date(2024, 2, 29), "semimonthly")
        assert paydays == [date(2024, 2, 15), date(2024, 2, 29)]

    def test_crosses_year_boundary(self):
        paydays = list_paydays_between(date(2023, 12, 20), date(2024, 1, 20), "semimonthly")
        assert paydays == [date(2023, 12, 31), date(2024, 1, 15)]

    def test_start_on_fifteenth_excluded(self):
        paydays = list_paydays_between(date(2024, 1, 15), date(2024, 1, 31), "semimonthly")
        assert paydays == [date(2024, 1, 31)]


class TestMonthly:

    def test_last_day_of_each_month(self):
        paydays = list_paydays_between(date(2024, 1, 31), date(2024, 4, 30), "monthly")
        assert paydays == [date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]

    def test_mid_month_window_has_no_payday(self):
        assert count_pay_periods_between(date(2024, 1, 2), date(2024, 1, 30), "monthly") == 0


class TestEdgeCases:

    @pytest.mark.parametrize("pay_period", PAY_PERIODS)
    def test_empty_or_reversed_window(self, pay_period):
        assert count_pay_periods_between(date(2024, 1, 15), date(2024, 1, 15), pay_period) == 0
        assert count_pay_periods_between(date(2024, 3, 1), date(2024, 1, 1), pay_period) == 0

    def test_unknown_schedule_falls_back_to_thirty_days(self, caplog):
        with caplog.at_level(logging.WARNING):
            paydays = list_paydays_between(date(2024, 1, 1), date(2024, 3, 1), "fortnightly")
        assert paydays == [date(2024, 1, 31), date(2024, 3, 1)]
        assert "Unknown pay period" in caplog.text

    def test_period_days(self):
        assert get_period_days("weekly") == 7
        assert get_period_days("biweekly") == 14
        assert get_period_days("semimonthly") is None
        assert get_period_days("quarterly") == 30

    def test_pay_periods_per_year(self):
        assert [get_pay_periods_per_year(p) for p in PAY_PERIODS] == [52, 26, 24, 12]
        assert get_pay_periods_per_year("quarterly") == 12

    @pytest.mark.parametrize("pay_period", PAY_PERIODS)
    def test_count_is_monotonic_in_end_date(self, pay_period):
        start = date(2024, 1, 3)
        counts = [
            count_pay_periods_between(start, start + timedelta(days=n), pay_period, 2)
            for n in range(0, 120)
        ]
        assert counts == sorted(counts)
        assert counts[-1] > 0
