"""Tests for calendar date primitives."""

from datetime import date, datetime

import pytest

from ptoplan.sdk.dates import (
    day_of_week,
    days_between_dates,
    format_date_range,
    is_weekend,
    last_day_of_month,
    next_occurrence_of_weekday,
    normalize_date,
    parse_local_date,
    previous_occurrence_of_weekday,
    round_hours,
)

FRIDAY = 5


class TestParseLocalDate:

    def test_parses_iso_date(self):
        assert parse_local_date("2024-03-09") == date(2024, 3, 9)

    def test_accepts_unpadded_parts(self):
        assert parse_local_date("2024-1-5") == date(2024, 1, 5)

    @pytest.mark.parametrize("value", ["2024/01/05", "2024-01", "abc", "2024-02-30", ""])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            parse_local_date(value)


class TestNormalizeDate:

    def test_drops_time_of_day(self):
        assert normalize_date(datetime(2024, 1, 1, 23, 59, 59, 999)) == date(2024, 1, 1)

    def test_date_unchanged(self):
        assert normalize_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_parses_string(self):
        assert normalize_date("2024-01-01") == date(2024, 1, 1)


class TestWeekdays:

    def test_sunday_is_zero(self):
        assert day_of_week(date(2024, 3, 10)) == 0
        assert day_of_week(date(2024, 3, 9)) == 6
        assert day_of_week(date(2024, 1, 1)) == 1

    def test_is_weekend(self):
        assert is_weekend(date(2024, 3, 9))
        assert is_weekend(date(2024, 3, 10))
        assert not is_weekend(date(2024, 3, 11))

    def test_next_occurrence(self):
        # 2024-01-01 is a Monday
        assert next_occurrence_of_weekday(date(2024, 1, 1), FRIDAY) == date(2024, 1, 5)

    def test_next_occurrence_on_matching_day_returns_same_day(self):
        assert next_occurrence_of_weekday(date(2024, 1, 5), FRIDAY) == date(2024, 1, 5)

    def test_next_occurrence_wraps_week(self):
        assert next_occurrence_of_weekday(date(2024, 1, 6), FRIDAY) == date(2024, 1, 12)

    def test_previous_occurrence(self):
        assert previous_occurrence_of_weekday(date(2024, 1, 15), FRIDAY) == date(2024, 1, 12)

    def test_previous_occurrence_on_matching_day_returns_same_day(self):
        assert previous_occurrence_of_weekday(date(2024, 1, 12), FRIDAY) == date(2024, 1, 12)


class TestDayCounting:

    def test_full_week_with_weekends(self):
        assert days_between_dates(date(2024, 3, 4), date(2024, 3, 10)) == 7

    def test_full_week_without_weekends(self):
        assert days_between_dates(date(2024, 3, 4), date(2024, 3, 10), include_weekends=False) == 5

    def test_reversed_range_is_zero(self):
        assert days_between_dates(date(2024, 3, 10), date(2024, 3, 4)) == 0

    def test_last_day_of_month_leap_year(self):
        assert last_day_of_month(2024, 2) == date(2024, 2, 29)
        assert last_day_of_month(2023, 2) == date(2023, 2, 28)


class TestFormatDateRange:

    def test_same_year(self):
        assert format_date_range("2024-03-09", "2024-03-10", today=date(2024, 1, 1)) == "Mar 9 - Mar 10"

    def test_single_day(self):
        assert format_date_range("2024-03-09", "2024-03-09", today=date(2024, 1, 1)) == "Mar 9"

    def test_other_year_shows_year(self):
        text = format_date_range("2024-12-30", "2025-01-02", today=date(2025, 6, 1))
        assert text == "Dec 30, 2024 - Jan 2"


class TestRoundHours:

    def test_two_decimals(self):
        assert round_hours(10 / 3) == 3.33

    def test_half_rounds_up(self):
        assert round_hours(0.125) == 0.13

    def test_accrual_product(self):
        assert round_hours(2 * 13.36) == 26.72
