"""Unit tests for the week-sequence generator."""

from datetime import date, timedelta

import pytest

from calendarpage.page.weeks import (
    FIXED_HEIGHT_STANDARD_WEEK_COUNT,
    is_week_in_month,
    iter_week_starts,
)

FEBRUARY_2018 = date(2018, 2, 14)  # 28 days, starts on a Thursday


def week_days(week_start):
    return [week_start + timedelta(days=n) for n in range(7)]


class TestIsWeekInMonth:
    """Tests for week/month overlap."""

    def test_week_overlapping_month_start(self):
        assert is_week_in_month(date(2018, 1, 28), FEBRUARY_2018) is True

    def test_week_overlapping_month_end(self):
        assert is_week_in_month(date(2018, 2, 25), FEBRUARY_2018) is True

    def test_week_outside_month(self):
        assert is_week_in_month(date(2018, 3, 4), FEBRUARY_2018) is False


class TestFixedHeight:
    """Tests for fixed-height week rows."""

    def test_february_2018_yields_six_rows_ending_in_march(self):
        """The last of six rows is made entirely of next-month padding days."""
        weeks = list(iter_week_starts(FEBRUARY_2018, fixed_height=True))

        assert len(weeks) == FIXED_HEIGHT_STANDARD_WEEK_COUNT
        assert weeks[0] == date(2018, 1, 28)
        assert all(day.month == 3 for day in week_days(weeks[-1]))

    def test_peek_adds_seventh_row(self):
        weeks = list(iter_week_starts(FEBRUARY_2018, fixed_height=True, peek_next_month=True))

        assert len(weeks) == 7
        assert weeks[-1] == date(2018, 3, 11)

    @pytest.mark.parametrize("month", range(1, 13))
    def test_fixed_height_is_always_six_rows(self, month):
        assert len(list(iter_week_starts(date(2024, month, 1), fixed_height=True))) == 6


class TestVariableHeight:
    """Tests for variable-height week rows."""

    def test_february_2018_minimal_rows(self):
        weeks = list(iter_week_starts(FEBRUARY_2018))

        assert weeks == [
            date(2018, 1, 28),
            date(2018, 2, 4),
            date(2018, 2, 11),
            date(2018, 2, 18),
            date(2018, 2, 25),
        ]

    def test_february_2018_peek_adds_one_row(self):
        weeks = list(iter_week_starts(FEBRUARY_2018, peek_next_month=True))

        assert len(weeks) == 6
        assert weeks[-1] == date(2018, 3, 4)

    def test_february_2015_fits_four_rows(self):
        """A 28-day February starting on the week start day needs only four rows."""
        assert len(list(iter_week_starts(date(2015, 2, 1)))) == 4

    def test_monday_week_start(self):
        weeks = list(iter_week_starts(FEBRUARY_2018, calendar_start_day=1))

        assert weeks[0] == date(2018, 1, 29)
        assert len(weeks) == 5

    def test_locale_week_start(self):
        assert next(iter_week_starts(FEBRUARY_2018, locale="en-GB")) == date(2018, 1, 29)

    @pytest.mark.parametrize("start_day", [0, 1, 6])
    def test_rows_cover_month_minimally(self, start_day):
        """Every day of the month is covered and every row touches the month."""
        for year in (2023, 2024):
            for month in range(1, 13):
                anchor = date(year, month, 1)
                weeks = list(iter_week_starts(anchor, calendar_start_day=start_day))
                covered = {day for week in weeks for day in week_days(week)}

                day = anchor
                while day.month == month:
                    assert day in covered
                    day += timedelta(days=1)
                assert all(is_week_in_month(week, anchor) for week in weeks)

    def test_generator_is_lazy(self):
        weeks = iter_week_starts(FEBRUARY_2018)
        assert next(weeks) == date(2018, 1, 28)
        assert next(weeks) == date(2018, 2, 4)
