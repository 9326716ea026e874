"""Unit tests for calendar period arithmetic."""
from datetime import date, datetime, timedelta

import pytest

from shared_calendar.core import dates


class TestMonthBounds:
    """Month start and end helpers."""

    @pytest.mark.parametrize(
        "day, last",
        [
            (date(2024, 2, 10), date(2024, 2, 29)),
            (date(2023, 2, 10), date(2023, 2, 28)),
            (date(2024, 4, 30), date(2024, 4, 30)),
            (date(2024, 12, 1), date(2024, 12, 31)),
        ],
    )
    def test_month_end_is_last_day(self, day, last):
        assert dates.month_start(day).day == 1
        assert dates.month_end(day).date() == last

    def test_month_bounds_cover_whole_days(self):
        start = dates.month_start(datetime(2024, 3, 15, 16, 45))
        end = dates.month_end(datetime(2024, 3, 15, 16, 45))

        assert start == datetime(2024, 3, 1)
        assert end == datetime(2024, 3, 31, 23, 59, 59, 999000)


class TestWeekBounds:
    """Monday-first week helpers."""

    def test_week_starts_on_monday(self):
        assert dates.week_start(date(2024, 3, 15)) == datetime(2024, 3, 11)
        assert dates.week_start(date(2024, 3, 11)) == datetime(2024, 3, 11)

    def test_sunday_belongs_to_previous_monday(self):
        assert dates.week_start(date(2024, 3, 17)) == datetime(2024, 3, 11)

    def test_week_crosses_year_boundary(self):
        assert dates.week_start(date(2024, 12, 30)) == datetime(2024, 12, 30)
        assert dates.week_end(date(2024, 12, 30)) == datetime(2025, 1, 5, 23, 59, 59, 999000)

    def test_week_contains_every_day_of_a_year(self):
        day = date(2023, 12, 1)
        while day < date(2025, 2, 1):
            start = dates.week_start(day)
            end = dates.week_end(day)
            assert start <= dates.day_start(day) <= end
            assert (end.date() - start.date()).days == 6
            assert dates.week_start(start) == start
            day += timedelta(days=1)

    def test_week_dates(self):
        week = dates.week_dates(date(2024, 1, 3))

        assert week[0] == date(2024, 1, 1)
        assert week[-1] == date(2024, 1, 7)
        assert len(week) == 7


class TestMonthGrid:
    """Padded month grids."""

    def test_march_2024_grid(self):
        grid = dates.generate_month_grid(2024, 3)

        assert grid[0] == date(2024, 2, 26)
        assert grid[-1] == date(2024, 3, 31)
        assert len(grid) == 35

    def test_february_2021_fits_four_weeks(self):
        grid = dates.generate_month_grid(2021, 2)

        assert len(grid) == 28
        assert grid[0] == date(2021, 2, 1)

    def test_six_week_month(self):
        grid = dates.generate_month_grid(2024, 9)

        assert len(grid) == 42
        assert grid[0] == date(2024, 8, 26)
        assert grid[-1] == date(2024, 10, 6)

    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    def test_grid_is_whole_weeks_and_covers_month(self, year):
        for month in range(1, 13):
            grid = dates.generate_month_grid(year, month)
            assert len(grid) % 7 == 0
            assert grid[0].isoweekday() == 1
            last = dates.month_end(date(year, month, 1)).day
            for day in range(1, last + 1):
                assert date(year, month, day) in grid

    def test_december_grid_runs_into_january(self):
        grid = dates.generate_month_grid(2024, 12)

        assert grid[-1] == date(2025, 1, 5)


class TestDayHelpers:
    """Day bounds and comparisons."""

    def test_day_bounds(self):
        moment = datetime(2024, 3, 15, 12, 30)

        assert dates.day_start(moment) == datetime(2024, 3, 15)
        assert dates.day_end(moment) == datetime(2024, 3, 15, 23, 59, 59, 999000)

    def test_is_same_day_ignores_time(self):
        assert dates.is_same_day(datetime(2024, 3, 15, 0, 0), datetime(2024, 3, 15, 23, 59))
        assert not dates.is_same_day(datetime(2024, 3, 15, 23, 59), date(2024, 3, 16))

    def test_is_today(self):
        assert dates.is_today(datetime.now())
        assert not dates.is_today(date.today() - timedelta(days=1))

    def test_is_past_date(self):
        assert dates.is_past_date(date.today() - timedelta(days=1))
        assert not dates.is_past_date(date.today())

    def test_add_months_clamps_to_month_end(self):
        assert dates.add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert dates.add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
        assert dates.add_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
