"""Unit tests for view navigation."""
from datetime import date, datetime, timedelta

import pytest

from shared_calendar.core import ViewState
from shared_calendar.domain import ViewMode


class TestViewStateDefaults:

    def test_defaults_to_month_of_today(self):
        view = ViewState()

        assert view.mode is ViewMode.MONTH
        assert view.anchor == date.today()

    def test_datetime_anchor_is_truncated(self):
        view = ViewState(anchor=datetime(2024, 3, 15, 18, 30), mode="week")

        assert view.anchor == date(2024, 3, 15)
        assert view.mode is ViewMode.WEEK


class TestNavigation:

    def test_next_month_does_not_skip_february(self):
        view = ViewState(anchor=date(2024, 1, 31))
        view.go_to_next()

        assert view.anchor.month == 2
        assert view.anchor == date(2024, 2, 29)

    def test_previous_month_crosses_year(self):
        view = ViewState(anchor=date(2024, 1, 15))
        view.go_to_previous()

        assert view.anchor == date(2023, 12, 15)

    def test_week_and_day_steps(self):
        view = ViewState(anchor=date(2024, 12, 30), mode=ViewMode.WEEK)
        view.go_to_next()
        assert view.anchor == date(2025, 1, 6)

        view.change_view_mode(ViewMode.DAY)
        view.go_to_previous()
        assert view.anchor == date(2025, 1, 5)

    def test_mode_change_keeps_anchor(self):
        view = ViewState(anchor=date(2024, 3, 15))
        view.change_view_mode(ViewMode.DAY)

        assert view.anchor == date(2024, 3, 15)
        assert view.period_start() == datetime(2024, 3, 15)

    def test_go_to_date_and_today(self):
        view = ViewState(anchor=date(2020, 1, 1), mode=ViewMode.WEEK)
        view.go_to_date(datetime(2024, 7, 4, 9, 0))
        assert view.anchor == date(2024, 7, 4)
        assert view.mode is ViewMode.WEEK

        view.go_to_today()
        assert view.anchor == date.today()

    @pytest.mark.parametrize("mode", list(ViewMode))
    def test_anchor_stays_inside_period(self, mode):
        view = ViewState(anchor=date(2024, 1, 31), mode=mode)
        for _ in range(40):
            view.go_to_next()
            assert view.period_start() <= datetime.combine(view.anchor, datetime.min.time()) <= view.period_end()
            assert view.contains(view.anchor)


class TestPeriodBounds:

    def test_month_period(self):
        view = ViewState(anchor=date(2024, 3, 15))

        assert view.period_start().date() == date(2024, 3, 1)
        assert view.period_end().date() == date(2024, 3, 31)

    def test_week_period_crosses_year(self):
        view = ViewState(anchor=date(2024, 12, 30), mode=ViewMode.WEEK)

        assert view.period_start().date() == date(2024, 12, 30)
        assert view.period_end().date() == date(2025, 1, 5)

    def test_day_period(self):
        view = ViewState(anchor=date(2024, 3, 15), mode=ViewMode.DAY)

        assert view.period_end() - view.period_start() < timedelta(days=1)
        assert view.visible_dates() == [date(2024, 3, 15)]

    def test_contains(self):
        view = ViewState(anchor=date(2024, 3, 15), mode=ViewMode.WEEK)

        assert view.contains(date(2024, 3, 17))
        assert not view.contains(date(2024, 3, 18))

    def test_visible_dates_per_mode(self):
        view = ViewState(anchor=date(2024, 3, 15))
        assert len(view.visible_dates()) == 35

        view.change_view_mode(ViewMode.WEEK)
        assert view.visible_dates()[0] == date(2024, 3, 11)
        assert len(view.visible_dates()) == 7


class TestPeriodTitle:

    def test_month_title(self):
        assert ViewState(anchor=date(2024, 3, 15)).period_title() == "March 2024"

    def test_week_title_within_month(self):
        view = ViewState(anchor=date(2024, 3, 27), mode=ViewMode.WEEK)

        assert view.period_title() == "March 25 - 31, 2024"

    def test_week_title_across_months(self):
        view = ViewState(anchor=date(2024, 2, 28), mode=ViewMode.WEEK)

        assert view.period_title() == "February 26 - March 3, 2024"

    def test_day_title(self):
        view = ViewState(anchor=date(2024, 3, 15), mode=ViewMode.DAY)

        assert view.period_title() == "March 15, 2024"
