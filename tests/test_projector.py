"""Unit tests for projecting events onto calendar cells."""
from datetime import date

import pytest

from shared_calendar.core import dates, events_for_date, events_for_hour, hour_slots, in_current_period, project
from shared_calendar.domain import ViewMode


class TestEventsForDate:

    def test_filters_by_day_and_sorts(self, make_event):
        late = make_event("2024-03-15T15:00")
        early = make_event("2024-03-15T08:00")
        other_day = make_event("2024-03-16T08:00")

        assert events_for_date([late, other_day, early], date(2024, 3, 15)) == [early, late]

    def test_excludes_deleted(self, make_event):
        deleted = make_event("2024-03-15T09:00", is_deleted=True)
        live = make_event("2024-03-15T10:00")

        assert events_for_date([deleted, live], date(2024, 3, 15)) == [live]

    def test_ties_break_on_id(self, make_event):
        first = make_event("2024-03-15T09:00")
        second = make_event("2024-03-15T09:00")

        assert events_for_date([second, first], date(2024, 3, 15)) == [first, second]

    def test_ties_compare_ids_numerically(self, make_event):
        ninth = make_event("2024-03-15T09:00", id=9)
        tenth = make_event("2024-03-15T09:00", id=10)

        assert [event.id for event in events_for_date([tenth, ninth], date(2024, 3, 15))] == [9, 10]


class TestEventsForHour:

    def test_half_hour_event_occupies_one_slot(self, make_event):
        event = make_event("2024-03-15T10:00", "2024-03-15T10:30")

        assert events_for_hour([event], date(2024, 3, 15), 10) == [event]
        assert events_for_hour([event], date(2024, 3, 15), 11) == []

    def test_end_hour_is_inclusive(self, make_event):
        spanning = make_event("2024-03-15T10:00", "2024-03-15T11:05")
        on_the_hour = make_event("2024-03-15T13:00", "2024-03-15T14:00")
        day = date(2024, 3, 15)

        assert events_for_hour([spanning], day, 11) == [spanning]
        assert events_for_hour([on_the_hour], day, 14) == [on_the_hour]

    def test_malformed_event_has_no_slots(self, make_event):
        broken = make_event("2024-03-15T10:00", "2024-03-15T09:00")
        day = date(2024, 3, 15)

        assert all(events == [] for _, events in hour_slots([broken], day))
        assert events_for_date([broken], day) == [broken]

    def test_hour_slots_cover_day(self, make_event):
        event = make_event("2024-03-15T22:00", "2024-03-15T23:30")
        slots = hour_slots([event], date(2024, 3, 15))

        assert [hour for hour, _ in slots] == list(range(24))
        assert [hour for hour, events in slots if events] == [22, 23]


class TestProject:

    def test_in_current_period(self):
        anchor = date(2024, 3, 15)

        assert in_current_period(date(2024, 3, 1), anchor, ViewMode.MONTH)
        assert not in_current_period(date(2024, 2, 26), anchor, ViewMode.MONTH)
        assert in_current_period(date(2024, 2, 26), anchor, ViewMode.WEEK)
        assert in_current_period(date(2024, 2, 26), anchor, ViewMode.DAY)

    def test_month_cell_overflow(self, make_event):
        events = [make_event(f"2024-03-15T{hour:02d}:00") for hour in range(8, 13)]
        grid = dates.generate_month_grid(2024, 3)

        cells = project(events, grid, anchor=date(2024, 3, 15), mode=ViewMode.MONTH)
        cell = next(item for item in cells if item.date == date(2024, 3, 15))

        assert len(cells) == 35
        assert len(cell.events) == 5
        assert cell.visible_events == events[:3]
        assert cell.hidden_count == 2
        assert cell.overflow_label == "+2"

    def test_padding_cells_are_flagged(self):
        grid = dates.generate_month_grid(2024, 3)
        cells = project([], grid, anchor=date(2024, 3, 15), mode=ViewMode.MONTH)

        assert [cell.in_current_period for cell in cells[:4]] == [False] * 4
        assert cells[4].date == date(2024, 3, 1)
        assert cells[4].in_current_period

    def test_week_cells_are_not_capped(self, make_event):
        events = [make_event(f"2024-03-15T{hour:02d}:00") for hour in range(8, 14)]

        cells = project(events, dates.week_dates(date(2024, 3, 15)), anchor=date(2024, 3, 15), mode=ViewMode.WEEK)
        friday = cells[4]

        assert friday.date == date(2024, 3, 15)
        assert len(friday.visible_events) == 6
        assert friday.overflow_label is None

    @pytest.mark.parametrize("cap", [0, -1])
    def test_non_positive_cap_still_shows_one_event(self, make_event, cap):
        events = [make_event(f"2024-03-15T{hour:02d}:00") for hour in range(8, 12)]

        cells = project(events, [date(2024, 3, 15)], anchor=date(2024, 3, 15), mode=ViewMode.MONTH, max_cell_events=cap)

        assert cells[0].visible_events == events[:1]
        assert cells[0].hidden_count == 3
        assert cells[0].overflow_label == "+3"

    def test_deleted_events_never_projected(self, make_event):
        deleted = make_event("2024-03-15T09:00", is_deleted=True)

        cells = project([deleted], [date(2024, 3, 15)], anchor=date(2024, 3, 15), mode=ViewMode.DAY)

        assert cells[0].events == []
