from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain import CalendarCell, CalendarEvent, ViewMode
from .dates import DateLike, as_date, is_same_day

logger = logging.getLogger(__name__)

MAX_CELL_EVENTS = 3
HOURS_IN_DAY = 24


def _sort_key(event: CalendarEvent) -> tuple:
    return (event.starts_at, event.id)


def events_for_date(events: Iterable[CalendarEvent], day: DateLike) -> List[CalendarEvent]:
    """Live events starting on ``day``, earliest first."""

    matched = [event for event in events if not event.is_deleted and is_same_day(event.starts_at, day)]
    return sorted(matched, key=_sort_key)


def occupies_hour(event: CalendarEvent, hour: int) -> bool:
    # Both ends are inclusive: an event ending at 11:00 still claims the 11 slot.
    if not event.is_well_formed:
        return False
    return event.starts_at.hour <= hour <= event.ends_at.hour


def events_for_hour(events: Iterable[CalendarEvent], day: DateLike, hour: int) -> List[CalendarEvent]:
    return [event for event in events_for_date(events, day) if occupies_hour(event, hour)]


def hour_slots(events: Iterable[CalendarEvent], day: DateLike) -> List[Tuple[int, List[CalendarEvent]]]:
    day_events = events_for_date(events, day)
    malformed = [event.id for event in day_events if not event.is_well_formed]
    if malformed:
        logger.warning("Skipping malformed events in hour slots for %s: %s", as_date(day), malformed)
    return [(hour, [event for event in day_events if occupies_hour(event, hour)]) for hour in range(HOURS_IN_DAY)]


def in_current_period(day: DateLike, anchor: DateLike, mode: ViewMode) -> bool:
    if mode is ViewMode.MONTH:
        return as_date(day).month == as_date(anchor).month
    return True


def project(
    events: Iterable[CalendarEvent],
    dates: Sequence[date],
    *,
    anchor: DateLike,
    mode: ViewMode,
    max_cell_events: Optional[int] = MAX_CELL_EVENTS,
) -> List[CalendarCell]:
    """Build one cell per date. Only month cells are capped at ``max_cell_events``.

    The cap never drops below one visible event per cell.
    """

    live = [event for event in events if not event.is_deleted]
    limit = None
    if mode is ViewMode.MONTH and max_cell_events is not None:
        limit = max(max_cell_events, 1)
    return [
        CalendarCell(
            date=day,
            in_current_period=in_current_period(day, anchor, mode),
            events=events_for_date(live, day),
            max_visible=limit,
        )
        for day in dates
    ]
