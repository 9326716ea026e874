from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from ..core import ViewState, hour_slots, project, validate_event_form
from ..core.dates import add_months
from ..core.validation import FormErrors
from ..data import EventStore
from ..domain import CalendarCell, CalendarEvent, EventDraft, EventPatch, EventSearch, ViewMode
from .context import ServiceContext

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event id does not match a live event."""

    def __init__(self, event_id: int) -> None:
        super().__init__(f"Event {event_id} was not found.")
        self.event_id = event_id


class EventValidationError(ValueError):
    """Raised when a create or update payload fails form validation."""

    def __init__(self, errors: FormErrors) -> None:
        super().__init__("; ".join(f"{name}: {message}" for name, message in errors.items()))
        self.errors = dict(errors)


@dataclass(slots=True)
class CalendarPage:
    title: str
    mode: ViewMode
    anchor: date
    period_start: datetime
    period_end: datetime
    cells: List[CalendarCell]
    hours: List[Tuple[int, List[CalendarEvent]]] = field(default_factory=list)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    def with_default_range(self, search: EventSearch, *, today: Optional[date] = None) -> EventSearch:
        window = self.context.settings.view.default_window_months
        reference = today or date.today()
        return replace(
            search,
            start=search.start or add_months(reference, -window),
            end=search.end or add_months(reference, window),
        )

    def list_events(self, search: Optional[EventSearch] = None) -> List[CalendarEvent]:
        resolved = self.with_default_range(search or EventSearch())
        events = self.store.list_events(resolved)
        logger.debug("Listed %d events between %s and %s", len(events), resolved.start, resolved.end)
        return events

    def get_event(self, event_id: int) -> CalendarEvent:
        event = self.store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, draft: EventDraft) -> CalendarEvent:
        errors = validate_event_form(draft.form_values())
        if errors:
            logger.warning("Rejected new event: %s", errors)
            raise EventValidationError(errors)
        created = self.store.create_event(draft)
        logger.info("Created event %s (%s)", created.id, created.title)
        return created

    def update_event(self, event_id: int, patch: EventPatch) -> CalendarEvent:
        existing = self.get_event(event_id)
        merged = patch.apply(existing)
        errors = validate_event_form(merged.form_values())
        if errors:
            logger.warning("Rejected update of event %s: %s", event_id, errors)
            raise EventValidationError(errors)
        if patch.is_empty():
            return existing
        updated = self.store.update_event(event_id, patch)
        if updated is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s (%s)", updated.id, updated.title)
        return updated

    def delete_event(self, event_id: int) -> None:
        if not self.store.delete_event(event_id):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)

    def count_on(self, day: date) -> int:
        return self.store.count_on(day)

    def category_stats(self, start: date, end: date) -> Dict[str, int]:
        if end <= start:
            raise ValueError("end date must be after start date")
        return self.store.category_stats(start, end)

    def render(self, view: ViewState, search: Optional[EventSearch] = None) -> CalendarPage:
        """Fetch the events of the visible dates and lay them out as cells."""

        visible = view.visible_dates()
        query = replace(search or EventSearch(), start=visible[0], end=visible[-1])
        events = self.store.list_events(query)
        cells = project(
            events,
            visible,
            anchor=view.anchor,
            mode=view.mode,
            max_cell_events=self.context.settings.view.max_cell_events,
        )
        hours = hour_slots(events, view.anchor) if view.mode is ViewMode.DAY else []
        return CalendarPage(
            title=view.period_title(),
            mode=view.mode,
            anchor=view.anchor,
            period_start=view.period_start(),
            period_end=view.period_end(),
            cells=cells,
            hours=hours,
        )
