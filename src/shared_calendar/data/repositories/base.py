from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Protocol

from ...domain import CalendarEvent, EventDraft, EventPatch, EventSearch

UNCATEGORIZED = "uncategorized"


class EventStore(Protocol):
    """CRUD and range queries over persisted calendar events.

    Deleted events are invisible to every method: reads skip them and
    ``delete_event`` only flags them.
    """

    name: str

    def list_events(self, search: EventSearch) -> List[CalendarEvent]: ...

    def get_event(self, event_id: int) -> Optional[CalendarEvent]: ...

    def create_event(self, draft: EventDraft) -> CalendarEvent: ...

    def update_event(self, event_id: int, patch: EventPatch) -> Optional[CalendarEvent]: ...

    def delete_event(self, event_id: int) -> bool: ...

    def count_on(self, day: date) -> int: ...

    def category_stats(self, start: date, end: date) -> Dict[str, int]: ...
