from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import orjson

from ...domain import CalendarEvent, EventDraft, EventPatch, EventSearch
from .base import UNCATEGORIZED

logger = logging.getLogger(__name__)


class MemoryEventRepository:
    """Process-local event store used when no database is reachable.

    Writes are kept for the lifetime of the process only.
    """

    name = "memory"

    def __init__(self, events: Optional[Iterable[CalendarEvent]] = None) -> None:
        self._events: Dict[int, CalendarEvent] = {}
        self._lock = threading.Lock()
        for event in events or ():
            self._events[event.id] = event
        self._next_id = max(self._events, default=0) + 1

    @classmethod
    def from_json_file(cls, path: Path) -> "MemoryEventRepository":
        payload = orjson.loads(path.read_bytes() or b"[]")
        records = payload.get("events", []) if isinstance(payload, dict) else payload
        events = [CalendarEvent.from_record(record) for record in records]
        logger.info("Loaded %d seed events from %s", len(events), path)
        return cls(events)

    def _sorted(self, events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
        return sorted(events, key=lambda event: (event.starts_at, event.id))

    def list_events(self, search: EventSearch) -> List[CalendarEvent]:
        with self._lock:
            snapshot = list(self._events.values())
        return self._sorted(event for event in snapshot if search.matches(event))

    def get_event(self, event_id: int) -> Optional[CalendarEvent]:
        event = self._events.get(event_id)
        if event is None or event.is_deleted:
            return None
        return event

    def create_event(self, draft: EventDraft) -> CalendarEvent:
        record = draft.to_record()
        now = datetime.now()
        with self._lock:
            event = CalendarEvent.from_record({**record, "id": self._next_id})
            event = replace(event, created_at=now, updated_at=now)
            self._events[event.id] = event
            self._next_id += 1
        return event

    def update_event(self, event_id: int, patch: EventPatch) -> Optional[CalendarEvent]:
        with self._lock:
            existing = self._events.get(event_id)
            if existing is None or existing.is_deleted:
                return None
            updated = replace(patch.apply(existing), updated_at=datetime.now())
            self._events[event_id] = updated
        return updated

    def delete_event(self, event_id: int) -> bool:
        with self._lock:
            existing = self._events.get(event_id)
            if existing is None or existing.is_deleted:
                return False
            self._events[event_id] = replace(existing, is_deleted=True, updated_at=datetime.now())
        return True

    def count_on(self, day: date) -> int:
        return len(self.list_events(EventSearch(start=day, end=day)))

    def category_stats(self, start: date, end: date) -> Dict[str, int]:
        events = self.list_events(EventSearch(start=start, end=end))
        counts = Counter(event.category.value if event.category else UNCATEGORIZED for event in events)
        return dict(counts)
