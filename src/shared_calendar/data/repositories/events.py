from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Optional

from ...core.dates import day_end, day_start
from ...domain import CalendarEvent, EventDraft, EventPatch, EventSearch, format_datetime
from ..supabase import SupabaseGateway
from .base import UNCATEGORIZED


@dataclass(slots=True)
class SupabaseEventRepository:
    gateway: SupabaseGateway
    table_name: str
    name: str = "supabase"

    def _live(self):
        return self.gateway.table(self.table_name).select("*").eq("is_deleted", False)

    def list_events(self, search: EventSearch) -> List[CalendarEvent]:
        query = self._live()
        if search.start is not None:
            query = query.gte("starts_at", format_datetime(day_start(search.start)))
        if search.end is not None:
            query = query.lte("starts_at", format_datetime(day_end(search.end)))
        if search.category is not None:
            query = query.eq("category", search.category.value)
        if search.created_by:
            query = query.eq("created_by", search.created_by)
        if search.title_contains:
            query = query.ilike("title", f"%{search.title_contains}%")
        response = query.order("starts_at", desc=False).execute()
        records = response.data or []
        return [CalendarEvent.from_record(record) for record in records]

    def get_event(self, event_id: int) -> Optional[CalendarEvent]:
        response = self._live().eq("id", event_id).limit(1).execute()
        records = response.data or []
        if not records:
            return None
        return CalendarEvent.from_record(records[0])

    def create_event(self, draft: EventDraft) -> CalendarEvent:
        now = format_datetime(datetime.now())
        payload = {**draft.to_record(), "created_at": now, "updated_at": now, "is_deleted": False}
        response = self.gateway.table(self.table_name).insert(payload).execute()
        records = response.data or []
        if not records:
            raise RuntimeError("Supabase insert returned no rows.")
        return CalendarEvent.from_record(records[0])

    def update_event(self, event_id: int, patch: EventPatch) -> Optional[CalendarEvent]:
        payload = {**patch.to_record(), "updated_at": format_datetime(datetime.now())}
        response = (
            self.gateway.table(self.table_name)
            .update(payload)
            .eq("id", event_id)
            .eq("is_deleted", False)
            .execute()
        )
        records = response.data or []
        if not records:
            return None
        return CalendarEvent.from_record(records[0])

    def delete_event(self, event_id: int) -> bool:
        response = (
            self.gateway.table(self.table_name)
            .update({"is_deleted": True, "updated_at": format_datetime(datetime.now())})
            .eq("id", event_id)
            .eq("is_deleted", False)
            .execute()
        )
        return bool(response.data)

    def count_on(self, day: date) -> int:
        response = (
            self.gateway.table(self.table_name)
            .select("id", count="exact")
            .eq("is_deleted", False)
            .gte("starts_at", format_datetime(day_start(day)))
            .lte("starts_at", format_datetime(day_end(day)))
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def category_stats(self, start: date, end: date) -> Dict[str, int]:
        response = (
            self.gateway.table(self.table_name)
            .select("category")
            .eq("is_deleted", False)
            .gte("starts_at", format_datetime(day_start(start)))
            .lte("starts_at", format_datetime(day_end(end)))
            .execute()
        )
        counts = Counter((record.get("category") or UNCATEGORIZED) for record in response.data or [])
        return dict(counts)
