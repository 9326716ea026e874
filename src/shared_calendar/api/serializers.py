from __future__ import annotations

from typing import Any, Dict

from ..domain import CalendarEvent
from ..services import CalendarPage
from .models import CalendarPagePayload, EventPayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_page(page: CalendarPage) -> Dict[str, Any]:
    return CalendarPagePayload.from_domain(page).model_dump()
