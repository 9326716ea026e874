"""Domain models for the shared calendar."""

from __future__ import annotations

from .enums import DEFAULT_COLOR, EventCategory, EventColor, ViewMode
from .models import (
    CalendarCell,
    CalendarEvent,
    EventDraft,
    EventPatch,
    EventSearch,
    format_datetime,
    parse_datetime,
)

__all__ = [
    "DEFAULT_COLOR",
    "CalendarCell",
    "CalendarEvent",
    "EventCategory",
    "EventColor",
    "EventDraft",
    "EventPatch",
    "EventSearch",
    "ViewMode",
    "format_datetime",
    "parse_datetime",
]
