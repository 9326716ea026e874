"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .calendar import CalendarPage, CalendarService, EventNotFoundError, EventValidationError
from .context import ServiceContext, build_event_store

__all__ = [
    "CalendarPage",
    "CalendarService",
    "EventNotFoundError",
    "EventValidationError",
    "ServiceContext",
    "build_event_store",
]
