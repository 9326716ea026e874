"""HTTP surface: request/response payloads and the events router."""

from __future__ import annotations

from .routes import get_calendar_service, router
from .serializers import serialize_event, serialize_page

__all__ = ["get_calendar_service", "router", "serialize_event", "serialize_page"]
