from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from ..core import ViewState, validate_event_form
from ..domain import EventCategory, EventSearch, ViewMode
from ..services import CalendarService, EventValidationError
from .models import EventCreateRequest, EventUpdateRequest
from .serializers import serialize_event, serialize_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_calendar_service(request: Request) -> CalendarService:
    return request.app.state.calendar


def _category_filter(category: Optional[str]) -> Optional[EventCategory]:
    if not category:
        return None
    resolved = EventCategory.lookup(category)
    if resolved is None:
        raise HTTPException(status_code=400, detail=f"Unknown category: {category}")
    return resolved


@router.get("/health")
def health(service: CalendarService = Depends(get_calendar_service)) -> Dict[str, Any]:
    return {"status": "ok", "store": service.store.name}


@router.get("/events")
def list_events(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    category: Optional[str] = None,
    created_by: Optional[str] = None,
    title_search: Optional[str] = None,
    service: CalendarService = Depends(get_calendar_service),
) -> List[Dict[str, Any]]:
    search = EventSearch(
        start=start_date,
        end=end_date,
        category=_category_filter(category),
        created_by=created_by,
        title_contains=title_search,
    )
    events = service.list_events(search)
    logger.info("Listed %d events", len(events))
    return [serialize_event(event) for event in events]


@router.get("/events/count/{day}")
def count_events(day: date, service: CalendarService = Depends(get_calendar_service)) -> Dict[str, Any]:
    return {"date": day.isoformat(), "count": service.count_on(day)}


@router.get("/events/stats/category")
def category_stats(
    start_date: date,
    end_date: date,
    service: CalendarService = Depends(get_calendar_service),
) -> Dict[str, int]:
    if end_date <= start_date:
        logger.warning("Rejected category stats for %s - %s", start_date, end_date)
        raise HTTPException(status_code=400, detail="end_date must be after start_date")
    return service.category_stats(start_date, end_date)


@router.get("/events/{event_id}")
def get_event(event_id: int, service: CalendarService = Depends(get_calendar_service)) -> Dict[str, Any]:
    return serialize_event(service.get_event(event_id))


@router.post("/events", status_code=201)
def create_event(
    payload: EventCreateRequest,
    service: CalendarService = Depends(get_calendar_service),
) -> Dict[str, Any]:
    errors = validate_event_form(payload.form_values())
    if errors:
        raise EventValidationError(errors)
    return serialize_event(service.create_event(payload.to_draft()))


@router.put("/events/{event_id}")
def update_event(
    event_id: int,
    payload: EventUpdateRequest,
    service: CalendarService = Depends(get_calendar_service),
) -> Dict[str, Any]:
    existing = service.get_event(event_id)
    provided = payload.model_dump(exclude_none=True, exclude={"is_all_day"})
    errors = validate_event_form({**existing.form_values(), **provided})
    if errors:
        raise EventValidationError(errors)
    return serialize_event(service.update_event(event_id, payload.to_patch()))


@router.delete("/events/{event_id}", status_code=204)
def delete_event(event_id: int, service: CalendarService = Depends(get_calendar_service)) -> Response:
    service.delete_event(event_id)
    return Response(status_code=204)


@router.get("/calendar")
def calendar_page(
    mode: ViewMode = ViewMode.MONTH,
    anchor: Optional[date] = None,
    category: Optional[str] = None,
    title_search: Optional[str] = Query(default=None),
    service: CalendarService = Depends(get_calendar_service),
) -> Dict[str, Any]:
    view = ViewState(anchor=anchor or date.today(), mode=mode)
    search = EventSearch(category=_category_filter(category), title_contains=title_search)
    return serialize_page(service.render(view, search))
