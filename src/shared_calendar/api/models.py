from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.dates import is_today
from ..domain import CalendarCell, CalendarEvent, EventCategory, EventDraft, EventPatch, parse_datetime
from ..services import CalendarPage


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = Field(default=None)
    starts_at: str
    ends_at: str
    location: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)
    category_label: Optional[str] = Field(default=None)
    color: str
    is_all_day: bool = Field(default=False)
    created_by: Optional[str] = Field(default=None)
    created_at: Optional[str] = Field(default=None)
    updated_at: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            starts_at=event.starts_at.isoformat(),
            ends_at=event.ends_at.isoformat(),
            location=event.location,
            category=event.category.value if event.category else None,
            category_label=event.category.label if event.category else None,
            color=event.color,
            is_all_day=event.is_all_day,
            created_by=event.created_by,
            created_at=_iso(event.created_at),
            updated_at=_iso(event.updated_at),
        )


class EventCreateRequest(BaseModel):
    """Create payload. Kept loosely typed so the form validator can report every field."""

    title: Optional[str] = None
    description: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    is_all_day: bool = False
    created_by: Optional[str] = None

    def form_values(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"is_all_day", "created_by"})

    def to_draft(self) -> EventDraft:
        draft = EventDraft(
            title=(self.title or "").strip(),
            starts_at=parse_datetime(self.starts_at),
            ends_at=parse_datetime(self.ends_at),
            description=self.description or None,
            location=self.location or None,
            category=EventCategory.lookup(self.category),
            is_all_day=self.is_all_day,
            created_by=self.created_by or None,
        )
        if self.color:
            draft.color = self.color
        return draft


class EventUpdateRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    is_all_day: Optional[bool] = None

    def to_patch(self) -> EventPatch:
        return EventPatch(
            title=self.title.strip() if self.title is not None else None,
            starts_at=parse_datetime(self.starts_at) if self.starts_at else None,
            ends_at=parse_datetime(self.ends_at) if self.ends_at else None,
            description=self.description,
            location=self.location,
            category=EventCategory.lookup(self.category) if self.category else None,
            color=self.color or None,
            is_all_day=self.is_all_day,
        )


class CellPayload(BaseModel):
    date: str
    in_current_period: bool
    is_today: bool
    events: List[EventPayload]
    hidden_count: int = 0
    overflow_label: Optional[str] = None

    @classmethod
    def from_domain(cls, cell: CalendarCell) -> "CellPayload":
        return cls(
            date=cell.date.isoformat(),
            in_current_period=cell.in_current_period,
            is_today=is_today(cell.date),
            events=[EventPayload.from_domain(event) for event in cell.visible_events],
            hidden_count=cell.hidden_count,
            overflow_label=cell.overflow_label,
        )


class HourSlotPayload(BaseModel):
    hour: int
    events: List[EventPayload]


class CalendarPagePayload(BaseModel):
    title: str
    mode: str
    anchor: str
    period_start: str
    period_end: str
    cells: List[CellPayload]
    hours: List[HourSlotPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, page: CalendarPage) -> "CalendarPagePayload":
        return cls(
            title=page.title,
            mode=page.mode.value,
            anchor=page.anchor.isoformat(),
            period_start=page.period_start.isoformat(),
            period_end=page.period_end.isoformat(),
            cells=[CellPayload.from_domain(cell) for cell in page.cells],
            hours=[
                HourSlotPayload(hour=hour, events=[EventPayload.from_domain(event) for event in events])
                for hour, events in page.hours
            ],
        )


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
