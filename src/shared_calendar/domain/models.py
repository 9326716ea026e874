from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from .enums import DEFAULT_COLOR, EventCategory


def parse_datetime(value: Any) -> datetime:
    """Return a naive local wall-clock datetime for ``value``.

    Offsets (``Z`` included) are converted to local time before being dropped.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = isoparse(value.strip())
    else:
        raise ValueError(f"Unsupported datetime value: {value!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_datetime(value: datetime) -> str:
    """ISO-8601 text with the local UTC offset, so ``timestamptz`` columns keep the same instant."""

    return value.astimezone().isoformat()


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass(slots=True)
class CalendarEvent:
    id: int
    title: str
    starts_at: datetime
    ends_at: datetime
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[EventCategory] = None
    color: str = DEFAULT_COLOR
    is_all_day: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_deleted: bool = False

    @property
    def is_well_formed(self) -> bool:
        return self.ends_at > self.starts_at

    def form_values(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "location": self.location,
            "category": self.category,
            "color": self.color,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        return cls(
            id=int(record["id"]),
            title=str(record["title"]),
            starts_at=parse_datetime(record["starts_at"]),
            ends_at=parse_datetime(record["ends_at"]),
            description=_optional_text(record.get("description")),
            location=_optional_text(record.get("location")),
            category=EventCategory.lookup(record.get("category")),
            color=record.get("color") or DEFAULT_COLOR,
            is_all_day=bool(record.get("is_all_day", False)),
            created_by=_optional_text(record.get("created_by")),
            created_at=parse_datetime(record["created_at"]) if record.get("created_at") else None,
            updated_at=parse_datetime(record["updated_at"]) if record.get("updated_at") else None,
            is_deleted=bool(record.get("is_deleted", False)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "starts_at": format_datetime(self.starts_at),
            "ends_at": format_datetime(self.ends_at),
            "location": self.location,
            "category": self.category.value if self.category else None,
            "color": self.color,
            "is_all_day": self.is_all_day,
            "created_by": self.created_by,
            "created_at": format_datetime(self.created_at) if self.created_at else None,
            "updated_at": format_datetime(self.updated_at) if self.updated_at else None,
            "is_deleted": self.is_deleted,
        }


@dataclass(slots=True)
class EventDraft:
    """Everything needed to create an event; the store assigns id and audit fields."""

    title: str
    starts_at: datetime
    ends_at: datetime
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[EventCategory] = None
    color: str = DEFAULT_COLOR
    is_all_day: bool = False
    created_by: Optional[str] = None

    def form_values(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "location": self.location,
            "category": self.category,
            "color": self.color,
        }

    def to_record(self) -> Dict[str, Any]:
        return {
            "title": self.title.strip(),
            "description": self.description or None,
            "starts_at": format_datetime(self.starts_at),
            "ends_at": format_datetime(self.ends_at),
            "location": self.location or None,
            "category": self.category.value if self.category else None,
            "color": self.color or DEFAULT_COLOR,
            "is_all_day": self.is_all_day,
            "created_by": self.created_by or None,
        }


@dataclass(slots=True)
class EventPatch:
    """Partial update: ``None`` leaves the field as it is, an empty string clears it."""

    title: Optional[str] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[EventCategory] = None
    color: Optional[str] = None
    is_all_day: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self) if getattr(self, item.name) is not None}

    def is_empty(self) -> bool:
        return not self.changes()

    def apply(self, event: CalendarEvent) -> CalendarEvent:
        updates = self.changes()
        for name in ("description", "location"):
            if name in updates:
                updates[name] = updates[name] or None
        return replace(event, **updates)

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        for name, value in self.changes().items():
            if isinstance(value, datetime):
                record[name] = format_datetime(value)
            elif isinstance(value, EventCategory):
                record[name] = value.value
            elif name in ("description", "location"):
                record[name] = value or None
            else:
                record[name] = value
        return record


@dataclass(slots=True)
class EventSearch:
    start: Optional[date] = None
    end: Optional[date] = None
    category: Optional[EventCategory] = None
    created_by: Optional[str] = None
    title_contains: Optional[str] = None

    def matches(self, event: CalendarEvent) -> bool:
        if event.is_deleted:
            return False
        starts_on = event.starts_at.date()
        if self.start is not None and starts_on < self.start:
            return False
        if self.end is not None and starts_on > self.end:
            return False
        if self.category is not None and event.category != self.category:
            return False
        if self.created_by and event.created_by != self.created_by:
            return False
        if self.title_contains and self.title_contains.lower() not in event.title.lower():
            return False
        return True


@dataclass(slots=True)
class CalendarCell:
    date: date
    in_current_period: bool
    events: list[CalendarEvent] = field(default_factory=list)
    max_visible: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_visible is not None and self.max_visible < 0:
            self.max_visible = 0

    @property
    def visible_events(self) -> list[CalendarEvent]:
        if self.max_visible is None:
            return list(self.events)
        return self.events[: self.max_visible]

    @property
    def hidden_count(self) -> int:
        if self.max_visible is None:
            return 0
        return max(len(self.events) - self.max_visible, 0)

    @property
    def overflow_label(self) -> Optional[str]:
        return f"+{self.hidden_count}" if self.hidden_count else None
