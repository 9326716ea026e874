from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from ..domain import CalendarEvent, EventCategory, EventColor

# (day offset, start hour, duration hours, title, description, location, category, color, creator)
_SAMPLES = (
    (0, 10.0, 1.0, "Team sync", "Weekly progress check and task assignment.", "Room A",
     EventCategory.MEETING, EventColor.RED, "manager@example.com"),
    (0, 14.0, 1.0, "Code review", "Review open pull requests for the new feature.", "Online",
     EventCategory.TASK, EventColor.GREEN, "developer@example.com"),
    (1, 9.0, 1.5, "Project kickoff", "Scope the new project and estimate the work.", "Room B",
     EventCategory.MEETING, EventColor.PURPLE, "planner@example.com"),
    (1, 13.0, 4.0, "Online training", "Course on current tooling trends.", "Own desk",
     EventCategory.TRAINING, EventColor.ORANGE, "hr@example.com"),
    (7, 10.0, 2.0, "Client meeting", "Progress report and next-phase requirements.", "Client office",
     EventCategory.MEETING, EventColor.BLUE, "sales@example.com"),
    (-3, 15.0, 2.0, "Monthly report", "Prepare last month's report for review.", "Own desk",
     EventCategory.TASK, EventColor.TEAL, "analyst@example.com"),
    (21, 9.0, 8.0, "System migration", "Move the legacy system to the new platform.", "Data center",
     EventCategory.TASK, EventColor.INDIGO, "ops@example.com"),
    (3, 18.0, 2.0, "Team dinner", None, "Downtown",
     EventCategory.PERSONAL, EventColor.PINK, "manager@example.com"),
)


def sample_events(anchor: Optional[date] = None) -> List[CalendarEvent]:
    """Demo events placed around ``anchor`` (today by default)."""

    base = datetime.combine(anchor or date.today(), time.min)
    created = datetime.now()
    events: List[CalendarEvent] = []
    for index, (offset, hour, hours, title, description, location, category, color, creator) in enumerate(
        _SAMPLES, start=1
    ):
        starts_at = base + timedelta(days=offset, hours=hour)
        events.append(
            CalendarEvent(
                id=index,
                title=title,
                description=description,
                starts_at=starts_at,
                ends_at=starts_at + timedelta(hours=hours),
                location=location,
                category=category,
                color=color.value,
                created_by=creator,
                created_at=created,
                updated_at=created,
            )
        )

    holiday = base + timedelta(days=14)
    events.append(
        CalendarEvent(
            id=len(events) + 1,
            title="Founding day",
            description="Company-wide anniversary; no regular work planned.",
            starts_at=holiday,
            ends_at=holiday + timedelta(hours=23, minutes=59),
            location="Everywhere",
            category=EventCategory.HOLIDAY,
            color=EventColor.ORANGE.value,
            is_all_day=True,
            created_by="admin@example.com",
            created_at=created,
            updated_at=created,
        )
    )
    return events
