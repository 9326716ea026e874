"""Shared fixtures: events, an in-memory store and an API client around it."""

from datetime import datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient

from shared_calendar.config import AppSettings, ServerSettings, StorageSettings, SupabaseSettings, ViewSettings
from shared_calendar.data import MemoryEventRepository
from shared_calendar.domain import CalendarEvent, EventCategory
from shared_calendar.services import CalendarService, ServiceContext
from shared_calendar.services.http import create_app


@pytest.fixture
def settings():
    return AppSettings(
        supabase=SupabaseSettings(url=None, key=None),
        storage=StorageSettings(events_table="calendar_events", seed_file=None),
        server=ServerSettings(host="127.0.0.1", port=8000, cors_origins=("http://localhost:5173",)),
        view=ViewSettings(max_cell_events=3, default_window_months=1),
    )


@pytest.fixture
def make_event():
    ids = count(1)

    def factory(starts_at, ends_at=None, **overrides):
        starts = datetime.fromisoformat(starts_at) if isinstance(starts_at, str) else starts_at
        if ends_at is None:
            ends = starts + timedelta(hours=1)
        else:
            ends = datetime.fromisoformat(ends_at) if isinstance(ends_at, str) else ends_at
        values = {
            "id": next(ids),
            "title": f"Event {starts:%Y-%m-%d %H:%M}",
            "starts_at": starts,
            "ends_at": ends,
        }
        values.update(overrides)
        return CalendarEvent(**values)

    return factory


@pytest.fixture
def march_events(make_event):
    return [
        make_event("2024-03-15T09:00", "2024-03-15T10:00", title="Standup", category=EventCategory.MEETING),
        make_event("2024-03-15T13:00", "2024-03-15T14:30", title="Design review", category=EventCategory.MEETING),
        make_event("2024-03-18T08:00", "2024-03-18T17:00", title="Workshop", category=EventCategory.TRAINING),
        make_event("2024-03-20T12:00", "2024-03-20T13:00", title="Lunch", created_by="ann@example.com"),
        make_event("2024-03-21T10:00", "2024-03-21T11:00", title="Cancelled sync", is_deleted=True),
    ]


@pytest.fixture
def store(march_events):
    return MemoryEventRepository(march_events)


@pytest.fixture
def context(settings, store):
    return ServiceContext(settings=settings, store=store)


@pytest.fixture
def service(context):
    return CalendarService(context)


@pytest.fixture
def client(context):
    return TestClient(create_app(context))
