"""Data access layer."""

from __future__ import annotations

from .repositories import EventStore, MemoryEventRepository, SupabaseEventRepository
from .sample import sample_events
from .supabase import SupabaseGateway, SupabaseNotConfiguredError

__all__ = [
    "EventStore",
    "MemoryEventRepository",
    "SupabaseEventRepository",
    "SupabaseGateway",
    "SupabaseNotConfiguredError",
    "sample_events",
]
