"""Event stores: Supabase-backed and in-memory."""

from __future__ import annotations

from .base import UNCATEGORIZED, EventStore
from .events import SupabaseEventRepository
from .memory import MemoryEventRepository

__all__ = ["UNCATEGORIZED", "EventStore", "MemoryEventRepository", "SupabaseEventRepository"]
