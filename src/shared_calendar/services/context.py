from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import EventStore, MemoryEventRepository, SupabaseEventRepository, SupabaseGateway, sample_events

logger = logging.getLogger(__name__)


def build_event_store(settings: AppSettings, gateway: SupabaseGateway) -> EventStore:
    """Prefer Supabase; fall back to the in-memory demo store when it is unusable."""

    table_name = settings.storage.events_table
    if gateway.is_reachable(table_name):
        logger.info("Using Supabase table %s for events", table_name)
        return SupabaseEventRepository(gateway=gateway, table_name=table_name)

    if settings.supabase.is_configured:
        logger.warning("Supabase is configured but unreachable; serving in-memory sample data.")
    else:
        logger.warning("Supabase is not configured (missing %s); serving in-memory sample data.",
                       ", ".join(settings.supabase.missing_env_vars))

    seed_file = settings.storage.seed_file
    if seed_file is not None and seed_file.exists():
        return MemoryEventRepository.from_json_file(seed_file)
    return MemoryEventRepository(sample_events())


@dataclass(slots=True)
class ServiceContext:
    """Settings, gateway and event store shared by the services of one process."""

    settings: AppSettings = field(default_factory=get_settings)
    store: Optional[EventStore] = None
    gateway: SupabaseGateway = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        if self.store is None:
            self.store = build_event_store(self.settings, self.gateway)
