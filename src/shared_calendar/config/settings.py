from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Shared Calendar"
APP_AUTHOR = "SharedCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.key:
            missing.append("SUPABASE_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    events_table: str
    seed_file: Optional[Path]


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    cors_origins: tuple[str, ...]


@dataclass(frozen=True)
class ViewSettings:
    max_cell_events: int
    default_window_months: int


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    server: ServerSettings
    view: ViewSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _origins_from_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        key=os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY"),
    )

    seed_file = os.getenv("CALENDAR_SEED_FILE")
    storage = StorageSettings(
        events_table=os.getenv("SUPABASE_EVENTS_TABLE", "calendar_events"),
        seed_file=Path(seed_file) if seed_file else None,
    )

    server = ServerSettings(
        host=os.getenv("CALENDAR_API_HOST", "127.0.0.1"),
        port=_int_from_env("CALENDAR_API_PORT", 8000),
        cors_origins=_origins_from_env(
            "CALENDAR_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
        ),
    )

    view = ViewSettings(
        max_cell_events=_int_from_env("CALENDAR_MAX_CELL_EVENTS", 3),
        default_window_months=_int_from_env("CALENDAR_DEFAULT_WINDOW_MONTHS", 1),
    )

    return AppSettings(supabase=supabase, storage=storage, server=server, view=view)
