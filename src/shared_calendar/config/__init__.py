"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    APP_NAME,
    DATA_DIR,
    AppSettings,
    ServerSettings,
    StorageSettings,
    SupabaseSettings,
    ViewSettings,
    get_settings,
)

__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "AppSettings",
    "ServerSettings",
    "StorageSettings",
    "SupabaseSettings",
    "ViewSettings",
    "get_settings",
]
