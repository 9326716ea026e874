from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client

from ..config.settings import SupabaseSettings

logger = logging.getLogger(__name__)


class SupabaseNotConfiguredError(RuntimeError):
    """Raised when the Supabase client is requested without URL or key."""


@dataclass
class SupabaseGateway:
    """Lazily created Supabase client owned by whoever constructs the gateway."""

    settings: SupabaseSettings
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotConfiguredError(f"Supabase settings are incomplete; missing {missing}.")
        self._client = create_client(self.settings.url, self.settings.key)
        return self._client

    def table(self, name: str):
        return self.ensure_client().table(name)

    def is_reachable(self, table_name: str) -> bool:
        """Check ``table_name`` answers a one-row select."""

        if not self.settings.is_configured:
            return False
        try:
            self.table(table_name).select("id").limit(1).execute()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Supabase table %s is not reachable: %s", table_name, exc)
            return False
        return True
