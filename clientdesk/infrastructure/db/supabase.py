"""
Supabase connection handle.
"""

import asyncio
import logging
from typing import Optional

from supabase import AsyncClient, acreate_client

from clientdesk.config import Settings
from clientdesk.domain.models.base import ConfigurationError


logger = logging.getLogger(__name__)


class SupabaseDatabase:
    """
    Lazily connected Supabase client.
    Nothing is checked at construction; the first call to client() validates
    the settings and opens the connection.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[AsyncClient] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def check_configuration(self) -> None:
        """Raise ConfigurationError naming every missing store variable."""
        missing = self.settings.missing_store_settings()
        if missing:
            raise ConfigurationError(
                f"Missing Supabase environment variables: {', '.join(missing)}",
                missing=missing
            )

    async def client(self) -> AsyncClient:
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                self.check_configuration()
                self._client = await acreate_client(
                    self.settings.supabase_url,
                    self.settings.supabase_key
                )
                logger.info("Connected to Supabase at %s", self.settings.supabase_url)
        return self._client

    async def table(self, name: str):
        """Query builder for one table."""
        client = await self.client()
        return client.table(name)
