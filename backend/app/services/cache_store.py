"""
Supabase cache store - Row access to the ``cache`` table.

The supabase client is synchronous; every call runs in a worker thread. The
HTTP timeout (``SUPABASE_TIMEOUT``) is set on the client itself, so a call that
times out has also been abandoned on the wire. Errors propagate to the caller,
which decides whether they are fatal.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError
from supabase import Client, ClientOptions, create_client

from app.config import Settings
from app.errors import CacheReadError
from app.logger import logger
from app.schemas.llmstxt_result import CacheEntry


class SupabaseCacheStore:
    """Single-row lookup and insert over the Supabase cache table."""

    COLUMNS = "url, llmstxt, llmsfulltxt, no_limit, cached_at"

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        self.url = settings.SUPABASE_URL
        self.key = settings.SUPABASE_KEY
        self.table = settings.SUPABASE_CACHE_TABLE
        self.timeout = settings.SUPABASE_TIMEOUT
        self._client = client

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = create_client(
                self.url,
                self.key,
                options=ClientOptions(postgrest_client_timeout=self.timeout),
            )
        return self._client

    async def fetch(self, url: str, no_limit: bool) -> Optional[CacheEntry]:
        """Return the freshest row for (url, no_limit), or None when absent.

        Raises:
            CacheReadError: the row exists but cannot be parsed.
        """
        def _select():
            return (
                self._get_client()
                .table(self.table)
                .select(self.COLUMNS)
                .eq("url", url)
                .eq("no_limit", no_limit)
                .order("cached_at", desc=True)
                .limit(1)
                .execute()
            )

        response = await asyncio.to_thread(_select)
        rows = response.data or []
        if not rows:
            return None

        try:
            return CacheEntry.model_validate(rows[0])
        except ValidationError as e:
            raise CacheReadError(f"Malformed cache row for {url}: {e}") from e

    async def insert(self, entry: CacheEntry) -> None:
        """Insert a new row. Existing rows for the same key are left alone."""
        cached_at = entry.cached_at or datetime.now(timezone.utc)
        row = {
            "url": entry.url,
            "llmstxt": entry.llmstxt,
            "llmsfulltxt": entry.llmsfulltxt,
            "no_limit": entry.no_limit,
            "cached_at": cached_at.isoformat(),
        }

        def _insert():
            return self._get_client().table(self.table).insert([row]).execute()

        await asyncio.to_thread(_insert)
        logger.debug(f"Inserted cache row for {entry.url} (no_limit={entry.no_limit})")
