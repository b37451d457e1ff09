"""
Cache Gateway - Read-through cache keyed by (hostname stem, quota tier).

Handles:
- Cache key derivation from the first URL of a batch
- Freshness check (CACHE_TTL_DAYS)
- Non-fatal reads, fatal writes
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from urllib.parse import urlparse

from app.config import Settings
from app.errors import CacheWriteError, InputError
from app.logger import logger
from app.schemas.llmstxt_result import CacheEntry
from app.services.cache_store import SupabaseCacheStore


def stem_url(url: str) -> str:
    """Hostname of a URL; scheme-less input is read as http://."""
    if not url.startswith(('http://', 'https://')):
        url = 'http://' + url
    try:
        hostname = urlparse(url).hostname
    except ValueError as e:
        raise InputError(f"Could not parse hostname from {url!r}") from e
    if not hostname:
        raise InputError(f"Could not parse hostname from {url!r}")
    return hostname


@dataclass
class CacheLookup:
    """Outcome of a cache lookup. ``entry`` is set only for a usable hit."""
    stem: str
    no_limit: bool
    entry: Optional[CacheEntry] = None
    reason: str = "miss"
    error: Optional[str] = None

    @property
    def is_hit(self) -> bool:
        return self.entry is not None


class CacheGateway:
    """Decides whether a previous generation can be served again."""

    def __init__(self, settings: Settings, store: Optional[SupabaseCacheStore] = None):
        self.ttl = timedelta(days=settings.CACHE_TTL_DAYS)
        self.store = store or SupabaseCacheStore(settings)

    def is_fresh(self, entry: CacheEntry, now: Optional[datetime] = None) -> bool:
        if entry.cached_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        cached_at = entry.cached_at
        if cached_at.tzinfo is None:
            cached_at = cached_at.replace(tzinfo=timezone.utc)
        return now - cached_at < self.ttl

    async def lookup(self, urls: List[str], no_limit: bool) -> CacheLookup:
        """Look up the cached documents for this batch.

        Only the first URL contributes to the key. Read failures are logged
        and reported as a miss.
        """
        stem = stem_url(urls[0])
        try:
            entry = await self.store.fetch(stem, no_limit)
        except Exception as e:
            logger.error(f"Error fetching cache for {stem}: {e!r}")
            return CacheLookup(stem=stem, no_limit=no_limit, reason="read_error", error=str(e))

        if entry is None:
            return CacheLookup(stem=stem, no_limit=no_limit, reason="miss")

        if entry.no_limit != no_limit:
            return CacheLookup(stem=stem, no_limit=no_limit, reason="tier_mismatch")

        if not self.is_fresh(entry):
            logger.info(f"Cache stale for {stem} (cached_at={entry.cached_at})")
            return CacheLookup(stem=stem, no_limit=no_limit, reason="stale")

        logger.info(f"Cache hit for {stem}")
        return CacheLookup(stem=stem, no_limit=no_limit, entry=entry, reason="hit")

    async def store_documents(self, stem: str, no_limit: bool, llmstxt: str, llmsfulltxt: str) -> CacheEntry:
        """Insert both documents as one row.

        Raises:
            CacheWriteError: the insert failed.
        """
        entry = CacheEntry(
            url=stem,
            llmstxt=llmstxt,
            llmsfulltxt=llmsfulltxt,
            no_limit=no_limit,
            cached_at=datetime.now(timezone.utc),
        )
        try:
            await self.store.insert(entry)
        except Exception as e:
            raise CacheWriteError(f"Failed to insert into Supabase: {e}") from e
        return entry
