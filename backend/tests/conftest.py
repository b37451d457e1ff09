"""Shared fixtures: injected settings and in-memory collaborators (no network)."""

from datetime import datetime, timezone
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.config import Settings
from app.schemas.llmstxt_result import CacheEntry, PageSummary
from app.services.cache_gateway import CacheGateway
from app.services.firecrawl_adapter import BatchScrapeResult, ScrapedPage
from app.services.llmstxt_generator import LlmsTxtGenerator
from app.services.summarizer import SummaryResult


class InMemoryCacheStore:
    """Stands in for SupabaseCacheStore; rows live in a list."""

    def __init__(self):
        self.rows: List[CacheEntry] = []
        self.fail_reads = False
        self.fail_writes = False

    async def fetch(self, url: str, no_limit: bool) -> Optional[CacheEntry]:
        if self.fail_reads:
            raise RuntimeError("connection refused")
        matches = [r for r in self.rows if r.url == url and r.no_limit == no_limit]
        if not matches:
            return None
        return max(matches, key=lambda r: r.cached_at)

    async def insert(self, entry: CacheEntry) -> None:
        if self.fail_writes:
            raise RuntimeError("insert rejected")
        self.rows.append(entry)

    def seed(self, url: str, no_limit: bool, cached_at: datetime, llmstxt="cached llms", llmsfulltxt="cached full"):
        self.rows.append(CacheEntry(
            url=url,
            llmstxt=llmstxt,
            llmsfulltxt=llmsfulltxt,
            no_limit=no_limit,
            cached_at=cached_at,
        ))


@pytest.fixture
def settings():
    """Settings with a shared Firecrawl key and default tier limits."""
    return Settings(
        FIRECRAWL_API_KEY="fc-shared",
        OPENAI_API_KEY="sk-test",
        SUPABASE_URL="https://test.supabase.co",
        SUPABASE_KEY="service-key",
        CACHE_TTL_DAYS=3,
        DEFAULT_URL_LIMIT=10,
        BYOK_URL_LIMIT=1000,
        SUMMARY_CONCURRENCY=1,
    )


@pytest.fixture
def store():
    return InMemoryCacheStore()


@pytest.fixture
def cache(settings, store):
    return CacheGateway(settings, store=store)


def page_for(url: str) -> ScrapedPage:
    return ScrapedPage(url=url, markdown=f"# Content of {url}\n")


@pytest.fixture
def scraper():
    """Scraper mock echoing one page per requested URL."""
    mock = MagicMock()

    async def _batch_scrape(urls):
        return BatchScrapeResult(success=True, pages=[page_for(u) for u in urls])

    mock.batch_scrape = AsyncMock(side_effect=_batch_scrape)
    return mock


@pytest.fixture
def scraper_factory(scraper):
    factory = MagicMock(return_value=scraper)
    return factory


@pytest.fixture
def summarizer():
    """Summarizer mock deriving title and description from the URL."""
    mock = MagicMock()

    async def _summarize(url, markdown):
        return SummaryResult(
            url=url,
            summary=PageSummary(
                title=f"Title for {url}",
                description=f"Description of the page found at {url}",
            ),
        )

    mock.summarize = AsyncMock(side_effect=_summarize)
    return mock


@pytest.fixture
def generator(settings, cache, summarizer, scraper_factory):
    return LlmsTxtGenerator(
        settings=settings,
        cache=cache,
        summarizer=summarizer,
        scraper_factory=scraper_factory,
    )


@pytest.fixture
def now():
    return datetime.now(timezone.utc)
