"""
Firecrawl Adapter - Isolated adapter for the Firecrawl batch scrape API.

Handles:
- One batch call per request (markdown only, main content only)
- SDK result normalization
- Timeouts
"""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from firecrawl import Firecrawl

from app.config import Settings
from app.logger import logger


@dataclass
class ScrapedPage:
    """One page returned by the batch scrape."""
    url: str
    markdown: str = ""


@dataclass
class BatchScrapeResult:
    """Outcome of a batch scrape. ``error`` carries the provider's reason."""
    success: bool
    pages: List[ScrapedPage] = field(default_factory=list)
    error: Optional[str] = None


class FirecrawlAdapter:
    """Adapter for Firecrawl batch scraping."""

    def __init__(self, api_key: str, settings: Settings):
        self.api_key = api_key
        self.timeout = settings.FIRECRAWL_TIMEOUT
        # Outer guard; the SDK stops polling on its own at self.timeout
        self.grace = 10

    async def batch_scrape(self, urls: List[str]) -> BatchScrapeResult:
        """Scrape all URLs in a single Firecrawl batch job.

        Args:
            urls: URLs to scrape, already truncated to the quota limit

        Returns:
            BatchScrapeResult with one ScrapedPage per returned document,
            in the order Firecrawl returned them
        """
        logger.info(f"Firecrawl batch scrape called for {len(urls)} URLs")

        try:
            result = await asyncio.wait_for(self._firecrawl_request(urls), timeout=self.timeout + self.grace)
        except (asyncio.TimeoutError, TimeoutError):
            logger.warning(f"Firecrawl batch scrape timed out after {self.timeout}s")
            return BatchScrapeResult(success=False, error=f"timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"Firecrawl API error: {e}")
            return BatchScrapeResult(success=False, error=str(e))

        return self._normalize(result)

    async def _firecrawl_request(self, urls: List[str]):
        """Make actual Firecrawl API request."""
        app = Firecrawl(api_key=self.api_key)

        params = {
            'formats': ['markdown'],
            'only_main_content': True,
            'wait_timeout': self.timeout,
        }

        # SDK is synchronous; batch_scrape polls until the job finishes
        return await asyncio.to_thread(app.batch_scrape, urls, **params)

    def _normalize(self, result) -> BatchScrapeResult:
        """Turn whatever the SDK returned into a BatchScrapeResult."""
        data = {}
        if isinstance(result, dict):
            data = result
        elif hasattr(result, "model_dump"):
            data = result.model_dump()
        elif hasattr(result, "__dict__"):
            data = result.__dict__

        status = data.get("status")
        success = data.get("success")
        if success is None:
            success = status in (None, "completed")

        if not success:
            error = data.get("error") or f"batch status {status}"
            logger.warning(f"Firecrawl batch scrape failed: {error}")
            return BatchScrapeResult(success=False, error=str(error))

        pages = []
        for doc in data.get("data") or []:
            if not isinstance(doc, dict):
                doc = doc.model_dump() if hasattr(doc, "model_dump") else vars(doc)
            metadata = doc.get("metadata") or {}
            url = metadata.get("url") or metadata.get("source_url") or metadata.get("sourceURL") or ""
            pages.append(ScrapedPage(url=url, markdown=doc.get("markdown") or ""))

        logger.info(f"Firecrawl batch scrape returned {len(pages)} pages")
        return BatchScrapeResult(success=True, pages=pages)
