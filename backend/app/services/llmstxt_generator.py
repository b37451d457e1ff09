"""
LLMs.txt Generator - Main orchestrator for a generation request.

Coordinates quota resolution, cache lookup, batch scraping, per-page
summarization, document assembly and the cache write.
"""
import asyncio
from typing import Callable, List, Optional

from app.config import Settings, settings as default_settings
from app.errors import InputError, ScrapeError, SummarizationError
from app.logger import logger
from app.schemas.llmstxt_request import GenerateRequest
from app.schemas.llmstxt_result import GenerateResponse
from app.services.cache_gateway import CacheGateway
from app.services.firecrawl_adapter import FirecrawlAdapter, ScrapedPage
from app.services.llmstxt_builder import PageResult, build_documents
from app.services.quota import resolve_quota
from app.services.summarizer import PageSummarizer, SummaryResult


class LlmsTxtGenerator:
    """Orchestrates the complete generation process."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[CacheGateway] = None,
        summarizer: Optional[PageSummarizer] = None,
        scraper_factory: Optional[Callable[[str], FirecrawlAdapter]] = None,
    ):
        self.settings = settings or default_settings
        self.cache = cache or CacheGateway(self.settings)
        self.summarizer = summarizer or PageSummarizer(self.settings)
        self.scraper_factory = scraper_factory or (lambda api_key: FirecrawlAdapter(api_key, self.settings))
        self.concurrency = max(1, self.settings.SUMMARY_CONCURRENCY)

    async def run(self, request: GenerateRequest) -> GenerateResponse:
        """
        Generate llms.txt and llms-full.txt for the requested URLs.

        Args:
            request: URLs plus the optional caller Firecrawl key

        Returns:
            GenerateResponse with both documents, cached or freshly generated

        Raises:
            InputError, ConfigurationError, ScrapeError, SummarizationError,
            CacheWriteError
        """
        # 1. Parse
        if not request.urls:
            raise InputError("URLs are not defined")

        # 2. Resolve quota and truncate
        quota = resolve_quota(request.byok_key, self.settings)
        urls = quota.apply(request.urls)

        # 3. Cache lookup
        lookup = await self.cache.lookup(urls, quota.no_limit)
        if lookup.is_hit:
            return GenerateResponse(llmstxt=lookup.entry.llmstxt, llmsfulltxt=lookup.entry.llmsfulltxt)

        logger.info(f"Generating llms.txt for {lookup.stem} ({len(urls)} URLs, cache {lookup.reason})")

        # 4. Batch scrape
        scraper = self.scraper_factory(quota.api_key)
        scrape = await scraper.batch_scrape(urls)
        if not scrape.success:
            raise ScrapeError(f"Failed to scrape: {scrape.error}")

        # 5. Summarize every page, in scrape order
        summaries = await self._summarize_all(scrape.pages)
        pages = [
            PageResult(
                url=page.url,
                markdown=page.markdown,
                title=result.summary.title,
                description=result.summary.description,
            )
            for page, result in zip(scrape.pages, summaries)
        ]

        # 6. Assemble and persist together
        docs = build_documents(lookup.stem, pages, quota.no_limit)
        await self.cache.store_documents(lookup.stem, quota.no_limit, docs.llmstxt, docs.llmsfulltxt)

        logger.info(f"Generated llms.txt for {lookup.stem} from {len(pages)} pages")
        return GenerateResponse(llmstxt=docs.llmstxt, llmsfulltxt=docs.llmsfulltxt)

    async def _summarize_all(self, pages: List[ScrapedPage]) -> List[SummaryResult]:
        """Summarize pages; results come back in the same order as ``pages``.

        Raises:
            SummarizationError: any page failed.
        """
        if self.concurrency == 1:
            results = []
            for page in pages:
                result = await self.summarizer.summarize(page.url, page.markdown)
                self._check(result)
                results.append(result)
            return results

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(page: ScrapedPage) -> SummaryResult:
            async with semaphore:
                result = await self.summarizer.summarize(page.url, page.markdown)
            self._check(result)
            return result

        # First failure cancels the pages still in flight
        tasks = [asyncio.ensure_future(_bounded(page)) for page in pages]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return list(results)

    def _check(self, result: SummaryResult) -> None:
        if not result.is_success:
            raise SummarizationError(f"Failed to summarize {result.url}: {result.error}")
