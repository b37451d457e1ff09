"""Unit tests for the Firecrawl batch scrape adapter (SDK mocked)."""

import time
from typing import List, Optional
from unittest.mock import MagicMock, patch

import pytest
from pydantic import BaseModel

from app.services.firecrawl_adapter import FirecrawlAdapter


class _Metadata(BaseModel):
    url: Optional[str] = None
    source_url: Optional[str] = None


class _Document(BaseModel):
    markdown: Optional[str] = None
    metadata: Optional[_Metadata] = None


class _BatchJob(BaseModel):
    """Shape of the v2 SDK's BatchScrapeJob."""
    status: str
    data: List[_Document] = []


@pytest.fixture
def firecrawl_cls():
    with patch("app.services.firecrawl_adapter.Firecrawl") as cls:
        yield cls


def _app(firecrawl_cls, **kwargs) -> MagicMock:
    app = MagicMock()
    app.batch_scrape = MagicMock(**kwargs)
    firecrawl_cls.return_value = app
    return app


class TestBatchScrape:

    async def test_requests_markdown_main_content(self, settings, firecrawl_cls):
        app = _app(firecrawl_cls, return_value={"status": "completed", "data": []})

        await FirecrawlAdapter("fc-caller", settings).batch_scrape(["https://a.com", "https://b.com"])

        firecrawl_cls.assert_called_once_with(api_key="fc-caller")
        app.batch_scrape.assert_called_once_with(
            ["https://a.com", "https://b.com"],
            formats=["markdown"],
            only_main_content=True,
            wait_timeout=settings.FIRECRAWL_TIMEOUT,
        )

    async def test_normalizes_sdk_models_in_order(self, settings, firecrawl_cls):
        job = _BatchJob(status="completed", data=[
            _Document(markdown="# B", metadata=_Metadata(url="https://b.com")),
            _Document(markdown="# A", metadata=_Metadata(source_url="https://a.com")),
            _Document(markdown=None, metadata=None),
        ])
        _app(firecrawl_cls, return_value=job)

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com", "https://b.com"])

        assert result.success
        assert [(p.url, p.markdown) for p in result.pages] == [
            ("https://b.com", "# B"),
            ("https://a.com", "# A"),
            ("", ""),
        ]

    async def test_dict_response_with_success_flag(self, settings, firecrawl_cls):
        _app(firecrawl_cls, return_value={
            "success": True,
            "data": [{"markdown": "hello", "metadata": {"sourceURL": "https://a.com"}}],
        })

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com"])

        assert result.success
        assert result.pages[0].url == "https://a.com"

    async def test_reported_failure_keeps_reason(self, settings, firecrawl_cls):
        _app(firecrawl_cls, return_value={"success": False, "error": "Insufficient credits"})

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com"])

        assert not result.success
        assert result.error == "Insufficient credits"
        assert result.pages == []

    async def test_failed_job_status(self, settings, firecrawl_cls):
        _app(firecrawl_cls, return_value=_BatchJob(status="failed"))

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com"])

        assert not result.success
        assert "failed" in result.error

    async def test_sdk_exception(self, settings, firecrawl_cls):
        _app(firecrawl_cls, side_effect=RuntimeError("Unauthorized: Invalid token"))

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com"])

        assert not result.success
        assert "Invalid token" in result.error

    async def test_sdk_wait_timeout(self, settings, firecrawl_cls):
        settings.FIRECRAWL_TIMEOUT = 30
        app = _app(firecrawl_cls, side_effect=TimeoutError("Batch scrape job did not complete within 30 seconds"))

        result = await FirecrawlAdapter("k", settings).batch_scrape(["https://a.com"])

        assert app.batch_scrape.call_args.kwargs["wait_timeout"] == 30
        assert not result.success
        assert "timed out" in result.error

    async def test_outer_guard_when_sdk_hangs(self, settings, firecrawl_cls):
        settings.FIRECRAWL_TIMEOUT = 0.05
        _app(firecrawl_cls, side_effect=lambda *a, **kw: time.sleep(0.5))
        adapter = FirecrawlAdapter("k", settings)
        adapter.grace = 0

        result = await adapter.batch_scrape(["https://a.com"])

        assert not result.success
        assert "timed out" in result.error
