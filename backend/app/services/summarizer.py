"""
Page Summarizer - Structured OpenAI completion producing a title and description per page.
"""

from dataclasses import dataclass
from typing import Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from app.config import Settings
from app.logger import logger
from app.schemas.llmstxt_result import PageSummary


PROMPT_TEMPLATE = (
    "Generate a 9-10 word description and a 3-4 word title of the entire page based on ALL "
    "the content one will find on the page for this url: {url}. This will help in a user "
    "finding the page for its intended purpose. Here is the content: {markdown}"
)


@dataclass
class SummaryResult:
    """Outcome of one summarization call."""
    url: str
    summary: Optional[PageSummary] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.summary is not None


class PageSummarizer:
    """Asks the completion provider for a two-field PageSummary."""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.model = settings.OPENAI_MODEL
        self.api_key = settings.OPENAI_API_KEY
        self.timeout = settings.OPENAI_TIMEOUT
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        # AsyncOpenAI raises OpenAIError when no key is configured
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key or None, timeout=self.timeout)
        return self._client

    async def summarize(self, url: str, markdown: str) -> SummaryResult:
        logger.debug(f"Summarizing {url} ({len(markdown)} chars)")
        try:
            completion = await self._get_client().chat.completions.parse(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": PROMPT_TEMPLATE.format(url=url, markdown=markdown),
                    }
                ],
                response_format=PageSummary,
            )
        except (OpenAIError, ValidationError) as e:
            logger.error(f"Summarization failed for {url}: {e}")
            return SummaryResult(url=url, error=str(e))

        if not completion.choices:
            return SummaryResult(url=url, error="no choices returned")

        message = completion.choices[0].message
        if message.parsed is None:
            reason = getattr(message, "refusal", None) or "no structured response"
            logger.error(f"Summarization returned no structured output for {url}: {reason}")
            return SummaryResult(url=url, error=reason)

        return SummaryResult(url=url, summary=message.parsed)
