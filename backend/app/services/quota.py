"""
Quota Resolver - Picks the Firecrawl credential and URL ceiling for a request.

Callers who bring their own Firecrawl key get the large limit and their own
cache partition; everyone else shares the service key and the small limit.
"""
from dataclasses import dataclass
from typing import List, Optional

from app.config import Settings
from app.errors import ConfigurationError
from app.logger import logger


@dataclass(frozen=True)
class Quota:
    """Resolved tier for one request."""
    api_key: str
    limit: int
    no_limit: bool

    def apply(self, urls: List[str]) -> List[str]:
        """Truncate to the tier ceiling, keeping order."""
        if len(urls) > self.limit:
            logger.info(f"Truncating {len(urls)} URLs to limit of {self.limit}")
            return list(urls[:self.limit])
        return list(urls)


def resolve_quota(byok_key: Optional[str], settings: Settings) -> Quota:
    """Resolve the quota tier from the caller-supplied key, if any.

    Raises:
        ConfigurationError: no caller key and no shared FIRECRAWL_API_KEY.
    """
    if byok_key:
        logger.info(f"Using provided Firecrawl API key. Limit set to {settings.BYOK_URL_LIMIT}")
        return Quota(api_key=byok_key, limit=settings.BYOK_URL_LIMIT, no_limit=True)

    logger.info(f"Using default limit of {settings.DEFAULT_URL_LIMIT}")
    if not settings.FIRECRAWL_API_KEY:
        raise ConfigurationError("FIRECRAWL_API_KEY is not set")
    return Quota(api_key=settings.FIRECRAWL_API_KEY, limit=settings.DEFAULT_URL_LIMIT, no_limit=False)
