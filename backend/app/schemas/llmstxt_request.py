"""
Pydantic schemas for generation requests.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Request to generate llms.txt and llms-full.txt for a set of pages."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "urls": ["https://example.com", "https://example.com/pricing"],
                "bringYourOwnFirecrawlApiKey": None
            }
        },
    )

    urls: Optional[List[str]] = Field(None, description="Pages to scrape, in output order")
    byok_key: Optional[str] = Field(
        None,
        alias="bringYourOwnFirecrawlApiKey",
        description="Caller's own Firecrawl API key; lifts the URL limit",
    )
