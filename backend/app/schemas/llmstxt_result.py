"""
Pydantic schemas for generation responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageSummary(BaseModel):
    """Structured completion returned for each scraped page."""
    description: str = Field(..., description="9-10 word description of the page")
    title: str = Field(..., description="3-4 word title of the page")


class CacheEntry(BaseModel):
    """One row of the Supabase ``cache`` table."""
    url: str
    llmstxt: str
    llmsfulltxt: str
    no_limit: bool = False
    cached_at: Optional[datetime] = None


class GenerateResponse(BaseModel):
    """Both generated documents, verbatim."""
    llmstxt: str
    llmsfulltxt: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "llmstxt": "# example.com llms.txt\n\n- [Example Home Page](https://example.com): ...\n",
                "llmsfulltxt": "# example.com llms-full.txt\n\n# Example Domain ..."
            }
        }
    )


class ErrorResponse(BaseModel):
    """Body returned for any failed generation."""
    error: str
    detail: str
