"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "llms.txt Generator")

    # API Keys
    FIRECRAWL_API_KEY: str = os.getenv("FIRECRAWL_API_KEY", "")
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # Firecrawl settings (seconds for the whole batch)
    FIRECRAWL_TIMEOUT: int = int(os.getenv("FIRECRAWL_TIMEOUT", "300"))

    # OpenAI settings
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TIMEOUT: int = int(os.getenv("OPENAI_TIMEOUT", "60"))
    SUMMARY_CONCURRENCY: int = int(os.getenv("SUMMARY_CONCURRENCY", "1"))

    # Supabase cache
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")
    SUPABASE_CACHE_TABLE: str = os.getenv("SUPABASE_CACHE_TABLE", "cache")
    SUPABASE_TIMEOUT: int = int(os.getenv("SUPABASE_TIMEOUT", "15"))
    CACHE_TTL_DAYS: float = float(os.getenv("CACHE_TTL_DAYS", "3"))

    # Quota tiers
    DEFAULT_URL_LIMIT: int = int(os.getenv("DEFAULT_URL_LIMIT", "10"))
    BYOK_URL_LIMIT: int = int(os.getenv("BYOK_URL_LIMIT", "1000"))

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: _csv(os.getenv("CORS_ORIGINS", "*")))

settings = Settings()
