"""
Service error taxonomy.

Every fatal condition of a generation request is an ``LlmsTxtError`` subclass
carrying the HTTP status the API layer answers with.
"""


class LlmsTxtError(Exception):
    """Base class for generation failures surfaced to the caller."""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(LlmsTxtError):
    """A required credential is missing from the environment."""
    status_code = 500


class InputError(LlmsTxtError):
    """The request body is unusable (no URLs)."""
    status_code = 400


class CacheReadError(LlmsTxtError):
    """Cache lookup failed. Never raised to the caller; logged and treated as a miss."""
    status_code = 502


class ScrapeError(LlmsTxtError):
    """The batch scrape reported failure."""
    status_code = 502


class SummarizationError(LlmsTxtError):
    """A page summary could not be produced or parsed."""
    status_code = 502


class CacheWriteError(LlmsTxtError):
    """Inserting the generated documents into the cache failed."""
    status_code = 502
