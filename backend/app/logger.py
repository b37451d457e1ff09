"""
Logging configuration.

One stdout handler on the ``llmstxt_generator`` logger. The SDK loggers used
per request (httpx, openai, firecrawl) are held at WARNING so each page
summary does not emit its own request line.
"""
import logging
import os
import sys

LOGGER_NAME = "llmstxt_generator"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "firecrawl")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the service logger once; later calls only change the level."""
    service_logger = logging.getLogger(LOGGER_NAME)
    service_logger.setLevel(level.upper())

    if not service_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        service_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return service_logger


logger = setup_logging(os.getenv("LOG_LEVEL", "INFO"))
