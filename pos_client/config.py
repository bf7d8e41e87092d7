"""Runtime configuration and logging setup.

Environment variables:
    POS_API_URL: Backend base URL (default: http://localhost:3000/api)
    POS_API_TIMEOUT: Request timeout in seconds (default: 15)
    POS_LOG_LEVEL: debug, info, warning or error (default: info)
"""

import logging
import os
from dataclasses import dataclass

import structlog

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def get_api_config() -> ApiConfig:
    """Build the backend configuration from the environment."""
    base_url = os.environ.get("POS_API_URL", DEFAULT_API_URL).rstrip("/")
    timeout = float(os.environ.get("POS_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
    return ApiConfig(base_url=base_url, timeout=timeout)


def configure_logging(level: str | None = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    name = (level or os.environ.get("POS_LOG_LEVEL", "info")).upper()
    min_level = logging.getLevelName(name)
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
