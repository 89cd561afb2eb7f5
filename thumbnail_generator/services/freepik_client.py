import logging
from typing import Optional

import httpx

from thumbnail_generator.config import FreepikConfig

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-freepik-api-key"


class FreepikError(RuntimeError):
    """Raised when a call to the Freepik API does not succeed."""


class NetworkFailure(FreepikError):
    """The Freepik endpoint could not be reached or did not answer in time."""


class UpstreamError(FreepikError):
    """Freepik answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def create_http_client(config: FreepikConfig) -> httpx.AsyncClient:
    logger.debug("Creating Freepik HTTP client (timeout=%ss)", config.timeout_seconds)
    return httpx.AsyncClient(timeout=httpx.Timeout(config.timeout_seconds))
