"""Retry utilities for fetching listings over flaky connections."""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_none,
)

from ..config import RETRY_ATTEMPTS, RETRY_MAX_WAIT, RETRY_MIN_WAIT

logger = logging.getLogger(__name__)

# Statuses worth another attempt besides 5xx
RETRYABLE_STATUSES = frozenset({429})


class ServerError(Exception):
    """Raised when a registry answers 5xx or 429, triggering retry."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Server returned {status_code} for {url}")


def get_with_retry(
    client: httpx.Client,
    url: str,
    max_attempts: int = RETRY_ATTEMPTS,
    min_wait: int = RETRY_MIN_WAIT,
    max_wait: int = RETRY_MAX_WAIT,
) -> httpx.Response:
    """
    GET a URL, retrying transient failures with exponential backoff.

    Retries on transport errors (connect, read, protocol), 5xx responses
    and 429 Too Many Requests. Other responses are returned as-is.

    Args:
        client: httpx Client instance
        url: URL to request
        max_attempts: Maximum number of attempts
        min_wait: Minimum wait between retries in seconds, 0 disables waiting
        max_wait: Maximum wait between retries in seconds

    Returns:
        httpx Response object

    Raises:
        httpx.TransportError: After retries exhausted for network errors
        ServerError: After retries exhausted for 5xx/429 responses
    """
    if min_wait == 0:
        wait_strategy = wait_none()
        before_sleep_callback = None
    else:
        wait_strategy = wait_exponential(multiplier=1, min=min_wait, max=max_wait)
        before_sleep_callback = before_sleep_log(logger, logging.WARNING)

    @retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_strategy,
        retry=retry_if_exception_type((httpx.TransportError, ServerError)),
        before_sleep=before_sleep_callback,
        reraise=True,
    )
    def _get() -> httpx.Response:
        response = client.get(url)
        if response.status_code >= 500 or response.status_code in RETRYABLE_STATUSES:
            raise ServerError(response.status_code, url)
        return response

    return _get()
