# ABOUTME: HTTP client abstraction for Open Library enrichment calls.
# ABOUTME: Shares one paced, retrying httpx client between the threads of an enrichment batch.

import logging
import threading
import time
from typing import Any, Protocol, runtime_checkable

import httpx

from nextread import __version__

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class EnrichmentFetchError(Exception):
    """Raised when an enrichment request fails or returns an unusable payload."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations returning a parsed JSON object."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


def backoff_delay(base: float, attempt: int) -> float:
    """Seconds to wait after a failed attempt (0-based): base, 2*base, 4*base, ..."""
    return base * (2**attempt)


def _decode(response: httpx.Response, url: str) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise EnrichmentFetchError(f"Invalid JSON from {url}") from exc
    if not isinstance(payload, dict):
        raise EnrichmentFetchError(
            f"Expected a JSON object from {url}, got {type(payload).__name__}"
        )
    return payload


class NextreadHttpClient:
    """Paced, retrying HTTP client for Open Library lookups.

    Every attempt, retries included, waits for its turn behind a shared
    lock so that concurrent enrichment workers never send two requests
    closer together than `min_request_interval`. Transient statuses
    (429 and the 5xx gateway family) are retried with exponential backoff;
    everything else that is not a 200 with a JSON object body is raised
    as EnrichmentFetchError.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers={"User-Agent": f"nextread/{__version__}"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._pace_lock = threading.Lock()
        self._next_slot: float | None = None

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Fetch a URL and return its JSON object body.

        Raises:
            EnrichmentFetchError: On transport errors, non-retryable statuses,
                exhausted retries, or a body that is not a JSON object.
        """
        attempts = 1 + self._max_retries
        for attempt in range(attempts):
            response = self._send(url, params)
            if response.status_code == 200:
                return _decode(response, url)
            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise EnrichmentFetchError(f"HTTP {response.status_code} from {url}")
            if attempt == attempts - 1:
                raise EnrichmentFetchError(
                    f"HTTP {response.status_code} from {url} after {attempts} attempts"
                )

            delay = backoff_delay(self._retry_delay, attempt)
            logger.warning(
                "HTTP %d from %s, retrying in %.1fs (retry %d/%d)",
                response.status_code,
                url,
                delay,
                attempt + 1,
                self._max_retries,
            )
            time.sleep(delay)

        # range(attempts) always returns or raises above
        raise AssertionError("unreachable")

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def _send(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        self._wait_for_slot()
        try:
            return self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise EnrichmentFetchError(f"Request failed: {url}: {exc}") from exc

    def _wait_for_slot(self) -> None:
        """Block until this thread may send, then reserve the next slot."""
        if self._min_interval <= 0:
            return
        with self._pace_lock:
            now = time.monotonic()
            if self._next_slot is not None and now < self._next_slot:
                time.sleep(self._next_slot - now)
                now = time.monotonic()
            self._next_slot = now + self._min_interval
