"""
Asynchronous HTTP client

Thin wrapper over httpx.AsyncClient that issues a single GET per call and
reduces the outcome to either the response text or an HttpStatusError.
"""

import logging
import time

import httpx

from photoview.exceptions import HttpStatusError, TransportUnavailableError

logger = logging.getLogger(__name__)

CACHE_BUST_PARAM = "_"


def bust_cache(url: str) -> str:
    """Append the current timestamp (ms) so intermediaries can't serve a cached copy."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{CACHE_BUST_PARAM}={int(time.time() * 1000)}"


class HttpClient:
    """GET-only HTTP client

    The underlying httpx.AsyncClient can be injected, which is how tests swap
    in an httpx.MockTransport. No retries and no timeout policy are applied
    on top of what the injected client does.
    """

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(self, url: str, cache: bool = True) -> str:
        """Fetch ``url`` and return the response body.

        Args:
            url: Absolute URL to fetch
            cache: When False, a cache-busting query parameter is appended

        Returns:
            The raw response text

        Raises:
            TransportUnavailableError: If the client has been closed
            HttpStatusError: On a non-2xx status, or status 0 if the request itself failed
        """
        if self._client.is_closed:
            raise TransportUnavailableError("HTTP client is closed, no transport available")

        if not cache:
            url = bust_cache(url)

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            # Transport, decoding and redirect failures alike: no usable response
            logger.error(f"GET {url} failed: {e}")
            raise HttpStatusError(0, str(e)) from e

        if not response.is_success:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise HttpStatusError(response.status_code, response.reason_phrase)

        logger.debug(f"GET {url} returned {response.status_code}")
        return response.text

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


__all__ = ["HttpClient", "bust_cache"]
