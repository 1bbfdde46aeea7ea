"""httpx-based implementation of the HTTP transport port."""

from __future__ import annotations

import asyncio

import httpx
import structlog

from ecbrates.domain.exceptions import EcbApiError, EcbNetworkError
from ecbrates.domain.ports.http import HttpFetcher

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpxFetcher(HttpFetcher):
    """GET requests over a lazily created ``httpx.AsyncClient``.

    The whole request is bounded by ``timeout_seconds``. A caller may also pass
    an ``asyncio.Event`` to ``get``; whichever of the two fires first aborts
    the request. Failures are mapped to ``EcbNetworkError`` / ``EcbApiError``
    and never retried.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def get(self, url: str, cancel_event: asyncio.Event | None = None) -> str:
        client = await self._get_client()
        logger.debug("Fetching ECB data", url=url, timeout_seconds=self._timeout_seconds)

        try:
            async with asyncio.timeout(self._timeout_seconds):
                if cancel_event is None:
                    response = await client.get(url)
                else:
                    response = await self._get_cancellable(client, url, cancel_event)
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.warning("ECB request timed out", url=url, timeout_seconds=self._timeout_seconds)
            raise EcbNetworkError(
                f"Request timed out after {self._timeout_seconds}s: {url}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "ECB request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise EcbNetworkError(f"Network request failed for {url}: {e}") from e

        if not response.is_success:
            logger.warning(
                "ECB API returned an error status",
                url=url,
                status_code=response.status_code,
                response_text=response.text[:200] if response.text else None,
            )
            raise EcbApiError(response.status_code, response.reason_phrase, response.text)

        return response.text

    async def _get_cancellable(
        self, client: httpx.AsyncClient, url: str, cancel_event: asyncio.Event
    ) -> httpx.Response:
        request = asyncio.ensure_future(client.get(url))
        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({request, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not request.done():
                request.cancel()

        if request.done() and not request.cancelled():
            return request.result()
        logger.info("ECB request cancelled by caller", url=url)
        raise EcbNetworkError(f"Request cancelled: {url}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
