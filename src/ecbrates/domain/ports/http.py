"""HTTP transport port."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod


class HttpFetcher(ABC):
    """Fetches the raw body of an HTTP GET request.

    Implementations map transport failures to ``EcbNetworkError`` and non-2xx
    statuses to ``EcbApiError``. They never retry.
    """

    @abstractmethod
    async def get(self, url: str, cancel_event: asyncio.Event | None = None) -> str:
        """Return the response text for ``url``.

        Args:
            url: Fully built request URL
            cancel_event: Optional event; setting it aborts the in-flight request

        Returns:
            The response body as text
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the fetcher."""
        return None
