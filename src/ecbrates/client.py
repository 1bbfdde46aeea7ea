"""ECB exchange rates client.

Orchestrates query → validate → build URL → fetch → decode → shape, on top
of an ``HttpFetcher`` so the transport can be swapped out.

Example:
    ```python
    async with EcbClient() as client:
        result = await client.get_rate("USD", "2025-01-15")
        print(result.rates["2025-01-15"])  # e.g. 1.03
    ```
"""

from __future__ import annotations

import asyncio
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from types import TracebackType

import httpx
import structlog

from ecbrates.domain.exceptions import EcbNoDataError
from ecbrates.domain.models.exchange_rate import (
    ConversionResult,
    ExchangeRateObservation,
    ExchangeRateQuery,
    ExchangeRateResult,
    ExchangeRatesResult,
)
from ecbrates.domain.ports.http import HttpFetcher
from ecbrates.infrastructure.http.fetcher import DEFAULT_TIMEOUT_SECONDS, HttpxFetcher
from ecbrates.infrastructure.parsers.sdmx_json import decode, parse_document
from ecbrates.infrastructure.utils.url_builder import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_BASE_URL,
    build_exchange_rate_url,
)
from ecbrates.infrastructure.utils.validation import validate_query

logger = structlog.get_logger(__name__)

__all__ = ["DEFAULT_BASE_CURRENCY", "DEFAULT_BASE_URL", "EcbClient"]


def _format_date(value: str | date) -> str:
    return value.isoformat() if isinstance(value, date) else value


def _round_amount(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class EcbClient:
    """Typed client for the ECB EXR reference rates.

    Rates are quoted as units of ``currency`` per one unit of the base
    (denomination) currency, which defaults to EUR.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        base_currency: str = DEFAULT_BASE_CURRENCY,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        fetcher: HttpFetcher | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root of the ECB SDMX API
            base_currency: Default denomination currency for queries that omit one
            timeout_seconds: Request timeout used by the default fetcher
            fetcher: Custom transport; overrides ``timeout_seconds`` and ``transport``
            transport: Optional httpx transport for the default fetcher
        """
        self._base_url = base_url
        self._base_currency = base_currency
        self._fetcher = fetcher or HttpxFetcher(
            timeout_seconds=timeout_seconds, transport=transport
        )

    @classmethod
    def with_fetcher(
        cls,
        fetcher: HttpFetcher,
        base_url: str = DEFAULT_BASE_URL,
        base_currency: str = DEFAULT_BASE_CURRENCY,
    ) -> EcbClient:
        """Create a client that sends every request through ``fetcher``."""
        return cls(base_url=base_url, base_currency=base_currency, fetcher=fetcher)

    @property
    def base_currency(self) -> str:
        return self._base_currency

    async def get_rate(
        self,
        currency: str,
        on_date: str | date,
        cancel_event: asyncio.Event | None = None,
    ) -> ExchangeRateResult:
        """Get the rate of one currency on a single date.

        Args:
            currency: Target currency code, e.g. "USD"
            on_date: Date to query (YYYY-MM-DD)
            cancel_event: Optional event that aborts the request when set
        """
        day = _format_date(on_date)
        query = ExchangeRateQuery(currencies=[currency], start_date=day, end_date=day)
        return await self._get_single_currency_rates(query, cancel_event)

    async def get_rate_history(
        self,
        currency: str,
        start_date: str | date,
        end_date: str | date,
        frequency: str = "D",
        cancel_event: asyncio.Event | None = None,
    ) -> ExchangeRateResult:
        """Get the rates of one currency over a date range.

        Args:
            currency: Target currency code, e.g. "USD"
            start_date: Inclusive start date (YYYY-MM-DD)
            end_date: Inclusive end date (YYYY-MM-DD)
            frequency: "D" (daily), "M" (monthly) or "A" (annual)
            cancel_event: Optional event that aborts the request when set
        """
        query = ExchangeRateQuery(
            currencies=[currency],
            start_date=_format_date(start_date),
            end_date=_format_date(end_date),
            frequency=frequency,
        )
        return await self._get_single_currency_rates(query, cancel_event)

    async def get_rates(
        self, query: ExchangeRateQuery, cancel_event: asyncio.Event | None = None
    ) -> ExchangeRatesResult:
        """Get rates for several currencies, grouped by date."""
        resolved = self._resolve_query(query)
        validate_query(resolved)
        observations = await self._fetch_and_decode(resolved, cancel_event)

        rates: dict[str, dict[str, float]] = {}
        for obs in observations:
            rates.setdefault(obs.date, {})[obs.currency] = obs.rate

        return ExchangeRatesResult(
            base=self._result_base(observations, resolved),
            currencies=list(resolved.currencies),
            rates=rates,
        )

    async def get_observations(
        self, query: ExchangeRateQuery, cancel_event: asyncio.Event | None = None
    ) -> list[ExchangeRateObservation]:
        """Get the decoded observations as returned by the API.

        Raises:
            EcbNoDataError: If the response holds no observations, like every
                other lookup on this client
        """
        resolved = self._resolve_query(query)
        validate_query(resolved)
        return await self._fetch_and_decode(resolved, cancel_event)

    async def convert(
        self,
        amount: float,
        currency: str,
        on_date: str | date,
        cancel_event: asyncio.Event | None = None,
    ) -> ConversionResult | None:
        """Convert an amount of the base currency into ``currency``.

        Returns:
            The conversion, or None when no rate is published for that date
        """
        try:
            result = await self.get_rate(currency, on_date, cancel_event)
        except EcbNoDataError:
            return None

        rate_date, rate = next(iter(result.rates.items()))
        return ConversionResult(
            amount=_round_amount(amount * rate),
            rate=rate,
            date=rate_date,
            currency=currency,
        )

    async def close(self) -> None:
        await self._fetcher.close()

    async def __aenter__(self) -> EcbClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _resolve_query(self, query: ExchangeRateQuery) -> ExchangeRateQuery:
        if query.base_currency is not None:
            return query
        return query.model_copy(update={"base_currency": self._base_currency})

    async def _fetch_and_decode(
        self, query: ExchangeRateQuery, cancel_event: asyncio.Event | None
    ) -> list[ExchangeRateObservation]:
        url = build_exchange_rate_url(query, self._base_url)
        raw = await self._fetcher.get(url, cancel_event)
        observations = decode(parse_document(raw))
        if not observations:
            logger.info(
                "No exchange rate data for query",
                currencies=query.currencies,
                start_date=query.start_date,
                end_date=query.end_date,
            )
            raise EcbNoDataError(query.currencies, query.start_date, query.end_date)
        return observations

    async def _get_single_currency_rates(
        self, query: ExchangeRateQuery, cancel_event: asyncio.Event | None
    ) -> ExchangeRateResult:
        resolved = self._resolve_query(query)
        validate_query(resolved)
        observations = await self._fetch_and_decode(resolved, cancel_event)

        rates = {obs.date: obs.rate for obs in observations}
        return ExchangeRateResult(
            base=self._result_base(observations, resolved),
            currency=resolved.currencies[0],
            rates=rates,
        )

    def _result_base(
        self, observations: list[ExchangeRateObservation], query: ExchangeRateQuery
    ) -> str:
        # Prefer the denomination reported by the response over the requested one
        if observations:
            return observations[0].base_currency
        return query.base_currency or self._base_currency
