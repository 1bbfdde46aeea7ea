"""URL construction for EXR dataflow queries."""

from __future__ import annotations

import httpx

from ecbrates.domain.models.exchange_rate import ExchangeRateQuery

DEFAULT_BASE_URL = "https://data-api.ecb.europa.eu/service"
DEFAULT_BASE_CURRENCY = "EUR"


def build_exchange_rate_url(query: ExchangeRateQuery, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the ECB SDMX API URL for an exchange rate query.

    Pattern: ``{base}/data/EXR/{freq}.{currencies}.{base_currency}.{type}.{variation}``
    with ``startPeriod`` and an optional ``endPeriod`` query parameter. The
    response format is negotiated through the ``Accept`` header, not the URL.
    """
    currency_key = "+".join(query.currencies)
    base_currency = query.base_currency or DEFAULT_BASE_CURRENCY

    # EXR series key: FREQ.CURRENCY.CURRENCY_DENOM.EXR_TYPE.EXR_SUFFIX
    series_key = (
        f"{query.frequency}.{currency_key}.{base_currency}."
        f"{query.exr_type}.{query.series_variation}"
    )

    params = {"startPeriod": query.start_date}
    if query.end_date is not None:
        params["endPeriod"] = query.end_date

    url = httpx.URL(f"{base_url.rstrip('/')}/data/EXR/{series_key}", params=params)
    return str(url)
