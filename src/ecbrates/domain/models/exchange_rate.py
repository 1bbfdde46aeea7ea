"""Exchange rate domain models."""

from __future__ import annotations

from pydantic import Field

from ecbrates.domain.models.base import ValueObject

# ISO 4217 codes the ECB publishes euro reference rates for.
ECB_CURRENCIES: tuple[str, ...] = (
    "AUD",
    "BGN",
    "BRL",
    "CAD",
    "CHF",
    "CNY",
    "CZK",
    "DKK",
    "EUR",
    "GBP",
    "HKD",
    "HUF",
    "IDR",
    "ILS",
    "INR",
    "ISK",
    "JPY",
    "KRW",
    "MXN",
    "MYR",
    "NOK",
    "NZD",
    "PHP",
    "PLN",
    "RON",
    "SEK",
    "SGD",
    "THB",
    "TRY",
    "USD",
    "ZAR",
)

SUPPORTED_FREQUENCIES: tuple[str, ...] = ("D", "M", "A")
SUPPORTED_EXR_TYPES: tuple[str, ...] = ("SP00", "EN00")
SUPPORTED_SERIES_VARIATIONS: tuple[str, ...] = ("A", "E")


class ExchangeRateObservation(ValueObject):
    """A single decoded exchange rate observation.

    One unit of ``base_currency`` buys ``rate`` units of ``currency``.
    """

    date: str = Field(..., description="Observation period (YYYY-MM-DD for daily data)")
    currency: str = Field(..., description="Target currency code")
    base_currency: str = Field(..., description="Denomination (base) currency code")
    rate: float = Field(..., description="Exchange rate value")


class ExchangeRateQuery(ValueObject):
    """Parameters of an EXR dataflow query."""

    currencies: list[str] = Field(..., description="One or more target currency codes")
    start_date: str = Field(..., description="Inclusive start date, YYYY-MM-DD")
    end_date: str | None = Field(default=None, description="Inclusive end date, YYYY-MM-DD")
    frequency: str = Field(default="D", description="Data frequency: D, M or A")
    base_currency: str | None = Field(
        default=None, description="Denomination currency; the client default when omitted"
    )
    exr_type: str = Field(default="SP00", description="Exchange rate type: SP00 or EN00")
    series_variation: str = Field(default="A", description="Series variation: A or E")


class ExchangeRateResult(ValueObject):
    """Rates of a single currency keyed by date."""

    base: str = Field(..., description="Base (denomination) currency")
    currency: str = Field(..., description="Target currency")
    rates: dict[str, float] = Field(default_factory=dict, description="Date to rate")


class ExchangeRatesResult(ValueObject):
    """Rates of several currencies keyed by date, then currency."""

    base: str = Field(..., description="Base (denomination) currency")
    currencies: list[str] = Field(..., description="Currencies included in the query")
    rates: dict[str, dict[str, float]] = Field(
        default_factory=dict, description="Date to {currency: rate}"
    )


class ConversionResult(ValueObject):
    """Outcome of converting a base currency amount."""

    amount: float = Field(..., description="Converted amount, rounded to 2 decimal places")
    rate: float = Field(..., description="Exchange rate used")
    date: str = Field(..., description="Date of the exchange rate used")
    currency: str = Field(..., description="Target currency")
