"""
ecb-rates - Typed client for the European Central Bank's exchange rate API.

Queries the ECB SDMX RESTful service for the EXR dataflow and turns its
index-encoded SDMX-JSON payloads into flat observations and date to rate maps.
"""

from ecbrates.client import DEFAULT_BASE_CURRENCY, DEFAULT_BASE_URL, EcbClient
from ecbrates.domain.exceptions import (
    EcbApiError,
    EcbError,
    EcbNetworkError,
    EcbNoDataError,
    EcbParseError,
    EcbValidationError,
    PayloadSyntaxError,
    StructuralParseError,
)
from ecbrates.domain.models import (
    ECB_CURRENCIES,
    ConversionResult,
    ExchangeRateObservation,
    ExchangeRateQuery,
    ExchangeRateResult,
    ExchangeRatesResult,
    SdmxDataSet,
    SdmxDimension,
    SdmxJsonResponse,
    SdmxSeries,
    SdmxStructure,
    SdmxValue,
)
from ecbrates.domain.ports.http import HttpFetcher
from ecbrates.infrastructure.http.fetcher import HttpxFetcher
from ecbrates.infrastructure.parsers.sdmx_json import decode, parse_document
from ecbrates.infrastructure.utils.url_builder import build_exchange_rate_url
from ecbrates.infrastructure.utils.validation import validate_query

__version__ = "0.1.0"

__all__ = [
    "EcbClient",
    "DEFAULT_BASE_URL",
    "DEFAULT_BASE_CURRENCY",
    # Models
    "ECB_CURRENCIES",
    "ConversionResult",
    "ExchangeRateObservation",
    "ExchangeRateQuery",
    "ExchangeRateResult",
    "ExchangeRatesResult",
    "SdmxDataSet",
    "SdmxDimension",
    "SdmxJsonResponse",
    "SdmxSeries",
    "SdmxStructure",
    "SdmxValue",
    # Errors
    "EcbError",
    "EcbApiError",
    "EcbNetworkError",
    "EcbNoDataError",
    "EcbParseError",
    "EcbValidationError",
    "PayloadSyntaxError",
    "StructuralParseError",
    # Extension points
    "HttpFetcher",
    "HttpxFetcher",
    # Pipeline building blocks
    "build_exchange_rate_url",
    "decode",
    "parse_document",
    "validate_query",
]
