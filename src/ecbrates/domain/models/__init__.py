"""Domain models for ecb-rates."""

from ecbrates.domain.models.base import ValueObject
from ecbrates.domain.models.exchange_rate import (
    ECB_CURRENCIES,
    SUPPORTED_EXR_TYPES,
    SUPPORTED_FREQUENCIES,
    SUPPORTED_SERIES_VARIATIONS,
    ConversionResult,
    ExchangeRateObservation,
    ExchangeRateQuery,
    ExchangeRateResult,
    ExchangeRatesResult,
)
from ecbrates.domain.models.sdmx import (
    SdmxDataSet,
    SdmxDimension,
    SdmxDimensions,
    SdmxJsonResponse,
    SdmxSeries,
    SdmxStructure,
    SdmxValue,
)

__all__ = [
    "ValueObject",
    # Exchange rate models
    "ECB_CURRENCIES",
    "SUPPORTED_EXR_TYPES",
    "SUPPORTED_FREQUENCIES",
    "SUPPORTED_SERIES_VARIATIONS",
    "ConversionResult",
    "ExchangeRateObservation",
    "ExchangeRateQuery",
    "ExchangeRateResult",
    "ExchangeRatesResult",
    # SDMX-JSON wire shapes
    "SdmxDataSet",
    "SdmxDimension",
    "SdmxDimensions",
    "SdmxJsonResponse",
    "SdmxSeries",
    "SdmxStructure",
    "SdmxValue",
]
