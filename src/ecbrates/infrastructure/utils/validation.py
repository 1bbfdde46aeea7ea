"""Query validation, run before anything is sent over the network."""

from __future__ import annotations

import re

from ecbrates.domain.exceptions import EcbValidationError
from ecbrates.domain.models.exchange_rate import (
    SUPPORTED_EXR_TYPES,
    SUPPORTED_FREQUENCIES,
    SUPPORTED_SERIES_VARIATIONS,
    ExchangeRateQuery,
)

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")


def validate_query(query: ExchangeRateQuery) -> None:
    """Reject malformed queries.

    Dates are checked for format only; ``2025-13-01`` passes and is left for
    the API to answer.

    Raises:
        EcbValidationError: On the first problem found
    """
    if not query.currencies:
        raise EcbValidationError("At least one currency must be specified.")

    for currency in query.currencies:
        if not CURRENCY_PATTERN.fullmatch(currency):
            raise EcbValidationError(
                f'Invalid currency code "{currency}". Must be a 3-letter ISO 4217 code.'
            )

    if not ISO_DATE_PATTERN.fullmatch(query.start_date):
        raise EcbValidationError(
            f'Invalid startDate "{query.start_date}". Expected format: YYYY-MM-DD.'
        )

    if query.end_date is not None:
        if not ISO_DATE_PATTERN.fullmatch(query.end_date):
            raise EcbValidationError(
                f'Invalid endDate "{query.end_date}". Expected format: YYYY-MM-DD.'
            )
        # Lexicographic order matches chronological order for YYYY-MM-DD
        if query.start_date > query.end_date:
            raise EcbValidationError(
                f'startDate "{query.start_date}" must not be after endDate "{query.end_date}".'
            )

    if query.base_currency is not None and not CURRENCY_PATTERN.fullmatch(query.base_currency):
        raise EcbValidationError(
            f'Invalid baseCurrency "{query.base_currency}". Must be a 3-letter ISO 4217 code.'
        )

    if query.frequency not in SUPPORTED_FREQUENCIES:
        raise EcbValidationError(
            f'Unsupported frequency "{query.frequency}". '
            f"Use one of: {', '.join(SUPPORTED_FREQUENCIES)}."
        )

    if query.exr_type not in SUPPORTED_EXR_TYPES:
        raise EcbValidationError(
            f'Unsupported exchange rate type "{query.exr_type}". '
            f"Use one of: {', '.join(SUPPORTED_EXR_TYPES)}."
        )

    if query.series_variation not in SUPPORTED_SERIES_VARIATIONS:
        raise EcbValidationError(
            f'Unsupported series variation "{query.series_variation}". '
            f"Use one of: {', '.join(SUPPORTED_SERIES_VARIATIONS)}."
        )
