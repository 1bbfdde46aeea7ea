"""Error hierarchy for ecb-rates.

Every error raised by the library derives from ``EcbError`` and carries a
stable ``code`` so callers can handle whole families with one ``except``.
"""

from __future__ import annotations

from collections.abc import Sequence


class EcbError(Exception):
    """Base error for all ECB client errors."""

    code: str = "ECB_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EcbApiError(EcbError):
    """The ECB API answered with a non-2xx HTTP status."""

    code = "ECB_API_ERROR"

    def __init__(self, status_code: int, status_text: str, body: str | None = None) -> None:
        message = f"ECB API returned {status_code} {status_text}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class EcbNetworkError(EcbError):
    """The request never produced a response (timeout, DNS, refused, cancelled)."""

    code = "ECB_NETWORK_ERROR"


class EcbParseError(EcbError):
    """The response could not be turned into observations."""

    code = "ECB_PARSE_ERROR"


class PayloadSyntaxError(EcbParseError):
    """The response body is not valid JSON."""


class StructuralParseError(EcbParseError):
    """Valid JSON that lacks the structure of the EXR dataflow."""

    def __init__(
        self,
        message: str,
        *,
        dimension_id: str | None = None,
        role: str | None = None,
    ) -> None:
        super().__init__(message)
        self.dimension_id = dimension_id
        self.role = role


class EcbValidationError(EcbError):
    """Query parameters were rejected before any request was sent."""

    code = "ECB_VALIDATION_ERROR"


class EcbNoDataError(EcbError):
    """A well-formed response held no observations for the query.

    Typical for weekends and TARGET holidays, when no reference rate is set.
    """

    code = "ECB_NO_DATA"

    def __init__(
        self,
        currencies: Sequence[str],
        start_date: str,
        end_date: str | None = None,
    ) -> None:
        if end_date is None or end_date == start_date:
            period = f"on {start_date}"
        else:
            period = f"from {start_date} to {end_date}"
        super().__init__(
            f"No exchange rate data available for {', '.join(currencies)} {period}."
        )
        self.currencies = list(currencies)
        self.start_date = start_date
        self.end_date = end_date
