"""SDMX-JSON decoder for the ECB EXR dataflow.

The ECB encodes data messages by position rather than by value:

- series keys such as ``"0:1:0:0:0"`` hold one index per series dimension,
  each pointing into that dimension's value vocabulary;
- observation keys such as ``"0"`` index into the observation dimension
  (``TIME_PERIOD``);
- observation values are tuples ``[rate, *attribute_indices]``.

``decode`` resolves the dimensions it needs up front and fails hard when the
document is not shaped like the EXR dataflow. Individual malformed series or
observations inside an otherwise valid document are dropped.

See https://data.ecb.europa.eu/help/api/data
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Literal

import structlog

from ecbrates.domain.exceptions import PayloadSyntaxError, StructuralParseError
from ecbrates.domain.models.exchange_rate import ExchangeRateObservation
from ecbrates.domain.models.sdmx import SdmxJsonResponse

logger = structlog.get_logger(__name__)

DimensionRole = Literal["series", "observation"]

CURRENCY_DIMENSION = "CURRENCY"
CURRENCY_DENOM_DIMENSION = "CURRENCY_DENOM"
TIME_PERIOD_DIMENSION = "TIME_PERIOD"


class Vocabulary:
    """Ordered dimension values with bounds-checked index lookup."""

    def __init__(self, values: Sequence[Mapping[str, Any]]) -> None:
        self._ids: list[str | None] = [
            value.get("id") if isinstance(value, Mapping) else None for value in values
        ]

    def __len__(self) -> int:
        return len(self._ids)

    def lookup(self, index: int) -> str | None:
        """Return the identifier at ``index``, or None when absent or empty."""
        if index < 0 or index >= len(self._ids):
            return None
        value_id = self._ids[index]
        if not isinstance(value_id, str) or not value_id:
            return None
        return value_id


def find_dimension_index(
    dimensions: Sequence[Mapping[str, Any]],
    dimension_id: str,
    role: DimensionRole,
) -> int:
    """Return the position of the first dimension named ``dimension_id``.

    Args:
        dimensions: Series or observation dimension list from ``structure.dimensions``
        dimension_id: Dimension identifier, e.g. ``"CURRENCY"``
        role: Which list is searched, used in the error

    Returns:
        Zero-based index of the dimension

    Raises:
        StructuralParseError: If no dimension carries that identifier
    """
    for index, dimension in enumerate(dimensions):
        if isinstance(dimension, Mapping) and dimension.get("id") == dimension_id:
            return index
    raise StructuralParseError(
        f'Missing {role} dimension "{dimension_id}" in SDMX-JSON structure.',
        dimension_id=dimension_id,
        role=role,
    )


def parse_document(text: str) -> Any:
    """Parse raw response text into an SDMX-JSON document.

    Raises:
        PayloadSyntaxError: If ``text`` is not valid JSON, including the
            ``NaN``/``Infinity`` literals ``json`` would otherwise accept
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError is a ValueError subclass
        raise PayloadSyntaxError(f"Failed to parse ECB JSON response: {e}") from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}")


def decode(document: SdmxJsonResponse) -> list[ExchangeRateObservation]:
    """Decode an SDMX-JSON EXR document into flat observations.

    An empty or absent ``dataSets`` list is a valid "no data" answer and
    yields an empty list. Observations come back in document order.

    Raises:
        StructuralParseError: If the CURRENCY, CURRENCY_DENOM or TIME_PERIOD
            dimensions or their value lists are missing
    """
    if not isinstance(document, Mapping):
        raise StructuralParseError("SDMX-JSON response is not a JSON object.")

    data_sets = document.get("dataSets")
    if not data_sets:
        return []

    structure = document.get("structure")
    dimensions = structure.get("dimensions") if isinstance(structure, Mapping) else None
    if not isinstance(dimensions, Mapping):
        raise StructuralParseError("SDMX-JSON response missing structure.dimensions.")

    series_dims = _dimension_list(dimensions, "series")
    obs_dims = _dimension_list(dimensions, "observation")

    currency_pos = find_dimension_index(series_dims, CURRENCY_DIMENSION, "series")
    denom_pos = find_dimension_index(series_dims, CURRENCY_DENOM_DIMENSION, "series")
    time_pos = find_dimension_index(obs_dims, TIME_PERIOD_DIMENSION, "observation")

    currencies = _vocabulary(series_dims[currency_pos])
    denominations = _vocabulary(series_dims[denom_pos])
    periods = _vocabulary(obs_dims[time_pos])
    if currencies is None or denominations is None or periods is None:
        raise StructuralParseError("SDMX-JSON response missing dimension values.")

    observations: list[ExchangeRateObservation] = []
    for data_set in data_sets:
        series_map = data_set.get("series") if isinstance(data_set, Mapping) else None
        if not isinstance(series_map, Mapping):
            continue

        for series_key, series in series_map.items():
            pair = _decode_series_key(
                series_key, len(series_dims), currency_pos, denom_pos, currencies, denominations
            )
            if pair is None:
                logger.debug("Skipping undecodable SDMX series", series_key=series_key)
                continue
            currency, base_currency = pair
            observations.extend(
                ExchangeRateObservation(
                    date=date, currency=currency, base_currency=base_currency, rate=rate
                )
                for date, rate in _decode_observations(series_key, series, periods)
            )

    logger.debug("Decoded SDMX-JSON document", observations=len(observations))
    return observations


def _dimension_list(dimensions: Mapping[str, Any], role: DimensionRole) -> list[Any]:
    dims = dimensions.get(role)
    return list(dims) if isinstance(dims, list) else []


def _vocabulary(dimension: Mapping[str, Any]) -> Vocabulary | None:
    values = dimension.get("values")
    if not isinstance(values, list):
        return None
    return Vocabulary(values)


def _is_index(text: Any) -> bool:
    """Whether a key segment is made only of ASCII digits.

    ``int()`` alone would also take ``"+1"``, ``" 1"``, ``"0_1"`` and
    non-ASCII digits, turning a malformed key into a different valid index.
    """
    return isinstance(text, str) and text.isascii() and text.isdecimal()


def _decode_series_key(
    series_key: str,
    dimension_count: int,
    currency_pos: int,
    denom_pos: int,
    currencies: Vocabulary,
    denominations: Vocabulary,
) -> tuple[str, str] | None:
    """Return ``(currency, base_currency)`` for a series key, or None to skip it."""
    segments = series_key.split(":")
    # one segment per series dimension, all of them decimal
    if len(segments) != dimension_count or not all(_is_index(s) for s in segments):
        return None
    indices = [int(segment) for segment in segments]

    currency = currencies.lookup(indices[currency_pos])
    base_currency = denominations.lookup(indices[denom_pos])
    if currency is None or base_currency is None:
        return None
    return currency, base_currency


def _decode_observation(
    obs_key: str, obs_values: Any, periods: Vocabulary
) -> tuple[str, float] | None:
    """Return ``(date, rate)`` for one observation entry, or None to skip it."""
    if not _is_index(obs_key):
        return None
    date = periods.lookup(int(obs_key))
    if date is None:
        return None

    if not isinstance(obs_values, list) or not obs_values:
        return None
    rate = obs_values[0]
    # bool is an int subclass but never a rate
    if isinstance(rate, bool) or not isinstance(rate, int | float):
        return None
    try:
        value = float(rate)
    except OverflowError:
        return None
    # 1e400 parses to inf without going through parse_constant
    if not math.isfinite(value):
        return None
    return date, value


def _decode_observations(
    series_key: str, series: Any, periods: Vocabulary
) -> Iterator[tuple[str, float]]:
    raw = series.get("observations") if isinstance(series, Mapping) else None
    if not isinstance(raw, Mapping):
        return
    for obs_key, obs_values in raw.items():
        decoded = _decode_observation(obs_key, obs_values, periods)
        if decoded is None:
            logger.debug(
                "Skipping undecodable SDMX observation",
                series_key=series_key,
                observation_key=obs_key,
            )
            continue
        yield decoded
