"""SDMX-JSON wire shapes returned by the ECB data API.

The decoder works on the plain ``dict`` produced by ``json.loads``; these
``TypedDict`` declarations only describe its shape.
"""

from __future__ import annotations

from typing import Any, TypedDict


class SdmxValue(TypedDict, total=False):
    """One entry of a dimension's value vocabulary."""

    id: str
    name: str
    start: str
    end: str


class SdmxDimension(TypedDict, total=False):
    """A series-level or observation-level dimension."""

    id: str
    name: str
    role: str
    keyPosition: int
    values: list[SdmxValue]


class SdmxDimensions(TypedDict, total=False):
    series: list[SdmxDimension]
    observation: list[SdmxDimension]


class SdmxStructure(TypedDict, total=False):
    name: str
    dimensions: SdmxDimensions
    attributes: dict[str, list[SdmxDimension]]


class SdmxSeries(TypedDict, total=False):
    """A time series keyed by colon-joined dimension value indices.

    ``observations`` maps an observation-dimension index (as a string) to a
    tuple ``[rate, *attribute_indices]``.
    """

    attributes: list[int | None]
    observations: dict[str, list[float | int | None]]


class SdmxDataSet(TypedDict, total=False):
    action: str
    validFrom: str
    series: dict[str, SdmxSeries]


class SdmxJsonResponse(TypedDict, total=False):
    """Top-level SDMX-JSON data message."""

    header: dict[str, Any]
    dataSets: list[SdmxDataSet]
    structure: SdmxStructure
