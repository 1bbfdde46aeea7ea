"""Shared fixtures: realistic ECB SDMX-JSON documents and a stub transport."""

from __future__ import annotations

import asyncio
import copy
import json
from collections.abc import Callable
from typing import Any

import pytest

from ecbrates.client import EcbClient
from ecbrates.domain.ports.http import HttpFetcher

_SERIES_DIMENSIONS_TAIL: list[dict[str, Any]] = [
    {
        "id": "CURRENCY_DENOM",
        "name": "Currency denominator",
        "values": [{"id": "EUR", "name": "Euro"}],
    },
    {"id": "EXR_TYPE", "name": "Exchange rate type", "values": [{"id": "SP00", "name": "Spot"}]},
    {"id": "EXR_SUFFIX", "name": "Series variation", "values": [{"id": "A", "name": "Average"}]},
]

_TIME_DIMENSION: dict[str, Any] = {
    "id": "TIME_PERIOD",
    "name": "Time period or range",
    "role": "time",
    "values": [
        {"id": "2025-01-15", "name": "2025-01-15"},
        {"id": "2025-01-16", "name": "2025-01-16"},
    ],
}

# D.USD.EUR.SP00.A with two daily observations
SINGLE_CURRENCY_RESPONSE: dict[str, Any] = {
    "header": {
        "id": "test-single",
        "test": False,
        "prepared": "2026-02-07T21:00:00.000+00:00",
        "sender": {"id": "ECB"},
    },
    "dataSets": [
        {
            "action": "Replace",
            "series": {
                "0:0:0:0:0": {
                    "attributes": [0, None, 0],
                    "observations": {
                        "0": [1.03, 0, 0, None, None],
                        "1": [1.0303, 0, 0, None, None],
                    },
                }
            },
        }
    ],
    "structure": {
        "name": "Exchange Rates",
        "dimensions": {
            "series": [
                {"id": "FREQ", "name": "Frequency", "values": [{"id": "D", "name": "Daily"}]},
                {
                    "id": "CURRENCY",
                    "name": "Currency",
                    "values": [{"id": "USD", "name": "US dollar"}],
                },
                *_SERIES_DIMENSIONS_TAIL,
            ],
            "observation": [_TIME_DIMENSION],
        },
    },
}

# D.USD+GBP.EUR.SP00.A with two dates each
MULTI_CURRENCY_RESPONSE: dict[str, Any] = {
    "header": {
        "id": "test-multi",
        "test": False,
        "prepared": "2026-02-07T21:00:00.000+00:00",
        "sender": {"id": "ECB"},
    },
    "dataSets": [
        {
            "action": "Replace",
            "series": {
                "0:0:0:0:0": {"attributes": [], "observations": {"0": [1.03, 0], "1": [1.0303, 0]}},
                "0:1:0:0:0": {
                    "attributes": [],
                    "observations": {"0": [0.8442, 0], "1": [0.8451, 0]},
                },
            },
        }
    ],
    "structure": {
        "name": "Exchange Rates",
        "dimensions": {
            "series": [
                {"id": "FREQ", "name": "Frequency", "values": [{"id": "D", "name": "Daily"}]},
                {
                    "id": "CURRENCY",
                    "name": "Currency",
                    "values": [
                        {"id": "USD", "name": "US dollar"},
                        {"id": "GBP", "name": "Pound sterling"},
                    ],
                },
                *_SERIES_DIMENSIONS_TAIL,
            ],
            "observation": [_TIME_DIMENSION],
        },
    },
}

# Weekend / holiday answer: well-formed but without data sets
EMPTY_RESPONSE: dict[str, Any] = {
    "header": {
        "id": "test-empty",
        "test": False,
        "prepared": "2026-02-07T21:00:00.000+00:00",
        "sender": {"id": "ECB"},
    },
    "dataSets": [],
    "structure": copy.deepcopy(SINGLE_CURRENCY_RESPONSE["structure"]),
}


class StubFetcher(HttpFetcher):
    """Serves a canned body and records the requested URLs."""

    def __init__(self, body: str) -> None:
        self.body = body
        self.urls: list[str] = []
        self.closed = False

    async def get(self, url: str, cancel_event: asyncio.Event | None = None) -> str:
        self.urls.append(url)
        return self.body

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def single_currency_response() -> dict[str, Any]:
    return copy.deepcopy(SINGLE_CURRENCY_RESPONSE)


@pytest.fixture
def multi_currency_response() -> dict[str, Any]:
    return copy.deepcopy(MULTI_CURRENCY_RESPONSE)


@pytest.fixture
def empty_response() -> dict[str, Any]:
    return copy.deepcopy(EMPTY_RESPONSE)


@pytest.fixture
def stub_fetcher_factory() -> Callable[[dict[str, Any]], StubFetcher]:
    def _make(document: dict[str, Any]) -> StubFetcher:
        return StubFetcher(json.dumps(document))

    return _make


@pytest.fixture
def client_factory(
    stub_fetcher_factory: Callable[[dict[str, Any]], StubFetcher],
) -> Callable[..., EcbClient]:
    def _make(document: dict[str, Any], **kwargs: Any) -> EcbClient:
        return EcbClient.with_fetcher(stub_fetcher_factory(document), **kwargs)

    return _make
