"""Unit tests for the command-line interface."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
import structlog
from dependency_injector import providers
from typer.testing import CliRunner

from ecbrates.cli import app
from ecbrates.client import EcbClient
from ecbrates.infrastructure.containers import Container, reset_container, set_container

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def use_client() -> Iterator[Callable[[EcbClient], None]]:
    def _install(client: EcbClient) -> None:
        container = Container()
        container.ecb_client.override(providers.Object(client))
        set_container(container)

    yield _install
    reset_container()


@pytest.mark.unit
class TestCli:
    def test_rate(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        single_currency_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(single_currency_response))

        result = runner.invoke(app, ["rate", "USD", "2025-01-15"])

        assert result.exit_code == 0, result.output
        assert "1 EUR = 1.03 USD (2025-01-15)" in result.output

    def test_history(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        single_currency_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(single_currency_response))

        result = runner.invoke(app, ["history", "USD", "2025-01-15", "2025-01-16"])

        assert result.exit_code == 0, result.output
        assert "1.0300" in result.output
        assert "1.0303" in result.output

    def test_rates_table(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        multi_currency_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(multi_currency_response))

        result = runner.invoke(app, ["rates", "USD", "GBP", "--start", "2025-01-15"])

        assert result.exit_code == 0, result.output
        assert "0.8442" in result.output
        assert "0.8451" in result.output

    def test_convert(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        single_currency_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(single_currency_response))

        result = runner.invoke(app, ["convert", "100", "USD", "2025-01-15"])

        assert result.exit_code == 0, result.output
        assert "103.0" in result.output

    def test_convert_without_data(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        empty_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(empty_response))

        result = runner.invoke(app, ["convert", "100", "USD", "2025-01-18"])

        assert result.exit_code == 1
        assert "No rate published" in result.output

    def test_errors_exit_with_status_one(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        empty_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(empty_response))

        result = runner.invoke(app, ["rate", "USD", "2025-01-18"])

        assert result.exit_code == 1

    def test_validation_errors_exit_with_status_one(
        self,
        use_client: Callable[[EcbClient], None],
        client_factory: Callable[..., EcbClient],
        single_currency_response: dict[str, Any],
    ) -> None:
        use_client(client_factory(single_currency_response))

        result = runner.invoke(app, ["rate", "usd", "2025-01-15"])

        assert result.exit_code == 1

    def test_currencies(self) -> None:
        result = runner.invoke(app, ["currencies"])

        assert result.exit_code == 0
        assert "USD" in result.output
        assert "JPY" in result.output
