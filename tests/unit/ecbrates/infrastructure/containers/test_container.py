"""Unit tests for the dependency injection container."""

from collections.abc import Iterator

import pytest

from ecbrates.client import EcbClient
from ecbrates.infrastructure.config import Settings
from ecbrates.infrastructure.containers import (
    Container,
    get_container,
    reset_container,
    set_container,
)
from ecbrates.infrastructure.http.fetcher import HttpxFetcher


@pytest.fixture(autouse=True)
def _isolated_container() -> Iterator[None]:
    reset_container()
    yield
    reset_container()


@pytest.mark.unit
class TestContainer:
    def test_global_container_is_reused(self) -> None:
        assert get_container() is get_container()

    def test_custom_settings_build_a_separate_container(self) -> None:
        settings = Settings(_env_file=None, base_currency="USD", timeout_seconds=5)

        container = get_container(settings=settings)
        client = container.ecb_client()

        assert container is not get_container()
        assert isinstance(client, EcbClient)
        assert client.base_currency == "USD"
        assert isinstance(container.http_fetcher(), HttpxFetcher)
        assert container.http_fetcher()._timeout_seconds == 5

    def test_client_and_fetcher_are_singletons(self) -> None:
        container = get_container(settings=Settings(_env_file=None))

        assert container.ecb_client() is container.ecb_client()
        assert container.http_fetcher() is container.http_fetcher()
        assert container.ecb_client()._fetcher is container.http_fetcher()

    def test_set_container(self) -> None:
        custom = Container()
        set_container(custom)

        assert get_container() is custom
