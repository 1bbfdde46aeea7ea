"""Data provider container configuration."""

from dependency_injector import providers

from ecbrates.client import EcbClient
from ecbrates.infrastructure.config import Settings, get_settings
from ecbrates.infrastructure.http.fetcher import HttpxFetcher


def configure_data_providers(settings: Settings | None = None) -> dict[str, providers.Provider]:
    """Configure the transport and client providers.

    Args:
        settings: Optional settings. If None, uses ``get_settings()`` (environment
                  and ``.env``). Library integrators can pass their own instance.

    Returns:
        Dictionary of data provider providers
    """
    effective_settings = settings if settings is not None else get_settings()

    http_fetcher = providers.Singleton(
        HttpxFetcher,
        timeout_seconds=effective_settings.timeout_seconds,
    )
    return {
        "http_fetcher": http_fetcher,
        "ecb_client": providers.Singleton(
            EcbClient,
            base_url=effective_settings.base_url,
            base_currency=effective_settings.base_currency,
            fetcher=http_fetcher,
        ),
    }
