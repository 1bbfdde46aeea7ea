"""Main dependency injection container configuration."""

from dependency_injector import containers, providers

from ecbrates.infrastructure.config import Settings, get_settings
from ecbrates.infrastructure.containers.data_providers import configure_data_providers


class Container(containers.DeclarativeContainer):
    """Dependency injection container for ecb-rates.

    To use custom settings (for library integrators):
        container = get_container(settings=Settings(base_currency="USD"))

    Or override a provider after creation (useful in tests):
        container = Container()
        container.ecb_client.override(providers.Object(fake_client))
    """

    settings = providers.Singleton(get_settings)

    # Built once so the fetcher and client stay singletons
    _data_providers_config = providers.Singleton(
        configure_data_providers,
        settings=settings,
    )
    http_fetcher = providers.Callable(
        lambda config: config["http_fetcher"](),
        config=_data_providers_config,
    )
    ecb_client = providers.Callable(
        lambda config: config["ecb_client"](),
        config=_data_providers_config,
    )


# Global container instance (can be overridden for testing)
_container: Container | None = None


def get_container(settings: Settings | None = None) -> Container:
    """Get the global dependency injection container.

    Args:
        settings: Optional settings. When given, a new container using them is
                  returned and the global instance is left untouched.

    Returns:
        Container instance
    """
    global _container
    if settings is not None:
        container_instance = Container()
        container_instance.settings.override(providers.Object(settings))
        return container_instance
    if _container is None:
        _container = Container()
    return _container


def set_container(container: Container) -> None:
    """Set a custom container (useful for testing).

    Args:
        container: Container instance to use
    """
    global _container
    _container = container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    _container = None
