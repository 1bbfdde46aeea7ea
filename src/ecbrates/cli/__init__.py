"""Command-line interface for ecb-rates."""

import typer

from ecbrates.cli.rates import rates_app
from ecbrates.infrastructure.containers import get_container
from ecbrates.infrastructure.logging_config import configure_logging

app = rates_app


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ECB exchange rates from the SDMX data API."""
    settings = get_container().settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


__all__ = ["app"]
