"""Error reporting for CLI commands."""

from typing import NoReturn

import structlog
import typer
from rich.console import Console

from ecbrates.domain.exceptions import EcbApiError, EcbError

logger = structlog.get_logger(__name__)
error_console = Console(stderr=True)


def handle_cli_error(error: EcbError) -> NoReturn:
    """Print an ECB error and exit with status 1."""
    logger.debug("CLI command failed", code=error.code, error=str(error))
    error_console.print(f"✗ {error}", style="bold red")
    if isinstance(error, EcbApiError) and error.status_code == 404:
        error_console.print(
            "  The ECB returns 404 when no series matches the query.", style="dim"
        )
    raise typer.Exit(code=1)
