"""Exchange rate CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from ecbrates.cli.error_handler import handle_cli_error
from ecbrates.cli.utils import async_command
from ecbrates.client import EcbClient
from ecbrates.domain.exceptions import EcbError
from ecbrates.domain.models.exchange_rate import ECB_CURRENCIES, ExchangeRateQuery
from ecbrates.infrastructure.containers import get_container

rates_app = typer.Typer(help="Query ECB euro foreign exchange reference rates")
console = Console()


def _client() -> EcbClient:
    client: EcbClient = get_container().ecb_client()
    return client


def _print_single_currency(base: str, currency: str, rates: dict[str, float]) -> None:
    table = Table(title=f"{base} → {currency}")
    table.add_column("Date", style="cyan")
    table.add_column("Rate", justify="right")
    for day in sorted(rates):
        table.add_row(day, f"{rates[day]:.4f}")
    console.print(table)


@rates_app.command("rate")
@async_command
async def rate(
    currency: str = typer.Argument(..., help="Target currency code, e.g. USD"),
    date: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
) -> None:
    """Show the reference rate of a currency on one date."""
    client = _client()
    try:
        result = await client.get_rate(currency, date)
    except EcbError as e:
        handle_cli_error(e)
    finally:
        await client.close()

    for day, value in result.rates.items():
        console.print(f"1 {result.base} = [bold]{value}[/bold] {result.currency} ({day})")


@rates_app.command("history")
@async_command
async def history(
    currency: str = typer.Argument(..., help="Target currency code, e.g. USD"),
    start: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="End date (YYYY-MM-DD)"),
    frequency: str = typer.Option("D", "--frequency", "-f", help="D, M or A"),
) -> None:
    """Show the rate history of a currency."""
    client = _client()
    try:
        result = await client.get_rate_history(currency, start, end, frequency)
    except EcbError as e:
        handle_cli_error(e)
    finally:
        await client.close()

    _print_single_currency(result.base, result.currency, result.rates)


@rates_app.command("rates")
@async_command
async def rates(
    currencies: list[str] = typer.Argument(..., help="Target currency codes"),
    start: str = typer.Option(..., "--start", "-s", help="Start date (YYYY-MM-DD)"),
    end: str | None = typer.Option(None, "--end", "-e", help="End date (YYYY-MM-DD)"),
    base: str | None = typer.Option(None, "--base", "-b", help="Base currency"),
) -> None:
    """Show rates of several currencies side by side."""
    client = _client()
    query = ExchangeRateQuery(
        currencies=currencies, start_date=start, end_date=end, base_currency=base
    )
    try:
        result = await client.get_rates(query)
    except EcbError as e:
        handle_cli_error(e)
    finally:
        await client.close()

    table = Table(title=f"Reference rates (base {result.base})")
    table.add_column("Date", style="cyan")
    for currency in result.currencies:
        table.add_column(currency, justify="right")
    for day in sorted(result.rates):
        row = result.rates[day]
        table.add_row(day, *(f"{row[c]:.4f}" if c in row else "-" for c in result.currencies))
    console.print(table)


@rates_app.command("convert")
@async_command
async def convert(
    amount: float = typer.Argument(..., help="Amount in the base currency"),
    currency: str = typer.Argument(..., help="Target currency code"),
    date: str = typer.Argument(..., help="Date (YYYY-MM-DD)"),
) -> None:
    """Convert an amount of the base currency."""
    client = _client()
    try:
        conversion = await client.convert(amount, currency, date)
    except EcbError as e:
        handle_cli_error(e)
    finally:
        await client.close()

    if conversion is None:
        console.print(f"[yellow]No rate published for {currency} on {date}.[/yellow]")
        raise typer.Exit(code=1)
    console.print(
        f"{amount} {client.base_currency} = [bold]{conversion.amount}[/bold] "
        f"{conversion.currency} (rate {conversion.rate} on {conversion.date})"
    )


@rates_app.command("currencies")
def currencies() -> None:
    """List the currencies with ECB reference rates."""
    console.print(", ".join(ECB_CURRENCIES))
