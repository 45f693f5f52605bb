"""Query commands for listing transactions and finding the largest expense."""

import sys
import tomllib
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from pennywise.config import get_default_year, get_show_transactions
from pennywise.domain.models import Year
from pennywise.domain.transactions import (
    Transaction,
    format_money_display,
    largest_expense,
    latest_year,
    total_expenses,
    transaction_years,
    transactions_in_year,
)
from pennywise.sample import SAMPLE_TRANSACTIONS

console = Console()


def resolve_year(year: int | None, transactions: Sequence[Transaction]) -> Year | None:
    """Resolve the query year from option, config, then latest data year.

    Args:
        year: Year passed on the command line, if any.
        transactions: Transactions the query will run over.

    Returns:
        Year to query, or None if nothing is available.

    Raises:
        ValueError: If the configured query section or default year is invalid.
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if year is not None:
        return Year(year)

    configured = get_default_year()
    if configured is not None:
        return configured

    return latest_year(transactions)


def render_transactions(transactions: Sequence[Transaction], title: str) -> None:
    """Render transactions as a table.

    Args:
        transactions: Transactions to show.
        title: Table title.
    """
    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        amount_display = format_money_display(txn.amount)
        if txn.amount.is_negative():
            amount_display = f"[red]{amount_display}[/red]"
        else:
            amount_display = f"[green]{amount_display}[/green]"

        table.add_row(str(txn.date), txn.description, amount_display)

    console.print(table)


def list_command(year: int | None = None) -> None:
    """List sample transactions."""
    transactions: Sequence[Transaction] = SAMPLE_TRANSACTIONS
    title = f"Transactions (showing all {len(transactions)})"

    if year is not None:
        transactions = transactions_in_year(transactions, Year(year))
        title = f"Transactions in {year} (showing {len(transactions)})"

    if not transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    render_transactions(transactions, title)


def largest_command(year: int | None = None) -> None:
    """Show the largest expense for a year."""
    transactions = SAMPLE_TRANSACTIONS

    try:
        target_year = resolve_year(year, transactions)
        show_transactions = get_show_transactions()
    except (ValueError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    if target_year is None:
        console.print("[yellow]No transactions found[/yellow]")
        return

    in_year = transactions_in_year(transactions, target_year)
    if show_transactions and in_year:
        render_transactions(in_year, f"Transactions in {target_year}")

    largest = largest_expense(transactions, target_year)
    if largest is None:
        console.print(f"[yellow]No expenses in {target_year}[/yellow]")
        return

    console.print(f"Largest expense in {target_year}: [red]{largest}[/red]")
    console.print(f"[dim]Total expenses: {total_expenses(transactions, target_year)}[/dim]")


def demo_command() -> None:
    """Run the largest-expense query over every sample year."""
    transactions = SAMPLE_TRANSACTIONS
    years = transaction_years(transactions)

    if not years:
        console.print("[yellow]No transactions found[/yellow]")
        return

    # One year past the data shows the no-expense case
    for year in [*years, Year(years[-1] + 1)]:
        largest = largest_expense(transactions, year)
        if largest is None:
            console.print(f"{year}: [yellow]no expenses[/yellow]")
        else:
            console.print(f"{year}: largest expense [red]{largest}[/red]")
