"""CLI entry point for pennywise."""

import typer

from pennywise.commands.admin import init_command
from pennywise.commands.calc import calc_command
from pennywise.commands.query import demo_command, largest_command, list_command

app = typer.Typer(
    name="pennywise",
    help="Pennywise - fixed-point money and largest-expense queries",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Pennywise - fixed-point money and largest-expense queries."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize pennywise configuration."""
    init_command(force)


@app.command(name="list")
def list_transactions(
    year: int = typer.Option(None, "--year", "-y", help="Only show transactions from this year"),
) -> None:
    """List the sample transactions."""
    list_command(year)


@app.command()
def largest(
    year: int = typer.Option(None, "--year", "-y", help="Year to search (default: config, then latest year)"),
) -> None:
    """Show the largest expense in a year."""
    largest_command(year)


@app.command()
def demo() -> None:
    """Run the largest-expense query for every sample year."""
    demo_command()


@app.command()
def calc(
    amount: str = typer.Argument(..., help="Amount, e.g. 100.00 (use -- before negative amounts)"),
    operator: str = typer.Argument(..., help="One of: add, sub, mul, div"),
    operand: str = typer.Argument(..., help="Amount for add/sub, integer for mul/div"),
) -> None:
    """Do fixed-point money arithmetic."""
    calc_command(amount, operator, operand)


if __name__ == "__main__":
    app()
