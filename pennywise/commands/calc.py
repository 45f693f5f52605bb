"""Money arithmetic command."""

import sys

from rich.console import Console

from pennywise.domain.money import Money

console = Console()

AMOUNT_OPERATORS = ("add", "sub")
SCALAR_OPERATORS = ("mul", "div")


def calculate(amount: Money, operator: str, operand: str) -> Money:
    """Apply an arithmetic operator to an amount.

    Args:
        amount: Left-hand amount.
        operator: One of add, sub, mul, div.
        operand: Amount text for add/sub, integer text for mul/div.

    Returns:
        Resulting Money.

    Raises:
        ValueError: If the operator or operand is invalid.
        ZeroDivisionError: If dividing by zero.
    """
    if operator in AMOUNT_OPERATORS:
        other = Money.parse(operand)
        return amount + other if operator == "add" else amount - other

    if operator in SCALAR_OPERATORS:
        try:
            scalar = int(operand)
        except ValueError:
            raise ValueError(f"Operand for '{operator}' must be an integer, got {operand!r}") from None
        return amount * scalar if operator == "mul" else amount / scalar

    valid = ", ".join(AMOUNT_OPERATORS + SCALAR_OPERATORS)
    raise ValueError(f"Unknown operator '{operator}' (expected one of: {valid})")


def calc_command(amount: str, operator: str, operand: str) -> None:
    """Evaluate AMOUNT OPERATOR OPERAND and print the result."""
    try:
        result = calculate(Money.parse(amount), operator, operand)
    except ValueError as e:
        console.print(f"[red]Invalid input: {e}[/red]", style="bold")
        sys.exit(1)
    except ZeroDivisionError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(str(result))
