"""Pure functions for transaction queries.

This module contains the functional core for transaction operations:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are Money values in minor units.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pennywise.domain.models import CalendarDate, Description, Year
from pennywise.domain.money import Money


@dataclass(frozen=True)
class Transaction:
    """Immutable transaction data."""

    amount: Money
    date: CalendarDate
    description: Description


def is_expense(transaction: Transaction) -> bool:
    """Check if transaction is an expense (strictly negative amount)."""
    return transaction.amount < Money.zero()


def transactions_in_year(transactions: Iterable[Transaction], year: Year) -> list[Transaction]:
    """Filter transactions to a single year, preserving order.

    Args:
        transactions: Transactions to filter.
        year: Year to keep.

    Returns:
        Transactions dated in that year.
    """
    return [txn for txn in transactions if txn.date.year == year]


def largest_expense(transactions: Iterable[Transaction], year: Year) -> Money | None:
    """Find the largest expense (most negative amount) in a year.

    Zero amounts are not expenses. Among equal amounts the first one seen is
    kept.

    Args:
        transactions: Transactions to scan.
        year: Year to search.

    Returns:
        Most negative amount in that year, or None if the year has no expenses.
    """
    largest: Money | None = None

    for txn in transactions:
        if txn.date.year != year or not is_expense(txn):
            continue
        if largest is None or txn.amount < largest:
            largest = txn.amount

    return largest


def total_expenses(transactions: Iterable[Transaction], year: Year) -> Money:
    """Sum all expenses in a year.

    Args:
        transactions: Transactions to scan.
        year: Year to sum.

    Returns:
        Total of negative amounts (zero if none).
    """
    total = Money.zero()
    for txn in transactions_in_year(transactions, year):
        if is_expense(txn):
            total = total + txn.amount
    return total


def transaction_years(transactions: Iterable[Transaction]) -> list[Year]:
    """Get the distinct years present, oldest first."""
    return sorted({Year(txn.date.year) for txn in transactions})


def latest_year(transactions: Iterable[Transaction]) -> Year | None:
    """Get the most recent year present, or None for no transactions."""
    years = transaction_years(transactions)
    return years[-1] if years else None


def format_money_display(amount: Money, include_sign: bool = True) -> str:
    """Format money amount for display.

    Args:
        amount: Amount to format.
        include_sign: Whether to prefix positive amounts with +.

    Returns:
        Formatted string (e.g., "-55.30" or "+2500.00"). Zero is unsigned.
    """
    if include_sign and amount > Money.zero():
        return f"+{amount}"
    return str(amount)
