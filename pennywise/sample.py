"""Built-in sample transactions used by the CLI."""

from pennywise.domain.models import CalendarDate, Description
from pennywise.domain.money import Money
from pennywise.domain.transactions import Transaction


def _txn(amount: str, date: str, description: str) -> Transaction:
    return Transaction(
        amount=Money.parse(amount),
        date=CalendarDate.parse(date),
        description=Description(description),
    )


SAMPLE_TRANSACTIONS: tuple[Transaction, ...] = (
    _txn("2500.00", "2023-01-05", "Salary"),
    _txn("-55.30", "2023-01-10", "Groceries"),
    _txn("-1200.00", "2023-01-15", "Rent"),
    _txn("-45.00", "2023-02-01", "Utilities"),
    _txn("-800.50", "2023-03-05", "Car repair"),
    _txn("100.00", "2023-03-10", "Refund"),
    _txn("-150.75", "2024-01-08", "Dinner out"),
    _txn("-2000.00", "2024-01-15", "Rent"),
    _txn("3000.00", "2024-02-05", "Salary"),
    _txn("-10.00", "2024-02-10", "Coffee"),
    _txn("0.00", "2024-02-15", "Adjustment"),
)
