"""Domain models and types for pennywise.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from pennywise.domain.models import CalendarDate, Description, Year
from pennywise.domain.money import Money
from pennywise.domain.transactions import Transaction, largest_expense

__all__ = ["Money", "CalendarDate", "Description", "Year", "Transaction", "largest_expense"]
