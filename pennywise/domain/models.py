"""Domain type definitions for pennywise.

These types provide semantic clarity and help with type checking:
- Year: Calendar year used to scope queries
- Description: Transaction description text
- CalendarDate: Plain year/month/day triple
"""

from dataclasses import dataclass
from typing import NewType

# Calendar year (e.g., 2023)
Year = NewType("Year", int)

# Transaction description text
Description = NewType("Description", str)


@dataclass(frozen=True)
class CalendarDate:
    """Immutable calendar date.

    Month and day ranges are not checked. Dates support equality only.
    """

    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """Parse a YYYY-MM-DD string without range validation.

        Raises:
            ValueError: If the text is not three dash-separated integers.
        """
        parts = text.strip().split("-")
        if len(parts) != 3:
            raise ValueError(f"Invalid date: {text!r} (expected YYYY-MM-DD)")

        year, month, day = (int(part) for part in parts)
        return cls(year, month, day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
