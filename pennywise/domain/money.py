"""Fixed-point money value type.

Amounts are held as an integer count of minor units (cents) to avoid floating
point errors. Python integers are arbitrary precision, so arithmetic never
overflows.
"""

import re
from dataclasses import dataclass

MINOR_PER_MAJOR = 100

_AMOUNT_PATTERN = re.compile(r"^([+-])?(\d{1,3}(?:,\d{3})+|\d+)(?:\.(\d{1,2}))?$")


@dataclass(frozen=True, order=True)
class Money:
    """Immutable monetary amount in minor units.

    Ordering and equality compare ``minor_units`` only.
    """

    minor_units: int

    @classmethod
    def of(cls, major: int, minor: int = 0) -> "Money":
        """Create money from a major and minor unit pair.

        When ``major`` is negative the minor part is subtracted, so
        ``Money.of(-5, 25)`` is -5.25 rather than -4.75.

        Args:
            major: Whole currency units.
            minor: Minor units, 0 to 99.

        Returns:
            Money for the combined amount.

        Raises:
            ValueError: If minor is outside 0-99.
        """
        if not 0 <= minor < MINOR_PER_MAJOR:
            raise ValueError(f"Minor units must be between 0 and 99, got {minor}")

        if major < 0:
            return cls(major * MINOR_PER_MAJOR - minor)
        return cls(major * MINOR_PER_MAJOR + minor)

    @classmethod
    def from_minor_units(cls, minor_units: int) -> "Money":
        """Create money directly from a minor unit count."""
        return cls(minor_units)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse an amount such as "-1,200.50", "45" or "0.5".

        A single decimal digit is read as tenths ("0.5" is 0.50).

        Args:
            text: Amount text, optionally signed. Commas are allowed only
                as thousands separators ("1,200" but not "1,2,3").

        Returns:
            Parsed Money.

        Raises:
            ValueError: If the text is not a plain decimal amount.
        """
        match = _AMOUNT_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid amount: {text!r}")

        sign, major_text, minor_text = match.groups()
        minor = int((minor_text or "0").ljust(2, "0"))
        minor_units = int(major_text.replace(",", "")) * MINOR_PER_MAJOR + minor

        return cls(-minor_units if sign == "-" else minor_units)

    @property
    def major(self) -> int:
        """Whole units, truncated toward zero."""
        whole = abs(self.minor_units) // MINOR_PER_MAJOR
        return -whole if self.minor_units < 0 else whole

    @property
    def minor(self) -> int:
        """Minor units for display, always 0-99."""
        return abs(self.minor_units) % MINOR_PER_MAJOR

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.minor_units + other.minor_units)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.minor_units - other.minor_units)

    def __neg__(self) -> "Money":
        return Money(-self.minor_units)

    def __abs__(self) -> "Money":
        return Money(abs(self.minor_units))

    def __mul__(self, scalar: int) -> "Money":
        if not isinstance(scalar, int):
            return NotImplemented
        return Money(self.minor_units * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: int) -> "Money":
        """Divide by an integer, discarding the remainder (truncates toward zero).

        Raises:
            ZeroDivisionError: If scalar is zero.
        """
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide money by zero")

        quotient = abs(self.minor_units) // abs(scalar)
        if (self.minor_units < 0) != (scalar < 0):
            quotient = -quotient
        return Money(quotient)

    def __str__(self) -> str:
        sign = "-" if self.minor_units < 0 else ""
        return f"{sign}{abs(self.major)}.{self.minor:02d}"
