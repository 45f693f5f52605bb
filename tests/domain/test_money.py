"""Tests for pennywise.domain.money."""

import pytest

from pennywise.domain.money import Money


class TestMoneyOf:
    """Tests for Money.of."""

    def test_positive_amount(self) -> None:
        """Should combine major and minor units."""
        money = Money.of(12, 34)

        assert money.minor_units == 1234
        assert money.major == 12
        assert money.minor == 34

    def test_negative_major_subtracts_minor(self) -> None:
        """Should treat (-5, 25) as -5.25, not -4.75."""
        money = Money.of(-5, 25)

        assert money.minor_units == -525
        assert money.major == -5
        assert money.minor == 25

    def test_minor_defaults_to_zero(self) -> None:
        """Should default minor units to zero."""
        assert Money.of(7) == Money(700)

    def test_boundary_minor_values(self) -> None:
        """Should accept minor units 0 and 99."""
        assert Money.of(1, 0).minor_units == 100
        assert Money.of(1, 99).minor_units == 199

    def test_minor_of_100_raises_valueerror(self) -> None:
        """Should reject minor units above 99."""
        with pytest.raises(ValueError):
            Money.of(1, 100)

    def test_negative_minor_raises_valueerror(self) -> None:
        """Should reject negative minor units."""
        with pytest.raises(ValueError):
            Money.of(1, -1)

    def test_roundtrip_through_accessors(self) -> None:
        """Should read back major and minor for every valid minor value."""
        for major in (-3, 0, 3):
            for minor in range(100):
                money = Money.of(major, minor)
                assert money.minor == minor
                assert money.major == major


class TestFromMinorUnits:
    """Tests for Money.from_minor_units."""

    def test_accepts_any_integer(self) -> None:
        """Should accept any integer without validation."""
        assert Money.from_minor_units(-25).minor_units == -25
        assert Money.from_minor_units(10**30).minor_units == 10**30

    def test_small_negative_decomposes(self) -> None:
        """Should keep the sign when the major part is zero."""
        money = Money.from_minor_units(-25)

        assert money.major == 0
        assert money.minor == 25
        assert str(money) == "-0.25"


class TestMoneyParse:
    """Tests for Money.parse."""

    def test_parses_decimal_amount(self) -> None:
        """Should parse a two-digit decimal amount."""
        assert Money.parse("123.45") == Money(12345)

    def test_parses_negative_amount(self) -> None:
        """Should parse a leading minus sign."""
        assert Money.parse("-1200.00") == Money(-120000)

    def test_parses_whole_amount(self) -> None:
        """Should parse an amount with no decimals."""
        assert Money.parse("45") == Money(4500)

    def test_single_decimal_digit_is_tenths(self) -> None:
        """Should read one decimal digit as tenths."""
        assert Money.parse("0.5") == Money(50)

    def test_strips_whitespace_commas_and_plus(self) -> None:
        """Should tolerate whitespace, thousands commas and a plus sign."""
        assert Money.parse("  +2,500.00 ") == Money(250000)

    def test_parses_grouped_thousands(self) -> None:
        """Should accept commas placed as thousands separators."""
        assert Money.parse("12,345,678.90") == Money(1234567890)
        assert Money.parse("-1,200") == Money(-120000)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "1.234", "1.", "--5", "£10.00", "1e5", "1,2,3.45", "1234,567", ",100"],
    )
    def test_invalid_text_raises_valueerror(self, text: str) -> None:
        """Should reject text that is not a plain decimal amount."""
        with pytest.raises(ValueError):
            Money.parse(text)


class TestMoneyArithmetic:
    """Tests for Money arithmetic operators."""

    def test_addition_is_exact(self) -> None:
        """Should add minor units exactly."""
        assert Money.parse("0.10") + Money.parse("0.20") == Money.parse("0.30")

    def test_subtraction_is_exact(self) -> None:
        """Should subtract minor units exactly."""
        assert Money.of(10) - Money.of(0, 1) == Money.of(9, 99)

    def test_addition_is_associative(self) -> None:
        """Should give the same result regardless of grouping."""
        a, b, c = Money(123), Money(-4567), Money(89)

        assert (a + b) + c == a + (b + c)

    def test_negation_and_abs(self) -> None:
        """Should negate and take absolute value."""
        assert -Money(525) == Money(-525)
        assert abs(Money(-525)) == Money(525)

    def test_multiplication_by_integer(self) -> None:
        """Should multiply exactly from either side."""
        assert Money.parse("33.33") * 3 == Money.parse("99.99")
        assert 3 * Money.parse("-1.50") == Money.parse("-4.50")

    def test_exact_division(self) -> None:
        """Should divide 100.00 by 4 exactly."""
        assert Money.of(100) / 4 == Money.of(25)

    def test_division_discards_remainder(self) -> None:
        """Should truncate 100.00 / 3 to 33.33."""
        assert Money.of(100) / 3 == Money.parse("33.33")

    def test_negative_division_truncates_toward_zero(self) -> None:
        """Should truncate toward zero rather than flooring."""
        assert Money.of(-100) / 3 == Money.parse("-33.33")
        assert Money.of(100) / -3 == Money.parse("-33.33")
        assert Money(-1) / 2 == Money(0)

    def test_division_by_zero_raises(self) -> None:
        """Should raise ZeroDivisionError when dividing by zero."""
        with pytest.raises(ZeroDivisionError):
            Money.of(100) / 0

    def test_rejects_non_integer_scalar(self) -> None:
        """Should not multiply or divide by floats."""
        with pytest.raises(TypeError):
            Money.of(1) * 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            Money.of(1) / 2.0  # type: ignore[operator]

    def test_rejects_adding_plain_integer(self) -> None:
        """Should not add a bare integer to money."""
        with pytest.raises(TypeError):
            Money.of(1) + 1  # type: ignore[operator]

    def test_operations_return_new_values(self) -> None:
        """Should leave operands unchanged."""
        original = Money(100)
        _ = original + Money(50)

        assert original == Money(100)


class TestMoneyComparison:
    """Tests for Money ordering."""

    def test_orders_by_minor_units(self) -> None:
        """Should compare consistently with minor unit integers."""
        values = [Money(n) for n in (-500, -1, 0, 1, 500)]

        for left in values:
            for right in values:
                assert (left < right) == (left.minor_units < right.minor_units)
                assert (left <= right) == (left.minor_units <= right.minor_units)
                assert (left == right) == (left.minor_units == right.minor_units)
                assert (left != right) == (left.minor_units != right.minor_units)
                assert (left > right) == (left.minor_units > right.minor_units)
                assert (left >= right) == (left.minor_units >= right.minor_units)

    def test_sorts_values(self) -> None:
        """Should sort by amount."""
        amounts = [Money(300), Money(-200), Money(0)]

        assert sorted(amounts) == [Money(-200), Money(0), Money(300)]

    def test_is_negative(self) -> None:
        """Should report strictly negative amounts only."""
        assert Money(-1).is_negative()
        assert not Money(0).is_negative()


class TestMoneyDisplay:
    """Tests for Money string formatting."""

    def test_positive(self) -> None:
        """Should format without a sign."""
        assert str(Money.of(2500)) == "2500.00"

    def test_negative(self) -> None:
        """Should print the sign once."""
        assert str(Money.of(-5, 25)) == "-5.25"

    def test_pads_minor_units(self) -> None:
        """Should zero-pad minor units to two digits."""
        assert str(Money.of(3, 7)) == "3.07"

    def test_zero(self) -> None:
        """Should format zero unsigned."""
        assert str(Money.zero()) == "0.00"
