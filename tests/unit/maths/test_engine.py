"""Tests for the arithmetic engine."""

import pytest

from maths import (
    DivisionByZero,
    InvalidExponent,
    InvalidPowerModulusDivisor,
    NonNumericValue,
    Number,
    NumberImmutable,
    engine,
)

PRECISION = 64


class TestFolds:
    """Variadic operations fold left to right."""

    def test_add_many(self):
        """0.333 + 1.861 + 102.5 = 104.694."""
        assert engine.add("0.333", [1.861, 102.5], PRECISION) == "104.694"

    def test_subtract_to_whole_number(self):
        """22.63 - 2.12 - 1.51 = 19."""
        assert engine.subtract("22.63", [2.12, 1.51], PRECISION) == "19"

    def test_multiply_many(self):
        """0.333 * 1.861 * 102.5 = 63.5205825."""
        assert engine.multiply("0.333", ["1.861", "102.5"], PRECISION) == "63.5205825"

    def test_divide_many(self):
        """148.8375 / 3.5 / 12.15 = 3.5."""
        assert engine.divide("148.8375", [3.5, 12.15], PRECISION) == "3.5"

    def test_empty_operands_is_identity(self):
        """No operands leaves the number unchanged."""
        assert engine.add("1.5", [], PRECISION) == "1.5"
        assert engine.divide("1.5", [], PRECISION) == "1.5"

    def test_wrapper_operands(self):
        """Both wrapper kinds are accepted as operands."""
        assert engine.add("1", [Number("0.5"), NumberImmutable("0.25")], PRECISION) == "1.75"

    def test_truncates_each_step(self):
        """Intermediate results are truncated to precision."""
        assert engine.multiply("1", ["0.5", "0.5"], 1) == "0.2"

    def test_bad_operand_raises(self):
        """Operands are normalized before use."""
        with pytest.raises(NonNumericValue):
            engine.add("1", ["1", "one"], PRECISION)


class TestDivide:
    """Division by zero is rejected eagerly."""

    def test_zero_divisor(self):
        """100 / 0 raises DivisionByZero."""
        with pytest.raises(DivisionByZero, match=r"^Division by zero\.$"):
            engine.divide("100", [0], PRECISION)

    def test_zero_dividend(self):
        """0 / 10 raises DivisionByZero as well."""
        with pytest.raises(DivisionByZero, match=r"^Division by zero\.$"):
            engine.divide("0", [10], PRECISION)

    def test_later_zero_divisor(self):
        """A zero anywhere in the divisors is rejected."""
        with pytest.raises(DivisionByZero):
            engine.divide("100", ["2", "0.0"], PRECISION)

    def test_divisor_zero_at_precision(self):
        """A divisor that truncates to zero at precision counts as zero."""
        with pytest.raises(DivisionByZero):
            engine.divide("1", ["0.001"], 2)

    def test_division_by_zero_is_logged(self, log_events):
        """The rejected divisor is logged."""
        with pytest.raises(DivisionByZero):
            engine.divide("100.123", [0], PRECISION)
        assert log_events == [
            {
                "event": "division_by_zero",
                "dividend": "100.123",
                "divisor": "0",
                "log_level": "debug",
            }
        ]

    def test_is_zero_error(self):
        """DivisionByZero is also a ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            engine.divide("1", [0], PRECISION)


class TestModulusAndRoot:
    """Tests for modulus() and square_root()."""

    def test_integer_modulus(self):
        """5 mod 3 = 2."""
        assert engine.modulus("5", 3, PRECISION) == "2"

    def test_decimal_modulus(self):
        """5.5 mod 2.5 = 0.5."""
        assert engine.modulus("5.5", "2.5", PRECISION) == "0.5"

    def test_square_root(self):
        """sqrt(30.25) = 5.5."""
        assert engine.square_root("30.25", PRECISION) == "5.5"

    def test_square_root_of_negative(self):
        """Negative numbers have no real root."""
        with pytest.raises(ValueError, match="negative"):
            engine.square_root("-4", PRECISION)


class TestRaiseToPower:
    """Tests for raise_to_power()."""

    def test_whole_exponent(self):
        """2.75 ** 2 = 7.5625."""
        assert engine.raise_to_power("2.75", 2, PRECISION) == "7.5625"

    def test_negative_exponent(self):
        """2 ** -2 = 0.25."""
        assert engine.raise_to_power("2", -2, PRECISION) == "0.25"

    def test_exponent_with_zero_fraction(self):
        """'2.0' is a whole number once normalized."""
        assert engine.raise_to_power("5", "2.0", PRECISION) == "25"

    def test_fractional_exponent_raises(self):
        """A fractional exponent raises InvalidExponent."""
        with pytest.raises(InvalidExponent) as exc_info:
            engine.raise_to_power("25", 1.5, PRECISION)
        assert str(exc_info.value) == "Exponent must be a whole number. Invalid exponent: 1.5"

    def test_fractional_exponent_is_logged(self, log_events):
        """The rejected exponent is logged."""
        with pytest.raises(InvalidExponent):
            engine.raise_to_power("25", "0.5", PRECISION)
        assert log_events == [
            {"event": "invalid_exponent", "exponent": "0.5", "log_level": "debug"}
        ]


class TestRaiseToPowerReduceByModulus:
    """Tests for raise_to_power_reduce_by_modulus()."""

    def test_result(self):
        """5371 ** 2 mod 7 = 4."""
        assert engine.raise_to_power_reduce_by_modulus("5371", 2, 7, PRECISION) == "4"

    def test_wrapper_operands(self):
        """Exponent and divisor may be wrappers."""
        result = engine.raise_to_power_reduce_by_modulus(
            "5371", NumberImmutable(2), NumberImmutable(7), PRECISION
        )
        assert result == "4"

    def test_fractional_exponent_raises(self):
        """The exponent is validated first."""
        with pytest.raises(InvalidExponent, match="Invalid exponent: 2.2"):
            engine.raise_to_power_reduce_by_modulus("5371", 2.2, 7.5, PRECISION)

    def test_fractional_divisor_raises(self):
        """A fractional divisor raises InvalidPowerModulusDivisor."""
        with pytest.raises(InvalidPowerModulusDivisor) as exc_info:
            engine.raise_to_power_reduce_by_modulus("5371", 2, 7.5, PRECISION)
        assert str(exc_info.value) == "Divisor must be a whole number. Invalid divisor: 7.5"

    def test_fractional_divisor_is_logged(self, log_events):
        """The rejected divisor is logged."""
        with pytest.raises(InvalidPowerModulusDivisor):
            engine.raise_to_power_reduce_by_modulus("5371", 2, "7.5", PRECISION)
        assert log_events[0]["event"] == "invalid_power_modulus_divisor"
        assert log_events[0]["divisor"] == "7.5"

    def test_zero_divisor_raises(self):
        """A zero divisor is a division by zero."""
        with pytest.raises(DivisionByZero):
            engine.raise_to_power_reduce_by_modulus("5", 2, 0, PRECISION)


class TestPercentages:
    """Tests for increase_by_percentage() and decrease_by_percentage()."""

    @pytest.mark.parametrize(
        ("number", "percent", "expected"),
        [
            ("100", 10, "110"),
            ("100.5", 10.125, "110.675625"),
            ("100", -10, "90"),
            ("-100.25", -10.55, "-89.673625"),
            ("100.33", "-10.66", "89.634822"),
        ],
    )
    def test_increase(self, number, percent, expected):
        """number + number * percent / 100."""
        assert engine.increase_by_percentage(number, percent, PRECISION) == expected

    @pytest.mark.parametrize(
        ("number", "percent", "expected"),
        [
            ("100", 10, "90"),
            ("10.99", 5.123, "10.4269823"),
            ("100", -10, "110"),
            ("25.5", "15.25", "21.61125"),
        ],
    )
    def test_decrease(self, number, percent, expected):
        """number - number * percent / 100."""
        assert engine.decrease_by_percentage(number, percent, PRECISION) == expected


class TestComparison:
    """Comparisons happen at precision."""

    def test_relations(self):
        """The five relations agree with compare()."""
        assert engine.is_less_than("100.01", "100.02", PRECISION)
        assert not engine.is_less_than("1.003", "1.003", PRECISION)
        assert engine.is_greater_than("100.02", 100.01, PRECISION)
        assert engine.is_equal_to("1.002", NumberImmutable("1.002"), PRECISION)
        assert engine.is_less_than_or_equal_to("1.003", "1.003", PRECISION)
        assert not engine.is_greater_than_or_equal_to("1.002", "1.003", PRECISION)

    def test_compare_values(self):
        """compare() returns -1, 0 or 1."""
        assert engine.compare("1", "2", PRECISION) == -1
        assert engine.compare("2", "2.000", PRECISION) == 0
        assert engine.compare("3", "2", PRECISION) == 1

    def test_equal_beyond_precision(self):
        """Digits past precision are ignored."""
        assert engine.is_equal_to("1.001", "1.002", 2)
        assert not engine.is_equal_to("1.001", "1.002", 3)

    def test_is_zero(self):
        """is_zero() compares against zero at precision."""
        assert engine.is_zero("0", PRECISION)
        assert not engine.is_zero("0.000000000000000000000001", PRECISION)
        assert not engine.is_zero("-0.01", PRECISION)
        assert engine.is_zero("0.001", 2)


class TestWholeNumber:
    """Tests for is_whole_number()."""

    @pytest.mark.parametrize("number", ["0", "7", "-12", "1" + "0" * 400])
    def test_whole(self, number):
        """Canonical integers are whole."""
        assert engine.is_whole_number(number)

    @pytest.mark.parametrize("number", ["0.5", "-1.25", "1" + "0" * 400 + ".1"])
    def test_fractional(self, number):
        """Any fractional digit fails, however large the number."""
        assert not engine.is_whole_number(number)
