# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Legacy Amount Formatting

This module contains unit tests for format_amount and to_decimal, covering the
two-decimal output shape and the pinned ROUND_HALF_UP rounding.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- paybridge.adapters.formatting.formatter (format_amount, to_decimal)
- paybridge.domain.errors (InvalidAmountError)
- pytest (testing framework)
"""
import sys  # Float limits

import pytest  # Testing framework for writing and running tests

from decimal import Decimal, localcontext  # Fixed-point inputs and caller contexts

from paybridge.adapters.formatting.formatter import format_amount, to_decimal
from paybridge.domain.errors import InvalidAmountError, PaymentError


class TestFormatAmount:
    def test_whole_float(self):
        assert format_amount(150.00) == "150.00"
        assert format_amount(200.0) == "200.00"

    def test_integer(self):
        assert format_amount(5) == "5.00"
        assert format_amount(0) == "0.00"

    def test_decimal(self):
        assert format_amount(Decimal("42.1")) == "42.10"
        assert format_amount(Decimal("1.005")) == "1.01"

    def test_rounds_up_to_next_unit(self):
        assert format_amount(19.999) == "20.00"

    def test_half_up_rounding(self):
        assert format_amount(0.125) == "0.13"
        assert format_amount(0.005) == "0.01"
        assert format_amount(2.675) == "2.68"  # binary float is 2.67499999...

    def test_rounds_down_below_half(self):
        assert format_amount(10.004) == "10.00"
        assert format_amount(10.0049) == "10.00"

    def test_large_amount_not_scientific(self):
        assert format_amount(1e20) == "100000000000000000000.00"
        assert format_amount(1234567.891) == "1234567.89"

    def test_amounts_beyond_default_precision(self):
        assert format_amount(1e26) == "1" + "0" * 26 + ".00"
        assert format_amount(10 ** 30) == "1" + "0" * 30 + ".00"
        assert format_amount(Decimal("1E+30")) == "1" + "0" * 30 + ".00"
        assert format_amount(Decimal("9" * 30 + ".995")) == "1" + "0" * 30 + ".00"

    def test_largest_float(self):
        result = format_amount(sys.float_info.max)
        whole, _, frac = result.partition(".")
        assert whole.startswith("17976931348623157")
        assert len(whole) == 309
        assert frac == "00"

    def test_independent_of_caller_context(self):
        with localcontext() as ctx:
            ctx.prec = 6
            assert format_amount(12345.67) == "12345.67"
            assert format_amount(19.999) == "20.00"
            assert format_amount(1e26) == "1" + "0" * 26 + ".00"

    def test_always_two_decimal_digits(self):
        amounts = [0, 0.1, 0.01, 0.001, 1, 9.5, 99.99, 99.995, 1000000, 0.3333333, Decimal("7")]
        for amount in amounts:
            result = format_amount(amount)
            whole, sep, frac = result.partition(".")
            assert sep == ".", result
            assert len(frac) == 2, result
            assert whole.isdigit(), result
            assert "," not in result

    def test_nan_rejected(self):
        with pytest.raises(InvalidAmountError, match="no two-decimal representation"):
            format_amount(float("nan"))

    def test_infinity_rejected(self):
        with pytest.raises(InvalidAmountError):
            format_amount(float("inf"))


class TestToDecimal:
    def test_float_uses_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(2.675) == Decimal("2.675")

    def test_decimal_passthrough(self):
        value = Decimal("3.14")
        assert to_decimal(value) is value

    def test_invalid_amount_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_decimal(float("-inf"))
        assert issubclass(InvalidAmountError, PaymentError)
