"""Tests for the numeric coercers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from ryandata_field_utils import (
    FieldErrorKind,
    try_decimal,
    try_double,
    try_integer,
    try_integer64,
)

INTEGER_MESSAGE = "Qty must only contain numbers with no decimal places or special characters."
FLOATING_MESSAGE = "Qty must only contain numbers (may include decimal points)."


class TestTryInteger:
    """Tests for try_integer() and try_integer64()."""

    def test_empty_defaults_to_zero(self) -> None:
        assert try_integer("", "Qty").value == 0
        assert try_integer64("", "Qty").value == 0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("42", 42), ("-7", -7), ("+7", 7), ("0042", 42), ("0", 0)],
    )
    def test_parses_integers(self, value: str, expected: int) -> None:
        result = try_integer(value, "Qty")
        assert result.value == expected
        assert isinstance(result.value, int)

    @pytest.mark.parametrize(
        "value", ["4.2", "abc", " 42", "42 ", "1,000", "1e3", "+", "-", "4_2"]
    )
    def test_rejects_non_integers(self, value: str) -> None:
        result = try_integer(value, "Qty")
        assert result.kind == FieldErrorKind.NOT_NUMERIC
        assert result.message == INTEGER_MESSAGE

    def test_32_bit_range(self) -> None:
        assert try_integer("2147483647", "Qty").value == 2147483647
        assert try_integer("-2147483648", "Qty").value == -2147483648
        assert try_integer("2147483648", "Qty").kind == FieldErrorKind.NOT_NUMERIC
        assert try_integer("-2147483649", "Qty").kind == FieldErrorKind.NOT_NUMERIC

    def test_64_bit_range(self) -> None:
        assert try_integer64("2147483648", "Qty").value == 2147483648
        assert try_integer64("9223372036854775807", "Qty").value == 2**63 - 1
        assert try_integer64("9223372036854775808", "Qty").kind == FieldErrorKind.NOT_NUMERIC
        assert try_integer64("1.5", "Qty").message == INTEGER_MESSAGE
        assert try_integer64("-9223372036854775808", "Qty").value == -(2**63)

    @pytest.mark.parametrize("value", ["1" * 5000, "-" + "9" * 5000, "+" + "1" * 20])
    def test_very_long_digit_strings_fail(self, value: str) -> None:
        for coercer in (try_integer, try_integer64):
            result = coercer(value, "Qty")
            assert result.kind == FieldErrorKind.NOT_NUMERIC
            assert result.message == INTEGER_MESSAGE

    def test_leading_zeros_do_not_count_toward_range(self) -> None:
        assert try_integer("0" * 5000 + "42", "Qty").value == 42
        assert try_integer64("-" + "0" * 30 + "7", "Qty").value == -7
        assert try_integer("-0", "Qty").value == 0


class TestTryDouble:
    """Tests for try_double()."""

    def test_empty_defaults_to_zero(self) -> None:
        result = try_double("", "Qty")
        assert result.value == 0.0
        assert isinstance(result.value, float)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3.14", 3.14),
            ("-2", -2.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("+1.5E-2", 0.015),
        ],
    )
    def test_parses_doubles(self, value: str, expected: float) -> None:
        assert try_double(value, "Qty").value == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["abc", "1.2.3", "1,5", " 1.5", "inf", "nan", "1e999", "."])
    def test_rejects_non_doubles(self, value: str) -> None:
        result = try_double(value, "Qty")
        assert result.kind == FieldErrorKind.NOT_NUMERIC
        assert result.message == FLOATING_MESSAGE


class TestTryDecimal:
    """Tests for try_decimal()."""

    def test_empty_defaults_to_zero(self) -> None:
        result = try_decimal("", "Qty")
        assert result.value == Decimal(0)
        assert isinstance(result.value, Decimal)

    def test_keeps_digits_as_written(self) -> None:
        result = try_decimal("19.90", "Qty")
        assert result.value == Decimal("19.90")
        assert str(result.value) == "19.90"

    def test_no_float_rounding(self) -> None:
        assert try_decimal("0.1", "Qty").value + try_decimal("0.2", "Qty").value == Decimal("0.3")

    @pytest.mark.parametrize("value", ["abc", "1e3", "1.2.3", "NaN", "Infinity", "$5", "-"])
    def test_rejects_non_decimals(self, value: str) -> None:
        result = try_decimal(value, "Qty")
        assert result.kind == FieldErrorKind.NOT_NUMERIC
        assert result.message == FLOATING_MESSAGE
