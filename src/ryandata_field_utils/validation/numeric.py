"""Numeric coercers.

Each coercer validates and converts a raw string to a number. The empty string
means "not set" and becomes zero of the target type. Anything else has to match
the numeric grammar of the target in full: no surrounding whitespace, no
thousands separators, no partial parse.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from ryandata_field_utils.core.errors import FieldErrorKind
from ryandata_field_utils.core.results import FieldResult

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
# Digits in INT64_MAX; longer magnitudes are out of range for every integer target.
_MAX_INTEGER_DIGITS = 19

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _integer_failure(value: str, field: str) -> FieldResult[int]:
    return FieldResult.fail(
        FieldErrorKind.NOT_NUMERIC,
        field,
        f"{field} must only contain numbers with no decimal places or special characters.",
        value,
    )


def _floating_failure(value: str, field: str) -> FieldResult[float]:
    return FieldResult.fail(
        FieldErrorKind.NOT_NUMERIC,
        field,
        f"{field} must only contain numbers (may include decimal points).",
        value,
    )


def _parse_integer(value: str, field: str, low: int, high: int) -> FieldResult[int]:
    if value == "":
        return FieldResult.ok(0)
    if _INTEGER_RE.fullmatch(value) is None:
        return _integer_failure(value, field)
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        return _integer_failure(value, field)
    number = -int(digits) if value.startswith("-") else int(digits)
    if not low <= number <= high:
        return _integer_failure(value, field)
    return FieldResult.ok(number)


def try_integer(value: str, field: str) -> FieldResult[int]:
    """Parse a signed 32-bit integer ("" becomes 0)."""
    return _parse_integer(value, field, INT32_MIN, INT32_MAX)


def try_integer64(value: str, field: str) -> FieldResult[int]:
    """Parse a signed 64-bit integer ("" becomes 0)."""
    return _parse_integer(value, field, INT64_MIN, INT64_MAX)


def try_double(value: str, field: str) -> FieldResult[float]:
    """Parse a finite double-precision float ("" becomes 0.0).

    An exponent is accepted ("1.5e3"); "inf" and "nan" are not.
    """
    if value == "":
        return FieldResult.ok(0.0)
    if _DOUBLE_RE.fullmatch(value) is None:
        return _floating_failure(value, field)
    number = float(value)
    if not math.isfinite(number):
        return _floating_failure(value, field)
    return FieldResult.ok(number)


def try_decimal(value: str, field: str) -> FieldResult[Decimal]:
    """Parse an arbitrary-precision Decimal ("" becomes Decimal(0)).

    The digits are kept exactly as written, so "1.50" stays Decimal("1.50").
    """
    if value == "":
        return FieldResult.ok(Decimal(0))
    if _DECIMAL_RE.fullmatch(value) is None:
        return _floating_failure(value, field)
    try:
        return FieldResult.ok(Decimal(value))
    except InvalidOperation:
        return _floating_failure(value, field)
