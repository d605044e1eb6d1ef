"""Primitive field checks.

Each check looks at one property of the raw input and returns a FieldResult.
On success the value is the very string that was passed in; primitives never
coerce or normalize.
"""

from __future__ import annotations

import re

from ryandata_field_utils.core.errors import FieldErrorKind
from ryandata_field_utils.core.results import FieldResult


def required(value: str, field: str) -> FieldResult[str]:
    """Reject the empty string.

    Only a zero-length value counts as missing; whitespace is a value.

    Args:
        value: Raw input.
        field: Field label used in the message.

    Returns:
        FieldResult with the unchanged value, or an EMPTY_INPUT failure.
    """
    if len(value) == 0:
        return FieldResult.fail(FieldErrorKind.EMPTY_INPUT, field, f"{field} is required.", value)
    return FieldResult.ok(value)


def min_length(value: str, field: str, min_length: int) -> FieldResult[str]:
    """Reject values shorter than min_length characters."""
    if len(value) < min_length:
        return FieldResult.fail(
            FieldErrorKind.TOO_SHORT,
            field,
            f"{field} must have a minimum of {min_length} characters.",
            value,
            min_length=min_length,
        )
    return FieldResult.ok(value)


def max_length(value: str, field: str, max_length: int) -> FieldResult[str]:
    """Reject values longer than max_length characters."""
    if len(value) > max_length:
        return FieldResult.fail(
            FieldErrorKind.TOO_LONG,
            field,
            f"{field} must have a maximum of {max_length} characters.",
            value,
            max_length=max_length,
        )
    return FieldResult.ok(value)


def exact_length(value: str, field: str, exact_length: int) -> FieldResult[str]:
    """Reject values that are not exactly exact_length characters long."""
    if len(value) != exact_length:
        return FieldResult.fail(
            FieldErrorKind.WRONG_LENGTH,
            field,
            f"{field} must have exactly {exact_length} characters.",
            value,
            exact_length=exact_length,
        )
    return FieldResult.ok(value)


def alphabetical_only(value: str, field: str) -> FieldResult[str]:
    """Reject values containing anything but letters (any script)."""
    if not all(ch.isalpha() for ch in value):
        return FieldResult.fail(
            FieldErrorKind.INVALID_CHARACTERS,
            field,
            f"{field} must contain only letters.",
            value,
        )
    return FieldResult.ok(value)


def alpha_numeric_only(value: str, field: str) -> FieldResult[str]:
    """Reject values containing anything but letters and decimal digits."""
    if not all(ch.isalpha() or ch.isdecimal() for ch in value):
        return FieldResult.fail(
            FieldErrorKind.INVALID_CHARACTERS,
            field,
            f"{field} must only contain letters and numbers.",
            value,
        )
    return FieldResult.ok(value)


def matches_pattern(
    value: str,
    field: str,
    pattern: re.Pattern[str] | str,
    message: str | None = None,
) -> FieldResult[str]:
    """Reject values that do not fully match pattern.

    Args:
        value: Raw input.
        field: Field label used in the default message.
        pattern: Compiled or string regular expression, matched against the
            whole value.
        message: Message to use instead of the default one.

    Returns:
        FieldResult with the unchanged value, or an INVALID_FORMAT failure.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.fullmatch(value) is None:
        return FieldResult.fail(
            FieldErrorKind.INVALID_FORMAT,
            field,
            message or f"{field} is not in a valid format.",
            value,
            pattern=compiled.pattern,
        )
    return FieldResult.ok(value)
