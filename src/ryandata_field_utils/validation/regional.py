"""Canadian regional format checks.

The checks let the empty string through so that "is this field required"
stays a separate decision. The required variants (postal_code_r, email_r, ...)
are composites and live in validation.composites.
"""

from __future__ import annotations

import re

from ryandata_field_utils.core.errors import FieldErrorKind
from ryandata_field_utils.core.results import FieldResult
from ryandata_field_utils.validation.primitives import matches_pattern

# D, F, I, O, Q and U are never used; W and Z never start a postal code.
_FIRST_LETTER = "[ABCEGHJ-NPRSTVXY]"
_LETTER = "[ABCEGHJ-NPRSTV-Z]"

POSTAL_CODE_PATTERN = re.compile(
    rf"{_FIRST_LETTER}[0-9]{_LETTER}[ -]?[0-9]{_LETTER}[0-9]", re.ASCII
)
POSTAL_CODE_NO_GAP_PATTERN = re.compile(
    rf"{_FIRST_LETTER}[0-9]{_LETTER}[0-9]{_LETTER}[0-9]", re.ASCII
)
EMAIL_PATTERN = re.compile(r"[^@]{1,64}@.{1,250}[.][a-zA-Z]{1,4}")

# Hyphens are fine in street and city names
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_")
_CITY_FORBIDDEN = SPECIAL_CHARACTERS | frozenset("0123456789")


def _postal_code(
    value: str, field: str, pattern: re.Pattern[str], formats: str
) -> FieldResult[str]:
    if value == "":
        return FieldResult.ok("")
    upper = value.upper()
    if not value.isascii() or pattern.fullmatch(upper) is None:
        return FieldResult.fail(
            FieldErrorKind.INVALID_FORMAT,
            field,
            f"{field} is invalid. Use format {formats}.",
            value,
            pattern=pattern.pattern,
        )
    return FieldResult.ok(upper)


def postal_code(value: str, field: str = "Postal code") -> FieldResult[str]:
    """Check a Canadian postal code, with or without a separator.

    Accepts 'A1B 2C3', 'A1B-2C3' and 'A1B2C3' in any case and returns the
    upper-cased value with its separator (if any) left as typed.
    """
    return _postal_code(value, field, POSTAL_CODE_PATTERN, "'A1B 2C3', 'A1B-2C3' or 'A1B2C3'")


def postal_code_no_gap(value: str, field: str = "Postal code") -> FieldResult[str]:
    """Check a Canadian postal code written without a separator ('A1B2C3')."""
    return _postal_code(value, field, POSTAL_CODE_NO_GAP_PATTERN, "'A1B2C3'")


def street_address(value: str, field: str = "Street address") -> FieldResult[str]:
    """Reject street addresses containing special characters other than '-'."""
    if value and not SPECIAL_CHARACTERS.isdisjoint(value):
        return FieldResult.fail(
            FieldErrorKind.INVALID_CHARACTERS,
            field,
            f"{field} must not include special characters other than '-'.",
            value,
        )
    return FieldResult.ok(value)


def city_name(value: str, field: str = "City name") -> FieldResult[str]:
    """Reject city names containing digits or special characters other than '-'."""
    if value and not _CITY_FORBIDDEN.isdisjoint(value):
        return FieldResult.fail(
            FieldErrorKind.INVALID_CHARACTERS,
            field,
            f"{field} must not include numbers or special characters other than '-'.",
            value,
        )
    return FieldResult.ok(value)


def email(value: str, field: str = "Email") -> FieldResult[str]:
    """Loosely check an email address: local part, '@', domain and a short TLD."""
    if value == "":
        return FieldResult.ok("")
    return matches_pattern(value, field, EMAIL_PATTERN, f"{field} is not a valid email address.")

