"""ryandata-field-utils: consistent validation of raw form field input.

This package provides pure, stateless checks that take a raw string and a
field label and return either a normalized value or a labeled failure:
- Primitive checks (required, length bounds, character classes, patterns)
- Numeric coercers (32/64-bit integers, doubles, decimals)
- Canadian regional formats (postal code, street address, city, email)
- Named composite rules built from a declarative pipeline
- pydantic and abstract_validation_base integration

Quick Start:
    >>> from ryandata_field_utils import string_rnie, postal_code
    >>> result = string_rnie("0042", "PIN", exact_length=4)
    >>> result.value
    '42'

    # Check validity
    >>> result = postal_code("k1a0b1")
    >>> if result.is_valid:
    ...     print(result.value)  # "K1A0B1"
    ... else:
    ...     print(result.kind, result.message)

    # Raise instead of branching
    >>> from ryandata_field_utils import RyanDataFieldError, int_r
    >>> try:
    ...     quantity = int_r("4.5", "Quantity").unwrap()
    ... except RyanDataFieldError as exc:
    ...     print(exc.message())

    # Build a rule that has no name yet
    >>> from ryandata_field_utils import RulePipelineBuilder
    >>> rule = RulePipelineBuilder("member_code").required().length(exact_length=6).build()
"""

from __future__ import annotations  # noqa: I001

from ryandata_field_utils.core import (
    PACKAGE_NAME,
    FieldErrorKind,
    FieldFailure,
    FieldResult,
    LengthBounds,
    RyanDataFieldError,
    ValidationResult,
)
from ryandata_field_utils.pydantic_ext import field_rule
from ryandata_field_utils.validation import (
    FieldRule,
    RulePipelineBuilder,
    RuleRegistry,
    RuleSpec,
    RuleValidator,
    alpha_numeric_only,
    alphabetical_only,
    available_rules,
    build_rule,
    city_name,
    city_name_r,
    decimal_r,
    double_r,
    email,
    email_r,
    exact_length,
    get_rule,
    int64_r,
    int_r,
    matches_pattern,
    max_length,
    min_length,
    postal_code,
    postal_code_no_gap,
    postal_code_no_gap_r,
    postal_code_r,
    required,
    street_address,
    street_address_r,
    string_r,
    string_rc,
    string_rce,
    string_re,
    string_rnie,
    string_rnle,
    try_decimal,
    try_double,
    try_integer,
    try_integer64,
)

__version__ = "0.1.0"
__package_name__ = "ryandata-field-utils"

__all__ = [
    # Version
    "__version__",
    "PACKAGE_NAME",
    # Results and errors
    "FieldResult",
    "FieldFailure",
    "FieldErrorKind",
    "RyanDataFieldError",
    "LengthBounds",
    "ValidationResult",
    # Primitives
    "required",
    "min_length",
    "max_length",
    "exact_length",
    "alphabetical_only",
    "alpha_numeric_only",
    "matches_pattern",
    # Numeric coercers
    "try_integer",
    "try_integer64",
    "try_double",
    "try_decimal",
    # Regional formats
    "postal_code",
    "postal_code_no_gap",
    "street_address",
    "city_name",
    "email",
    "postal_code_r",
    "postal_code_no_gap_r",
    "street_address_r",
    "city_name_r",
    "email_r",
    # Composites
    "string_r",
    "string_re",
    "string_rnie",
    "string_rnle",
    "string_rc",
    "string_rce",
    "int_r",
    "int64_r",
    "double_r",
    "decimal_r",
    # Pipeline
    "FieldRule",
    "RuleSpec",
    "RulePipelineBuilder",
    "RuleRegistry",
    "build_rule",
    "get_rule",
    "available_rules",
    # Integrations
    "RuleValidator",
    "field_rule",
]
