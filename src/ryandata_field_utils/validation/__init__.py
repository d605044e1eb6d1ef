"""Field checks, from single-purpose primitives to named composite rules."""

from ryandata_field_utils.validation.composites import (
    RuleRegistry,
    available_rules,
    city_name_r,
    decimal_r,
    double_r,
    email_r,
    get_rule,
    int64_r,
    int_r,
    postal_code_no_gap_r,
    postal_code_r,
    street_address_r,
    string_r,
    string_rc,
    string_rce,
    string_re,
    string_rnie,
    string_rnle,
)
from ryandata_field_utils.validation.numeric import (
    try_decimal,
    try_double,
    try_integer,
    try_integer64,
)
from ryandata_field_utils.validation.pipeline import (
    FieldRule,
    RulePipelineBuilder,
    RuleSpec,
    build_rule,
)
from ryandata_field_utils.validation.primitives import (
    alpha_numeric_only,
    alphabetical_only,
    exact_length,
    matches_pattern,
    max_length,
    min_length,
    required,
)
from ryandata_field_utils.validation.regional import (
    city_name,
    email,
    postal_code,
    postal_code_no_gap,
    street_address,
)
from ryandata_field_utils.validation.validators import RuleValidator

__all__ = [
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
    # Validators
    "RuleValidator",
]
