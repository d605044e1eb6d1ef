"""Named composite rules.

Callers pick a rule by name instead of chaining primitives themselves. Every
rule here is a RuleSpec registered in the rule registry; the functions below
are thin shortcuts that look the rule up and run it.

Example:
    >>> string_rnie("0042", "PIN", exact_length=4).value
    '42'
    >>> get_rule("string_rc", min_length=2).check("Jo", "First name").is_valid
    True
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from functools import partial
from typing import ClassVar

from ryandata_field_utils.core.bounds import LengthBounds
from ryandata_field_utils.core.results import FieldResult
from ryandata_field_utils.validation.pipeline import FieldRule, FormatName, RuleSpec, build_rule

SpecFactory = Callable[..., RuleSpec]


def _format_rule(
    name: str,
    format_name: FormatName,
    default_field: str,
    *,
    required: bool = False,
    min_length: int | None = None,
    max_length: int | None = None,
    exact_length: int | None = None,
) -> RuleSpec:
    return RuleSpec(
        name=name,
        required=required,
        format=format_name,
        bounds=LengthBounds(
            min_length=min_length, max_length=max_length, exact_length=exact_length
        ),
        default_field=default_field,
    )


class RuleRegistry:
    """Registry of named rules.

    Maps rule names to factories that take optional length bounds and return
    a RuleSpec. Add a new field archetype with register(); never by changing
    an existing rule.
    """

    _registry: ClassVar[dict[str, SpecFactory]] = {}
    _entity_name: ClassVar[str] = "rule"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "string_r" in cls._registry:
            return
        for rule_name, convention_name in (
            ("string_r", "StringR"),
            ("string_re", "StringRE"),
            ("string_rnie", "StringRNIE"),
            ("string_rnle", "StringRNLE"),
            ("string_rc", "StringRC"),
            ("string_rce", "StringRCE"),
            ("int_r", "IntR"),
            ("int64_r", "Int64R"),
            ("double_r", "DoubleR"),
            ("decimal_r", "DecimalR"),
        ):
            cls._registry[rule_name] = partial(RuleSpec.from_name, convention_name)

        for format_name, label in (
            ("postal_code", "Postal code"),
            ("postal_code_no_gap", "Postal code"),
            ("street_address", "Street address"),
            ("city_name", "City name"),
            ("email", "Email"),
        ):
            cls._registry[format_name] = partial(_format_rule, format_name, format_name, label)
            cls._registry[f"{format_name}_r"] = partial(
                _format_rule, f"{format_name}_r", format_name, label, required=True
            )

    @classmethod
    def register(cls, name: str, factory: SpecFactory) -> None:
        """Register a rule.

        Args:
            name: Rule name.
            factory: Callable taking optional min_length/max_length/exact_length
                keyword arguments and returning a RuleSpec.
        """
        cls._ensure_defaults_registered()
        cls._registry[name] = factory

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a rule."""
        cls._registry.pop(name, None)

    @classmethod
    def spec(cls, name: str, **bounds: int | None) -> RuleSpec:
        """Get the RuleSpec for a named rule.

        Args:
            name: Rule name.
            **bounds: min_length, max_length and/or exact_length. None values
                are ignored.

        Returns:
            The rule's RuleSpec.

        Raises:
            ValueError: If the name is not registered or the bounds do not
                fit the rule.
        """
        cls._ensure_defaults_registered()
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry))
            raise ValueError(f"Unknown {cls._entity_name}: {name}. Available rules: {available}")
        given = {key: value for key, value in bounds.items() if value is not None}
        return cls._registry[name](**given)

    @classmethod
    def available_rules(cls) -> list[str]:
        """Get list of registered rule names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry)


def get_rule(name: str, **bounds: int | None) -> FieldRule:
    """Get a compiled rule by name.

    Args:
        name: Registered rule name (see available_rules()).
        **bounds: min_length, max_length and/or exact_length.

    Returns:
        FieldRule ready to check values.
    """
    return build_rule(RuleRegistry.spec(name, **bounds))


def available_rules() -> list[str]:
    """Get list of registered rule names."""
    return RuleRegistry.available_rules()


# -----------------------------------------------------------------------------
# String input / required
# -----------------------------------------------------------------------------


def string_r(
    value: str, field: str, *, min_length: int | None = None, max_length: int | None = None
) -> FieldResult[str]:
    """Required string, optionally bounded in length."""
    return get_rule("string_r", min_length=min_length, max_length=max_length).check(value, field)


def string_re(value: str, field: str, exact_length: int) -> FieldResult[str]:
    """Required string of exactly exact_length characters."""
    return get_rule("string_re", exact_length=exact_length).check(value, field)


def string_rnie(value: str, field: str, exact_length: int) -> FieldResult[str]:
    """Required, exact length, parsed as a 32-bit integer and returned as text.

    Leading zeros and a '+' sign are dropped by the round trip: "0042" -> "42".
    """
    return get_rule("string_rnie", exact_length=exact_length).check(value, field)


def string_rnle(value: str, field: str, exact_length: int) -> FieldResult[str]:
    """Required, exact length, parsed as a 64-bit integer and returned as text."""
    return get_rule("string_rnle", exact_length=exact_length).check(value, field)


# -----------------------------------------------------------------------------
# String input / required / letters only
# -----------------------------------------------------------------------------


def string_rc(
    value: str, field: str, *, min_length: int | None = None, max_length: int | None = None
) -> FieldResult[str]:
    """Required letters-only string, optionally bounded in length."""
    return get_rule("string_rc", min_length=min_length, max_length=max_length).check(value, field)


def string_rce(value: str, field: str, exact_length: int) -> FieldResult[str]:
    """Required letters-only string of exactly exact_length characters."""
    return get_rule("string_rce", exact_length=exact_length).check(value, field)


# -----------------------------------------------------------------------------
# Numeric input / required
# -----------------------------------------------------------------------------


def int_r(value: str, field: str) -> FieldResult[int]:
    """Required 32-bit integer."""
    return get_rule("int_r").check(value, field)


def int64_r(value: str, field: str) -> FieldResult[int]:
    """Required 64-bit integer."""
    return get_rule("int64_r").check(value, field)


def double_r(value: str, field: str) -> FieldResult[float]:
    """Required double."""
    return get_rule("double_r").check(value, field)


def decimal_r(value: str, field: str) -> FieldResult[Decimal]:
    """Required decimal."""
    return get_rule("decimal_r").check(value, field)


# -----------------------------------------------------------------------------
# Regional formats / required
# -----------------------------------------------------------------------------


def postal_code_r(value: str, field: str = "Postal code") -> FieldResult[str]:
    """Required postal code, with or without a separator."""
    return get_rule("postal_code_r").check(value, field)


def postal_code_no_gap_r(value: str, field: str = "Postal code") -> FieldResult[str]:
    """Required postal code without a separator."""
    return get_rule("postal_code_no_gap_r").check(value, field)


def street_address_r(value: str, field: str = "Street address") -> FieldResult[str]:
    """Required street address."""
    return get_rule("street_address_r").check(value, field)


def city_name_r(
    value: str,
    field: str = "City name",
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> FieldResult[str]:
    """Required city name, optionally bounded in length."""
    rule = get_rule("city_name_r", min_length=min_length, max_length=max_length)
    return rule.check(value, field)


def email_r(
    value: str,
    field: str = "Email",
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> FieldResult[str]:
    """Required email, optionally bounded in length."""
    return get_rule("email_r", min_length=min_length, max_length=max_length).check(value, field)
