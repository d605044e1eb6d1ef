from __future__ import annotations

from typing import Any

from pydantic import AfterValidator

from ryandata_field_utils.validation.composites import get_rule
from ryandata_field_utils.validation.pipeline import FieldRule


def field_rule(rule: FieldRule | str, field: str | None = None, **bounds: int | None) -> Any:
    """Use a rule as a pydantic field validator.

    The returned AfterValidator runs the rule on the (already str-typed) field
    value and replaces it with the normalized value. A failure is raised as
    RyanDataFieldError, so it shows up in pydantic.ValidationError with the
    failure kind as its type.

    Usage:
        >>> from typing import Annotated
        >>> from pydantic import BaseModel
        >>> class Signup(BaseModel):
        ...     first_name: Annotated[str, field_rule("string_rc", "First name")]
        ...     postal: Annotated[str, field_rule("postal_code_r")]

    Args:
        rule: Compiled rule, or the name of a registered rule.
        field: Field label for messages (defaults to the rule's default).
        **bounds: Length bounds, only used when rule is a name.

    Returns:
        pydantic AfterValidator to place in an Annotated type.
    """
    compiled = get_rule(rule, **bounds) if isinstance(rule, str) else rule

    def _validate(value: str) -> Any:
        return compiled.check(value, field).unwrap()

    return AfterValidator(_validate)
