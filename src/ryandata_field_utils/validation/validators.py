from __future__ import annotations

from abstract_validation_base import BaseValidator, ValidationResult

from ryandata_field_utils.validation.composites import get_rule
from ryandata_field_utils.validation.pipeline import FieldRule


class RuleValidator(BaseValidator[str]):
    """Validates one field value against one FieldRule.

    Lets a rule plug into anything that accepts a BaseValidator, such as a
    ValidatorPipelineBuilder, and report through a ValidationResult.
    """

    def __init__(
        self,
        rule: FieldRule | str,
        field: str | None = None,
        **bounds: int | None,
    ) -> None:
        """Initialize rule validator.

        Args:
            rule: Compiled rule, or the name of a registered rule.
            field: Field label for messages (defaults to the rule's default).
            **bounds: Length bounds, only used when rule is a name.
        """
        self._rule = get_rule(rule, **bounds) if isinstance(rule, str) else rule
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._rule.name

    @property
    def rule(self) -> FieldRule:
        """The rule this validator runs."""
        return self._rule

    def validate(self, item: str) -> ValidationResult:
        """Validate a raw field value.

        Args:
            item: Raw input.

        Returns:
            ValidationResult with at most one error.
        """
        return self._rule.check(item, self._field).to_validation_result()
