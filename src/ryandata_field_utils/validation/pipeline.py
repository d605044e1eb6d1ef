"""Declarative rule pipelines.

A RuleSpec lists which stages a rule has; build_rule() turns it into a
FieldRule that runs those stages in one fixed order:

    required -> format -> min_length -> max_length -> exact_length
             -> char_class -> numeric (-> str when as_text)

The first stage that fails stops the pipeline and its failure is returned
as-is. Rules are never combined by branching, only by listing stages.

Rule names follow a compact naming convention:
a prefix for the output type (String, Int, Int64, Double, Decimal) followed
by suffix modifiers, always in this order:

    R  - required
    C  - characters (letters) only      N  - numeric input
    I  - integer    L  - 64-bit integer    Do - double    De - decimal
    E  - exact length

so ``StringRNIE`` is "required, exact length, parsed as an integer, returned
as text". The stages still run in the canonical order above.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache, partial
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ryandata_field_utils.core.bounds import LengthBounds
from ryandata_field_utils.core.results import FieldResult
from ryandata_field_utils.validation import numeric, primitives, regional

logger = logging.getLogger(__name__)

FormatName = Literal["postal_code", "postal_code_no_gap", "street_address", "city_name", "email"]
CharClass = Literal["letters", "letters_or_digits"]
NumericTarget = Literal["integer", "integer64", "double", "decimal"]

StageFunc = Callable[[Any, str], FieldResult[Any]]

FORMAT_CHECKS: dict[str, StageFunc] = {
    "postal_code": regional.postal_code,
    "postal_code_no_gap": regional.postal_code_no_gap,
    "street_address": regional.street_address,
    "city_name": regional.city_name,
    "email": regional.email,
}

CHAR_CLASS_CHECKS: dict[str, StageFunc] = {
    "letters": primitives.alphabetical_only,
    "letters_or_digits": primitives.alpha_numeric_only,
}

NUMERIC_COERCERS: dict[str, StageFunc] = {
    "integer": numeric.try_integer,
    "integer64": numeric.try_integer64,
    "double": numeric.try_double,
    "decimal": numeric.try_decimal,
}

_PREFIX_TARGETS: dict[str, NumericTarget | None] = {
    "String": None,
    "Int": "integer",
    "Int64": "integer64",
    "Double": "double",
    "Decimal": "decimal",
}
_SUFFIX_TARGETS: dict[str, NumericTarget] = {
    "I": "integer",
    "L": "integer64",
    "Do": "double",
    "De": "decimal",
}
_NAME_RE = re.compile(
    r"(?P<prefix>String|Int64|Int|Double|Decimal)"
    r"(?P<required>R)?(?P<kind>[CN])?(?P<target>I|L|Do|De)?(?P<exact>E)?"
)

DEFAULT_FIELD = "Value"


class RuleSpec(BaseModel):
    """Stage descriptors for one rule.

    Attributes:
        name: Rule name, used in logs.
        required: Reject empty input first.
        format: Regional format check to apply.
        bounds: Length bounds to apply.
        char_class: Character class the value must belong to.
        numeric: Numeric type to parse the value into.
        as_text: Render the parsed number back to a string.
        default_field: Field label used when the caller gives none.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    required: bool = False
    format: FormatName | None = None
    bounds: LengthBounds = Field(default_factory=LengthBounds)
    char_class: CharClass | None = None
    numeric: NumericTarget | None = None
    as_text: bool = False
    default_field: str | None = None

    @model_validator(mode="after")
    def check_stages(self) -> Self:
        """as_text only makes sense after a numeric stage."""
        if self.as_text and self.numeric is None:
            raise ValueError(f"Rule {self.name!r}: as_text requires a numeric stage")
        return self

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        exact_length: int | None = None,
    ) -> RuleSpec:
        """Build the RuleSpec described by a rule name such as ``StringRNIE``.

        Args:
            name: Prefix plus suffix modifiers (see module docstring).
            min_length: Minimum length, for rules without ``E``.
            max_length: Maximum length, for rules without ``E``.
            exact_length: Exact length, required by rules with ``E``.

        Returns:
            RuleSpec for the named composite.

        Raises:
            ValueError: If the name does not follow the convention or the
                bounds do not fit it.
        """
        match = _NAME_RE.fullmatch(name)
        if match is None:
            raise ValueError(f"Invalid rule name: {name!r}")

        prefix, kind, target = match["prefix"], match["kind"], match["target"]
        numeric_target = _PREFIX_TARGETS[prefix]

        if prefix == "String":
            if kind == "N" and target is None:
                raise ValueError(f"Rule {name!r}: N needs a numeric target (I, L, Do or De)")
            if target is not None and kind != "N":
                raise ValueError(f"Rule {name!r}: numeric target without N modifier")
            if target is not None:
                numeric_target = _SUFFIX_TARGETS[target]
        elif kind is not None or target is not None:
            raise ValueError(f"Rule {name!r}: {prefix} rules take no C, N or target modifier")

        exact = match["exact"] is not None
        if exact and exact_length is None:
            raise ValueError(f"Rule {name!r} requires exact_length")
        if not exact and exact_length is not None:
            raise ValueError(f"Rule {name!r} does not take exact_length")
        if prefix != "String" and (min_length is not None or max_length is not None):
            raise ValueError(f"Rule {name!r} does not take length bounds")

        return cls(
            name=name,
            required=match["required"] is not None,
            bounds=LengthBounds(
                min_length=min_length, max_length=max_length, exact_length=exact_length
            ),
            char_class="letters" if kind == "C" else None,
            numeric=numeric_target,
            as_text=prefix == "String" and numeric_target is not None,
        )


@dataclass(frozen=True)
class Stage:
    """One named step of a rule pipeline."""

    name: str
    func: StageFunc


@dataclass(frozen=True)
class FieldRule:
    """A compiled rule: an ordered tuple of stages.

    Example:
        >>> rule = build_rule(RuleSpec.from_name("StringRNIE", exact_length=5))
        >>> rule.check("01234", "Account").value
        '1234'
    """

    spec: RuleSpec
    stages: tuple[Stage, ...]

    @property
    def name(self) -> str:
        """Name of this rule."""
        return self.spec.name

    @property
    def stage_names(self) -> list[str]:
        """Names of the stages, in evaluation order."""
        return [stage.name for stage in self.stages]

    def check(self, value: str, field: str | None = None) -> FieldResult[Any]:
        """Run value through every stage, stopping at the first failure.

        Args:
            value: Raw input.
            field: Field label for messages. Defaults to the rule's default.

        Returns:
            FieldResult with the normalized value or the first failure.
        """
        label = field if field is not None else self.spec.default_field or DEFAULT_FIELD
        current: Any = value
        for stage in self.stages:
            result = stage.func(current, label)
            if not result.is_valid:
                logger.debug(
                    "Rule %s rejected %s at stage %s (%s): %s",
                    self.name,
                    label,
                    stage.name,
                    result.kind.value if result.kind else "",
                    str(value)[:50],
                )
                return result
            current = result.value
        return FieldResult.ok(current)

    def __call__(self, value: str, field: str | None = None) -> FieldResult[Any]:
        return self.check(value, field)

    def annotation(self, field: str | None = None) -> Any:
        """Pydantic AfterValidator running this rule (see pydantic_ext)."""
        from ryandata_field_utils.pydantic_ext import field_rule

        return field_rule(self, field)


def _as_text(value: Any, field: str) -> FieldResult[str]:
    return FieldResult.ok(str(value))


@lru_cache(maxsize=256)
def build_rule(spec: RuleSpec) -> FieldRule:
    """Compile a RuleSpec into a FieldRule.

    Stages are laid out in the canonical order regardless of how the RuleSpec was
    written. Results are cached per spec.
    """
    stages: list[Stage] = []
    if spec.required:
        stages.append(Stage("required", primitives.required))
    if spec.format is not None:
        stages.append(Stage(spec.format, FORMAT_CHECKS[spec.format]))

    bounds = spec.bounds
    if bounds.min_length is not None:
        stages.append(
            Stage("min_length", partial(primitives.min_length, min_length=bounds.min_length))
        )
    if bounds.max_length is not None:
        stages.append(
            Stage("max_length", partial(primitives.max_length, max_length=bounds.max_length))
        )
    if bounds.exact_length is not None:
        stages.append(
            Stage(
                "exact_length",
                partial(primitives.exact_length, exact_length=bounds.exact_length),
            )
        )

    if spec.char_class is not None:
        stages.append(Stage(spec.char_class, CHAR_CLASS_CHECKS[spec.char_class]))
    if spec.numeric is not None:
        stages.append(Stage(spec.numeric, NUMERIC_COERCERS[spec.numeric]))
        if spec.as_text:
            stages.append(Stage("as_text", _as_text))

    rule = FieldRule(spec=spec, stages=tuple(stages))
    logger.debug("Built rule %s with stages %s", spec.name, rule.stage_names)
    return rule


class RulePipelineBuilder:
    """Fluent builder for rules that have no name in the convention.

    Example:
        >>> rule = (
        ...     RulePipelineBuilder("member_code")
        ...     .required()
        ...     .length(min_length=3, max_length=8)
        ...     .letters_or_digits()
        ...     .build()
        ... )
    """

    def __init__(self, name: str) -> None:
        """Initialize builder.

        Args:
            name: Name of the rule being built.
        """
        self._fields: dict[str, Any] = {"name": name}

    def required(self) -> RulePipelineBuilder:
        """Reject empty input."""
        self._fields["required"] = True
        return self

    def format(self, format_name: FormatName) -> RulePipelineBuilder:
        """Apply a regional format check."""
        self._fields["format"] = format_name
        return self

    def length(
        self,
        *,
        min_length: int | None = None,
        max_length: int | None = None,
        exact_length: int | None = None,
    ) -> RulePipelineBuilder:
        """Set length bounds."""
        self._fields["bounds"] = LengthBounds(
            min_length=min_length, max_length=max_length, exact_length=exact_length
        )
        return self

    def letters(self) -> RulePipelineBuilder:
        """Allow letters only."""
        self._fields["char_class"] = "letters"
        return self

    def letters_or_digits(self) -> RulePipelineBuilder:
        """Allow letters and digits only."""
        self._fields["char_class"] = "letters_or_digits"
        return self

    def numeric(self, target: NumericTarget, *, as_text: bool = False) -> RulePipelineBuilder:
        """Parse the value into a number, optionally rendered back to text."""
        self._fields["numeric"] = target
        self._fields["as_text"] = as_text
        return self

    def default_field(self, field: str) -> RulePipelineBuilder:
        """Field label used when callers give none."""
        self._fields["default_field"] = field
        return self

    def spec(self) -> RuleSpec:
        """Build the RuleSpec without compiling it."""
        return RuleSpec(**self._fields)

    def build(self) -> FieldRule:
        """Build and compile the rule."""
        return build_rule(self.spec())
