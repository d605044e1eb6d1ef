"""Result classes for field checks.

Every check returns a FieldResult: either the normalized value or a single
FieldFailure describing why the value was rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from abstract_validation_base import ValidationResult

from ryandata_field_utils.core.errors import FieldErrorKind, RyanDataFieldError

T = TypeVar("T")


@dataclass(frozen=True)
class FieldFailure:
    """A labeled validation failure.

    Attributes:
        kind: Which constraint was violated.
        field: Label of the field, as supplied by the caller.
        message: Human-readable message, including the field label.
        value: The raw input that was rejected.
        context: The bound or pattern involved, if any.
    """

    kind: FieldErrorKind
    field: str
    message: str
    value: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of checking one raw input against one rule.

    Attributes:
        value: The normalized value (None if the check failed).
        failure: The failure (None if the check passed).
    """

    value: T | None = None
    failure: FieldFailure | None = None

    @classmethod
    def ok(cls, value: T) -> FieldResult[T]:
        """Create a passing result."""
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        kind: FieldErrorKind,
        field: str,
        message: str,
        value: str,
        **context: Any,
    ) -> FieldResult[Any]:
        """Create a failing result."""
        return cls(failure=FieldFailure(kind, field, message, value, context))

    @property
    def is_valid(self) -> bool:
        """Check if the value passed."""
        return self.failure is None

    @property
    def kind(self) -> FieldErrorKind | None:
        """Failure kind, or None if the value passed."""
        return self.failure.kind if self.failure else None

    @property
    def message(self) -> str | None:
        """Failure message, or None if the value passed."""
        return self.failure.message if self.failure else None

    def unwrap(self) -> T:
        """Return the value, raising if the check failed.

        Raises:
            RyanDataFieldError: If the result holds a failure.
        """
        if self.failure is not None:
            raise RyanDataFieldError.from_failure(self.failure)
        return self.value  # type: ignore[return-value]

    def to_validation_result(self) -> ValidationResult:
        """Convert to a ValidationResult that can be merged into a larger report."""
        result = ValidationResult(is_valid=self.failure is None)
        if self.failure is not None:
            result.add_error(self.failure.field, self.failure.message, self.failure.value)
        return result
