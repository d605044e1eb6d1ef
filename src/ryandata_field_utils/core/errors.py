"""Field validation failure kinds and the error raised for them.

Failures are normally returned inside a FieldResult. RyanDataFieldError is
what gets raised when a caller prefers a try/except boundary, or when a rule
runs inside a pydantic model.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from ryandata_field_utils.core.results import FieldFailure

# Package identifier for error context
PACKAGE_NAME = "ryandata_field_utils"


class FieldErrorKind(str, Enum):
    """Enumeration of every way a field value can be rejected."""

    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    WRONG_LENGTH = "wrong_length"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_FORMAT = "invalid_format"
    NOT_NUMERIC = "not_numeric"


class RyanDataFieldError(PydanticCustomError):
    """Custom exception for ryandata_field_utils based on PydanticCustomError.

    The error type is the FieldErrorKind value, so a failure raised inside a
    pydantic validator shows up in ``ValidationError.errors()`` with that type.
    """

    @classmethod
    def from_failure(cls, failure: FieldFailure) -> RyanDataFieldError:
        """Build the error for a field failure.

        Args:
            failure: The failure returned by a check.

        Returns:
            RyanDataFieldError carrying the failure kind, message and context.
        """
        # The message is already formatted; braces in a label are not placeholders.
        return cls(
            failure.kind.value,
            "{message}",
            {
                "message": failure.message,
                "package": PACKAGE_NAME,
                "field": failure.field,
                "value": failure.value,
                **failure.context,
            },
        )

    @property
    def kind(self) -> FieldErrorKind:
        """The failure kind this error was raised for."""
        return FieldErrorKind(self.type)

    @property
    def field(self) -> str | None:
        """Label of the field that failed."""
        return (self.context or {}).get("field")
