"""Length bound options shared by the composite rules."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LengthBounds(BaseModel):
    """Optional length bounds for a rule.

    Either an exact length, or a minimum and/or a maximum. Bad combinations are
    programming errors and raise pydantic.ValidationError on construction.

    Example:
        >>> LengthBounds(min_length=2, max_length=30)
        >>> LengthBounds(exact_length=6)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_length: int | None = Field(default=None, ge=0, description="Minimum number of characters")
    max_length: int | None = Field(default=None, ge=0, description="Maximum number of characters")
    exact_length: int | None = Field(default=None, ge=0, description="Exact number of characters")

    @model_validator(mode="after")
    def check_consistency(self) -> Self:
        """Reject exact lengths mixed with ranges and inverted ranges."""
        if self.exact_length is not None and (
            self.min_length is not None or self.max_length is not None
        ):
            raise ValueError("exact_length cannot be combined with min_length or max_length")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise ValueError(
                f"min_length ({self.min_length}) is greater than max_length ({self.max_length})"
            )
        return self

    @property
    def is_empty(self) -> bool:
        """True if no bound is set."""
        return self.min_length is None and self.max_length is None and self.exact_length is None
