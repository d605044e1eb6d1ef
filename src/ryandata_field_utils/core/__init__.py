"""RyanData Field Utils Core - results, errors and options shared by all checks.

Usage:
    from ryandata_field_utils.core import (
        # Results
        FieldResult,
        FieldFailure,
        # Errors
        FieldErrorKind,
        RyanDataFieldError,
        # Options
        LengthBounds,
        # Validation reports (from abstract_validation_base)
        ValidationResult,
        BaseValidator,
    )
"""

from __future__ import annotations

from abstract_validation_base import BaseValidator, ValidationResult

from ryandata_field_utils.core.bounds import LengthBounds
from ryandata_field_utils.core.errors import PACKAGE_NAME, FieldErrorKind, RyanDataFieldError
from ryandata_field_utils.core.results import FieldFailure, FieldResult

__all__ = [
    "PACKAGE_NAME",
    # Errors
    "FieldErrorKind",
    "RyanDataFieldError",
    # Results
    "FieldFailure",
    "FieldResult",
    # Options
    "LengthBounds",
    # Validation reports (from abstract_validation_base)
    "BaseValidator",
    "ValidationResult",
]
