"""Tests for the primitive field checks."""

from __future__ import annotations

import re

import pytest

from ryandata_field_utils import (
    FieldErrorKind,
    alpha_numeric_only,
    alphabetical_only,
    exact_length,
    matches_pattern,
    max_length,
    min_length,
    required,
)

# =============================================================================
# required
# =============================================================================


class TestRequired:
    """Tests for required()."""

    def test_empty_string_fails(self) -> None:
        result = required("", "Name")
        assert not result.is_valid
        assert result.kind == FieldErrorKind.EMPTY_INPUT
        assert result.message == "Name is required."
        assert result.failure is not None
        assert result.failure.field == "Name"

    def test_value_is_returned_unchanged(self) -> None:
        value = "Ada"
        result = required(value, "Name")
        assert result.is_valid
        assert result.value is value
        assert result.failure is None

    @pytest.mark.parametrize("value", [" ", "\t", "   "])
    def test_whitespace_is_not_empty(self, value: str) -> None:
        """Only zero-length input counts as missing."""
        assert required(value, "Name").value == value


# =============================================================================
# Length checks
# =============================================================================


class TestLengthChecks:
    """Tests for min_length(), max_length() and exact_length()."""

    def test_min_length_boundary(self) -> None:
        assert min_length("abc", "Code", 3).is_valid
        result = min_length("ab", "Code", 3)
        assert result.kind == FieldErrorKind.TOO_SHORT
        assert result.message == "Code must have a minimum of 3 characters."

    def test_max_length_boundary(self) -> None:
        assert max_length("abc", "Code", 3).is_valid
        result = max_length("abcd", "Code", 3)
        assert result.kind == FieldErrorKind.TOO_LONG
        assert result.message == "Code must have a maximum of 3 characters."

    def test_exact_length(self) -> None:
        assert exact_length("abcd", "Code", 4).value == "abcd"
        for value in ("abc", "abcde", ""):
            result = exact_length(value, "Code", 4)
            assert result.kind == FieldErrorKind.WRONG_LENGTH
            assert result.message == "Code must have exactly 4 characters."

    def test_failure_context_carries_bound(self) -> None:
        result = max_length("abcd", "Code", 3)
        assert result.failure is not None
        assert result.failure.context == {"max_length": 3}
        assert result.failure.value == "abcd"

    def test_length_counts_characters(self) -> None:
        assert exact_length("Émile", "Name", 5).is_valid


# =============================================================================
# Character classes
# =============================================================================


class TestCharacterClasses:
    """Tests for alphabetical_only() and alpha_numeric_only()."""

    @pytest.mark.parametrize("value", ["abc", "Émile", "Zoë", "Ωμέγα", ""])
    def test_alphabetical_accepts_letters(self, value: str) -> None:
        assert alphabetical_only(value, "Name").value == value

    @pytest.mark.parametrize("value", ["abc1", "Jean-Luc", "Ann Marie", "O'Neil"])
    def test_alphabetical_rejects_non_letters(self, value: str) -> None:
        result = alphabetical_only(value, "Name")
        assert result.kind == FieldErrorKind.INVALID_CHARACTERS
        assert result.message == "Name must contain only letters."

    @pytest.mark.parametrize("value", ["abc123", "A1B2C3", "Émile2", ""])
    def test_alpha_numeric_accepts_letters_and_digits(self, value: str) -> None:
        assert alpha_numeric_only(value, "Code").is_valid

    @pytest.mark.parametrize("value", ["abc-1", "a b", "½", "x_y"])
    def test_alpha_numeric_rejects_others(self, value: str) -> None:
        result = alpha_numeric_only(value, "Code")
        assert result.kind == FieldErrorKind.INVALID_CHARACTERS
        assert result.message == "Code must only contain letters and numbers."


# =============================================================================
# Pattern match
# =============================================================================


class TestMatchesPattern:
    """Tests for matches_pattern()."""

    def test_full_match_required(self) -> None:
        assert matches_pattern("abc", "Code", r"[a-z]+").is_valid
        result = matches_pattern("abc1", "Code", r"[a-z]+")
        assert result.kind == FieldErrorKind.INVALID_FORMAT
        assert result.message == "Code is not in a valid format."

    def test_compiled_pattern_and_custom_message(self) -> None:
        pattern = re.compile(r"\d{3}")
        result = matches_pattern("12", "Area code", pattern, "Area code needs 3 digits.")
        assert result.message == "Area code needs 3 digits."
        assert result.failure is not None
        assert result.failure.context["pattern"] == r"\d{3}"
