"""
Unit tests for note field validation.
Covers the length boundaries and the empty-title asymmetry.
"""

import pytest

from src.models.validation import (
    DESCRIPTION_ERROR_MESSAGE,
    TITLE_ERROR_MESSAGE,
    NoteValidationError,
    can_save,
    description_has_error,
    title_has_error,
    validate_note,
)


class TestTitleRule:
    """Test suite for the title length rule."""

    @pytest.mark.parametrize("length", [3, 9, 50])
    def test_lengths_in_range_pass(self, length):
        assert title_has_error("x" * length) is False

    @pytest.mark.parametrize("length", [1, 2, 51, 200])
    def test_lengths_out_of_range_fail(self, length):
        assert title_has_error("x" * length) is True

    def test_boundaries(self):
        assert title_has_error("Tea") is False
        assert title_has_error("Hi") is True
        assert title_has_error("a" * 50) is False

    def test_empty_title_shows_no_error(self):
        """An empty title is not a length error even though it cannot be saved."""
        assert title_has_error("") is False

    def test_whitespace_counts(self):
        assert title_has_error("   ") is False


class TestDescriptionRule:
    """Test suite for the description length rule."""

    def test_exactly_120_passes(self):
        assert description_has_error("d" * 120) is False

    def test_121_fails(self):
        assert description_has_error("d" * 121) is True

    def test_no_lower_bound(self):
        assert description_has_error("") is False
        assert description_has_error("d") is False


class TestCanSave:
    """Test suite for the combined save predicate."""

    @pytest.mark.parametrize("title_len", [3, 25, 50])
    @pytest.mark.parametrize("desc_len", [1, 60, 120])
    def test_valid_drafts_can_save(self, title_len, desc_len):
        assert can_save("t" * title_len, "d" * desc_len) is True

    @pytest.mark.parametrize("title", ["a", "ab", "a" * 51])
    @pytest.mark.parametrize("description", ["", "ok", "d" * 121])
    def test_bad_title_blocks_save_regardless_of_description(self, title, description):
        assert can_save(title, description) is False

    def test_empty_title_blocks_save_without_error(self):
        """Save is disabled while no title error is displayed."""
        validation = validate_note("", "Some description")

        assert validation.title_error is False
        assert validation.can_save is False
        assert validation.errors == []

    def test_empty_description_blocks_save(self):
        validation = validate_note("Groceries", "")

        assert validation.description_error is False
        assert validation.can_save is False

    def test_long_description_blocks_save(self):
        assert can_save("Groceries", "d" * 121) is False


class TestValidateNote:
    """Test suite for the validation result object."""

    def test_groceries(self):
        validation = validate_note("Groceries", "Milk, eggs")

        assert validation.can_save is True
        assert validation.title_error is False
        assert validation.description_error is False
        assert validation.errors == []

    def test_messages_for_each_error(self):
        validation = validate_note("Hi", "d" * 121)

        assert validation.title_error is True
        assert validation.description_error is True
        assert validation.errors == [TITLE_ERROR_MESSAGE, DESCRIPTION_ERROR_MESSAGE]

    def test_message_text(self):
        assert TITLE_ERROR_MESSAGE == "Title must be between 3 and 50 characters"
        assert DESCRIPTION_ERROR_MESSAGE == "Description cannot exceed 120 characters"

    def test_validation_error_carries_result(self):
        validation = validate_note("Hi", "ok")
        error = NoteValidationError(validation)

        assert error.validation is validation
        assert isinstance(error, ValueError)
        assert TITLE_ERROR_MESSAGE in str(error)

    def test_validation_error_for_empty_fields(self):
        error = NoteValidationError(validate_note("", ""))

        assert "required" in str(error)
