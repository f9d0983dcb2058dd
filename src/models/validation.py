"""
Field validation rules for notes.
Evaluated on every keystroke in the editor and again at save time.
"""

from dataclasses import dataclass, field
from typing import List

from .note import NoteStoreError

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 120

TITLE_ERROR_MESSAGE = (
    f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
)
DESCRIPTION_ERROR_MESSAGE = (
    f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
)


@dataclass(frozen=True)
class NoteValidation:
    """Result of validating a (title, description) draft."""
    title_error: bool
    description_error: bool
    can_save: bool
    errors: List[str] = field(default_factory=list)


class NoteValidationError(NoteStoreError, ValueError):
    """Raised when a draft that fails validation is committed."""

    def __init__(self, validation: NoteValidation):
        self.validation = validation
        reasons = "; ".join(validation.errors) or "Title and description are required"
        super().__init__(f"Note cannot be saved: {reasons}")


def title_has_error(title: str) -> bool:
    """Length error for a non-empty title outside [3, 50].

    An empty title is not flagged here; it is rejected by can_save instead.
    """
    length = len(title)
    return length > 0 and (length < TITLE_MIN_LENGTH or length > TITLE_MAX_LENGTH)


def description_has_error(description: str) -> bool:
    return len(description) > DESCRIPTION_MAX_LENGTH


def can_save(title: str, description: str) -> bool:
    return (
        not title_has_error(title)
        and not description_has_error(description)
        and len(title) > 0
        and len(description) > 0
    )


def validate_note(title: str, description: str) -> NoteValidation:
    """Validate a draft and collect the inline messages to display."""
    title_error = title_has_error(title)
    description_error = description_has_error(description)

    errors = []
    if title_error:
        errors.append(TITLE_ERROR_MESSAGE)
    if description_error:
        errors.append(DESCRIPTION_ERROR_MESSAGE)

    return NoteValidation(
        title_error=title_error,
        description_error=description_error,
        can_save=can_save(title, description),
        errors=errors,
    )
