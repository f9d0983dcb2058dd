"""
Notes Service
Thin, testable wrapper around NoteStore implementing the save and delete workflow.
"""
from __future__ import annotations

from typing import List, Optional

from src.models.note import Note, NoteStore
from src.models.validation import NoteValidation, NoteValidationError, validate_note
from src.utils.logger import Logger


class NotesService:
    """Service for note create/edit/delete against a store owned by the caller.

    Create mode (no index) appends, edit mode replaces at the index. Index
    errors from the store propagate; they indicate a stale index.
    """

    def __init__(self, store: Optional[NoteStore] = None):
        self.logger = Logger()
        self._store = store if store is not None else NoteStore()

    @property
    def store(self) -> NoteStore:
        return self._store

    def validate(self, title: str, description: str) -> NoteValidation:
        return validate_note(title, description)

    def save_note(self, title: str, description: str,
                  index: Optional[int] = None) -> int:
        """Commit a draft and return the index it was stored at.

        Raises:
            NoteValidationError: the draft does not pass validation.
            NoteIndexError: index is not addressable.
        """
        validation = self.validate(title, description)
        if not validation.can_save:
            self.logger.warning(
                f"Rejected note save (index={index}): {validation.errors or 'empty field'}"
            )
            raise NoteValidationError(validation)

        note = Note(title=title, description=description)
        if index is None:
            self._store.append(note)
            index = self._store.length() - 1
            self.logger.info(f"Created note at index {index}")
        else:
            self._store.replace_at(index, note)
            self.logger.info(f"Updated note at index {index}")
        return index

    def delete_note(self, index: int) -> Note:
        """Remove the note at index without confirmation."""
        removed = self._store.remove_at(index)
        self.logger.info(f"Deleted note at index {index}")
        return removed

    def get_note(self, index: int) -> Note:
        return self._store.get(index)

    def get_all_notes(self) -> List[Note]:
        return self._store.notes()

    def count(self) -> int:
        return self._store.length()
