"""
Models Package - Data models and business logic
Contains Note, NoteStore and the note validation rules
"""

from .note import Note, NoteStore, NoteStoreError, NoteIndexError
from .validation import NoteValidation, NoteValidationError, validate_note

__all__ = [
    'Note', 'NoteStore', 'NoteStoreError', 'NoteIndexError',
    'NoteValidation', 'NoteValidationError', 'validate_note',
]
