"""
Tools Package - Application services

Contains the notes service that applies the save and delete workflow
to the application's note store.
"""

from .notes_service import NotesService

__all__ = ['NotesService']
