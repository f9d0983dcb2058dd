"""
Enums and constants for NoteStack
Centralized location for application constants
"""

from enum import Enum, auto


class EditorMode(Enum):
    """Whether the editor creates a new note or edits an existing one"""
    CREATE = auto()
    EDIT = auto()


class Screen(Enum):
    """Navigation destinations; values are route name prefixes"""
    MAIN = "main"
    NOTE_DETAIL = "noteDetail"
    EDIT_NOTE = "editNote"


class StoreEvent(Enum):
    """Events published by the note store to its listeners"""
    APPENDED = "appended"
    REPLACED = "replaced"
    REMOVED = "removed"
