"""
GUI Package - lightweight initializer

Purpose:
- Export `MainWindow` without importing every screen at import time.

Consumers should import specific components directly, e.g.:
    from src.gui.components.note_editor import NoteEditor
    from src.gui.pages.notes_page import NotesPage
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow',
]
