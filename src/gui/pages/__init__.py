"""
GUI Pages Package - lightweight initializer

Do not re-export pages to prevent import-time side effects and cycles.
Import pages explicitly where needed, e.g.:
    from src.gui.pages.notes_page import NotesPage
"""

__all__ = []
