"""
GUI Components Package - lightweight initializer

Avoid re-exporting all components to reduce import-time side effects.
Import specific components directly from their modules, e.g.:
    from src.gui.components.note_list_widget import NoteListWidget
"""

__all__ = []
