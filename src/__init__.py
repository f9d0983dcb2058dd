"""
NoteStack - Main Source Package
Minimal in-memory note-taking application
"""

__version__ = "1.0.0"
__author__ = "NoteStack Development Team"

# Avoid package-wide re-exports to reduce import-time side effects.
# Import modules/classes explicitly at call sites.

__all__: list[str] = []
