"""
Utils Package - Core utilities for NoteStack
Contains configuration, logging, and enumeration utilities
"""

from .config_loader import ConfigLoader
from .logger import Logger
from .enums import EditorMode, Screen, StoreEvent

__all__ = ['ConfigLoader', 'Logger', 'EditorMode', 'Screen', 'StoreEvent']
