#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
NoteStack GUI - Main Window
Main window hosting the notes page.
"""

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStatusBar
from PySide6.QtGui import QCloseEvent

from src.models.note import NoteStore
from src.utils.config_loader import ConfigLoader
from src.utils.enums import Screen
from src.utils.logger import Logger
from .pages.notes_page import NotesPage

_ROUTE_TITLES = {
    Screen.MAIN.value: "Notes",
    Screen.NOTE_DETAIL.value: "Note",
    Screen.EDIT_NOTE.value: "Edit Note",
}


class MainWindow(QMainWindow):
    """Main window of the NoteStack application."""

    def __init__(self, store: NoteStore, config: Optional[ConfigLoader] = None):
        """Initialize the main window around the application's note store."""
        super().__init__()
        self.logger = Logger()
        self.config_loader = config or ConfigLoader()
        self.store = store

        self.app_name = self.config_loader.get("app.name", "NoteStack")
        self.setWindowTitle(self.app_name)
        self.resize(
            self.config_loader.get("ui.window_width", 420),
            self.config_loader.get("ui.window_height", 720)
        )

        self.notes_page = NotesPage(store)
        self.notes_page.route_changed.connect(self._on_route_changed)
        self.setCentralWidget(self.notes_page)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self._on_route_changed(self.notes_page.current_route())

    def _on_route_changed(self, route: str) -> None:
        name, _, argument = route.partition("/")
        title = _ROUTE_TITLES.get(name, self.app_name)
        if name == Screen.EDIT_NOTE.value and not argument:
            title = "New Note"
        self.setWindowTitle(f"{title} - {self.app_name}")
        self.status_bar.showMessage(route)

    def closeEvent(self, event: QCloseEvent):
        # Notes live in memory only and are gone once the window closes
        self.logger.info(f"Closing with {self.store.length()} unsaved note(s) discarded")
        event.accept()
