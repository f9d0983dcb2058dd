"""
Note Detail View Component - Read-only view of a single note
"""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Signal, Qt
from PySide6.QtGui import QFont

from src.models.note import Note
from src.utils.colors import NoteStackColors


class NoteDetailView(QWidget):
    """Detail surface showing one note and the index it was opened with."""

    edit_requested = Signal(int)
    back_requested = Signal()

    def __init__(self, note: Note, note_index: int):
        super().__init__()
        self.note = note
        self.note_index = note_index
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.title_label = QLabel(f"Title: {self.note.title}")
        title_font = QFont()
        title_font.setBold(True)
        title_font.setPointSize(16)
        self.title_label.setFont(title_font)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(f"color: {NoteStackColors.PRIMARY_TEXT};")
        layout.addWidget(self.title_label)
        layout.addSpacing(8)

        self.description_label = QLabel(f"Description: {self.note.description}")
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(
            f"color: {NoteStackColors.PRIMARY_TEXT}; font-size: 14px;"
        )
        layout.addWidget(self.description_label)
        layout.addSpacing(16)

        self.edit_button = QPushButton("Edit")
        self.edit_button.setToolTip("Edit Note")
        self.edit_button.setStyleSheet(NoteStackColors.get_stylesheet("button"))
        self.edit_button.clicked.connect(
            lambda: self.edit_requested.emit(self.note_index)
        )
        layout.addWidget(self.edit_button, alignment=Qt.AlignmentFlag.AlignLeft)
        layout.addSpacing(16)

        self.back_button = QPushButton("Back to Main Screen")
        self.back_button.setStyleSheet(NoteStackColors.get_stylesheet("danger_button"))
        self.back_button.clicked.connect(self.back_requested)
        layout.addWidget(self.back_button)
